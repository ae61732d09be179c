"""
Runtime Configuration Store.

Settings come from ``[tool.vue_class_transform]`` in the nearest
``pyproject.toml`` and can be overridden per invocation (CLI flags win).
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "vue_class_transform"


class RuntimeConfig(BaseModel):
  """
  Configuration for the transform engine and CLI host.
  """

  line_base: int = Field(1, description="Index of the first line in CLI line arguments (0 or 1).")
  encoding: str = Field("utf-8", description="Encoding used to read and write documents.")
  dry_run: bool = Field(False, description="If True, compute edits without applying them.")

  @field_validator("line_base")
  @classmethod
  def validate_line_base(cls, v: int) -> int:
    """
    Only zero- and one-based numbering are meaningful.

    Raises:
        ValueError: If the value is neither 0 nor 1.
    """
    if v not in (0, 1):
      raise ValueError(f"line_base must be 0 or 1 (got {v})")
    return v

  def to_zero_based(self, line: int) -> int:
    """Converts a user-supplied line number to a zero-based index."""
    return line - self.line_base

  @classmethod
  def load(
    cls,
    line_base: Optional[int] = None,
    encoding: Optional[str] = None,
    dry_run: Optional[bool] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        line_base (Optional[int]): Override for line numbering base.
        encoding (Optional[str]): Override for file encoding.
        dry_run (Optional[bool]): Override for dry-run mode.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    return cls(
      line_base=line_base if line_base is not None else toml_config.get("line_base", 1),
      encoding=encoding or toml_config.get("encoding", "utf-8"),
      dry_run=dry_run if dry_run is not None else toml_config.get("dry_run", False),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
