"""
Tests for Config Persistence (TOML).

Verifies that:
1. RuntimeConfig.load() picks up [tool.vue_class_transform] from pyproject.toml.
2. Explicit arguments override TOML settings.
3. File traversal finds toml in parent directories.
4. Invalid values are rejected.
"""

import pytest
from pydantic import ValidationError
from vue_class_transform.config import RuntimeConfig


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.vue_class_transform]
line_base = 0
encoding = "latin-1"
dry_run = true
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_defaults_without_toml(tmp_path):
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.line_base == 1
  assert config.encoding == "utf-8"
  assert config.dry_run is False


def test_load_defaults_from_toml(tmp_path, toml_file):
  config = RuntimeConfig.load(search_path=tmp_path)

  assert config.line_base == 0
  assert config.encoding == "latin-1"
  assert config.dry_run is True


def test_cli_overrides_toml(tmp_path, toml_file):
  config = RuntimeConfig.load(line_base=1, dry_run=False, search_path=tmp_path)

  assert config.line_base == 1
  assert config.dry_run is False
  assert config.encoding == "latin-1"


def test_hierarchical_search(tmp_path, toml_file):
  nested = tmp_path / "src" / "components"
  nested.mkdir(parents=True)

  assert RuntimeConfig.load(search_path=nested).line_base == 0


def test_invalid_toml_is_ignored(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.vue_class_transform\nbroken", encoding="utf-8")
  assert RuntimeConfig.load(search_path=tmp_path).line_base == 1


def test_line_base_validation():
  with pytest.raises(ValidationError):
    RuntimeConfig(line_base=2)


def test_to_zero_based():
  assert RuntimeConfig().to_zero_based(1) == 0
  assert RuntimeConfig(line_base=0).to_zero_based(1) == 1
