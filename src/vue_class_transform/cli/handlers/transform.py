"""
Transform Command Handler.

Implements `vue-class-transform transform PATH --line N`. The file is loaded
into an in-memory document, the line becomes the cursor, and the class
transform command runs exactly as an editor host would run it:

1. Configuration loading (pyproject.toml + CLI overrides).
2. Running `transform_class` on the document.
3. Writing the document (or printing the replacement on dry run).
4. Optional trace dump.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from vue_class_transform.config import RuntimeConfig
from vue_class_transform.core.document import Editor, TextDocument
from vue_class_transform.core.engine import transform_class
from vue_class_transform.utils.console import log_error, log_info, log_success


def handle_transform(
  input_path: Path,
  line: int,
  output_path: Optional[Path],
  in_place: bool,
  dry_run: Optional[bool],
  line_base: Optional[int],
  json_trace_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'transform' command execution.

  Args:
      input_path: File holding the template.
      line: Cursor line as given on the command line.
      output_path: Where to write the transformed file.
      in_place: If True, overwrite `input_path`.
      dry_run: Override for config dry-run; prints the replacement only.
      line_base: Override for config line numbering.
      json_trace_path: Optional path to dump execution trace JSON.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    config = RuntimeConfig.load(
      line_base=line_base,
      dry_run=dry_run,
      search_path=input_path.parent,
    )
  except ValidationError as e:
    log_error(f"Invalid [tool.vue_class_transform] configuration: {e}")
    return 1

  try:
    with open(input_path, "rt", encoding=config.encoding, newline="") as f:
      document = TextDocument(f.read())
  except (UnicodeDecodeError, LookupError) as e:
    log_error(f"Cannot decode {input_path} as {config.encoding}: {e}")
    return 1

  result = transform_class(Editor(document, config.to_zero_based(line)), config)

  if json_trace_path:
    _write_trace(json_trace_path, result.trace_events)

  if not result.success:
    return 1

  if config.dry_run:
    print(result.text)
    return 0

  destination = input_path if in_place else output_path
  if destination is None:
    print(document.text)
    return 0

  destination.parent.mkdir(parents=True, exist_ok=True)
  with open(destination, "wt", encoding=config.encoding, newline=document.newline) as f:
    f.write(document.text)
  log_success(
    f"Transformed {result.source_form.value} -> {result.target_form.value} binding: "
    f"[path]{input_path}[/path] -> [path]{destination}[/path]"
  )
  return 0


def _write_trace(path: Path, events: List[Dict[str, Any]]) -> None:
  try:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wt", encoding="utf-8") as f:
      json.dump(events, f, indent=2)
    log_info(f"Trace saved to {path}")
  except OSError as e:
    log_error(f"Failed to write trace: {e}")
