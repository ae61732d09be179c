"""
Object Binding Boundary Locator.

Finds the span of a (possibly multi-line) object-literal binding around a
cursor::

    <div :class="{        <- upward scan stops here (open marker)
      'active': true,     <- cursor
      'large': true
    }">                   <- downward scan stops here (close marker)

Both scans start at the cursor line and are bounded by the document, so they
always terminate.
"""

from typing import Optional

from vue_class_transform.core.document import Document, Position, SourceRange, line_in_bounds

OPEN_MARKER = ':class="{'
CLOSE_MARKER = '}"'


def find_open_marker(document: Document, cursor_line: int) -> Optional[Position]:
  """
  Scans from `cursor_line` up to line 0 for the open marker.

  Returns:
      Optional[Position]: Location of the marker's first character.
  """
  for line in range(cursor_line, -1, -1):
    col = document.get_line_text(line).find(OPEN_MARKER)
    if col != -1:
      return Position(line, col)
  return None


def find_close_marker(document: Document, cursor_line: int, start: Optional[Position] = None) -> Optional[Position]:
  """
  Scans from `cursor_line` down to the last line for the close marker.

  When `start` is given, a marker on the start line only counts if it follows
  `start`, so an earlier ``}"`` on the opening line is skipped.

  Returns:
      Optional[Position]: Location just past the marker.
  """
  for line in range(cursor_line, document.line_count):
    offset = start.character if start is not None and line == start.line else 0
    col = document.get_line_text(line).find(CLOSE_MARKER, offset)
    if col != -1:
      return Position(line, col + len(CLOSE_MARKER))
  return None


def locate_object_binding(document: Document, cursor_line: int) -> Optional[SourceRange]:
  """
  Locates the object binding enclosing `cursor_line`.

  The downward scan starts at the cursor line, not at the line where the open
  marker was found. On the open marker's own line only text after the marker
  is searched.

  Args:
      document (Document): Document to scan.
      cursor_line (int): Zero-based cursor line.

  Returns:
      Optional[SourceRange]: The binding span, or None when either marker is
      missing (or the cursor lies outside the document).
  """
  if not line_in_bounds(document, cursor_line):
    return None

  start = find_open_marker(document, cursor_line)
  if start is None:
    return None

  end = find_close_marker(document, cursor_line, start)
  if end is None:
    return None

  return SourceRange(start, end)
