"""
Host Document Boundary.

The converter core never touches an editor directly. It reads a document
through the small `Document` protocol and hands back a `TextEdit`. This module
defines the positional types shared by the locator and the engine, the protocol
itself, and an in-memory `TextDocument` used by the CLI and in tests.

Positions are zero-based. A `SourceRange` end is exclusive on its end line,
matching the usual editor convention.
"""

from dataclasses import dataclass
from typing import List, Protocol


@dataclass(frozen=True, order=True)
class Position:
  """Zero-based (line, character) location."""

  line: int
  character: int


@dataclass(frozen=True)
class SourceRange:
  """
  Textual span of a binding occurrence.

  Attributes:
      start (Position): First character of the span.
      end (Position): Position just past the last character.
  """

  start: Position
  end: Position

  def __post_init__(self) -> None:
    if self.end < self.start:
      raise ValueError(f"Range end {self.end} precedes start {self.start}")

  @classmethod
  def from_coords(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> "SourceRange":
    return cls(Position(start_line, start_col), Position(end_line, end_col))


@dataclass(frozen=True)
class TextEdit:
  """A replacement to apply to a document as one atomic edit."""

  range: SourceRange
  new_text: str


class Document(Protocol):
  """Read/replace access the transform needs from a host editor."""

  @property
  def line_count(self) -> int: ...

  def get_line_text(self, line: int) -> str: ...

  def get_text(self, text_range: SourceRange) -> str: ...

  def replace(self, text_range: SourceRange, new_text: str) -> None: ...


def detect_newline(text: str) -> str:
  """
  Returns the most frequent line terminator in `text` (LF when there is none).

  Ties prefer CRLF, then LF.
  """
  crlf = text.count("\r\n")
  counts = {
    "\r\n": crlf,
    "\n": text.count("\n") - crlf,
    "\r": text.count("\r") - crlf,
  }
  best = max(counts, key=counts.get)
  return best if counts[best] else "\n"


class TextDocument:
  """
  In-memory document backed by a list of lines.

  Line terminators are normalized to LF on load and `text` joins lines with LF.
  The dominant terminator of the loaded text is kept in `newline` so hosts can
  write the document back without changing its line endings.
  """

  def __init__(self, text: str = "") -> None:
    self.newline = detect_newline(text)
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    self._lines: List[str] = normalized.split("\n")

  @classmethod
  def from_lines(cls, lines: List[str]) -> "TextDocument":
    doc = cls()
    doc._lines = list(lines)
    return doc

  @property
  def line_count(self) -> int:
    return len(self._lines)

  @property
  def lines(self) -> List[str]:
    return list(self._lines)

  @property
  def text(self) -> str:
    return "\n".join(self._lines)

  def get_line_text(self, line: int) -> str:
    if not 0 <= line < len(self._lines):
      raise IndexError(f"Line {line} is out of range (0..{len(self._lines) - 1})")
    return self._lines[line]

  def _check_range(self, text_range: SourceRange) -> None:
    for pos in (text_range.start, text_range.end):
      line_text = self.get_line_text(pos.line)
      if not 0 <= pos.character <= len(line_text):
        raise IndexError(f"Character {pos.character} is out of range on line {pos.line}")

  def get_text(self, text_range: SourceRange) -> str:
    self._check_range(text_range)
    start, end = text_range.start, text_range.end
    if start.line == end.line:
      return self._lines[start.line][start.character : end.character]

    parts = [self._lines[start.line][start.character :]]
    parts.extend(self._lines[start.line + 1 : end.line])
    parts.append(self._lines[end.line][: end.character])
    return "\n".join(parts)

  def replace(self, text_range: SourceRange, new_text: str) -> None:
    """
    Replaces the span with `new_text`.

    The new content is computed fully before the line list is swapped, so a
    failing range check leaves the document untouched.
    """
    self._check_range(text_range)
    start, end = text_range.start, text_range.end
    head = self._lines[start.line][: start.character]
    tail = self._lines[end.line][end.character :]
    replacement = (head + new_text + tail).split("\n")
    self._lines = self._lines[: start.line] + replacement + self._lines[end.line + 1 :]


@dataclass
class Editor:
  """
  An active editor: a document plus the line the cursor is on.

  Attributes:
      document (Document): The open document.
      cursor_line (int): Zero-based cursor line.
  """

  document: Document
  cursor_line: int = 0

  @classmethod
  def from_text(cls, text: str, cursor_line: int = 0) -> "Editor":
    return cls(TextDocument(text), cursor_line)


def line_in_bounds(document: Document, line: int) -> bool:
  return 0 <= line < document.line_count
