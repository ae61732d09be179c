"""
Class Value Scanners.

Hand-written scanners for the two raw-text shapes a class binding takes:

1.  **Class values** (`split_class_value`): the inside of ``class="..."`` or of a
    template literal. Splits on whitespace, except inside backtick pairs and
    ``${...}`` interpolation fragments.
2.  **Object bodies** (`split_object_entries`): the inside of ``{ ... }``. Splits
    on top-level commas, skipping commas nested in quotes, brackets or braces.
3.  **Entries** (`EntryLexer`): tokenizes a single object entry such as
    ``['active']: true`` for the entry parser in `object_printer`.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Generator, List

_OPENERS = "[{("
_CLOSERS = "]})"
_QUOTES = "'\"`"


def split_class_value(raw_value: str) -> List[str]:
  """
  Splits a class value into ordered raw tokens.

  A backtick toggles the "inside template" flag. ``${`` opens an interpolation
  fragment and the matching ``}`` closes it; bare braces inside a fragment
  nest. Whitespace separates tokens only when outside both. Unterminated
  backticks or fragments are not an error: the rest of the input becomes the
  last token.

  Args:
      raw_value (str): Class value with its attribute quotes already removed.

  Returns:
      List[str]: Trimmed, non-empty tokens in source order.

  Example:
      >>> split_class_value("a ${b + c} d")
      ['a', '${b + c}', 'd']
  """
  parts: List[str] = []
  current: List[str] = []
  in_template = False
  depth = 0

  def flush() -> None:
    token = "".join(current).strip()
    if token:
      parts.append(token)
    current.clear()

  i = 0
  length = len(raw_value)
  while i < length:
    char = raw_value[i]

    if char == "`":
      in_template = not in_template
      current.append(char)
    elif char == "$" and raw_value.startswith("{", i + 1):
      depth += 1
      current.append("${")
      i += 2
      continue
    elif char == "{" and depth > 0:
      depth += 1
      current.append(char)
    elif char == "}" and depth > 0:
      depth -= 1
      current.append(char)
    elif char.isspace() and not in_template and depth == 0:
      flush()
    else:
      current.append(char)
    i += 1

  flush()
  return parts


def split_object_entries(body: str) -> List[str]:
  """
  Splits an object-literal body into its entries.

  Commas split only at nesting depth zero and outside quoted text. Empty
  entries, such as the one after a trailing comma, are dropped.

  Args:
      body (str): Text between the object's braces. May span several lines.

  Returns:
      List[str]: Trimmed entry strings in source order.
  """
  entries: List[str] = []
  current: List[str] = []
  quote = ""
  depth = 0

  def flush() -> None:
    entry = "".join(current).strip()
    if entry:
      entries.append(entry)
    current.clear()

  i = 0
  length = len(body)
  while i < length:
    char = body[i]

    if quote:
      current.append(char)
      if char == "\\" and i + 1 < length:
        current.append(body[i + 1])
        i += 2
        continue
      if char == quote:
        quote = ""
    elif char in _QUOTES:
      quote = char
      current.append(char)
    elif char in _OPENERS:
      depth += 1
      current.append(char)
    elif char in _CLOSERS:
      depth = max(0, depth - 1)
      current.append(char)
    elif char == "," and depth == 0:
      flush()
    else:
      current.append(char)
    i += 1

  flush()
  return entries


class EntryTokenKind(str, Enum):
  """Lexeme types of a single object entry."""

  TEMPLATE = "TEMPLATE"  # `expr`
  STRING = "STRING"  # 'name'
  LBRACKET = "LBRACKET"
  RBRACKET = "RBRACKET"
  COLON = "COLON"
  IDENTIFIER = "IDENTIFIER"
  WHITESPACE = "WHITESPACE"
  MISMATCH = "MISMATCH"
  EOF = "EOF"


@dataclass
class EntryToken:
  kind: EntryTokenKind
  text: str
  col: int


class EntryLexer:
  """
  Regex-driven tokenizer for one object entry.

  Unknown characters come out as MISMATCH tokens rather than raising, so that
  the parser can reject the entry quietly.
  """

  PATTERN_DEFS = [
    (EntryTokenKind.TEMPLATE, r"`[^`]*`"),
    (EntryTokenKind.STRING, r"'[^']*'"),
    (EntryTokenKind.LBRACKET, r"\["),
    (EntryTokenKind.RBRACKET, r"\]"),
    (EntryTokenKind.COLON, r":"),
    (EntryTokenKind.IDENTIFIER, r"[A-Za-z_$][\w$]*"),
    (EntryTokenKind.WHITESPACE, r"\s+"),
    (EntryTokenKind.MISMATCH, r"."),
  ]

  _REGEX = re.compile(
    "|".join(f"(?P<{kind.value}>{pattern})" for kind, pattern in PATTERN_DEFS),
    re.DOTALL,
  )

  def __init__(self, text: str):
    self.text = text

  def tokenize(self) -> Generator[EntryToken, None, None]:
    """Yields significant tokens (whitespace skipped), ending with EOF."""
    for mo in self._REGEX.finditer(self.text):
      kind = EntryTokenKind(mo.lastgroup)
      if kind == EntryTokenKind.WHITESPACE:
        continue
      yield EntryToken(kind, mo.group(), mo.start())
    yield EntryToken(EntryTokenKind.EOF, "", len(self.text))
