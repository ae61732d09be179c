"""
Tests for the in-memory Document boundary.
"""

import pytest
from vue_class_transform.core.document import Editor, Position, SourceRange, TextDocument, detect_newline


def test_line_access_and_normalization():
  doc = TextDocument("a\r\nb\rc")
  assert doc.line_count == 3
  assert doc.get_line_text(1) == "b"
  assert doc.text == "a\nb\nc"


def test_get_text_multiline():
  doc = TextDocument("hello\nbig\nworld")
  assert doc.get_text(SourceRange.from_coords(0, 3, 2, 2)) == "lo\nbig\nwo"


def test_replace_collapses_lines():
  doc = TextDocument("<div :class=\"{\n  'a': true\n}\">")
  doc.replace(SourceRange.from_coords(0, 5, 2, 2), 'class="a"')
  assert doc.text == '<div class="a">'
  assert doc.line_count == 1


def test_replace_can_insert_lines():
  doc = TextDocument("ab")
  doc.replace(SourceRange.from_coords(0, 1, 0, 1), "\n")
  assert doc.lines == ["a", "b"]


def test_invalid_range_leaves_document_untouched():
  doc = TextDocument("abc")
  with pytest.raises(IndexError):
    doc.replace(SourceRange.from_coords(0, 0, 0, 10), "x")
  assert doc.text == "abc"


def test_range_order_enforced():
  with pytest.raises(ValueError):
    SourceRange(Position(2, 0), Position(1, 0))


def test_editor_from_text():
  editor = Editor.from_text("a\nb", cursor_line=1)
  assert editor.document.get_line_text(editor.cursor_line) == "b"


@pytest.mark.parametrize(
  "text, expected",
  [
    ("a\r\nb\r\n", "\r\n"),
    ("a\nb\n", "\n"),
    ("a\rb", "\r"),
    ("a\r\nb\nc\r\n", "\r\n"),
    ("single line", "\n"),
  ],
)
def test_detect_newline(text, expected):
  assert detect_newline(text) == expected


def test_document_remembers_newline():
  doc = TextDocument("a\r\nb")
  assert doc.newline == "\r\n"
  assert doc.text == "a\nb"
