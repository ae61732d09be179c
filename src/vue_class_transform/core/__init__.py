"""
Class Binding Converter Core.

Scanners, the two printers, the boundary locator and the mode dispatcher. The
core works on a `Document` snapshot and a cursor line and never talks to an
editor directly.
"""

from vue_class_transform.core.nodes import ClassBinding, ClassToken
from vue_class_transform.core.document import Editor, Position, SourceRange, TextDocument, TextEdit
from vue_class_transform.core.object_printer import object_to_string, parse_object_binding, render_string_binding
from vue_class_transform.core.string_printer import parse_string_binding, render_object_binding, string_to_object
from vue_class_transform.core.locator import locate_object_binding
from vue_class_transform.core.dispatcher import detect_mode, plan_transform

__all__ = [
  "ClassBinding",
  "ClassToken",
  "Editor",
  "Position",
  "SourceRange",
  "TextDocument",
  "TextEdit",
  "detect_mode",
  "locate_object_binding",
  "object_to_string",
  "parse_object_binding",
  "parse_string_binding",
  "plan_transform",
  "render_object_binding",
  "render_string_binding",
  "string_to_object",
]
