"""
Enumerations for vue-class-transform.

Token kinds, surface forms, and the direction picked by the mode dispatcher.
"""

from enum import Enum


class TokenKind(str, Enum):
  """Classification of a single class entry."""

  STATIC = "static"  # 'name': true
  DYNAMIC = "dynamic"  # [`expr`]: true


class SurfaceForm(str, Enum):
  """
  Textual encoding of a class binding.

  A ClassBinding itself is form-agnostic; the form only decides which printer
  produced or consumes the text.
  """

  OBJECT = "object"  # :class="{ 'a': true }"
  STRING = "string"  # class="a b"
  TEMPLATE = "template"  # :class="`a ${b}`"


class TransformMode(str, Enum):
  """Conversion direction chosen for one invocation."""

  OBJECT = "object"  # object form found, convert to string/template
  STRING = "string"  # string/template form found, convert to object
  UNRESOLVED = "unresolved"
