"""
String Form -> Object Form.

Converts ``class="foo bar"`` or ``:class="`foo ${bar}`"`` into the equivalent
object-literal binding, one entry per class token::

    :class="{ 'foo': true, [`${bar}`]: true }"

Duplicate class names are kept as separate entries.
"""

import re
from typing import Optional

from vue_class_transform.core.nodes import ClassBinding, ClassToken
from vue_class_transform.core.scanner import split_class_value
from vue_class_transform.enums import SurfaceForm

_ATTR_PREFIX = re.compile(r'^\s*:?class="')
_ATTR_SUFFIX = re.compile(r'"\s*$')


def _strip_attribute(raw_value: str) -> str:
  value = _ATTR_PREFIX.sub("", raw_value, count=1)
  return _ATTR_SUFFIX.sub("", value, count=1)


def _is_backtick_quoted(text: str) -> bool:
  return len(text) >= 2 and text.startswith("`") and text.endswith("`")


def detect_string_form(raw_value: str) -> SurfaceForm:
  """
  Tells a template-literal attribute (``:class="`...`"``) from a plain one.
  """
  if _is_backtick_quoted(_strip_attribute(raw_value).strip()):
    return SurfaceForm.TEMPLATE
  return SurfaceForm.STRING


def parse_string_binding(raw_value: str, is_template_literal: Optional[bool] = None) -> ClassBinding:
  """
  Parses a string or template-literal class value.

  Args:
      raw_value (str): Either the full attribute (``class="..."``) or its bare
          value.
      is_template_literal (Optional[bool]): Whether the value is wrapped in
          backticks. Detected from the value when None.

  Returns:
      ClassBinding: Tokens in source order.
  """
  value = _strip_attribute(raw_value)
  if is_template_literal is None:
    is_template_literal = detect_string_form(raw_value) == SurfaceForm.TEMPLATE
  if is_template_literal and _is_backtick_quoted(value.strip()):
    value = value.strip()[1:-1]

  binding = ClassBinding()
  for part in split_class_value(value):
    if _is_backtick_quoted(part):
      inner = part[1:-1]
      if inner.strip():
        binding.append(ClassToken.dynamic(inner))
    elif is_template_literal and "${" in part:
      binding.append(ClassToken.dynamic(part))
    else:
      binding.append(ClassToken.static(part))
  return binding


def render_object_binding(binding: ClassBinding) -> str:
  """
  Prints a binding in object form.

  Args:
      binding (ClassBinding): Tokens to print.

  Returns:
      str: ``:class="{ 'a': true, [`expr`]: true }"``.
  """
  entries = ", ".join(token.to_entry() for token in binding)
  return f':class="{{ {entries} }}"'


def string_to_object(raw_value: str, is_template_literal: Optional[bool] = None) -> str:
  """Converts a string/template class attribute to its object form."""
  return render_object_binding(parse_string_binding(raw_value, is_template_literal))
