"""
Mode Dispatcher.

Decides which way to convert for one invocation and builds the resulting edit.

State machine (one shot, no retries):

1.  Cursor line contains ``:class="{``                 -> OBJECT.
2.  Else it contains ``class="`` or ``:class="`...`"`` -> STRING.
3.  Else walk upward to line 0 re-testing each line; the first hit decides,
    exhausting the walk                               -> UNRESOLVED.

OBJECT locates the full (multi-line) object span from the original cursor line
and prints it as string/template. STRING extracts the attribute from the matched
line and prints it as an object.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from vue_class_transform.core.document import Document, SourceRange, TextEdit, line_in_bounds
from vue_class_transform.core.errors import MalformedBindingError, UnrecognizedFormatError
from vue_class_transform.core.locator import OPEN_MARKER, locate_object_binding
from vue_class_transform.core.object_printer import ObjectBindingParser, render_string_binding, string_form_for
from vue_class_transform.core.string_printer import detect_string_form, string_to_object
from vue_class_transform.core.tracer import TraceLogger
from vue_class_transform.enums import SurfaceForm, TransformMode

STRING_MARKER = 'class="'

_TEMPLATE_ATTR = re.compile(r':class="`.*`"')
# Leftmost match, so ':class="..."' wins over the 'class="...' inside it.
_STRING_ATTR = re.compile(r':?class="[^"]*"')


@dataclass(frozen=True)
class TransformPlan:
  """
  Outcome of a successful dispatch.

  Attributes:
      mode (TransformMode): Direction taken.
      edit (TextEdit): Replacement to apply.
      original_text (str): Text currently covered by the edit range.
      source_form (SurfaceForm): Form of `original_text`.
      target_form (SurfaceForm): Form of the edit's new text.
  """

  mode: TransformMode
  edit: TextEdit
  original_text: str
  source_form: SurfaceForm
  target_form: SurfaceForm


def classify_line(text: str) -> Optional[TransformMode]:
  """
  Tests a single line for either surface form.

  Returns:
      Optional[TransformMode]: OBJECT, STRING, or None when neither appears.
  """
  if OPEN_MARKER in text:
    return TransformMode.OBJECT
  if STRING_MARKER in text or _TEMPLATE_ATTR.search(text):
    return TransformMode.STRING
  return None


def detect_mode(document: Document, cursor_line: int) -> Tuple[TransformMode, Optional[int]]:
  """
  Determines the conversion direction.

  Args:
      document (Document): Document to inspect.
      cursor_line (int): Zero-based cursor line.

  Returns:
      Tuple[TransformMode, Optional[int]]: The mode and the line that decided it
      (None when UNRESOLVED).
  """
  if not line_in_bounds(document, cursor_line):
    return TransformMode.UNRESOLVED, None

  for line in range(cursor_line, -1, -1):
    mode = classify_line(document.get_line_text(line))
    if mode is not None:
      return mode, line
  return TransformMode.UNRESOLVED, None


def plan_transform(document: Document, cursor_line: int, tracer: Optional[TraceLogger] = None) -> TransformPlan:
  """
  Builds the edit for the binding at `cursor_line` without applying it.

  Args:
      document (Document): Document snapshot to read.
      cursor_line (int): Zero-based cursor line.
      tracer (Optional[TraceLogger]): Receives mode and skipped-entry events.

  Returns:
      TransformPlan: The chosen mode and its edit.

  Raises:
      MalformedBindingError: Object form found but not closed.
      UnrecognizedFormatError: No class binding found at or above the cursor.
  """
  tracer = tracer or TraceLogger()
  mode, line = detect_mode(document, cursor_line)
  tracer.log_mode(mode.value, line)

  if mode == TransformMode.OBJECT:
    return _plan_object(document, cursor_line, tracer)
  if mode == TransformMode.STRING:
    return _plan_string(document, line, tracer)
  raise UnrecognizedFormatError()


def _plan_object(document: Document, cursor_line: int, tracer: TraceLogger) -> TransformPlan:
  tracer.start_phase("Locate", "Object binding boundaries")
  text_range = locate_object_binding(document, cursor_line)
  tracer.end_phase()
  if text_range is None:
    raise MalformedBindingError()

  tracer.start_phase("Print", "Object -> String")
  original = document.get_text(text_range)
  parser = ObjectBindingParser(original)
  binding = parser.parse()
  for entry in parser.skipped:
    tracer.log_skipped(entry)
  new_text = render_string_binding(binding)
  tracer.end_phase()

  return TransformPlan(
    TransformMode.OBJECT,
    TextEdit(text_range, new_text),
    original,
    source_form=SurfaceForm.OBJECT,
    target_form=string_form_for(binding),
  )


def _plan_string(document: Document, line: int, tracer: TraceLogger) -> TransformPlan:
  line_text = document.get_line_text(line)
  match = _STRING_ATTR.search(line_text)
  if match is None:
    # 'class="' present but never closed on this line
    raise UnrecognizedFormatError()

  tracer.start_phase("Print", "String -> Object")
  original = match.group(0)
  new_text = string_to_object(original)
  tracer.end_phase()

  text_range = SourceRange.from_coords(line, match.start(), line, match.end())
  return TransformPlan(
    TransformMode.STRING,
    TextEdit(text_range, new_text),
    original,
    source_form=detect_string_form(original),
    target_form=SurfaceForm.OBJECT,
  )
