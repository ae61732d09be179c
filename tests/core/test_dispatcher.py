"""
Tests for the Mode Dispatcher.

Verifies:
1. Direction detection on the cursor line and the upward walk.
2. Object plans span the located binding.
3. String plans cover exactly the matched attribute.
4. Failures raise the taxonomy errors.
"""

import pytest
from vue_class_transform.core.dispatcher import classify_line, detect_mode, plan_transform
from vue_class_transform.core.document import SourceRange, TextDocument
from vue_class_transform.core.errors import (
  MALFORMED_BINDING,
  UNRECOGNIZED_FORMAT,
  MalformedBindingError,
  UnrecognizedFormatError,
)
from vue_class_transform.core.tracer import TraceEventType, TraceLogger
from vue_class_transform.enums import SurfaceForm, TransformMode


@pytest.mark.parametrize(
  "line, expected",
  [
    ("<div :class=\"{ 'a': true }\">", TransformMode.OBJECT),
    ('<div class="a b">', TransformMode.STRING),
    ('<div :class="`a ${b}`">', TransformMode.STRING),
    ("<div>", None),
  ],
)
def test_classify_line(line, expected):
  assert classify_line(line) == expected


def test_detect_mode_walks_upward(multiline_doc):
  assert detect_mode(multiline_doc, 4) == (TransformMode.OBJECT, 2)
  assert detect_mode(multiline_doc, 9) == (TransformMode.STRING, 8)
  assert detect_mode(multiline_doc, 0) == (TransformMode.UNRESOLVED, None)


def test_detect_mode_out_of_bounds(multiline_doc):
  assert detect_mode(multiline_doc, 99) == (TransformMode.UNRESOLVED, None)


def test_plan_object(multiline_doc):
  plan = plan_transform(multiline_doc, 4)
  assert plan.mode == TransformMode.OBJECT
  assert plan.edit.range == SourceRange.from_coords(2, 4, 6, 6)
  assert plan.edit.new_text == ':class="`card card--active ${theme}-card`"'


def test_plan_string(multiline_doc):
  plan = plan_transform(multiline_doc, 8)
  assert plan.mode == TransformMode.STRING
  assert plan.original_text == 'class="title muted"'
  assert plan.edit.range == SourceRange.from_coords(8, 10, 8, 29)
  assert plan.edit.new_text == ":class=\"{ 'title': true, 'muted': true }\""


def test_plan_template_keeps_leading_colon():
  doc = TextDocument('<p :class="`a ${b}`">')
  plan = plan_transform(doc, 0)
  assert plan.original_text == ':class="`a ${b}`"'
  assert plan.edit.range == SourceRange.from_coords(0, 3, 0, 20)


def test_plan_malformed():
  doc = TextDocument.from_lines(['<div :class="{', "  'a': true", "></div>"])
  with pytest.raises(MalformedBindingError) as exc:
    plan_transform(doc, 1)
  assert str(exc.value) == MALFORMED_BINDING


def test_plan_unrecognized():
  doc = TextDocument("<div>\n  <span>hi</span>")
  with pytest.raises(UnrecognizedFormatError) as exc:
    plan_transform(doc, 1)
  assert str(exc.value) == UNRECOGNIZED_FORMAT


def test_plan_unclosed_string_attribute():
  doc = TextDocument('<div class="a b')
  with pytest.raises(UnrecognizedFormatError):
    plan_transform(doc, 0)


def test_plan_records_skipped_entries():
  tracer = TraceLogger()
  doc = TextDocument("<div :class=\"{ 'a': true, 'b': isB }\">")
  plan = plan_transform(doc, 0, tracer)

  assert plan.edit.new_text == 'class="a"'
  skipped = [e for e in tracer.export() if e["type"] == TraceEventType.SKIPPED_ENTRY]
  assert skipped[0]["metadata"]["entry"] == "'b': isB"


@pytest.mark.parametrize(
  "text, source, target",
  [
    ("<div :class=\"{ 'a': true }\">", SurfaceForm.OBJECT, SurfaceForm.STRING),
    ("<div :class=\"{ 'a': true, [`${b}`]: true }\">", SurfaceForm.OBJECT, SurfaceForm.TEMPLATE),
    ('<div class="a b">', SurfaceForm.STRING, SurfaceForm.OBJECT),
    ('<div :class="`a ${b}`">', SurfaceForm.TEMPLATE, SurfaceForm.OBJECT),
  ],
)
def test_plan_surface_forms(text, source, target):
  plan = plan_transform(TextDocument(text), 0)
  assert plan.source_form == source
  assert plan.target_form == target
