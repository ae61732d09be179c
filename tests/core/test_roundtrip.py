"""
Property Tests for Round-trip Stability.

Verifies:
1. Static bindings survive string -> object -> string unchanged (tokens and order).
2. Bindings with at least one dynamic token always print as template literals.
"""

from hypothesis import given, settings, strategies as st

from vue_class_transform.core.nodes import ClassBinding, ClassToken
from vue_class_transform.core.object_printer import object_to_string, parse_object_binding, render_string_binding
from vue_class_transform.core.string_printer import parse_string_binding, render_object_binding, string_to_object

class_names = st.from_regex(r"[a-z][a-z0-9_-]{0,11}", fullmatch=True)
expressions = st.from_regex(r"\$\{[a-z][a-zA-Z0-9]{0,7}\}", fullmatch=True)


@given(names=st.lists(class_names, min_size=1, max_size=8))
@settings(max_examples=50)
def test_static_round_trip(names):
  attr = f'class="{" ".join(names)}"'
  assert object_to_string(string_to_object(attr)) == attr


@given(names=st.lists(class_names, min_size=1, max_size=8))
@settings(max_examples=50)
def test_static_binding_round_trip_through_object(names):
  binding = ClassBinding([ClassToken.static(n) for n in names])
  parsed = parse_object_binding(render_object_binding(binding))
  assert parsed.tokens == binding.tokens


@given(
  names=st.lists(class_names, max_size=5),
  exprs=st.lists(expressions, min_size=1, max_size=3),
)
@settings(max_examples=50)
def test_dynamic_forces_template(names, exprs):
  binding = ClassBinding([ClassToken.static(n) for n in names] + [ClassToken.dynamic(e) for e in exprs])
  out = render_string_binding(binding)
  assert out.startswith(':class="`')

  # Interpolated fragments come back as dynamic tokens in the same order
  reparsed = parse_string_binding(out)
  assert reparsed.tokens == binding.tokens
