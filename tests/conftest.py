"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so log capture in one test does not leak into another.
- Shared multi-line template fixtures.
"""

import sys
import pytest
from pathlib import Path

# Add src to path so we can import 'vue_class_transform' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from vue_class_transform.core.document import TextDocument
from vue_class_transform.utils.console import reset_console

MULTILINE_TEMPLATE = """<template>
  <div
    :class="{
      'card': true,
      'card--active': true,
      [`${theme}-card`]: true
    }"
  >
    <span class="title muted">Hello</span>
  </div>
</template>"""


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console is reset to stdout around every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def multiline_doc() -> TextDocument:
  """A component template with one multi-line object binding and one string binding."""
  return TextDocument(MULTILINE_TEMPLATE)
