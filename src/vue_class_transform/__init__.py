"""
vue-class-transform Package.

Toggles Vue class bindings between the object form and the string/template
form::

    class="foo bar"                 <->  :class="{ 'foo': true, 'bar': true }"
    :class="`card ${theme}`"        <->  :class="{ 'card': true, [`${theme}`]: true }"

Usage
-----

Single Attribute
^^^^^^^^^^^^^^^^

.. code-block:: python

    import vue_class_transform as vct
    print(vct.convert_attribute('class="foo bar"'))
    # :class="{ 'foo': true, 'bar': true }"

Editor Command
^^^^^^^^^^^^^^

.. code-block:: python

    from vue_class_transform import Editor, transform_class

    editor = Editor.from_text(source, cursor_line=12)
    result = transform_class(editor)
    if result.success:
        print(editor.document.text)
"""

from vue_class_transform.config import RuntimeConfig
from vue_class_transform.core.conversion_result import TransformResult
from vue_class_transform.core.dispatcher import plan_transform
from vue_class_transform.core.document import Editor, TextDocument
from vue_class_transform.core.engine import TransformEngine, transform_class
from vue_class_transform.core.errors import ClassTransformError

__version__ = "0.1.0"


def convert_attribute(text: str) -> str:
  """
  Converts one class attribute snippet in whichever direction applies.

  The snippet must start with the attribute (object form may span lines).

  Args:
      text (str): e.g. ``class="a b"`` or ``:class="{ 'a': true }"``.

  Returns:
      str: The converted attribute.

  Raises:
      ValueError: If no class binding is recognised or the object is not closed.
  """
  try:
    plan = plan_transform(TextDocument(text), 0)
  except ClassTransformError as e:
    raise ValueError(str(e)) from e
  return plan.edit.new_text


__all__ = [
  "Editor",
  "RuntimeConfig",
  "TextDocument",
  "TransformEngine",
  "TransformResult",
  "convert_attribute",
  "transform_class",
  "__version__",
]
