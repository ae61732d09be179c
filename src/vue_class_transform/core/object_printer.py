"""
Object Form -> String Form.

Parses an object-literal class binding such as::

    :class="{ 'card': true, [`${theme}-card`]: true }"

into a `ClassBinding` and prints it back as a plain string attribute
(``class="card"``) or, when any entry is dynamic, as a template literal
(``:class="`card ${theme}-card`"``).

Recognised entries:

- ``[`expr`]: true``  -> dynamic token ``expr``
- ``'name': true``    -> static token ``name``
- ``['name']: true``  -> static token ``name``

Anything else (other conditions, spreads, shorthand properties) is dropped
without error.
"""

import logging
import re
from typing import List, Optional

from vue_class_transform.core.nodes import ClassBinding, ClassToken
from vue_class_transform.core.scanner import EntryLexer, EntryToken, EntryTokenKind, split_object_entries
from vue_class_transform.enums import SurfaceForm

logger = logging.getLogger(__name__)

_OBJECT_PREFIX = re.compile(r'^\s*(?::class=")?\{\s*')
_OBJECT_SUFFIX = re.compile(r'\s*\}"?\s*$')


class EntryParser:
  """
  Recursive descent parser for a single object entry.

  Grammar::

      entry := key ':' 'true'
      key   := STRING | '[' (TEMPLATE | STRING) ']'
  """

  def __init__(self, entry: str):
    self.entry = entry
    self.tokens: List[EntryToken] = list(EntryLexer(entry).tokenize())
    self.pos = 0

  def peek(self) -> EntryToken:
    return self.tokens[min(self.pos, len(self.tokens) - 1)]

  def consume(self) -> EntryToken:
    token = self.peek()
    self.pos += 1
    return token

  def match(self, kind: EntryTokenKind) -> bool:
    return self.peek().kind == kind

  def parse(self) -> Optional[ClassToken]:
    """
    Returns:
        Optional[ClassToken]: The classified token, or None if the entry does not
        have one of the recognised shapes.
    """
    token = self._parse_key()
    if token is None:
      return None

    if not self.match(EntryTokenKind.COLON):
      return None
    self.consume()

    value = self.consume()
    if value.kind != EntryTokenKind.IDENTIFIER or value.text != "true":
      return None

    if not self.match(EntryTokenKind.EOF):
      return None
    return token

  def _parse_key(self) -> Optional[ClassToken]:
    if self.match(EntryTokenKind.STRING):
      return self._make(ClassToken.static, self.consume())

    if not self.match(EntryTokenKind.LBRACKET):
      return None
    self.consume()

    inner = self.consume()
    if inner.kind == EntryTokenKind.TEMPLATE:
      token = self._make(ClassToken.dynamic, inner)
    elif inner.kind == EntryTokenKind.STRING:
      token = self._make(ClassToken.static, inner)
    else:
      return None

    if not self.match(EntryTokenKind.RBRACKET):
      return None
    self.consume()
    return token

  @staticmethod
  def _make(factory, quoted: EntryToken) -> Optional[ClassToken]:
    inner = quoted.text[1:-1]
    if not inner.strip():
      return None
    return factory(inner)


class ObjectBindingParser:
  """
  Parses object-literal binding text into a `ClassBinding`.

  Attributes:
      skipped (List[str]): Entries that matched no recognised shape.
  """

  def __init__(self, text: str):
    self.text = text
    self.skipped: List[str] = []

  def body(self) -> str:
    """Strips the ``:class="{`` opener and ``}"`` closer."""
    body = _OBJECT_PREFIX.sub("", self.text, count=1)
    return _OBJECT_SUFFIX.sub("", body, count=1)

  def parse(self) -> ClassBinding:
    binding = ClassBinding()
    for entry in split_object_entries(self.body()):
      token = EntryParser(entry).parse()
      if token is None:
        logger.debug("Dropping unrecognised class entry: %r", entry)
        self.skipped.append(entry)
        continue
      binding.append(token)
    return binding


def parse_object_binding(text: str) -> ClassBinding:
  """
  Parses an object-literal class binding.

  Args:
      text (str): The full ``:class="{ ... }"`` text, possibly multi-line.

  Returns:
      ClassBinding: Tokens in entry order.
  """
  return ObjectBindingParser(text).parse()


def string_form_for(binding: ClassBinding) -> SurfaceForm:
  """TEMPLATE when any token is dynamic, STRING otherwise."""
  return SurfaceForm.TEMPLATE if binding.has_dynamic else SurfaceForm.STRING


def render_string_binding(binding: ClassBinding) -> str:
  """
  Prints a binding in string form.

  Dynamic texts are emitted bare, so they are expected to carry their own
  ``${...}`` markup. A single dynamic token forces the template literal since a
  plain attribute cannot interpolate.

  Args:
      binding (ClassBinding): Tokens to print.

  Returns:
      str: ``class="a b"`` or ``:class="`a ${b}`"``.
  """
  joined = " ".join(binding.texts)
  if string_form_for(binding) == SurfaceForm.TEMPLATE:
    return f':class="`{joined}`"'
  return f'class="{joined}"'


def object_to_string(text: str) -> str:
  """Converts object-literal binding text to its string/template form."""
  return render_string_binding(parse_object_binding(text))
