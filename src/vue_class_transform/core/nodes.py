"""
Class Binding Data Structures.

Defines the form-agnostic representation of a Vue class binding:

- ClassToken: one class entry, either a static class name or a dynamic
  interpolation expression.
- ClassBinding: the ordered sequence of tokens. Order is significant; it decides
  output token order and object entry order, which keeps round-trips stable.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from vue_class_transform.enums import TokenKind


@dataclass(frozen=True)
class ClassToken:
  """
  A single class entry.

  Attributes:
      kind (TokenKind): STATIC for a bare class name, DYNAMIC for an expression.
      text (str): The class name, or the raw expression source without its
          backtick delimiters.
  """

  kind: TokenKind
  text: str

  def __post_init__(self) -> None:
    if not self.text.strip():
      raise ValueError("ClassToken text must not be empty")

  @classmethod
  def static(cls, name: str) -> "ClassToken":
    return cls(TokenKind.STATIC, name)

  @classmethod
  def dynamic(cls, expr: str) -> "ClassToken":
    return cls(TokenKind.DYNAMIC, expr)

  @property
  def is_dynamic(self) -> bool:
    return self.kind == TokenKind.DYNAMIC

  def to_entry(self) -> str:
    """
    Renders the token as an object-literal entry.

    Returns:
        str: ``[`expr`]: true`` for dynamic tokens, ``'name': true`` otherwise.
    """
    if self.is_dynamic:
      return f"[`{self.text}`]: true"
    return f"'{self.text}': true"


@dataclass
class ClassBinding:
  """
  Ordered sequence of class tokens.

  Duplicate class names are kept as distinct entries.
  """

  tokens: List[ClassToken] = field(default_factory=list)

  def append(self, token: ClassToken) -> None:
    self.tokens.append(token)

  @property
  def has_dynamic(self) -> bool:
    return any(t.is_dynamic for t in self.tokens)

  @property
  def texts(self) -> List[str]:
    return [t.text for t in self.tokens]

  def __iter__(self) -> Iterator[ClassToken]:
    return iter(self.tokens)

  def __len__(self) -> int:
    return len(self.tokens)
