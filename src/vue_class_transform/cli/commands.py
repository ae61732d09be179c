"""
CLI Command Handlers Facade.

Re-exports handlers from `vue_class_transform.cli.handlers`.
"""

from vue_class_transform.cli.handlers.convert import handle_convert
from vue_class_transform.cli.handlers.transform import handle_transform

__all__ = [
  "handle_convert",
  "handle_transform",
]
