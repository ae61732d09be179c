"""
Convert Command Handler.

Implements `vue-class-transform convert TEXT`: prints the counterpart of a
single attribute snippet.
"""

from vue_class_transform import convert_attribute
from vue_class_transform.utils.console import log_info


def handle_convert(text: str) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      text: Attribute snippet in either form.

  Returns:
      int: Exit code (0 for success, 1 if the snippet was not recognised).
  """
  try:
    result = convert_attribute(text)
  except ValueError as e:
    log_info(str(e))
    return 1

  print(result)
  return 0
