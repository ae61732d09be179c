"""
Error taxonomy for class-binding transforms.

Every error carries the exact informational message shown to the user. They are
raised inside the core and converted into a failed `TransformResult` at the
command boundary; none of them is fatal to the host process.
"""

NO_ACTIVE_EDITOR = "No editor is active"
MALFORMED_BINDING = ":class object not properly closed or malformed"
UNRECOGNIZED_FORMAT = "No recognizable Vue class format found."


class ClassTransformError(Exception):
  """Base error for a transform invocation that ends without an edit."""

  message = "Class transform failed"

  def __init__(self, message=None):
    super().__init__(message or self.message)


class NoActiveContextError(ClassTransformError):
  """No document or cursor was supplied."""

  message = NO_ACTIVE_EDITOR


class MalformedBindingError(ClassTransformError):
  """An object-form open marker has no closing marker within document bounds."""

  message = MALFORMED_BINDING


class UnrecognizedFormatError(ClassTransformError):
  """Neither the object form nor the string/template form could be found."""

  message = UNRECOGNIZED_FORMAT
