"""
Data structures representing the output of a transform invocation.

This module defines the `TransformResult` Pydantic model, which encapsulates
the chosen direction, the edit that was (or would be) applied, any reported
failures, and the execution trace.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vue_class_transform.core.document import TextEdit
from vue_class_transform.enums import SurfaceForm, TransformMode


class TransformResult(BaseModel):
  """
  Container for the results of one transform invocation.
  """

  model_config = ConfigDict(arbitrary_types_allowed=True)

  success: bool = Field(default=True, description="True if an edit was produced.")
  mode: TransformMode = Field(default=TransformMode.UNRESOLVED, description="Direction chosen by the dispatcher.")
  source_form: Optional[SurfaceForm] = Field(default=None, description="Form of the binding before the edit.")
  target_form: Optional[SurfaceForm] = Field(default=None, description="Form of the binding after the edit.")
  edit: Optional[TextEdit] = Field(default=None, description="Replacement range and text.")
  applied: bool = Field(default=False, description="True if the edit was written to the document.")
  errors: List[str] = Field(default_factory=list, description="User-facing failure messages.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def text(self) -> str:
    """
    The replacement text, or an empty string when no edit was produced.
    """
    return self.edit.new_text if self.edit else ""

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
