"""
Transform Engine and Command.

This module provides the `TransformEngine`, which drives a single conversion:

1.  **Dispatch**: pick a direction from the cursor line (`dispatcher`).
2.  **Plan**: locate the binding and print its counterpart.
3.  **Apply**: replace the range in the document as one edit (skipped on dry run).
4.  **Report**: failures are logged as informational messages and returned in the
    `TransformResult`; they never propagate to the host.

`transform_class` is the user-facing command that hosts bind to a key or menu
entry.
"""

import logging
from typing import Optional

from vue_class_transform.config import RuntimeConfig
from vue_class_transform.core.conversion_result import TransformResult
from vue_class_transform.core.dispatcher import plan_transform
from vue_class_transform.core.document import Document, Editor
from vue_class_transform.core.errors import ClassTransformError, NoActiveContextError
from vue_class_transform.core.tracer import TraceLogger
from vue_class_transform.utils.console import log_info

logger = logging.getLogger(__name__)


class TransformEngine:
  """
  Runs one class-binding transform against a document.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    self.config = config or RuntimeConfig()

  def run(self, document: Document, cursor_line: int) -> TransformResult:
    """
    Executes dispatch, planning and (unless dry-running) the edit.

    Args:
        document (Document): The document to transform.
        cursor_line (int): Zero-based cursor line.

    Returns:
        TransformResult: Outcome with the edit and trace events.
    """
    tracer = TraceLogger()
    tracer.start_phase("Transform", f"cursor line {cursor_line}")

    try:
      plan = plan_transform(document, cursor_line, tracer)
    except ClassTransformError as e:
      tracer.log_failure(str(e))
      tracer.end_phase()
      return self._fail(str(e), tracer)

    applied = False
    if not self.config.dry_run:
      tracer.start_phase("Apply", "Replace range")
      document.replace(plan.edit.range, plan.edit.new_text)
      tracer.end_phase()
      applied = True

    tracer.log_edit(plan.original_text, plan.edit.new_text)
    tracer.end_phase()
    logger.debug("Transformed %r -> %r", plan.original_text, plan.edit.new_text)

    return TransformResult(
      success=True,
      mode=plan.mode,
      source_form=plan.source_form,
      target_form=plan.target_form,
      edit=plan.edit,
      applied=applied,
      trace_events=tracer.export(),
    )

  @staticmethod
  def _fail(message: str, tracer: TraceLogger) -> TransformResult:
    log_info(message)
    return TransformResult(success=False, errors=[message], trace_events=tracer.export())


def transform_class(editor: Optional[Editor], config: Optional[RuntimeConfig] = None) -> TransformResult:
  """
  Toggles the class binding under the editor's cursor.

  Object form becomes string/template form and vice versa. On failure the
  document is left unchanged and one informational message is logged.

  Args:
      editor (Optional[Editor]): The active editor, or None if there is none.
      config (Optional[RuntimeConfig]): Engine settings.

  Returns:
      TransformResult: Outcome of the invocation.
  """
  if editor is None:
    message = str(NoActiveContextError())
    return TransformEngine._fail(message, TraceLogger())
  return TransformEngine(config).run(editor.document, editor.cursor_line)
