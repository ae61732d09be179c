"""
Transform Trace Logger.

Records the step-by-step execution of one transform invocation:
1. Lifecycle phases (Dispatch, Locate, Print, Apply).
2. Mode decisions (which line matched and which direction was chosen).
3. Entries dropped by the lenient object parser.
4. The edit produced, or the failure reported.

The output is a list of event dictionaries suitable for JSON serialization. A
fresh logger is created per invocation; nothing is shared between runs.
"""

import time
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TraceEventType(str, Enum):
  PHASE_START = "phase_start"
  PHASE_END = "phase_end"
  MODE_DECISION = "mode_decision"
  SKIPPED_ENTRY = "skipped_entry"
  EDIT = "edit"
  FAILURE = "failure"


@dataclass
class TraceEvent:
  id: str
  type: TraceEventType
  timestamp: float
  description: str
  parent_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)


class TraceLogger:
  """
  Records transform events for debugging and `--json-trace` output.
  """

  def __init__(self):
    self._events: List[TraceEvent] = []
    self._active_phases: List[str] = []

  def start_phase(self, name: str, description: str = "") -> str:
    """Starts a nested phase. Returns the phase ID."""
    phase_id = str(uuid.uuid4())
    parent = self._active_phases[-1] if self._active_phases else None

    self._events.append(
      TraceEvent(
        id=phase_id,
        type=TraceEventType.PHASE_START,
        timestamp=time.time(),
        description=name,
        parent_id=parent,
        metadata={"detail": description},
      )
    )
    self._active_phases.append(phase_id)
    return phase_id

  def end_phase(self):
    """Ends the current active phase."""
    if not self._active_phases:
      return

    phase_id = self._active_phases.pop()
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()),
        type=TraceEventType.PHASE_END,
        timestamp=time.time(),
        description="End Phase",
        parent_id=phase_id,
      )
    )

  def log_mode(self, mode: str, line: Optional[int]):
    self._log_simple(TraceEventType.MODE_DECISION, f"Mode {mode}", {"mode": mode, "line": line})

  def log_skipped(self, entry: str):
    self._log_simple(TraceEventType.SKIPPED_ENTRY, f"Dropped entry '{entry}'", {"entry": entry})

  def log_edit(self, before: str, after: str):
    self._log_simple(TraceEventType.EDIT, "Replaced binding", {"before": before, "after": after})

  def log_failure(self, message: str):
    self._log_simple(TraceEventType.FAILURE, message, {"level": "info"})

  def _log_simple(self, evt_type: TraceEventType, desc: str, meta: Dict[str, Any]):
    parent = self._active_phases[-1] if self._active_phases else None
    self._events.append(
      TraceEvent(
        id=str(uuid.uuid4()), type=evt_type, timestamp=time.time(), description=desc, parent_id=parent, metadata=meta
      )
    )

  def export(self) -> List[Dict[str, Any]]:
    """Returns list of dicts for JSON serialization."""
    return [asdict(e) for e in self._events]
