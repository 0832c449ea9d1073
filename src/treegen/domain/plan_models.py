from __future__ import annotations

"""
Materialization Domain Data Models.

Defines the planned filesystem actions, their per-action outcomes and the
aggregate result handed from the materializer to the interface layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

# -----------------------------------------------------------------------------
# ENUMERATIONS
# -----------------------------------------------------------------------------

class ActionKind(str, Enum):
    CREATE_DIRECTORY = "create_directory"
    CREATE_FILE = "create_file"


class OutcomeStatus(str, Enum):
    PLANNED = "planned"
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"
    NOT_ATTEMPTED = "not_attempted"


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PlannedAction:
    """
    One filesystem entry that must exist after materialization.

    Attributes:
        kind: Directory or file creation.
        path: Absolute target path.
        relative_path: Slash-joined path below the output base.
        parts: Path segments below the output base.
    """
    kind: ActionKind
    path: str
    relative_path: str
    parts: Tuple[str, ...]

    @property
    def is_directory(self) -> bool:
        return self.kind is ActionKind.CREATE_DIRECTORY


@dataclass(frozen=True)
class ActionOutcome:
    """
    What happened to a planned action.

    Attributes:
        action: The planned action.
        status: Final status.
        error: Failure description for FAILED and NOT_ATTEMPTED outcomes.
    """
    action: PlannedAction
    status: OutcomeStatus
    error: str = ""


@dataclass(frozen=True)
class MaterializeResult:
    """
    Aggregate report of a materialization run.

    Attributes:
        base_path: Absolute output base directory.
        dry_run: True when nothing was executed.
        outcomes: One outcome per planned action, in plan order.
    """
    base_path: str
    dry_run: bool
    outcomes: List[ActionOutcome] = field(default_factory=list)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def planned(self) -> int:
        return self._count(OutcomeStatus.PLANNED)

    @property
    def created(self) -> int:
        return self._count(OutcomeStatus.CREATED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def not_attempted(self) -> int:
        return self._count(OutcomeStatus.NOT_ATTEMPTED)

    @property
    def failed_paths(self) -> List[str]:
        return [o.action.path for o in self.outcomes if o.status is OutcomeStatus.FAILED]

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def status(self) -> str:
        """'success', 'partial' or 'failure'."""
        if self.ok:
            return "success"
        if self.created or self.skipped:
            return "partial"
        return "failure"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation including the aggregate counters."""
        return {
            "ok": self.ok,
            "status": self.status,
            "base_path": self.base_path,
            "dry_run": self.dry_run,
            "summary": {
                "planned": self.planned,
                "created": self.created,
                "skipped": self.skipped,
                "failed": self.failed,
                "not_attempted": self.not_attempted,
            },
            "failed_paths": self.failed_paths,
            "actions": [
                {
                    "kind": o.action.kind.value,
                    "path": o.action.relative_path,
                    "status": o.status.value,
                    "error": o.error,
                }
                for o in self.outcomes
            ],
        }
