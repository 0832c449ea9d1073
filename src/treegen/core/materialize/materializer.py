from __future__ import annotations

"""
Structure Materializer.

Reconciles a frozen structure tree with the filesystem. Actions are applied
strictly in plan order and each one is idempotent: an entry that already
exists with the right kind is skipped. A failure only stops its own branch;
descendants are reported as not attempted and sibling branches go on.
"""

import logging
import os
from typing import List, Optional, Protocol, Set, Tuple

from treegen.core.materialize.planner import plan_actions
from treegen.domain.errors import KindConflictError, OutputBaseError
from treegen.domain.plan_models import (
    ActionOutcome,
    MaterializeResult,
    OutcomeStatus,
    PlannedAction,
)
from treegen.domain.tree_models import Node, NodeKind
from treegen.infra.fs import LocalFileSystem

logger = logging.getLogger(__name__)


class FileSystemGateway(Protocol):
    def entry_kind(self, path: str) -> Optional[NodeKind]: ...

    def create_directory(self, path: str) -> None: ...

    def create_empty_file(self, path: str) -> None: ...

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        root: Node,
        base_path: str,
        dry_run: bool = False,
        fs: Optional[FileSystemGateway] = None,
) -> MaterializeResult:
    """
    Plan and (unless dry_run) apply the actions for a tree.

    Args:
        root: Root of the tree to materialize.
        base_path: Existing output base directory.
        dry_run: Only report the plan; never touch the filesystem.
        fs: Filesystem primitives. Defaults to the local filesystem.

    Returns:
        MaterializeResult: One outcome per planned action.

    Raises:
        OutputBaseError: The base directory does not exist (real runs only).
    """
    base = os.path.abspath(base_path)
    actions = plan_actions(root, base)

    if dry_run:
        logger.info(f"Dry run: {len(actions)} actions planned under {base}")
        return MaterializeResult(
            base_path=base,
            dry_run=True,
            outcomes=[ActionOutcome(a, OutcomeStatus.PLANNED) for a in actions],
        )

    fs = fs or LocalFileSystem()
    if fs.entry_kind(base) is not NodeKind.DIRECTORY:
        raise OutputBaseError(f"output directory does not exist: {base}")

    outcomes: List[ActionOutcome] = []
    failed_branches: Set[Tuple[str, ...]] = set()

    for action in actions:
        blocked_by = _failed_ancestor(action.parts, failed_branches)
        if blocked_by is not None:
            outcomes.append(
                ActionOutcome(
                    action,
                    OutcomeStatus.NOT_ATTEMPTED,
                    error=f"parent '{'/'.join(blocked_by)}' failed",
                )
            )
            continue

        outcome = _apply(action, fs)
        if outcome.status is OutcomeStatus.FAILED:
            failed_branches.add(action.parts)
        outcomes.append(outcome)

    result = MaterializeResult(base_path=base, dry_run=False, outcomes=outcomes)
    logger.info(
        f"Materialization {result.status}: {result.created} created, "
        f"{result.skipped} skipped, {result.failed} failed, "
        f"{result.not_attempted} not attempted"
    )
    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _apply(action: PlannedAction, fs: FileSystemGateway) -> ActionOutcome:
    """Execute a single action, converting failures into an outcome."""
    expected = NodeKind.DIRECTORY if action.is_directory else NodeKind.FILE

    try:
        found = fs.entry_kind(action.path)
        if found is expected:
            logger.debug(f"Skipped existing {expected.value}: {action.relative_path}")
            return ActionOutcome(action, OutcomeStatus.SKIPPED)
        if found is not None:
            raise KindConflictError(action.path, expected.value, found.value)

        if action.is_directory:
            fs.create_directory(action.path)
        else:
            fs.create_empty_file(action.path)
    except (KindConflictError, OSError) as e:
        logger.error(f"Failed to create {action.relative_path}: {e}")
        return ActionOutcome(action, OutcomeStatus.FAILED, error=str(e))

    logger.debug(f"Created {expected.value}: {action.relative_path}")
    return ActionOutcome(action, OutcomeStatus.CREATED)


def _failed_ancestor(
        parts: Tuple[str, ...],
        failed: Set[Tuple[str, ...]],
) -> Optional[Tuple[str, ...]]:
    """Return the failed ancestor of a path, if any."""
    if not failed:
        return None
    for i in range(1, len(parts)):
        prefix = parts[:i]
        if prefix in failed:
            return prefix
    return None
