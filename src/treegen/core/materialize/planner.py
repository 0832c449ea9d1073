from __future__ import annotations

"""
Action Planner.

Flattens a structure tree into the ordered list of filesystem actions
needed to materialize it: pre-order, so every directory is planned before
anything inside it, with siblings in creation order.
"""

import os
from typing import List

from treegen.domain.plan_models import ActionKind, PlannedAction
from treegen.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def plan_actions(root: Node, base_path: str) -> List[PlannedAction]:
    """
    Plan one action per non-root node.

    Args:
        root: Root of the tree; never planned itself.
        base_path: Output base directory the tree is anchored to.

    Returns:
        List[PlannedAction]: Actions in pre-order.
    """
    base = os.path.abspath(base_path)
    actions: List[PlannedAction] = []
    for parts, node in root.walk():
        kind = ActionKind.CREATE_DIRECTORY if node.is_dir else ActionKind.CREATE_FILE
        actions.append(
            PlannedAction(
                kind=kind,
                path=os.path.join(base, *parts),
                relative_path="/".join(parts),
                parts=parts,
            )
        )
    return actions
