from __future__ import annotations

"""
Structure Tree Data Models.

Provides the mutable-until-frozen Node type shared by the inline and
indentation parsers. Kinds are inferred while the tree is being built:
an entry starts as a tentative file and is reclassified as a directory
in place as soon as something is nested under it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from treegen.domain.errors import DuplicateEntryError, FrozenTreeError, NodeKindError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Filesystem kind of a tree entry."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(eq=False)
class Node:
    """
    One filesystem entry of a structure tree.

    Equality is structural: two nodes are equal when their names, kinds and
    ordered children are equal. The parent link and the frozen flag are
    bookkeeping and do not take part in comparisons.

    Attributes:
        name: Base name of the entry. Empty for the root.
        kind: Directory or file.
        parent: Owning directory, None for the root.
        frozen: Set once construction is finished.
    """
    name: str
    kind: NodeKind = NodeKind.FILE
    _children: Dict[str, "Node"] = field(default_factory=dict, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)
    frozen: bool = field(default=False, repr=False)

    @classmethod
    def root(cls) -> Node:
        """Create the implicit root standing for the output base directory."""
        return cls(name="", kind=NodeKind.DIRECTORY)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        # Paired walk with an explicit stack; trees can be arbitrarily deep
        pending: List[Tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left.name != right.name or left.kind is not right.kind:
                return False
            if list(left._children) != list(right._children):
                return False
            pending.extend(zip(left._children.values(), right._children.values()))
        return True

    # --- Introspection ---

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def children(self) -> List[Node]:
        return list(self._children.values())

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def relative_path(self) -> str:
        """Slash-joined path from the root, empty for the root itself."""
        parts: List[str] = []
        node: Optional[Node] = self
        while node is not None and node.parent is not None:
            parts.append(node.name)
            node = node.parent
        return "/".join(reversed(parts))

    def child(self, name: str) -> Optional[Node]:
        return self._children.get(name)

    # --- Construction ---

    def add_child(self, node: Node) -> Node:
        """
        Attach a new child, reclassifying this node as a directory if needed.

        Args:
            node: Detached node to attach.

        Returns:
            Node: The attached node.

        Raises:
            NodeKindError: This node is a finalized file.
            FrozenTreeError: The tree has been finalized.
            DuplicateEntryError: A sibling with the same name exists.
        """
        self._check_mutable(node.name)
        if node.name in self._children:
            raise DuplicateEntryError(f"duplicate entry '{self._join(node.name)}'")
        self.kind = NodeKind.DIRECTORY
        node.parent = self
        self._children[node.name] = node
        return node

    def add_file(self, name: str) -> Node:
        """Attach a tentative file entry."""
        return self.add_child(Node(name=name))

    def ensure_directory(self, name: str) -> Node:
        """
        Return the child directory `name`, creating it when absent.

        An existing tentative file with that name is reclassified as a
        directory so its already attached children are kept.
        """
        existing = self._children.get(name)
        if existing is None:
            return self.add_child(Node(name=name, kind=NodeKind.DIRECTORY))
        self._check_mutable(name)
        existing.kind = NodeKind.DIRECTORY
        return existing

    def freeze(self) -> Node:
        """Finalize this node and every descendant. Returns self."""
        for _, node in self.walk(include_root=True):
            node.frozen = True
        return self

    # --- Traversal ---

    def walk(self, include_root: bool = False) -> Iterator[Tuple[Tuple[str, ...], Node]]:
        """
        Iterate the subtree in pre-order without recursion.

        Yields:
            Tuple[Tuple[str, ...], Node]: Path parts relative to this node and
            the node itself. Siblings come out in insertion order.
        """
        stack: List[Tuple[Tuple[str, ...], Node]] = [((), self)]
        while stack:
            parts, node = stack.pop()
            if parts or include_root:
                yield parts, node
            for child in reversed(node.children):
                stack.append((parts + (child.name,), child))

    def to_dict(self) -> Dict[str, Any]:
        """Nested mapping of names: directories map to dicts, files to None."""
        out: Dict[str, Any] = {}
        stack: List[Tuple[Node, Dict[str, Any]]] = [(self, out)]
        while stack:
            node, target = stack.pop()
            for child in node.children:
                if child.is_dir:
                    target[child.name] = {}
                    stack.append((child, target[child.name]))
                else:
                    target[child.name] = None
        return out

    # --- Helpers ---

    def _join(self, name: str) -> str:
        base = self.relative_path
        return f"{base}/{name}" if base else name

    def _check_mutable(self, name: str) -> None:
        if not self.frozen:
            return
        if self.kind is NodeKind.FILE:
            raise NodeKindError(
                f"cannot attach '{name}' under file '{self.relative_path}'"
            )
        raise FrozenTreeError(f"tree is finalized, cannot add '{self._join(name)}'")
