from __future__ import annotations

"""
Tree Renderer.

Converts Node trees into text. Two views are produced:

- an ASCII preview with box connectors (├──, └──) for dry runs, and
- the canonical indentation text, which the indentation parser reads back
  into an identical tree and which is what gets saved as a template.
"""

import os
from typing import List, Tuple

from treegen.domain.constants import (
    DEFAULT_FILE_ICON,
    DEFAULT_INDENT_WIDTH,
    DIRECTORY_ICON,
    FILE_ICONS,
    PATH_SEPARATOR,
)
from treegen.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        node: Node,
        lines: List[str],
        prefix: str = "",
        icons: bool = False,
) -> None:
    """
    Transform the tree into connector-drawn lines.

    Children keep their creation order. Directories carry a trailing '/'.
    Uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.

    Args:
        node: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix of the first level.
        icons: Prepend a folder or file-type emoji to each entry.
    """
    stack: List[Tuple[Node, str, bool]] = []
    _push_children(stack, node, prefix)

    while stack:
        child, child_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{child_prefix}{connector}{_label(child, icons)}")

        if child.is_dir:
            _push_children(stack, child, child_prefix + ("    " if is_last else "│   "))


def render_preview(root: Node, icons: bool = False) -> List[str]:
    """Return the ASCII preview of a whole tree as a list of lines."""
    lines: List[str] = []
    render_tree_structure(root, lines, icons=icons)
    return lines


def render_structure_text(root: Node, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Render the canonical indentation text of a tree.

    Directories are written with a trailing separator so empty directories
    keep their kind when the text is parsed again.

    Args:
        root: Root node.
        indent_width: Spaces per nesting level.

    Returns:
        str: Newline-terminated structure text.
    """
    unit = " " * indent_width
    out: List[str] = []
    for parts, node in root.walk():
        suffix = PATH_SEPARATOR if node.is_dir else ""
        out.append(f"{unit * (len(parts) - 1)}{node.name}{suffix}")
    return "\n".join(out) + "\n" if out else ""

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _push_children(stack: List[Tuple[Node, str, bool]], node: Node, prefix: str) -> None:
    """Queue the children of a node so they pop off in creation order."""
    children = node.children
    last = len(children) - 1
    for i in range(last, -1, -1):
        stack.append((children[i], prefix, i == last))


def _label(node: Node, icons: bool) -> str:
    name = f"{node.name}{PATH_SEPARATOR}" if node.is_dir else node.name
    if not icons:
        return name
    if node.is_dir:
        return f"{DIRECTORY_ICON} {name}"
    ext = os.path.splitext(node.name)[1].lower()
    return f"{FILE_ICONS.get(ext, DEFAULT_FILE_ICON)} {name}"
