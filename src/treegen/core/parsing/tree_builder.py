from __future__ import annotations

"""
Cursor-Based Tree Builder.

Consumes the inline token stream and resolves relative cursor movement
into a Node tree rooted at the output base.

Two positions are tracked while walking the tokens:

- cursor: the directory under which the next path is created.
- anchor: the directory holding the most recently created entry.

A file path leaves the cursor where it is and moves the anchor to the
file's directory. '..' moves the cursor to the anchor's parent, so
'src/core/test.rs .. lib.rs' puts lib.rs in src. ':' closes the current
branch and returns both positions to the root. A path ending in '/'
enters the directory it names.
"""

import logging
from typing import Iterable, Sequence, Tuple

from treegen.core.parsing.tokenizer import Token, TokenKind, tokenize
from treegen.domain.constants import ASCEND_MARKER, SIBLING_MARKER
from treegen.domain.errors import EmptyStructureError, RootAscendError
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(tokens: Iterable[Token]) -> Node:
    """
    Build and freeze the tree described by a token stream.

    Args:
        tokens: Tokens produced by the tokenizer.

    Returns:
        Node: Frozen root node.

    Raises:
        RootAscendError: An operator would move above the root.
        DuplicateEntryError: A file entry repeats a sibling name.
        EmptyStructureError: The stream contains no path.
    """
    root = Node.root()
    cursor = root
    anchor = root
    paths = 0

    for position, token in enumerate(tokens, start=1):
        if token.kind is TokenKind.PATH:
            leaf = attach_path(cursor, token.segments, token.directory)
            paths += 1
            if leaf.is_dir:
                cursor = anchor = leaf
            else:
                anchor = leaf.parent or root
            continue

        if anchor is root:
            marker = ASCEND_MARKER if token.kind is TokenKind.ASCEND else SIBLING_MARKER
            raise RootAscendError(
                f"token {position} '{marker}' cannot move above the output root"
            )

        if token.kind is TokenKind.ASCEND:
            cursor = anchor = anchor.parent or root
        else:
            cursor = anchor = root

    if not paths:
        raise EmptyStructureError("no paths to generate")

    logger.debug(f"Inline structure resolved into {sum(1 for _ in root.walk())} entries")
    return root.freeze()


def build_tree_from_args(args: Sequence[str]) -> Node:
    """Tokenize raw command-line arguments and build their tree."""
    return build_tree(tokenize(args))


def attach_path(parent: Node, segments: Tuple[str, ...], directory: bool) -> Node:
    """
    Create a slash-separated path under `parent` and return its leaf.

    Intermediate segments are created or reused as directories; the leaf is
    a tentative file unless `directory` is set, in which case an existing
    directory of that name is reused.

    Args:
        parent: Directory the path is relative to.
        segments: Path segments, at least one.
        directory: True when the path ended with a separator.

    Returns:
        Node: The leaf node.
    """
    node = parent
    for name in segments[:-1]:
        node = node.ensure_directory(name)
    if directory:
        return node.ensure_directory(segments[-1])
    return node.add_file(segments[-1])
