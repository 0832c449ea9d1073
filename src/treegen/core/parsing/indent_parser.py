from __future__ import annotations

"""
Indentation Structure Parser.

Parses the multi-line text form used by --from files and templates:

    src/
        main.rs
    Cargo.toml

Nesting is expressed by indentation instead of operators. The parser keeps
an explicit stack of (depth, node) pairs rather than recursing, so deeply
nested templates do not grow the call stack.
"""

import logging
from typing import List, Optional, Tuple

from treegen.core.parsing.tokenizer import split_path
from treegen.core.parsing.tree_builder import attach_path
from treegen.domain.constants import DEFAULT_COMMENT_MARKER
from treegen.domain.errors import (
    EmptyStructureError,
    InconsistentIndentError,
    IndentSkipError,
    StructureError,
)
from treegen.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_structure_text(text: str, comment_marker: str = DEFAULT_COMMENT_MARKER) -> Node:
    """
    Parse an indented structure description into a frozen tree.

    Args:
        text: Full file content.
        comment_marker: Prefix marking a comment line. Empty disables comments.

    Returns:
        Node: Frozen root node.

    Raises:
        InconsistentIndentError: Tabs and spaces are mixed, or an indent is
            not a multiple of the unit width.
        IndentSkipError: A line is more than one level deeper than the last.
        MalformedPathError: A line holds an invalid path.
        DuplicateEntryError: A file entry repeats a sibling name.
        EmptyStructureError: No entries were found.
    """
    root = Node.root()
    stack: List[Tuple[int, Node]] = [(-1, root)]
    gauge = _IndentGauge()
    prev_depth = -1
    entries = 0

    for lineno, raw_line in enumerate(text.lstrip("\ufeff").splitlines(), start=1):
        line = raw_line.rstrip()
        content = line.lstrip(" \t")
        if not content or (comment_marker and content.startswith(comment_marker)):
            continue

        depth = gauge.measure(line[: len(line) - len(content)], lineno)
        if depth > prev_depth + 1:
            raise IndentSkipError(
                f"'{content}' is nested {depth - prev_depth} levels below the previous entry",
                line=lineno,
            )

        while stack[-1][0] >= depth:
            stack.pop()
        parent = stack[-1][1]

        try:
            segments, directory = split_path(content)
            leaf = attach_path(parent, segments, directory)
        except StructureError as e:
            if e.line is not None:
                raise
            raise type(e)(str(e), line=lineno) from e

        stack.append((depth, leaf))
        prev_depth = depth
        entries += 1

    if not entries:
        raise EmptyStructureError("structure text contains no entries")

    logger.debug(f"Parsed {entries} structure lines into {sum(1 for _ in root.walk())} entries")
    return root.freeze()

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

class _IndentGauge:
    """Converts leading whitespace into a depth using the file's own unit."""

    def __init__(self) -> None:
        self.char: Optional[str] = None
        self.unit = 0

    def measure(self, leading: str, lineno: int) -> int:
        if not leading:
            return 0

        if len(set(leading)) > 1:
            raise InconsistentIndentError("indentation mixes tabs and spaces", line=lineno)

        char = leading[0]
        if self.char is None:
            # First indented line defines the unit
            self.char = char
            self.unit = len(leading)
        elif char != self.char:
            expected = "tabs" if self.char == "\t" else "spaces"
            raise InconsistentIndentError(
                f"indentation switches away from {expected}", line=lineno
            )

        if len(leading) % self.unit:
            raise InconsistentIndentError(
                f"indent of {len(leading)} is not a multiple of {self.unit}", line=lineno
            )
        return len(leading) // self.unit
