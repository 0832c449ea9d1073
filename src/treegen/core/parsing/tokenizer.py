from __future__ import annotations

"""
Inline Structure Tokenizer.

Splits the positional command-line structure arguments into an ordered
token stream of paths and cursor operators. No structural decision is
taken here: tokens are emitted in input order, one per argument.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from treegen.domain.constants import ASCEND_MARKER, PATH_SEPARATOR, SIBLING_MARKER
from treegen.domain.errors import MalformedPathError

# -----------------------------------------------------------------------------
# TOKEN MODEL
# -----------------------------------------------------------------------------

class TokenKind(str, Enum):
    PATH = "path"
    ASCEND = "ascend"
    SIBLING = "sibling"


@dataclass(frozen=True)
class Token:
    """
    One element of the inline structure language.

    Attributes:
        kind: Path or operator.
        segments: Ordered path segments (PATH tokens only).
        directory: True when the path ended with a separator.
    """
    kind: TokenKind
    segments: Tuple[str, ...] = ()
    directory: bool = False


ASCEND = Token(TokenKind.ASCEND)
SIBLING = Token(TokenKind.SIBLING)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tokenize(args: Sequence[str]) -> List[Token]:
    """
    Convert raw structure arguments into tokens.

    Args:
        args: Positional arguments as received from the command line.

    Returns:
        List[Token]: Tokens in input order.

    Raises:
        MalformedPathError: An argument is empty or has an empty, '.' or
            '..' segment.
    """
    tokens: List[Token] = []
    for raw in args:
        arg = raw.strip()
        if arg == ASCEND_MARKER:
            tokens.append(ASCEND)
        elif arg == SIBLING_MARKER:
            tokens.append(SIBLING)
        else:
            segments, directory = split_path(arg)
            tokens.append(Token(TokenKind.PATH, segments, directory))
    return tokens


def split_path(raw: str) -> Tuple[Tuple[str, ...], bool]:
    """
    Split one path into segments and detect a trailing separator.

    Backslashes are normalized to the internal '/' separator.

    Args:
        raw: Path text, e.g. 'src/core/test.rs' or 'docs/'.

    Returns:
        Tuple[Tuple[str, ...], bool]: Segments and the forced-directory flag.
    """
    path = raw.strip().replace("\\", PATH_SEPARATOR)
    if not path:
        raise MalformedPathError("empty path")

    directory = path.endswith(PATH_SEPARATOR)
    if directory:
        path = path[:-1]

    segments = tuple(s.strip() for s in path.split(PATH_SEPARATOR))
    for segment in segments:
        if not segment:
            raise MalformedPathError(f"empty segment in path '{raw}'")
        if segment in (".", ASCEND_MARKER):
            raise MalformedPathError(
                f"relative segment '{segment}' in path '{raw}'; "
                f"use a standalone '{ASCEND_MARKER}' to move up"
            )
    return segments, directory
