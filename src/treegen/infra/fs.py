from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides per-user configuration path resolution, path normalization and
the thin gateway over the raw 'os' primitives the materializer relies on.
Keeping the primitives behind LocalFileSystem lets the core be exercised
against an in-memory double.
"""

import os
from typing import Optional

from treegen.domain.constants import APP_NAME, CONFIG_FILE_NAME, TEMPLATES_DIR_NAME
from treegen.domain.tree_models import NodeKind

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_config_dir() -> str:
    """
    Resolve the per-user configuration directory without creating it.

    Standards:
    - $XDG_CONFIG_HOME/treegen when the variable is set
    - ~/.config/treegen otherwise

    Returns:
        str: Absolute path to the configuration directory.
    """
    base = os.environ.get("XDG_CONFIG_HOME", "").strip()
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".config")
    return os.path.abspath(os.path.join(base, APP_NAME))


def get_default_config_path() -> str:
    return os.path.join(get_config_dir(), CONFIG_FILE_NAME)


def get_default_template_dir() -> str:
    return os.path.join(get_config_dir(), TEMPLATES_DIR_NAME)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts (~/).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def read_text(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    """Write a UTF-8 text file, creating missing parent directories."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

# -----------------------------------------------------------------------------
# MATERIALIZATION PRIMITIVES
# -----------------------------------------------------------------------------

class LocalFileSystem:
    """Raw filesystem primitives used by the materializer."""

    def entry_kind(self, path: str) -> Optional[NodeKind]:
        """
        Report what currently exists at `path`.

        Symlinks are followed. A dangling link reports None, so the create
        call that follows fails on the link instead of skipping it.

        Returns:
            Optional[NodeKind]: DIRECTORY, FILE (any other existing entry),
            or None when nothing exists.
        """
        if os.path.isdir(path):
            return NodeKind.DIRECTORY
        if os.path.exists(path):
            return NodeKind.FILE
        return None

    def create_directory(self, path: str) -> None:
        # Parents are always created first by the pre-order plan
        os.mkdir(path)

    def create_empty_file(self, path: str) -> None:
        with open(path, "x", encoding="utf-8"):
            pass
