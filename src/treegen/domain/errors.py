from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure raised by the parsing, template and materialization layers
derives from TreeGenError so interface controllers can map them to exit
codes in a single place.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE
# -----------------------------------------------------------------------------

class TreeGenError(Exception):
    """Root of all treegen domain errors."""


# -----------------------------------------------------------------------------
# PARSE STAGE (FATAL TO THE WHOLE INVOCATION)
# -----------------------------------------------------------------------------

class StructureError(TreeGenError):
    """
    A structure description could not be turned into a tree.

    Attributes:
        line: 1-based line number in a structure file, when known.
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MalformedPathError(StructureError):
    """A path token contains an empty or relative segment."""


class RootAscendError(StructureError):
    """An ascend or sibling operator tried to move above the root."""


class InconsistentIndentError(StructureError):
    """Indentation mixes tabs and spaces or does not follow the unit width."""


class IndentSkipError(StructureError):
    """A line is nested more than one level deeper than the previous one."""


class DuplicateEntryError(StructureError):
    """Two sibling entries share the same name."""


class NodeKindError(StructureError):
    """A child was attached to a finalized file node."""


class FrozenTreeError(StructureError):
    """A finalized tree was mutated."""


class EmptyStructureError(StructureError):
    """The description does not contain a single entry."""


# -----------------------------------------------------------------------------
# TEMPLATE STORE
# -----------------------------------------------------------------------------

class TemplateError(TreeGenError):
    """Base class for template store failures."""


class TemplateNotFoundError(TemplateError):
    """No template file exists for the requested name."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"template '{name}' not found at {path}")


class TemplateExistsError(TemplateError):
    """Saving would overwrite an existing template."""


class InvalidTemplateNameError(TemplateError):
    """A template name cannot be mapped to a file in the store."""


class UnknownPresetError(TemplateError):
    """The requested built-in preset does not exist."""


# -----------------------------------------------------------------------------
# MATERIALIZATION STAGE
# -----------------------------------------------------------------------------

class MaterializeError(TreeGenError):
    """Base class for filesystem reconciliation failures."""


class KindConflictError(MaterializeError):
    """
    The target exists on disk with the wrong kind.

    Attributes:
        path: Absolute path of the conflicting entry.
        expected: Kind the tree asks for.
        found: Kind present on disk.
    """

    def __init__(self, path: str, expected: str, found: str) -> None:
        self.path = path
        self.expected = expected
        self.found = found
        super().__init__(f"{path} exists as a {found}, expected a {expected}")


class OutputBaseError(MaterializeError):
    """The output base directory is missing or is not a directory."""
