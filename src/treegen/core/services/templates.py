from __future__ import annotations

"""
Template Store Service.

Maps template names to structure text stored as '<name>.txt' files in a
template directory, and serves the built-in presets. The directory is
passed in explicitly so callers (and tests) decide where the store lives.
"""

import logging
import os
from typing import List

from treegen.domain.constants import (
    DEFAULT_PRESETS,
    PATH_SEPARATOR,
    PRESET_ALIASES,
    TEMPLATE_EXTENSION,
)
from treegen.domain.errors import (
    InvalidTemplateNameError,
    TemplateExistsError,
    TemplateNotFoundError,
    UnknownPresetError,
)
from treegen.infra.fs import read_text, write_text

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TEMPLATE STORE
# -----------------------------------------------------------------------------

class TemplateStore:
    """
    File-backed collection of named structure templates.

    Attributes:
        template_dir: Absolute directory holding the template files.
    """

    def __init__(self, template_dir: str) -> None:
        self.template_dir = os.path.abspath(template_dir)

    def path_for(self, name: str) -> str:
        """Absolute file path a template name maps to."""
        clean = (name or "").strip()
        if (
            not clean
            or clean in (".", "..")
            or PATH_SEPARATOR in clean
            or "\\" in clean
        ):
            raise InvalidTemplateNameError(f"invalid template name '{name}'")
        if not clean.endswith(TEMPLATE_EXTENSION):
            clean += TEMPLATE_EXTENSION
        return os.path.join(self.template_dir, clean)

    def resolve(self, name: str) -> str:
        """
        Return the structure text of a template.

        Args:
            name: Template name, with or without the '.txt' extension.

        Returns:
            str: Raw template text, fed unchanged to the indentation parser.

        Raises:
            TemplateNotFoundError: No file exists for the name.
        """
        path = self.path_for(name)
        if not os.path.isfile(path):
            raise TemplateNotFoundError(name, path)
        logger.debug(f"Loading template '{name}' from {path}")
        return read_text(path)

    def list_templates(self) -> List[str]:
        """Sorted names of the stored templates; empty if the store is missing."""
        if not os.path.isdir(self.template_dir):
            return []
        names = []
        for entry in os.listdir(self.template_dir):
            stem, ext = os.path.splitext(entry)
            if ext == TEMPLATE_EXTENSION and os.path.isfile(os.path.join(self.template_dir, entry)):
                names.append(stem)
        return sorted(names)

    def save(self, name: str, text: str, overwrite: bool = False) -> str:
        """
        Store structure text under a template name.

        Args:
            name: Template name.
            text: Structure text in indentation form.
            overwrite: Replace an existing template of the same name.

        Returns:
            str: Path of the written template file.

        Raises:
            TemplateExistsError: The template exists and overwrite is False.
        """
        path = self.path_for(name)
        if os.path.exists(path) and not overwrite:
            raise TemplateExistsError(f"template '{name}' already exists at {path}")
        write_text(path, text)
        logger.info(f"Template '{name}' saved to {path}")
        return path

# -----------------------------------------------------------------------------
# BUILT-IN PRESETS
# -----------------------------------------------------------------------------

def resolve_preset(name: str) -> str:
    """
    Return the structure text of a built-in preset.

    Args:
        name: Preset name or alias (python/py, rust/rs, web/js/ts).

    Raises:
        UnknownPresetError: The name matches no preset.
    """
    key = PRESET_ALIASES.get((name or "").strip().lower())
    if key is None:
        known = ", ".join(sorted(PRESET_ALIASES))
        raise UnknownPresetError(f"unknown default template '{name}' (known: {known})")
    return DEFAULT_PRESETS[key]
