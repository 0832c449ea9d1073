from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the inline-syntax markers, template store conventions,
built-in project presets and the icon table used by the preview renderer.
"""

from typing import Dict

APP_NAME = "treegen"
APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# STRUCTURE SYNTAX
# -----------------------------------------------------------------------------

PATH_SEPARATOR = "/"
ASCEND_MARKER = ".."
SIBLING_MARKER = ":"
DEFAULT_COMMENT_MARKER = "#"
DEFAULT_INDENT_WIDTH = 4

# -----------------------------------------------------------------------------
# TEMPLATE STORE
# -----------------------------------------------------------------------------

TEMPLATE_EXTENSION = ".txt"
CONFIG_FILE_NAME = "config.json"
TEMPLATES_DIR_NAME = "templates"

# -----------------------------------------------------------------------------
# BUILT-IN PRESETS
# -----------------------------------------------------------------------------

DEFAULT_PRESETS: Dict[str, str] = {
    "python": (
        "src/\n"
        "    __init__.py\n"
        "    main.py\n"
        ".gitignore\n"
        "requirements.txt\n"
        "README.md\n"
    ),
    "rust": (
        "src/\n"
        "    main.rs\n"
        "Cargo.toml\n"
        ".gitignore\n"
        "README.md\n"
    ),
    "web": (
        "src/\n"
        "    index.js\n"
        "    style.css\n"
        "public/\n"
        "    index.html\n"
        ".gitignore\n"
        "package.json\n"
        "README.md\n"
    ),
}

PRESET_ALIASES: Dict[str, str] = {
    "py": "python",
    "python": "python",
    "rs": "rust",
    "rust": "rust",
    "web": "web",
    "js": "web",
    "ts": "web",
}

# -----------------------------------------------------------------------------
# PREVIEW ICONS
# -----------------------------------------------------------------------------

DIRECTORY_ICON = "📁"
DEFAULT_FILE_ICON = "📄"

FILE_ICONS: Dict[str, str] = {
    ".rs": "🦀",
    ".py": "🐍",
    ".js": "🧩",
    ".ts": "🧩",
    ".toml": "📝",
    ".md": "📘",
    ".html": "🌐",
    ".css": "🎨",
}
