from __future__ import annotations

"""
Configuration Domain Management.

Loads the optional per-user JSON configuration, merges it over the
built-in defaults and normalizes the result. Unknown keys are dropped and
ill-typed values fall back to their defaults with a warning, so a broken
config file never prevents a run.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from treegen.domain.constants import DEFAULT_COMMENT_MARKER, DEFAULT_INDENT_WIDTH
from treegen.infra.fs import get_default_config_path, get_default_template_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "template_dir": get_default_template_dir(),
        "comment_marker": DEFAULT_COMMENT_MARKER,
        "indent_width": DEFAULT_INDENT_WIDTH,
        "icons": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Tuple[Dict[str, Any], List[str]]:
    """
    Load the configuration file and merge it over the defaults.

    A missing file is not an error. An unreadable or malformed file is
    reported as a warning and the defaults are used.

    Args:
        path: Explicit config file. Defaults to the per-user location.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return get_default_config(), []

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        msg = f"Failed to load config {config_path}: {e}. Using defaults."
        logger.error(msg)
        return get_default_config(), [msg]

    logger.debug(f"Configuration loaded from {config_path}")
    return validate_config(data)


def validate_config(config: Any) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a raw configuration mapping.

    Args:
        config: Raw configuration data, usually parsed JSON.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        warnings.append(
            f"Invalid config type: expected object, received {type(config).__name__}. Using defaults."
        )
        return defaults, warnings

    clean: Dict[str, Any] = dict(defaults)

    for key, value in config.items():
        if key not in defaults:
            warnings.append(f"Unknown config key '{key}' ignored.")
            continue
        clean[key] = value

    # Type coercion
    for key in ("template_dir", "comment_marker"):
        if not isinstance(clean[key], str) or not clean[key].strip():
            warnings.append(f"Invalid value for '{key}'. Using default.")
            clean[key] = defaults[key]

    clean["template_dir"] = os.path.abspath(
        os.path.expandvars(os.path.expanduser(clean["template_dir"]))
    )
    clean["comment_marker"] = clean["comment_marker"].strip()

    width = clean["indent_width"]
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        warnings.append("Invalid value for 'indent_width'. Using default.")
        clean["indent_width"] = defaults["indent_width"]

    if not isinstance(clean["icons"], bool):
        warnings.append("Invalid value for 'icons'. Using default.")
        clean["icons"] = defaults["icons"]

    return clean, warnings
