from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for structure descriptions and an isolated config home.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def scenario_args() -> List[str]:
    """Inline arguments exercising ascend, sibling and nested paths together."""
    return ["src/core/test.rs", "..", "lib.rs", "tests/test.rs", ":", "ui/f1.rs", "Cargo.toml"]


@pytest.fixture
def scenario_tree_dict() -> dict:
    """Expected nested mapping for `scenario_args`."""
    return {
        "src": {
            "core": {"test.rs": None},
            "lib.rs": None,
            "tests": {"test.rs": None},
        },
        "ui": {"f1.rs": None},
        "Cargo.toml": None,
    }


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg"
    home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
