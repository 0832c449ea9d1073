from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies default generation, JSON loading, and normalization of invalid
or unknown values.
"""

import json
import os
from pathlib import Path

from treegen.domain.config import get_default_config, load_config, validate_config


def test_defaults_follow_config_home(config_home: Path) -> None:
    conf = get_default_config()

    assert conf["template_dir"] == str(config_home / "treegen" / "templates")
    assert conf["comment_marker"] == "#"
    assert conf["indent_width"] == 4
    assert conf["icons"] is False


def test_missing_file_returns_defaults(config_home: Path) -> None:
    conf, warnings = load_config()
    assert conf == get_default_config()
    assert warnings == []


def test_file_values_override_defaults(tmp_path: Path, config_home: Path) -> None:
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(
        json.dumps({"template_dir": str(tmp_path / "tpl"), "indent_width": 2, "icons": True}),
        encoding="utf-8",
    )

    conf, warnings = load_config(str(cfg_file))

    assert warnings == []
    assert conf["template_dir"] == str(tmp_path / "tpl")
    assert conf["indent_width"] == 2
    assert conf["icons"] is True


def test_corrupted_file_falls_back_with_warning(tmp_path: Path, config_home: Path) -> None:
    cfg_file = tmp_path / "broken.json"
    cfg_file.write_text("{not json", encoding="utf-8")

    conf, warnings = load_config(str(cfg_file))

    assert conf == get_default_config()
    assert len(warnings) == 1


def test_validate_config_rejects_bad_types(config_home: Path) -> None:
    conf, warnings = validate_config({
        "indent_width": 0,
        "icons": "yes",
        "comment_marker": "",
        "colour": "blue",
    })
    defaults = get_default_config()

    assert conf["indent_width"] == defaults["indent_width"]
    assert conf["icons"] is False
    assert conf["comment_marker"] == "#"
    assert "colour" not in conf
    assert len(warnings) == 4


def test_validate_config_non_dict(config_home: Path) -> None:
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert warnings


def test_template_dir_is_expanded(config_home: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(config_home))
    conf, _ = validate_config({"template_dir": "~/tpl"})
    assert conf["template_dir"] == os.path.join(str(config_home), "tpl")
