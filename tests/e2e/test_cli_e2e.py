from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and checks exit codes,
stream output and the directories and files left on disk.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "treegen" / "main.py"


def run_cli(
        args: List[str],
        config_home: Path,
        stdin: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """
    Execute the CLI in a separate process.

    Injects 'src' into PYTHONPATH and points XDG_CONFIG_HOME at an isolated
    directory so user templates never leak into the run.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["XDG_CONFIG_HOME"] = str(config_home)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        input=stdin if stdin is not None else "",
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    out = tmp_path / "project"
    out.mkdir()
    return out


@pytest.fixture
def xdg(tmp_path: Path) -> Path:
    home = tmp_path / "xdg"
    home.mkdir()
    return home


def test_cli_help_and_version(xdg: Path) -> None:
    result = run_cli(["--help"], xdg)
    assert result.returncode == 0
    assert "--template" in result.stdout

    result = run_cli(["--version"], xdg)
    assert result.returncode == 0
    assert "treegen" in result.stdout


def test_cli_creates_inline_structure(out_dir: Path, xdg: Path, scenario_args) -> None:
    result = run_cli(scenario_args + ["-o", str(out_dir)], xdg)

    assert result.returncode == 0, result.stderr
    assert "Structure created successfully!" in result.stdout
    assert (out_dir / "src" / "core" / "test.rs").is_file()
    assert (out_dir / "src" / "tests" / "test.rs").is_file()
    assert (out_dir / "ui" / "f1.rs").is_file()
    assert (out_dir / "Cargo.toml").is_file()


def test_cli_no_input_exits_with_usage_error(xdg: Path) -> None:
    result = run_cli([], xdg)

    assert result.returncode == 2
    assert "no input provided" in result.stderr


def test_cli_confirm_declined_via_stdin(out_dir: Path, xdg: Path) -> None:
    result = run_cli(["notes.md", "--confirm", "-o", str(out_dir)], xdg, stdin="n\n")

    assert result.returncode == 0
    assert "Create this structure? (y/n):" in result.stdout
    assert "Structure not created." in result.stdout
    assert list(out_dir.iterdir()) == []


def test_cli_dry_run_json_is_machine_readable(out_dir: Path, xdg: Path) -> None:
    result = run_cli(["--default", "python", "--dry", "--json", "-o", str(out_dir)], xdg)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["dry_run"] is True
    assert "src/main.py" in [a["path"] for a in data["actions"]]
    assert list(out_dir.iterdir()) == []


def test_cli_saved_template_round_trip(out_dir: Path, xdg: Path, tmp_path: Path) -> None:
    first = tmp_path / "first"
    first.mkdir()
    saved = run_cli(
        ["api/", "routes.py", ":", "setup.cfg", "--save-template", "svc", "-o", str(first)],
        xdg,
    )
    assert saved.returncode == 0, saved.stderr
    assert (xdg / "treegen" / "templates" / "svc.txt").is_file()

    listed = run_cli(["--list-templates"], xdg)
    assert listed.stdout.split() == ["svc"]

    created = run_cli(["--template", "svc", "-o", str(out_dir)], xdg)
    assert created.returncode == 0, created.stderr
    assert (out_dir / "api" / "routes.py").is_file()
    assert (out_dir / "setup.cfg").is_file()


def test_cli_partial_failure(out_dir: Path, xdg: Path) -> None:
    (out_dir / "src").write_text("", encoding="utf-8")

    result = run_cli(["src/main.rs", ":", "docs/readme.md", "-o", str(out_dir)], xdg)

    assert result.returncode == 3
    assert "ERROR: src:" in result.stderr
    assert (out_dir / "docs" / "readme.md").is_file()
