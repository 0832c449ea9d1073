from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies the connector preview, icon decoration, and that the canonical
indentation text parses back into the same tree.
"""

from treegen.core.parsing.indent_parser import parse_structure_text
from treegen.core.parsing.tree_builder import build_tree_from_args
from treegen.core.render.tree_renderer import render_preview, render_structure_text


def test_preview_uses_connectors_in_creation_order() -> None:
    root = build_tree_from_args(["src/main.rs", "src/lib.rs", "Cargo.toml"])

    assert render_preview(root) == [
        "├── src/",
        "│   ├── main.rs",
        "│   └── lib.rs",
        "└── Cargo.toml",
    ]


def test_preview_icons() -> None:
    root = build_tree_from_args(["src/main.rs", "notes.xyz"])
    lines = render_preview(root, icons=True)

    assert lines[0] == "├── 📁 src/"
    assert lines[1] == "│   └── 🦀 main.rs"
    assert lines[2] == "└── 📄 notes.xyz"


def test_structure_text_format() -> None:
    root = build_tree_from_args(["src/core/test.rs", "logs/", ":", "README.md"])

    assert render_structure_text(root) == (
        "src/\n"
        "    core/\n"
        "        test.rs\n"
        "logs/\n"
        "README.md\n"
    )
    assert render_structure_text(root, indent_width=2).splitlines()[1] == "  core/"


def test_structure_text_round_trip(scenario_args) -> None:
    """Rendering a tree as indented text and parsing it back is lossless."""
    tree = build_tree_from_args(scenario_args + ["docs/", "api/"])

    reparsed = parse_structure_text(render_structure_text(tree))

    assert reparsed == tree


def test_preview_of_deeply_nested_path() -> None:
    root = build_tree_from_args(["/".join(["a"] * 1500) + "/f.rs", ":", "top.md"])

    lines = render_preview(root)

    assert len(lines) == 1502
    assert lines[0] == "├── a/"
    assert lines[1] == "│   └── a/"
    assert lines[1500] == "│   " + "    " * 1499 + "└── f.rs"
    assert lines[-1] == "└── top.md"
