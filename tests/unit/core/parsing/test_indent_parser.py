from __future__ import annotations

"""
Unit tests for the Indentation Structure Parser.

Verifies:
1. Depth tracking through the explicit indent stack.
2. Directory markers, inline paths and kind reclassification.
3. Comment and blank line handling.
4. Indentation error detection with line numbers.
"""

import pytest

from treegen.core.parsing.indent_parser import parse_structure_text
from treegen.domain.errors import (
    DuplicateEntryError,
    EmptyStructureError,
    InconsistentIndentError,
    IndentSkipError,
    MalformedPathError,
)
from treegen.domain.tree_models import NodeKind


def test_simple_nesting_and_dedent() -> None:
    root = parse_structure_text("src\n    main.rs\nCargo.toml\nREADME.md")

    assert root.to_dict() == {"src": {"main.rs": None}, "Cargo.toml": None, "README.md": None}
    assert root.child("src").kind is NodeKind.DIRECTORY
    assert [c.name for c in root.children] == ["src", "Cargo.toml", "README.md"]


def test_multi_level_dedent_pops_to_matching_level() -> None:
    text = (
        "a/\n"
        "    b/\n"
        "        c/\n"
        "            deep.txt\n"
        "    sibling.txt\n"
        "top.txt\n"
    )
    root = parse_structure_text(text)

    assert root.to_dict() == {
        "a": {"b": {"c": {"deep.txt": None}}, "sibling.txt": None},
        "top.txt": None,
    }


def test_trailing_separator_forces_directory() -> None:
    root = parse_structure_text("empty/\nfile\n")
    assert root.child("empty").kind is NodeKind.DIRECTORY
    assert root.child("file").kind is NodeKind.FILE


def test_line_with_path_nests_under_its_leaf() -> None:
    text = "src/core/\n    mod.rs\n    lib.rs\nCargo.toml\n"
    root = parse_structure_text(text)
    assert root.to_dict() == {
        "src": {"core": {"mod.rs": None, "lib.rs": None}},
        "Cargo.toml": None,
    }


def test_tabs_are_accepted_when_consistent() -> None:
    root = parse_structure_text("src\n\tmain.rs\n\tutil\n\t\tio.rs\n")
    assert root.to_dict() == {"src": {"main.rs": None, "util": {"io.rs": None}}}


def test_two_space_unit_is_detected() -> None:
    root = parse_structure_text("a\n  b\n    c.txt\n")
    assert root.to_dict() == {"a": {"b": {"c.txt": None}}}


def test_blank_and_comment_lines_do_not_affect_the_stack() -> None:
    text = (
        "# project layout\n"
        "src/\n"
        "\n"
        "        # nested comment at an odd depth\n"
        "    main.rs\n"
        "\n"
        "README.md\n"
    )
    root = parse_structure_text(text)
    assert root.to_dict() == {"src": {"main.rs": None}, "README.md": None}


def test_custom_comment_marker() -> None:
    root = parse_structure_text("; comment\n#hash.txt\n", comment_marker=";")
    assert root.to_dict() == {"#hash.txt": None}


def test_mixed_tabs_and_spaces_fail() -> None:
    with pytest.raises(InconsistentIndentError) as exc:
        parse_structure_text("src\n    a.rs\nlib\n\tb.rs\n")
    assert exc.value.line == 4


def test_mixed_whitespace_within_one_line_fails() -> None:
    with pytest.raises(InconsistentIndentError):
        parse_structure_text("src\n \ta.rs\n")


def test_indent_not_multiple_of_unit_fails() -> None:
    with pytest.raises(InconsistentIndentError) as exc:
        parse_structure_text("a\n    b\n      c\n")
    assert exc.value.line == 3


def test_skipping_a_level_fails() -> None:
    with pytest.raises(IndentSkipError) as exc:
        parse_structure_text("a\n  b\n      c\n")
    assert exc.value.line == 3


def test_indented_first_entry_fails() -> None:
    with pytest.raises(IndentSkipError):
        parse_structure_text("    a.txt\n")


def test_errors_from_paths_carry_the_line_number() -> None:
    with pytest.raises(MalformedPathError) as exc:
        parse_structure_text("ok.txt\nbad//path\n")
    assert exc.value.line == 2
    assert "line 2" in str(exc.value)


def test_duplicate_entries_fail() -> None:
    with pytest.raises(DuplicateEntryError) as exc:
        parse_structure_text("a.txt\na.txt\n")
    assert exc.value.line == 2


def test_repeated_directory_lines_merge() -> None:
    root = parse_structure_text("src/\n    a.rs\nsrc/\n    b.rs\n")
    assert root.to_dict() == {"src": {"a.rs": None, "b.rs": None}}


def test_empty_text_fails() -> None:
    with pytest.raises(EmptyStructureError):
        parse_structure_text("\n# only comments\n\n")


def test_byte_order_mark_is_ignored() -> None:
    root = parse_structure_text("\ufeffREADME.md\n")
    assert root.to_dict() == {"README.md": None}


def test_sibling_order_is_part_of_the_tree() -> None:
    assert parse_structure_text("x.rs\ny.rs\n") != parse_structure_text("y.rs\nx.rs\n")
