from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treegen.domain.constants import APP_NAME, APP_VERSION

_EPILOG = """\
inline syntax:
  a/b/c.rs     create directories a and b, then the file c.rs
  docs/        trailing '/' creates a directory and enters it
  ..           continue one level above the previous entry's directory
  :            start a new top-level branch

example:
  treegen src/core/test.rs .. lib.rs tests/test.rs : ui/f1.rs Cargo.toml
"""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treegen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate directory and file structures from a compact description.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Structure Sources (priority: template > from > default > paths) ---
    p.add_argument(
        "paths",
        nargs="*",
        help="Inline structure: paths plus the '..' and ':' operators.",
    )
    p.add_argument(
        "--from",
        dest="from_file",
        default=None,
        metavar="FILE",
        help="Load the structure from an indented text file.",
    )
    p.add_argument(
        "--template",
        default=None,
        metavar="NAME",
        help="Load the structure from a saved template.",
    )
    p.add_argument(
        "--default",
        dest="preset",
        default=None,
        metavar="LANG",
        help="Use a built-in structure: python, rust or web.",
    )

    # --- Output Target ---
    p.add_argument(
        "-o", "--output",
        default=".",
        help="Base output directory (must exist). Defaults to the current directory.",
    )

    # --- Execution Mode ---
    p.add_argument(
        "--dry",
        "--dry-run",
        dest="dry",
        action="store_true",
        help="Preview the structure without creating anything (templates are not saved either).",
    )
    p.add_argument(
        "--confirm",
        action="store_true",
        help="Preview the structure and ask before creating it.",
    )

    # --- Template Management ---
    p.add_argument(
        "--save-template",
        default=None,
        metavar="NAME",
        help="Save the parsed structure as a template.",
    )
    p.add_argument(
        "--force",
        action="store_true",
        help="Allow --save-template to replace an existing template.",
    )
    p.add_argument(
        "--list-templates",
        action="store_true",
        help="List saved templates and exit.",
    )
    p.add_argument(
        "--template-dir",
        default=None,
        metavar="DIR",
        help="Template store location (overrides the config file).",
    )

    # --- Presentation ---
    p.add_argument(
        "--plain",
        action="store_true",
        help="Print the preview as indented text instead of a drawn tree.",
    )
    p.add_argument(
        "--icons",
        action="store_true",
        help="Decorate the preview with file-type icons.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="Configuration file to use instead of the per-user one.",
    )
    p.add_argument(
        "--log-file",
        default=None,
        metavar="FILE",
        help="Also write logs to a rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only values explicitly given on the command line are returned, so config
    file values survive when a flag is absent.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.template_dir:
        overrides["template_dir"] = args.template_dir
    if args.icons:
        overrides["icons"] = True

    return overrides
