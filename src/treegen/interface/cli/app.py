from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration loading,
structure source selection, parsing, optional preview and confirmation,
materialization and result rendering. Maps domain outcomes to exit codes:

    0  success, dry run, or creation declined at the prompt
    1  materialization failed for every attempted entry
    2  invalid input (bad description, missing template/file/output base)
    3  partial failure (some branches failed, others were created)
    130 interrupted
"""

import argparse
import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from treegen.core.materialize.materializer import materialize
from treegen.core.parsing.indent_parser import parse_structure_text
from treegen.core.parsing.tree_builder import build_tree_from_args
from treegen.core.render.tree_renderer import render_preview, render_structure_text
from treegen.core.services.templates import TemplateStore, resolve_preset
from treegen.domain.config import load_config, validate_config
from treegen.domain.errors import TreeGenError
from treegen.domain.plan_models import MaterializeResult, OutcomeStatus
from treegen.domain.tree_models import Node
from treegen.infra.fs import normalize_path, read_text
from treegen.infra.logging import LoggingConfig, configure_logging, get_logger
from treegen.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration: file values, then command-line overrides
    base_conf, warnings = load_config(args.config)
    conf, more_warnings = validate_config({**base_conf, **cli_args.args_to_overrides(args)})
    for w in warnings + more_warnings:
        logger.warning(f"Configuration: {w}")

    store = TemplateStore(conf["template_dir"])

    if args.list_templates:
        _print_templates(store)
        return 0

    try:
        # 4. Parse stage: any error aborts before touching the filesystem
        tree = _load_tree(args, store, conf)

        if args.save_template:
            _save_template(store, args, tree, conf["indent_width"])

        output_base = normalize_path(args.output, os.getcwd())

        # 5. Preview / confirmation phase
        if args.dry and args.json_output:
            result = materialize(tree, output_base, dry_run=True)
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
            return 0

        if args.dry or args.confirm:
            _print_preview(tree, output_base, plain=args.plain, icons=conf["icons"],
                           indent_width=conf["indent_width"])
            if args.dry:
                plan = materialize(tree, output_base, dry_run=True)
                print("\n(No files created)")
                print(f"Planned: {plan.planned}")
                return 0
            if not _ask_confirmation():
                print("Structure not created.")
                return 0

        # 6. Materialization phase
        result = materialize(tree, output_base)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except (TreeGenError, OSError) as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return _exit_code(result)

# -----------------------------------------------------------------------------
# SOURCE SELECTION
# -----------------------------------------------------------------------------

def _load_tree(args: argparse.Namespace, store: TemplateStore, conf: Dict[str, Any]) -> Node:
    """
    Build the tree from the highest-priority structure source.

    Priority: --template, then --from, then --default, then inline paths.

    Raises:
        TreeGenError: The selected source is missing or malformed.
        OSError: A --from file cannot be read.
    """
    marker = conf["comment_marker"]
    sources: List[Tuple[str, bool, Callable[[], Node]]] = [
        ("--template", bool(args.template),
         lambda: parse_structure_text(store.resolve(args.template), marker)),
        ("--from", bool(args.from_file),
         lambda: parse_structure_text(read_text(args.from_file), marker)),
        ("--default", bool(args.preset),
         lambda: parse_structure_text(resolve_preset(args.preset), marker)),
        ("inline paths", bool(args.paths),
         lambda: build_tree_from_args(args.paths)),
    ]

    given = [(label, loader) for label, present, loader in sources if present]
    if not given:
        raise _NoInputError(
            "no input provided. Use arguments, --from, --template, or --default."
        )

    label, loader = given[0]
    for ignored, _ in given[1:]:
        logger.warning(f"Ignoring {ignored}: {label} takes priority.")

    logger.debug(f"Structure source: {label}")
    return loader()


class _NoInputError(TreeGenError):
    """No structure source was given on the command line."""


def _save_template(
        store: TemplateStore,
        args: argparse.Namespace,
        tree: Node,
        indent_width: int,
) -> None:
    """
    Store the parsed tree as a template.

    A dry run writes nothing and only reports where the template would go.
    With --json the message goes to the log so stdout stays valid JSON.
    """
    name = args.save_template
    if args.dry:
        message = f"Template '{name}' would be saved to {store.path_for(name)}"
    else:
        text = render_structure_text(tree, indent_width=indent_width)
        message = f"Template '{name}' saved to {store.save(name, text, overwrite=args.force)}"

    if args.json_output:
        logger.info(message)
    else:
        print(message)

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_templates(store: TemplateStore) -> None:
    names = store.list_templates()
    if not names:
        print(f"No templates found in {store.template_dir}")
        return
    for name in names:
        print(name)


def _print_preview(
        tree: Node,
        output_base: str,
        plain: bool,
        icons: bool,
        indent_width: int,
) -> None:
    print(f"\nProject structure preview ({output_base}):\n")
    if plain:
        print(render_structure_text(tree, indent_width=indent_width), end="")
    else:
        for line in render_preview(tree, icons=icons):
            print(line)


def _ask_confirmation() -> bool:
    try:
        answer = input("\nCreate this structure? (y/n): ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _print_human_summary(result: MaterializeResult) -> None:
    """
    Format and print the materialization report.

    Failures go to stderr with the failing path and reason; the counters go
    to stdout.
    """
    for outcome in result.outcomes:
        if outcome.status is OutcomeStatus.FAILED:
            print(f"ERROR: {outcome.action.relative_path}: {outcome.error}", file=sys.stderr)

    if result.ok:
        print("Structure created successfully!")
    elif result.status == "partial":
        print("Structure partially created.")
    else:
        print("Structure could not be created.")

    print(f"Created: {result.created}")
    print(f"Skipped (already present): {result.skipped}")
    if not result.ok:
        print(f"Failed: {result.failed}")
        print(f"Not attempted: {result.not_attempted}")


def _exit_code(result: MaterializeResult) -> int:
    if result.ok:
        return 0
    return 3 if result.status == "partial" else 1

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
