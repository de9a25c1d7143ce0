#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/cli.py
"""Command-line interface for docmark.

Sub-commands
------------
parse
    Markdown file to editor JSON.
render
    Editor JSON file to markdown.
split
    Split an editor JSON tree at a cursor and print both halves.
marks
    List the ``<mark>`` spans of a markdown file.

Examples
--------
    $ docmark parse notes.md --json-indent 2
    $ docmark render tree.json
    $ docmark split tree.json --path 0,0,0 --offset 5
    $ docmark marks notes.md --type comment

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

from docmark import __version__
from docmark.api import parse_with_fallback, serialize, split_at
from docmark.ast.nodes import Document
from docmark.ast.serialization import ast_to_json, json_to_ast
from docmark.ast.splitting import CursorPosition
from docmark.exceptions import DocmarkError, SplitError, ValidationError
from docmark.logging_utils import configure_logging
from docmark.options import MarkdownParserOptions, MarkdownRendererOptions
from docmark.parsers.scanner import extract_marked_text

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _parse_path(value: str) -> tuple[int, ...]:
    """Parse a comma-separated cursor path such as ``0,1,0``."""
    try:
        return tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid cursor path {value!r}: expected integers like 0,1,0") from e


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``docmark`` command."""
    parser = argparse.ArgumentParser(
        prog="docmark",
        description="Convert between extended markdown and the editor document tree.",
    )
    parser.add_argument("--version", action="version", version=f"docmark {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse markdown to editor JSON")
    parse_cmd.add_argument("input", help="Markdown file, or - for stdin")
    parse_cmd.add_argument("--json-indent", type=int, default=None, help="Indent JSON output by N spaces")
    parse_cmd.add_argument("--no-normalize", action="store_true", help="Skip tree normalization")
    parse_cmd.add_argument("--no-task-lists", action="store_true", help="Do not parse task list checkboxes")

    render_cmd = subparsers.add_parser("render", help="Render editor JSON to markdown")
    render_cmd.add_argument("input", help="JSON file, or - for stdin")
    _add_render_arguments(render_cmd)

    split_cmd = subparsers.add_parser("split", help="Split a markdown block at a cursor")
    split_cmd.add_argument("input", help="JSON file, or - for stdin")
    split_cmd.add_argument("--path", type=_parse_path, required=True, help="Cursor path, e.g. 0,1,0")
    split_cmd.add_argument("--offset", type=int, default=0, help="Character offset in the addressed leaf")
    _add_render_arguments(split_cmd)

    marks_cmd = subparsers.add_parser("marks", help="List <mark> spans in markdown")
    marks_cmd.add_argument("input", help="Markdown file, or - for stdin")
    marks_cmd.add_argument("--type", dest="mark_type", choices=["highlighted", "read-only", "comment"])

    return parser


def _add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--bullet", choices=["-", "*", "+"], default="-", help="Unordered list marker")
    parser.add_argument("--include-change-ids", action="store_true", help="Write id attributes on change tags")
    parser.add_argument(
        "--change-style",
        choices=["tag", "critic"],
        default="tag",
        help="Tracked change output style",
    )


def _renderer_options(args: argparse.Namespace) -> MarkdownRendererOptions:
    return MarkdownRendererOptions(
        bullet_symbol=args.bullet,
        include_change_ids=args.include_change_ids,
        tracked_change_style=args.change_style,
    )


def _run_parse(args: argparse.Namespace) -> int:
    options = MarkdownParserOptions(normalize=not args.no_normalize, parse_task_lists=not args.no_task_lists)
    tree = parse_with_fallback(_read_input(args.input), options)
    logger.info(f"Parsed {len(tree.children)} blocks using strategy {tree.metadata.get('strategy')}")
    print(ast_to_json(tree, indent=args.json_indent))
    return EXIT_SUCCESS


def _run_render(args: argparse.Namespace) -> int:
    tree = json_to_ast(_read_input(args.input))
    print(serialize(tree, _renderer_options(args)))
    return EXIT_SUCCESS


def _run_split(args: argparse.Namespace) -> int:
    tree = json_to_ast(_read_input(args.input))
    result = split_at(
        tree if isinstance(tree, Document) else [tree],
        CursorPosition(path=args.path, offset=args.offset),
        _renderer_options(args),
    )
    if result is None:
        print("No markdown block encloses the cursor", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return EXIT_SUCCESS


def _run_marks(args: argparse.Namespace) -> int:
    spans = extract_marked_text(_read_input(args.input), args.mark_type)
    print(json.dumps([asdict(span) for span in spans], ensure_ascii=False, indent=2))
    return EXIT_SUCCESS


_COMMANDS = {
    "parse": _run_parse,
    "render": _run_render,
    "split": _run_split,
    "marks": _run_marks,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the docmark command line.

    Parameters
    ----------
    argv : sequence of str or None, default = None
        Arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        return _COMMANDS[args.command](args)
    except SplitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except (DocmarkError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
