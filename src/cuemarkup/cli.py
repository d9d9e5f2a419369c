"""Command-line entry point for converting cue documents.

Usage:
    uv run cuemarkup render cue.json
    uv run cuemarkup render cue.json --density 2.0 --page -o cue.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cuemarkup import _setup_logging
from cuemarkup.config import get_settings
from cuemarkup.export import convert, render_page, render_style_block
from cuemarkup.loader import CueDocumentError, load_cue_document

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuemarkup",
        description="Convert annotated cue text to HTML and CSS.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a JSON cue document")
    render.add_argument("input", type=Path, help="Path to the cue document")
    render.add_argument(
        "--density",
        type=float,
        default=None,
        help="Display density (default: RENDER__DISPLAY_DENSITY or 1.0)",
    )
    render.add_argument(
        "--page",
        action="store_true",
        help="Emit a standalone HTML page instead of a fragment",
    )
    render.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )
    return parser


def _render(args: argparse.Namespace) -> str:
    settings = get_settings()
    density = args.density
    if density is None:
        density = settings.render.display_density
    if density <= 0:
        console.print(f"[red]Error:[/] density must be positive, got {density}")
        sys.exit(2)

    try:
        text = load_cue_document(args.input)
    except CueDocumentError as exc:
        console.print(f"[red]Error:[/] {escape(f'{args.input}: {exc}')}")
        sys.exit(1)

    result = convert(text, density)
    if args.page:
        return render_page(result, title=settings.render.page_title)

    style = render_style_block(result.css_rule_sets)
    return f"{style}\n{result.html}\n" if style else f"{result.html}\n"


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``cuemarkup`` command."""
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    _setup_logging(settings.logging.level, settings.logging.log_dir)

    output = _render(args)

    if args.output is None:
        sys.stdout.write(output)
        return

    try:
        args.output.write_text(output, encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Error:[/] {escape(f'cannot write {args.output}: {exc}')}")
        sys.exit(1)
    logger.info("Wrote %s", args.output)
    console.print(f"[green]Wrote[/] {args.output}")


if __name__ == "__main__":
    main()
