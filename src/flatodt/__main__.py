"""CLI entry point for flatodt.

Usage:
    python -m flatodt render <outline.json> -o <out.fodt>
    python -m flatodt text <input.txt> -o <out.fodt> [--title TITLE]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from flatodt.config import get_settings
from flatodt.errors import FlatOdtError
from flatodt.logging import configure_logging
from flatodt.outline import build_document, load_outline
from flatodt.plaintext import text_to_document

FODT_SUFFIX = ".fodt"


def _output_path(source: Path, output: str | None) -> Path:
    return Path(output) if output else source.with_suffix(FODT_SUFFIX)


def cmd_render(args: argparse.Namespace) -> int:
    """Render a JSON outline to a flat ODF file."""
    source = Path(args.outline)
    try:
        outline = load_outline(source)
        document = build_document(outline, base_dir=source.parent)
        target = document.save(_output_path(source, args.output))
    except FlatOdtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {target}")
    return 0


def cmd_text(args: argparse.Namespace) -> int:
    """Convert a plain text file to a flat ODF file."""
    source = Path(args.input)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: Cannot read {source}: {e.strerror or e}", file=sys.stderr)
        return 1

    try:
        document = text_to_document(text, title=args.title or source.stem)
        target = document.save(_output_path(source, args.output))
    except FlatOdtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {target}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="flatodt",
        description="Write OpenDocument text documents as flat XML (.fodt)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Minimum log level (default: %(default)s)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=settings.json_logs,
        help="Emit logs as JSON lines",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Render a JSON document outline",
    )
    render_parser.add_argument("outline", help="Path to the JSON outline")
    render_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: outline path with .fodt suffix)",
    )
    render_parser.set_defaults(func=cmd_render)

    # text subcommand
    text_parser = subparsers.add_parser(
        "text",
        help="Convert a plain text file",
    )
    text_parser.add_argument("input", help="Path to the text file")
    text_parser.add_argument(
        "-o",
        "--output",
        help="Output file (default: input path with .fodt suffix)",
    )
    text_parser.add_argument(
        "--title",
        help="Document title (default: input file name)",
    )
    text_parser.set_defaults(func=cmd_text)

    args = parser.parse_args(argv)
    configure_logging(json_logs=args.json_logs, log_level=args.log_level)
    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
