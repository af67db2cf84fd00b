"""
Convert single notes between Obsidian Markdown and FoundryVTT journal HTML.

Usage:
    obsidian-bridge to-html "Cragmaw Hideout.md" -o page.html --frontmatter-out page.yaml
    obsidian-bridge to-markdown page.html -o "Cragmaw Hideout.md" --frontmatter page.yaml

Without -o the result is written to stdout; log output goes to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from exceptions import ConfigurationError, ObsidianBridgeError
from foundry_converters.journals import (
    convert_journal_html_to_markdown,
    convert_markdown_to_journal_html,
)
from logging_config import setup_logging

logger = logging.getLogger(__name__)

# Loggers that receive the CLI's handlers
LOGGER_NAMES = (__name__, "foundry_converters")


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise ConfigurationError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _write_output(text: str, output: Optional[Path]) -> None:
    if output is None:
        sys.stdout.write(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.info(f"Wrote {output}")


def run_to_html(args: argparse.Namespace) -> None:
    markdown = _read_text(args.input)
    preserve_line_breaks = False if args.no_line_breaks else None

    journal = convert_markdown_to_journal_html(markdown, preserve_line_breaks=preserve_line_breaks)

    _write_output(journal.html, args.output)
    if args.frontmatter_out and journal.frontmatter is not None:
        args.frontmatter_out.write_text(journal.frontmatter + "\n", encoding="utf-8")
        logger.info(f"Wrote frontmatter to {args.frontmatter_out}")


def run_to_markdown(args: argparse.Namespace) -> None:
    html = _read_text(args.input)
    frontmatter = _read_text(args.frontmatter).rstrip("\n") if args.frontmatter else None

    markdown = convert_journal_html_to_markdown(html, frontmatter=frontmatter)

    _write_output(markdown, args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obsidian-bridge",
        description="Convert notes between Obsidian Markdown and FoundryVTT journal HTML.",
    )
    parser.add_argument("--log-file", type=Path, help="Also append log output to this file.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not log to the console.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_html = subparsers.add_parser("to-html", help="Vault note to journal page HTML.")
    to_html.add_argument("input", type=Path, help="Markdown note to convert.")
    to_html.add_argument("-o", "--output", type=Path, help="Write HTML here instead of stdout.")
    to_html.add_argument("--frontmatter-out", type=Path, help="Write the note's YAML frontmatter here.")
    to_html.add_argument("--no-line-breaks", action="store_true",
                         help="Do not turn single newlines into <br />.")
    to_html.set_defaults(handler=run_to_html)

    to_markdown = subparsers.add_parser("to-markdown", help="Journal page HTML to vault note.")
    to_markdown.add_argument("input", type=Path, help="HTML page to convert.")
    to_markdown.add_argument("-o", "--output", type=Path, help="Write Markdown here instead of stdout.")
    to_markdown.add_argument("--frontmatter", type=Path, help="YAML frontmatter file to put back on top.")
    to_markdown.set_defaults(handler=run_to_markdown)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else None
    for name in LOGGER_NAMES:
        setup_logging(name, level=level, log_file=args.log_file,
                      console_output=not args.quiet, stream=sys.stderr)

    try:
        args.handler(args)
    except ObsidianBridgeError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
