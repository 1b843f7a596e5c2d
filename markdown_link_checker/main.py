"""
Main module for the Markdown Link Checker.

Reads a Markdown file, extracts its http(s) links, probes them all
concurrently and prints a report. Broken links are reported, not treated as
a failure of the run: the exit status is non-zero only when the file cannot
be read or no file was given.
"""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional, Sequence

from rich.console import Console

from markdown_link_checker import __version__
from markdown_link_checker.link_parser import extract_links
from markdown_link_checker.renderer import Renderer, make_console
from markdown_link_checker.url_validator import DEFAULT_TIMEOUT, check_links
from markdown_link_checker.utils.logging import reset_logger, setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="markdown-link-checker",
        description="Check that every http(s) link in a Markdown file is reachable.",
    )

    # Optional here so a missing file is reported with our own exit status
    parser.add_argument("file", nargs="?", help="Path to the Markdown file to check")

    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--log-file", help="Write structured JSON logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Stream debug logs to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def read_document(path: str) -> str:
    """Read the document as UTF-8 text.

    Args:
        path: Absolute path of the document

    Returns:
        File content
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    logger.info(f"Read {len(content)} characters from {path}", extra={"path": path})
    return content


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    out = make_console(no_color=args.no_color)
    err = make_console(no_color=args.no_color, stderr=True)

    if not args.file:
        err.print("Error: provide the path to a Markdown file.", style="red")
        err.print(parser.format_usage().rstrip(), style="yellow")
        return 1

    try:
        try:
            setup_logger(
                "markdown_link_checker",
                log_file=args.log_file,
                level=logging.DEBUG if args.verbose else logging.INFO,
                stream=sys.stderr if args.verbose else None,
            )
        except Exception as e:
            err.print(f"An unexpected error occurred: {e}", style="red")
            return 1

        return check_document(args, out, err)
    finally:
        reset_logger("markdown_link_checker")


def check_document(args: argparse.Namespace, out: Console, err: Console) -> int:
    """Read, extract, probe and report; returns the exit status."""
    absolute_path = os.path.abspath(args.file)

    try:
        out.print(f"Reading file: {absolute_path}", style="blue")
        content = read_document(absolute_path)
    except FileNotFoundError:
        logger.error(f"File not found: {absolute_path}", extra={"path": absolute_path})
        err.print(f"Error: file not found at '{absolute_path}'", style="red")
        return 1
    except Exception as e:
        logger.error(f"Error reading {absolute_path}: {e}", exc_info=True)
        err.print(f"An unexpected error occurred: {e}", style="red")
        return 1

    links: List[str] = extract_links(content)
    if not links:
        out.print("No links found in the file.", style="green")
        return 0

    out.print(f"Found {len(links)} unique links. Starting check...", style="blue")

    start = time.perf_counter()
    outcomes = check_links(links, timeout=args.timeout)
    logger.info(
        f"Checked {len(outcomes)} links in {time.perf_counter() - start:.2f} seconds",
        extra={"links": len(outcomes)},
    )

    Renderer(out).render(outcomes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
