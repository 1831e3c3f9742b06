#!/usr/bin/env python3
"""
Parenpp CLI
-----------
Line-oriented driver around `prettyprint`.

    pp [FILE ...] [--width N] [--verbose]

Reads standard input, or each FILE in turn like `cat`, and prints every line
pretty-printed to the terminal width.
"""

import io
import sys
import argparse
import logging
from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape

from parenpp import __version__
from parenpp.core.engine import prettyprint
from parenpp.core.terminal import WIDTH_ENV_VAR, resolve_width

# Formatted lines go to sys.stdout untouched; rich is only used for diagnostics.
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("parenpp.cli")

STDIN_MARKER = "-"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pp",
        description="Pretty-print toString-style paren trees, one input line at a time.",
        epilog=f"Width defaults to ${WIDTH_ENV_VAR}, then the terminal, then 80 columns.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to read (default: stdin, '-' also means stdin)")
    parser.add_argument("-w", "--width", type=positive_int, default=None, metavar="N", help="Column width")
    parser.add_argument("--verbose", action="store_true", help="Log debug information to stderr")
    parser.add_argument("-v", "--version", action="store_true", help="Display version information")
    return parser


def process_lines(lines: Iterable[str], width: int, out: TextIO) -> int:
    """Pretty-prints each line to `out`. Returns the number of lines written."""
    count = 0
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        out.write(prettyprint(line, width))
        out.write("\n")
        count += 1
    return count


def process_stdin(width: int, out: TextIO) -> int:
    """Reads stdin as UTF-8 with the same lenient decoding as named files."""
    raw = getattr(sys.stdin, "buffer", None)
    if raw is None:
        return process_lines(sys.stdin, width, out)
    stream = io.TextIOWrapper(raw, encoding="utf-8", errors="replace")
    try:
        return process_lines(stream, width, out)
    finally:
        # detach keeps sys.stdin.buffer open
        stream.detach()


def process_file(path: str, width: int, out: TextIO) -> int:
    if path == STDIN_MARKER:
        return process_stdin(width, out)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return process_lines(f, width, out)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Primary orchestration logic for the CLI. Returns the exit status.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s")

    if args.version:
        console.print(f"pp (parenpp) [bold cyan]{__version__}[/bold cyan]")
        return 0

    width = resolve_width(args.width)
    out = sys.stdout
    status = 0

    try:
        for path in args.files or [STDIN_MARKER]:
            try:
                count = process_file(path, width, out)
                logger.info(f"{path}: {count} line(s) at width {width}")
            except BrokenPipeError:
                raise
            except OSError as e:
                err_console.print(f"[bold red]Error:[/bold red] {escape(path)}: {e.strerror or e}", highlight=False)
                status = 1
        out.flush()
    except BrokenPipeError:
        # Reader went away (e.g. `pp big.log | head`); nothing left to say.
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        err_console.print(f"[bold red]Fatal Error:[/bold red] {escape(str(e))}", highlight=False)
        import traceback
        logger.error(traceback.format_exc())
        return 1

    return status


if __name__ == "__main__":
    sys.exit(main())
