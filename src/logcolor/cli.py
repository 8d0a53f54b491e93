"""CLI entry point for logcolor.

Picks the input (a file path, or standard input for no argument or ``-``),
then streams it through the colorizer onto standard output.
"""

from __future__ import annotations

import argparse
import sys

from .colorize import colorize_stream
from .sources import open_source

PROG = "logcolor"
HELP_FLAGS = ("-h", "--help")


def print_usage(prog: str = PROG) -> None:
    """Print the usage block with example invocations to standard error."""
    print("Usage:", file=sys.stderr)
    print(f"  {prog} [path-to-log-file]", file=sys.stderr)
    print("Examples:", file=sys.stderr)
    print(f"  {prog} ./app.log", file=sys.stderr)
    print(f"  tail -f /var/log/syslog | {prog} -", file=sys.stderr)


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments.

    Arguments are counted before argparse sees them: more than one prints
    the tool's own usage block and exits with status 1. A single argument is
    always a path (even one starting with ``-``), except a lone ``-h`` or
    ``--help``.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Highlight log levels (ERROR, WARN, INFO, DEBUG, TRACE) in a file or stream.",
        epilog="Reads standard input when no path or '-' is given. Ctrl+C stops a never-ending stream.",
    )
    parser.add_argument("path", nargs="?", help="Log file to read ('-' for standard input)")

    argv = sys.argv[1:] if argv is None else list(argv)
    if len(argv) > 1:
        print_usage(parser.prog)
        sys.exit(1)

    if argv and argv[0] not in HELP_FLAGS:
        argv = ["--"] + argv

    return parser.parse_args(argv)


def main(argv=None) -> None:
    """Entry point: open the input, colorize it, exit non-zero on failure."""
    args = parse_args(argv)

    try:
        stream, src_desc, owned = open_source(args.path)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        ok = colorize_stream(stream, source_name=src_desc)
    except KeyboardInterrupt:
        sys.exit(130)
    finally:
        if owned:
            stream.close()

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
