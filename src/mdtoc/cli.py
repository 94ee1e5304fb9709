"""
mdtoc: build a navigation tree from a directory of Markdown documents.

Every ``.md`` file under SOURCE (except the root ``index.md``) contributes
its headings; adjacent files sharing a ``part:`` front-matter label are
grouped together. The result is written to ``_build/toc.xml`` under the
current working directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mdtoc.assembler import BuildOptions, build_toc
from mdtoc.config import MDTOC_MAX_SECTION_LEVEL, MDTOC_OUTPUT_DIR, MDTOC_OUTPUT_FILE
from mdtoc.exceptions import ConfigurationError
from mdtoc.serializer import render_toc, write_toc

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_USAGE = 2


def setup_logging(verbose: int) -> None:
    """Set up logging based on verbosity level."""
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    # Help is handled by hand: a help request must exit non-zero.
    parser = argparse.ArgumentParser(
        prog="mdtoc",
        description=__doc__,
        add_help=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", nargs="?", default=".", help="Source root (default: current directory)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit")
    parser.add_argument(
        "--max-level",
        type=_positive_int,
        default=MDTOC_MAX_SECTION_LEVEL,
        help=f"Deepest heading level to include (default: {MDTOC_MAX_SECTION_LEVEL})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(MDTOC_OUTPUT_DIR) / MDTOC_OUTPUT_FILE,
        help="Output file (default: %(default)s)",
    )
    parser.add_argument("--skip-code-blocks", action="store_true", help="Ignore headings inside ``` fences")
    parser.add_argument("--print", dest="to_stdout", action="store_true", help="Write to stdout instead of a file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    setup_logging(args.verbose)
    options = BuildOptions(max_level=args.max_level, skip_code_blocks=args.skip_code_blocks)

    try:
        root = build_toc(Path(args.source), options)
        if args.to_stdout:
            sys.stdout.write(render_toc(root))
        else:
            write_toc(root, args.output)
    except ConfigurationError as exc:
        print(f"mdtoc: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError):
        logger.exception("I/O error while building table of contents")
        return EXIT_ERROR
    return 0


def run() -> None:
    sys.exit(main())
