"""
Command line entry point.

    jobpare-cv generate -t template.html -i cv.json -o cv.pdf
    jobpare-cv template.html cv.json cv.pdf
"""

import argparse
import logging
import sys
from typing import List, Optional

from jobpare_cv import __version__
from jobpare_cv.exceptions import CVGeneratorError
from jobpare_cv.generator import CVGenerator

logger = logging.getLogger("jobpare_cv")

USAGE_HINT = (
    "Usage: jobpare-cv <template> <input> <output> [options]\n"
    "Or use: jobpare-cv generate -t <template> -i <input> -o <output>"
)


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--html-only", action="store_true",
                        help="Generate HTML file only (skip PDF generation)")
    parser.add_argument("--validate-only", action="store_true",
                        help="Only validate JSON data without generating output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")


def build_generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobpare-cv generate",
        description="Generate a CV from JSON data and template",
    )
    parser.add_argument("-t", "--template", required=True, help="Path to HTML template file")
    parser.add_argument("-i", "--input", required=True, help="Path to JSON input file")
    parser.add_argument("-o", "--output", help="Path for output file (PDF or HTML)")
    _add_common_flags(parser)
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobpare-cv",
        description="Generate beautiful CVs from JSON data and HTML templates",
        epilog="Run 'jobpare-cv generate --help' for the flag-based form.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("template", nargs="?", help="Path to HTML template file")
    parser.add_argument("input", nargs="?", help="Path to JSON input file")
    parser.add_argument("output", nargs="?", help="Path for output file")
    _add_common_flags(parser)
    return parser


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0] == "generate":
        args = build_generate_parser().parse_args(argv[1:])
    else:
        args = build_parser().parse_args(argv)
        if not (args.template and args.input and args.output):
            print(USAGE_HINT, file=sys.stderr)
            return 1

    setup_logging(args.verbose)

    try:
        CVGenerator().generate(
            template=args.template,
            input=args.input,
            output=args.output,
            html_only=args.html_only,
            validate_only=args.validate_only,
        )
    except CVGeneratorError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
