"""pathextract CLI — decode a path against a pattern from the shell.

Entry point registered as ``pathextract`` in ``pyproject.toml``::

    [project.scripts]
    pathextract = "pathextract.cli:main"
"""

import argparse

from pathextract.config import LOG_LEVELS, OUTPUT_FORMATS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathextract`` command."""
    parser = argparse.ArgumentParser(
        prog="pathextract",
        description="pathextract — decode URL path segments into typed values.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="URL path (no scheme, host, or query); not needed with --explain",
    )
    parser.add_argument("pattern", help="Directive pattern (e.g. X^users^IS)")
    parser.add_argument(
        "--output",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $PATHEXTRACT_LOG_LEVEL or warning)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the parsed directives instead of extracting",
    )

    args = parser.parse_args(argv)

    if args.path is None and not args.explain:
        parser.error("the following arguments are required: path")

    from pathextract.cli._extract import run_explain, run_extract

    if args.explain:
        run_explain(args)
    else:
        run_extract(args)
