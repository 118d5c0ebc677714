"""``pathextract PATH PATTERN`` — extract and print typed values.

Prints the Match as JSON (default) or as ``kind<TAB>value`` lines.
Extraction failures print ``Error: ...`` to stderr and exit 1.
"""

import argparse
import json
import logging
import sys

from pathextract.config import CLIConfig
from pathextract.directives import parse_pattern
from pathextract.errors import ExtractError
from pathextract.extractor import extract
from pathextract.values import to_json

logger = logging.getLogger("pathextract.cli")


def _load_config(args: argparse.Namespace) -> CLIConfig:
    """Build the CLIConfig and configure logging.

    An invalid setting (e.g. a bad ``$PATHEXTRACT_LOG_LEVEL``) prints an
    error to stderr and exits 1.
    """
    try:
        if args.log_level is None:
            config = CLIConfig(output=args.output)
        else:
            config = CLIConfig(output=args.output, log_level=args.log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return config


def run_extract(args: argparse.Namespace) -> None:
    """Extract ``args.path`` with ``args.pattern`` and print the values."""
    config = _load_config(args)
    try:
        match = extract(args.path, args.pattern)
    except ExtractError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Extracted %d values from %r", len(match), args.path)

    if config.output == "json":
        print(json.dumps(match.to_json()))
        return

    for value in match:
        print(f"{value.kind}\t{json.dumps(to_json(value))}")


def run_explain(args: argparse.Namespace) -> None:
    """Print one row per directive: offset, width, tag, and literal text."""
    _load_config(args)
    try:
        directives = parse_pattern(args.pattern)
    except ExtractError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print("OFFSET  WIDTH  TAG  LITERAL")
    print("-" * 32)
    for directive in directives:
        literal = "" if directive.literal is None else repr(directive.literal)
        print(f"{directive.offset:<6}  {directive.width:<5}  {directive.tag:<3}  {literal}")
