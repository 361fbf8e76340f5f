#!/usr/bin/env python
"""
Command-line PII filter.

Reads stdin; JSON input is filtered as an object and printed indented,
anything else is filtered as plain text. Statistics go to stderr.

    cat issue.json | pii-filter --preset jira.issue
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .config import PIIFilterConfig
from .exceptions import PIIFilterError
from .filter import PIIFilter
from .presets import available_presets, get_field_rules

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pii-filter",
        description="Remove PII from JSON records or text read from stdin",
    )
    parser.add_argument(
        "--preset",
        help=f"Field rule table for JSON input ({', '.join(available_presets())})",
    )
    parser.add_argument(
        "--disable",
        action="store_true",
        help="Pass data through unchanged (overrides PII_FILTER_ENABLED)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for diagnostics on stderr",
    )
    return parser


def run(raw: str, pii_filter: PIIFilter, preset: Optional[str] = None) -> str:
    """Filter raw stdin content and return what should be printed."""
    try:
        data = json.loads(raw)
    except ValueError:
        # Treat as plain text
        return pii_filter.filter_text(raw)

    field_rules = get_field_rules(preset) if preset else None
    filtered = pii_filter.filter_object(data, field_rules)
    return json.dumps(filtered, indent=2, ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    # .env is looked up from the working directory, not from this module
    load_dotenv(find_dotenv(usecwd=True))

    config = PIIFilterConfig.from_env()
    if args.disable:
        config.enabled = False
    pii_filter = PIIFilter(config)

    try:
        output = run(sys.stdin.read(), pii_filter, preset=args.preset)
    except PIIFilterError as e:
        logger.error(e.message)
        return 2

    print(output)
    print(f"\nFiltering stats: {json.dumps(pii_filter.get_stats())}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
