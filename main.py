#!/usr/bin/env python3
"""Login Scan - Entry point"""

import logging
import re
import sys
from typing import Dict, List, Optional, Tuple

from rich.console import Console

from loginscan import LogAnalyzer, get_classifier, print_report, setup_logging
from loginscan.patterns import DEFAULT_MODE, DEFAULT_THRESHOLD, HELP, USAGE, VERSION

logger = logging.getLogger("loginscan.cli")

INTEGER = re.compile(r'[+-]?\d+')


class UsageError(Exception):
    """Command line is missing a required flag or has an invalid value"""


def parse_args(argv: List[str]) -> Dict[str, str]:
    """Collect ``--key value`` pairs; a flag with no value maps to "true"."""
    args = {}
    i = 0
    while i < len(argv):
        token = argv[i]
        if token.startswith('--'):
            key = token[2:]
            if i + 1 < len(argv) and not argv[i + 1].startswith('--'):
                i += 1
                args[key] = argv[i]
            else:
                args[key] = 'true'
        i += 1
    return args


def parse_int_or_default(value: Optional[str], fallback: int) -> int:
    if value is None or not INTEGER.fullmatch(value):
        return fallback
    return int(value)


def resolve_run(args: Dict[str, str]) -> Tuple[str, LogAnalyzer]:
    """Return the log path and a configured analyzer, or raise UsageError."""
    filepath = args.get('file', '')
    if not filepath.strip():
        raise UsageError("--file is required")
    try:
        classifier = get_classifier(args.get('mode', DEFAULT_MODE))
    except ValueError as e:
        raise UsageError(str(e)) from e
    return filepath, LogAnalyzer(classifier=classifier)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    console = Console(highlight=False)

    if 'help' in args:
        console.print(HELP, markup=False, soft_wrap=True)
        return 0
    if 'version' in args:
        console.print(f"loginscan v{VERSION}", markup=False, soft_wrap=True)
        return 0

    setup_logging(verbose='verbose' in args)

    try:
        filepath, analyzer = resolve_run(args)
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        console.print(USAGE, markup=False, soft_wrap=True)
        return 2

    threshold = parse_int_or_default(args.get('threshold'), DEFAULT_THRESHOLD)

    try:
        result = analyzer.analyze_file(filepath)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read log file %s", filepath, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_report(result, threshold, filepath, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
