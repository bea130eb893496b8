"""Command line entry point for pairgate.

Reads submission names, builds the configured pair filter and prints every pair
that should be compared, one ``a;b`` line per pair, in enumeration order.

Usage:
    pairgate alice bob carol --deny-list collaborators.txt
    pairgate --allow-list suspects.txt --submissions names.txt
    ls submissions/ | pairgate --config .pairgate/config.yaml

Names come from positional arguments, else from --submissions (one per line),
else stdin. --allow-list / --deny-list override the config file's filter section.

Exit codes:
    0 — success
    1 — config error or pair list could not be loaded (nothing is printed)
    2 — invalid command line
"""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional

from pairgate.config import build_filter, load_config, validate_config
from pairgate.constants import FILTER_MODE_ALLOW, FILTER_MODE_DENY, FILTER_MODE_NONE, VALID_LOG_LEVELS
from pairgate.models.submission import Submission
from pairgate.pairing import candidate_pairs, count_pairs
from pairgate.utils.logger import clear_run_id, configure_logging, get_logger, set_run_id
from pairgate.utils.ulid import generate_ulid

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairgate",
        description="Print the submission pairs that should be compared.",
    )
    parser.add_argument("names", nargs="*", help="Submission names (default: read from --submissions or stdin)")
    parser.add_argument("--config", help="Path to a pairgate config.yaml")
    parser.add_argument("--submissions", help="File with one submission name per line")

    policy = parser.add_mutually_exclusive_group()
    policy.add_argument("--allow-list", metavar="PATH", help="Only compare pairs listed in PATH")
    policy.add_argument("--deny-list", metavar="PATH", help="Never compare pairs listed in PATH")
    policy.add_argument("--no-filter", action="store_true", help="Compare every pair, ignoring the config")

    parser.add_argument("--log-level", type=str.upper, choices=sorted(VALID_LOG_LEVELS))
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log records on stderr")
    return parser


def read_names(lines: Iterable[str]) -> list[str]:
    """One name per line; line terminators removed, empty lines skipped."""
    names = []
    for raw in lines:
        name = raw.rstrip("\r\n")
        if name:
            names.append(name)
    return names


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    config = load_config(args.config, require_list_path=False)
    if args.allow_list:
        config.filter.mode = FILTER_MODE_ALLOW
        config.filter.list_path = args.allow_list
    elif args.deny_list:
        config.filter.mode = FILTER_MODE_DENY
        config.filter.list_path = args.deny_list
    elif args.no_filter:
        config.filter.mode = FILTER_MODE_NONE
    if args.log_level:
        config.logging.level = args.log_level
    validate_config(config)

    configure_logging(config.logging.level, json_output=args.json_logs or config.logging.json)
    set_run_id(generate_ulid())
    try:
        if args.names:
            names = list(args.names)
        elif args.submissions:
            try:
                with open(args.submissions, encoding="utf-8") as fh:
                    names = read_names(fh)
            except OSError as exc:
                print(f"ERROR: could not read submissions {args.submissions}: {exc}", file=sys.stderr)
                return 1
        else:
            names = read_names(sys.stdin)

        # Fail fast: never fall back to comparing unfiltered.
        try:
            pair_filter = build_filter(config.filter)
        except OSError as exc:
            print(f"ERROR: could not load pair list {config.filter.list_path}: {exc}", file=sys.stderr)
            return 1

        submissions = [Submission(name) for name in names]
        emitted = 0
        for first, second in candidate_pairs(submissions, pair_filter):
            print(f"{first.name};{second.name}")
            emitted += 1

        logger.info(
            "Pair selection complete",
            filter_mode=config.filter.mode,
            submissions=len(submissions),
            candidate_pairs=count_pairs(len(submissions)),
            selected_pairs=emitted,
        )
        return 0
    finally:
        clear_run_id()


if __name__ == "__main__":
    sys.exit(main())
