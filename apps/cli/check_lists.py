# apps/cli/check_lists.py
"""
Validate the start-word list and the dictionary list.

Exit status is 0 when both lists pass, 1 otherwise.

Usage:
    python -m apps.cli.check_lists
    python -m apps.cli.check_lists --start my_start.txt --dictionary words.txt --json
"""

from __future__ import annotations

import argparse
import json
import sys

from wordscramble.config import DEFAULT_DICTIONARY_PATH, DEFAULT_START_WORDS, MIN_WORD_LENGTH
from wordscramble.datasets import validate_game_lists, pretty_summary


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Validate wordscramble word lists")
    ap.add_argument("--start", default=str(DEFAULT_START_WORDS), help="start-word list")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY_PATH), help="dictionary list")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest acceptable start word")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_game_lists(args.start, args.dictionary, min_length=args.min_length)
    if args.json:
        print(json.dumps(rep, indent=2))
    else:
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
