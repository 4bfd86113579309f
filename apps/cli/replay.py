# apps/cli/replay.py
"""
Replay a scripted session.

This script:
  1) Validates the start-word and dictionary lists (counts + SHA, start ⊆ dictionary).
  2) Builds a game, optionally pinned to a fixed root word.
  3) Feeds every line of --script through it with a progress bar and writes:
       - CSV:  one row per submission (status, points, running score, code)
       - JSON: manifest with config, list hashes, git commit and a summary

Script format: one submission per line; ":reset" lines start a new game.
Lines are not stripped beyond the trailing newline, so whitespace-only lines
exercise the "ignored" path.

Usage:
    python -m apps.cli.replay --script session.txt --root ballc --outdir reports
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from wordscramble.config import GameConfig
from wordscramble.datasets import (
    FixedWordSource, WordSource, read_lines,
    validate_game_lists, validate_wordlist, pretty_summary,
)
from wordscramble.dictionaries import get_dictionary_ids
from wordscramble.game import FILE_BACKED_DICTIONARIES, GameState, STARTUP_ERRORS, build_dictionary
from wordscramble.harness import replay_session, summarize
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordscramble.log import configure_logging

logger = logging.getLogger("wordscramble.cli.replay")


def main(argv=None) -> int:
    """
    Parse CLI args, validate lists, replay the script, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble: replay a scripted session")
    ap.add_argument("--script", required=True, help="file with one submission per line")
    ap.add_argument("--root", help="fixed root word (default: pick from the start list)")
    ap.add_argument("--start-words", help="path to the start-word list")
    ap.add_argument("--dictionary", choices=get_dictionary_ids(), help="dictionary provider id")
    ap.add_argument("--dictionary-path", help="word list used by the file-backed providers")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    args = ap.parse_args(argv)
    configure_logging(args.log_level)

    try:
        lines = read_lines(args.script)
    except OSError as e:
        logger.error("Could not read script %s: %s", args.script, e)
        return 2

    try:
        cfg = GameConfig.from_env().override(
            start_words=Path(args.start_words) if args.start_words else None,
            dictionary=args.dictionary,
            dictionary_path=Path(args.dictionary_path) if args.dictionary_path else None,
            seed=args.seed,
        )

        # 1) Validate lists and print a one-line summary. The dictionary file is
        #    only part of the report when the provider actually reads it.
        if cfg.dictionary in FILE_BACKED_DICTIONARIES:
            rep = validate_game_lists(str(cfg.start_words), str(cfg.dictionary_path),
                                      min_length=cfg.min_length)
            print(pretty_summary(rep))
        else:
            rep = {"start": validate_wordlist(str(cfg.start_words), min_length=cfg.min_length)}
            print(f"start={rep['start']['count']} | dictionary={cfg.dictionary} (no list file)")

        # 2) Build the session
        if args.root:
            source = FixedWordSource(args.root)
        else:
            source = WordSource(cfg.start_words, fallback=cfg.fallback_word, seed=cfg.seed)
        state = GameState(source, build_dictionary(cfg), min_length=cfg.min_length)

        # 3) Replay with progress
        rows = replay_session(state, tqdm(lines, ncols=80, desc="Replaying", unit="word",
                                          disable=args.no_progress))
    except STARTUP_ERRORS as e:
        logger.error("%s", e)
        return 2

    summary = summarize(rows)
    print(f"Final score: {summary['final_score']} | {summary['by_status']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": cfg.dictionary,
        "wordlists": rep,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
