# apps/cli/play.py
"""
Interactive terminal front end.

Shows the root word and the running score, reads one word per line and
prints either the accepted word list or the rejection ("title: message").

Commands:
  :reset   start over with a new root word
  :quit    leave (Ctrl-D works too)
  blank    ignored

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --seed 7 --dictionary nltk
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordscramble.config import GameConfig
from wordscramble.dictionaries import get_dictionary_ids
from wordscramble.game import GameState, STARTUP_ERRORS, new_game
from wordscramble.harness import RESET_COMMAND
from wordscramble.log import configure_logging

logger = logging.getLogger("wordscramble.cli.play")

QUIT_COMMAND = ":quit"


def render(state: GameState) -> str:
    """Header line plus one line per accepted word, most recent first."""
    lines = [f"== {state.root_word} ==  score: {state.score}"]
    for w in state.used_words:
        lines.append(f"  {w} ({len(w)} letters)")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble: make words from a root word")
    ap.add_argument("--start-words", help="path to the start-word list (one per line)")
    ap.add_argument("--dictionary", choices=get_dictionary_ids(),
                    help="dictionary provider id")
    ap.add_argument("--dictionary-path", help="word list used by the file-backed providers")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    ap.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return ap


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig.from_env().override(
        start_words=Path(args.start_words) if args.start_words else None,
        dictionary=args.dictionary,
        dictionary_path=Path(args.dictionary_path) if args.dictionary_path else None,
        seed=args.seed,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        state = new_game(config_from_args(args))
    except STARTUP_ERRORS as e:
        logger.error("%s", e)
        return 2

    print(render(state))
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        cmd = line.strip()
        if cmd == QUIT_COMMAND:
            break
        if cmd == RESET_COMMAND:
            try:
                state.start_or_reset_game()
            except STARTUP_ERRORS as e:
                logger.error("%s", e)
                return 2
            print(render(state))
            continue

        sub = state.submit(line)
        if sub.status == "ignored":
            continue
        if sub.status == "rejected":
            print(f"{sub.reason.title}: {sub.reason.message}")
            state.acknowledge_error()
            continue
        print(render(state))

    print(f"Final score: {state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
