"""
Download a plain-text English word list and write a clean dictionary file.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words "words_alpha").
- Lowercases, keeps a–z tokens only, drops duplicates.
- Optionally merges in the start-word list so every root word is a known word.
- Writes the result (sorted) to the bundled dictionary path by default.

Usage:
    python -m script.fetch_wordlist
    python -m script.fetch_wordlist --min-length 3 --out /tmp/dictionary.txt
"""

import argparse

import requests

from wordscramble.config import DEFAULT_DICTIONARY_PATH, DEFAULT_START_WORDS
from wordscramble.datasets.io import read_words, write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def fetch_words(url: str = URL, *, min_length: int = 1) -> list[str]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    words = {w.strip().lower() for w in r.text.splitlines()}
    return sorted(w for w in words if w.isascii() and w.isalpha() and len(w) >= min_length)


def main():
    ap = argparse.ArgumentParser(description="Download an English word list for the dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=str(DEFAULT_DICTIONARY_PATH))
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--no-merge-start", action="store_true",
                    help="do not add the start words to the downloaded list")
    args = ap.parse_args()

    words = fetch_words(args.url, min_length=args.min_length)
    if not args.no_merge_start:
        words = sorted(set(words) | set(read_words(DEFAULT_START_WORDS)))

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
