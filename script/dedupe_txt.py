"""
Clean a one-word-per-line list (start words or dictionary).

Features:
- Lowercases and strips every line; drops blank lines.
- Optionally drops tokens that are not a–z only (--alpha-only).
- Optionally drops words shorter than --min-length.
- Removes duplicates, preserving original order by default.
- Optional sorting AFTER dedupe (alphabetical); otherwise keep input order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.dedupe_txt --in wordscramble/datasets/data/start.txt \
        --alpha-only --min-length 3 --sort
"""

import argparse
from pathlib import Path

from wordscramble.datasets.io import read_lines, write_lines


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def clean(lines: list[str], *, alpha_only: bool = False, min_length: int = 1) -> list[str]:
    words = [s.strip().lower() for s in lines if s.strip()]
    if alpha_only:
        words = [w for w in words if w.isascii() and w.isalpha()]
    words = [w for w in words if len(w) >= min_length]
    return unique_preserve_order(words)


def main():
    ap = argparse.ArgumentParser(description="Clean and dedupe a word list.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--alpha-only", action="store_true", help="drop tokens that are not a-z only")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = clean(lines, alpha_only=args.alpha_only, min_length=args.min_length)
    if args.sort:
        out = sorted(out)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
