"""
Word-list validator for wordscramble.

What this module does:
- Validate the start-word list (root words) and the dictionary word list.
- Enforce formatting rules (lowercase, a–z only, one word per line, minimum length).
- Count blank, invalid and duplicate lines; compute SHA-256 of the raw files.
- Check that every start word is itself in the dictionary (otherwise a player
  could never submit the root word and see the "same as root" message).
- Return a machine-readable dict (for manifests) and a one-line summary.

Typical use:
    from wordscramble.datasets import validate_game_lists, pretty_summary
    rep = validate_game_lists("wordscramble/datasets/data/start.txt",
                              "wordscramble/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    blank_lines: int     # empty/whitespace-only lines
    invalid_lines: int   # non-blank lines that failed the format rules
    issues: List[str] = field(default_factory=list)
    passed: bool = False


@dataclass
class GameListsReport:
    """Top-level validation result for the (start, dictionary) pair."""
    start: FileReport
    dictionary: FileReport
    start_subset_dictionary: bool
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be at least `min_length` letters

    Returns:
      (valid_words, blank_count, invalid_count)
    """
    valid: List[str] = []
    blank = 0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isalpha() and w.isascii() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, blank, invalid


def _file_report(path: str, min_length: int) -> Tuple[FileReport, List[str]]:
    p = Path(path)
    if not p.exists():
        rep = FileReport(path, False, 0, "", 0, 0, 0, [f"file not found: {path}"], False)
        return rep, []

    words, blank, invalid = _load_and_check(p, min_length)
    rep = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        blank_lines=blank,
        invalid_lines=invalid,
    )
    if rep.count == 0:
        rep.issues.append(f"{p.name} contains 0 valid words")
    if invalid:
        rep.issues.append(f"{p.name} has {invalid} invalid line(s)")
    if blank:
        # Blank lines are skipped at load time, so they are reported but do not fail.
        rep.issues.append(f"{p.name} has {blank} blank line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append(f"{p.name} contains duplicate lines")
    rep.passed = rep.count > 0 and invalid == 0 and rep.count == rep.unique_count
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, *, min_length: int = 1) -> Dict:
    """
    Validate a single one-word-per-line list.

    Returns a JSON-serializable dict (see FileReport) with counts, SHA-256,
    `passed` and `issues`.
    """
    rep, _ = _file_report(str(path), min_length)
    return asdict(rep)


def validate_game_lists(start_path: str, dictionary_path: str, *, min_length: int = 3) -> Dict:
    """
    Validate the start-word list against the dictionary list.

    Start words must satisfy `min_length` (a shorter root word could never
    yield an acceptable answer); the dictionary accepts any length.
    """
    start, start_words = _file_report(str(start_path), min_length)
    dictionary, dict_words = _file_report(str(dictionary_path), 1)

    issues: List[str] = start.issues + dictionary.issues

    subset_ok = start.exists and dictionary.exists and set(start_words).issubset(dict_words)
    if start.exists and dictionary.exists and not subset_ok:
        # Surface a few examples to debug quickly
        missing = sorted(set(start_words) - set(dict_words))[:5]
        issues.append(f"start words missing from dictionary (e.g., {missing})")

    rep = GameListsReport(
        start=start,
        dictionary=dictionary,
        start_subset_dictionary=subset_ok,
        passed=start.passed and dictionary.passed and subset_ok,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=120 (uniq=120, sha=abc123...) | dictionary=2000 (uniq=2000, sha=def456...) | start⊆dictionary=True | OK
    """
    a = report["start"]
    b = report["dictionary"]
    subset = report["start_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"start={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| start⊆dictionary={subset} | {status}"
    )
