"""
Session replay primitives.

- replay_session: feed a scripted list of submissions through a GameState and
  record one row per line (accepted, rejected or ignored).
- RESET_COMMAND lines restart the game mid-script, exactly like the player
  pressing "Reset".

These functions are UI-agnostic so they can be reused by the replay CLI,
a notebook, or tests.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from wordscramble.game import GameState

RESET_COMMAND = ":reset"


def replay_session(
        state: GameState,
        submissions: Iterable[str],
        *,
        start: bool = True,
) -> List[Dict]:
    """
    Replay `submissions` in order.

    Args:
        state:        the session to drive
        submissions:  raw input lines; RESET_COMMAND restarts the game
        start:        call start_or_reset_game() before the first line

    Returns:
        list of dicts with keys:
            turn, input, status, word, points, score, code, root_word
    """
    if start:
        state.start_or_reset_game()

    rows: List[Dict] = []
    for turn, raw in enumerate(submissions, start=1):
        if raw.strip() == RESET_COMMAND:
            state.start_or_reset_game()
            rows.append({
                "turn": turn, "input": raw, "status": "reset", "word": "", "points": 0,
                "score": state.score, "code": "", "root_word": state.root_word,
            })
            continue

        sub = state.submit(raw)
        rows.append({
            "turn": turn,
            "input": raw,
            "status": sub.status,
            "word": sub.word,
            "points": sub.points,
            "score": state.score,
            "code": sub.reason.code if sub.reason is not None else "",
            "root_word": state.root_word,
        })
        # The replay acknowledges each rejection before the next line, as a player would.
        state.acknowledge_error()
    return rows


def summarize(rows: List[Dict]) -> Dict:
    """Counts per status and per rejection code, plus the final score."""
    by_status: Dict[str, int] = {}
    by_code: Dict[str, int] = {}
    for r in rows:
        by_status[r["status"]] = by_status.get(r["status"], 0) + 1
        if r["code"]:
            by_code[r["code"]] = by_code.get(r["code"], 0) + 1
    return {
        "submissions": len(rows),
        "by_status": by_status,
        "by_code": by_code,
        "final_score": rows[-1]["score"] if rows else 0,
    }
