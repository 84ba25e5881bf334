# shorthand/ranker.py
from __future__ import annotations
from typing import Iterable, List, Tuple

from .models import EXACT, PREFIX, CommandEntry, RankedCandidate

_QUALITY_RANK = {EXACT: 0, PREFIX: 1}


def _sort_key(c: RankedCandidate) -> Tuple[int, int, int]:
    # exact before prefix, earlier alias first, shorter alias first
    return (_QUALITY_RANK[c.quality], c.match_index, len(c.display_alias))


def filter_commands(commands: Iterable[CommandEntry], typed_text: str) -> List[RankedCandidate]:
    """
    Rank aliases against the text typed into the palette.

    - blank input: every command, shown by its canonical alias, in dictionary order
    - otherwise: aliases equal to or starting with the typed text (case-insensitive),
      best first, at most one row per command (keyed by symbol)

    Never raises; no match gives an empty list.
    """
    commands = list(commands)
    typed = typed_text.strip().lower() if isinstance(typed_text, str) else ""
    if not typed:
        return [RankedCandidate(cmd, cmd.canonical, 0, PREFIX) for cmd in commands]

    matches: List[RankedCandidate] = []
    for cmd in commands:
        for idx, alias in enumerate(cmd.aliases):
            lower = alias.lower()
            if lower == typed:
                matches.append(RankedCandidate(cmd, alias, idx, EXACT))
            elif lower.startswith(typed):
                matches.append(RankedCandidate(cmd, alias, idx, PREFIX))

    matches.sort(key=_sort_key)

    seen: set[str] = set()
    unique: List[RankedCandidate] = []
    for m in matches:
        if m.command.symbol in seen:
            continue
        seen.add(m.command.symbol)
        unique.append(m)
    return unique


def highlight_parts(display_alias: str, typed_text: str) -> Tuple[str, str]:
    """Split an alias into (typed prefix, remainder) so a list can bold the typed part."""
    if not isinstance(display_alias, str) or not display_alias.strip():
        return "", ""
    typed = typed_text.strip().lower() if isinstance(typed_text, str) else ""
    n = len(typed) if typed and display_alias.lower().startswith(typed) else 0
    return display_alias[:n], display_alias[n:]
