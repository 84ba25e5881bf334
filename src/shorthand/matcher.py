# shorthand/matcher.py
from __future__ import annotations
from typing import List, Optional

from .config import PLACEHOLDER
from .models import MatchResult


def _capture_end(text: str, pos: int, stop: str) -> int:
    """
    Scan a placeholder value starting at pos and return where it ends.

    Parentheses nest: "(" opens, ")" closes, and a ")" with nothing open
    belongs to an enclosing scope, so it ends the value without being
    consumed. Outside any parentheses the value also ends where the next
    literal segment `stop` begins. An empty `stop` (trailing placeholder)
    never ends the value early.
    """
    depth = 0
    n = len(text)
    while pos < n:
        if depth == 0 and stop and text.startswith(stop, pos):
            break
        ch = text[pos]
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                break
            depth -= 1
        pos += 1
    return pos


def _closing_paren(text: str, open_at: int) -> int:
    depth = 0
    for i in range(open_at, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def unwrap_group(value: str) -> str:
    """Drop one pair of parentheses that encloses the whole value: "(x and y)" -> "x and y"."""
    if len(value) >= 2 and value[0] == "(" and _closing_paren(value, 0) == len(value) - 1:
        return value[1:-1].strip()
    return value


def match_template(text: str, start: int, pattern: str) -> Optional[MatchResult]:
    """
    Match `pattern` ("if {} then {}") against `text` at `start`.

    Literal segments must match verbatim; every placeholder captures the
    text up to the next segment (see _capture_end). This is a single
    left-to-right pass: a failed segment never revisits an earlier capture.

    Returns None on mismatch, else the trimmed captured values and the index
    right after the last matched segment.

    >>> match_template("if P then Q", 0, "if {} then {}")
    MatchResult(values=('P', 'Q'), end=11)
    """
    parts = pattern.split(PLACEHOLDER)
    last = len(parts) - 1
    pos = start
    values: List[str] = []

    for i, part in enumerate(parts):
        if part:
            if not text.startswith(part, pos):
                return None
            pos += len(part)
        if i == last:
            break

        # only the ASCII space is skipped, tabs/newlines are part of the value
        while pos < len(text) and text[pos] == " ":
            pos += 1
        end = _capture_end(text, pos, parts[i + 1])
        values.append(unwrap_group(text[pos:end].strip()))
        pos = end

    return MatchResult(tuple(values), pos)
