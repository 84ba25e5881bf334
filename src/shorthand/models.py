# shorthand/models.py
"""
Data models for the shorthand compiler and the suggestion palette.

- CommandEntry / TemplateEntry: one row of the static dictionary.
- CompiledPattern: a flattened (pattern, output) pair ready for matching.
- MatchResult: values captured by a template match (no match is ``None``).
- RankedCandidate: one row of a ranked suggestion list.

All of them are frozen: the dictionary is read-only for the lifetime of the
process and results are plain values owned by the caller.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

EXACT = "exact"
PREFIX = "prefix"


@dataclass(frozen=True)
class CommandEntry:
    """
    A literal command.

    Attributes
    ----------
    aliases : tuple[str, ...]
        Shorthand spellings; the first one is the canonical/display form.
    symbol : str
        LaTeX emitted for any alias.
    description : str
        Human readable label shown in the palette.
    """
    aliases: Tuple[str, ...]
    symbol: str
    description: str = ""

    @property
    def canonical(self) -> str:
        return self.aliases[0]


@dataclass(frozen=True)
class TemplateEntry:
    """
    A parameterised command.

    Either ``patterns`` lists the accepted spellings verbatim ("mod {}"),
    or ``aliases`` lists one alias group per placeholder and the spellings
    are generated by cartesian expansion (see compiler.expand_aliases).
    ``template`` is a str.format string with positional fields ({0}, {1});
    literal LaTeX braces are doubled.
    """
    template: str
    description: str = ""
    patterns: Optional[Tuple[str, ...]] = None
    aliases: Optional[Tuple[Tuple[str, ...], ...]] = None
    suffix: str = ""


@dataclass(frozen=True)
class CompiledPattern:
    pattern: str
    output: str


@dataclass(frozen=True)
class MatchResult:
    values: Tuple[str, ...]
    end: int                  # index right after the last matched segment


@dataclass(frozen=True)
class RankedCandidate:
    command: CommandEntry
    display_alias: str
    match_index: int          # position of display_alias in command.aliases
    quality: str              # EXACT | PREFIX

    def to_dict(self) -> dict:
        return {
            "alias": self.display_alias,
            "symbol": self.command.symbol,
            "description": self.command.description,
            "match_index": self.match_index,
            "quality": self.quality,
        }
