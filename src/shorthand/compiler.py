# shorthand/compiler.py
from __future__ import annotations
import logging
from typing import Iterable, List, Sequence, Tuple

from .config import PLACEHOLDER
from .models import CommandEntry, CompiledPattern, TemplateEntry

log = logging.getLogger(__name__)


def expand_aliases(groups: Sequence[Sequence[str]]) -> List[str]:
    """
    Cartesian expansion of alias groups into template patterns.
    One alias is chosen per group and each alias is followed by a placeholder:

        [["congruent to", "equiv"], ["modulo", "mod"]]
        -> ["congruent to {}modulo {}", "congruent to {}mod {}",
            "equiv {}modulo {}", "equiv {}mod {}"]
    """
    if not groups:
        return [""]
    first, rest = groups[0], groups[1:]
    tails = expand_aliases(rest)
    out: List[str] = []
    for alias in first:
        for tail in tails:
            out.append(f"{alias} {PLACEHOLDER}{tail}")
    return out


def template_patterns(entry: TemplateEntry) -> List[str]:
    """Concrete spellings of one template entry, in declaration order."""
    if entry.patterns is not None:
        return list(entry.patterns)
    return [p + entry.suffix for p in expand_aliases(entry.aliases or ())]


def _by_length(items: Iterable[CompiledPattern]) -> List[CompiledPattern]:
    # sorted() is stable: equal lengths keep declaration order
    return sorted(items, key=lambda c: len(c.pattern), reverse=True)


def compile_tables(
    commands: Iterable[CommandEntry],
    templates: Iterable[TemplateEntry] = (),
) -> Tuple[Tuple[CompiledPattern, ...], Tuple[CompiledPattern, ...]]:
    """
    Flatten a dictionary into (command_patterns, template_patterns),
    both ordered longest pattern first (maximal munch).
    """
    cmds = _by_length(
        CompiledPattern(alias, cmd.symbol) for cmd in commands for alias in cmd.aliases
    )
    tmpls = _by_length(
        CompiledPattern(p, t.template) for t in templates for p in template_patterns(t)
    )
    log.debug("Compiled %d command patterns, %d template patterns", len(cmds), len(tmpls))
    return tuple(cmds), tuple(tmpls)
