# shorthand/parser.py
"""
Shorthand -> LaTeX conversion.

    parse_command_to_latex("if forall x mod 3 then x in ZZ", COMMANDS, TEMPLATE_COMMANDS)
    # '(\\forall x \\!\\pmod{3}) \\rightarrow (x \\in \\mathbb{Z})'

At each position the scanner tries, in order:
  1) templates, longest pattern first; every captured value is parsed again
     with the same rules, so templates nest to any depth,
  2) literal aliases, longest first, accepted only at a word boundary,
  3) otherwise the character is copied through unchanged.

Unknown text is never rejected, so any string is valid input.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from typing import Generator, Iterable, List, Optional, Sequence, Tuple, Union

from . import config as CFG
from .dictionary import CommandDictionary
from .matcher import match_template
from .models import CommandEntry, CompiledPattern, MatchResult, TemplateEntry

log = logging.getLogger(__name__)

# yields a captured value to parse, receives its LaTeX, returns this frame's LaTeX
_Frame = Generator[str, str, str]


def _is_boundary(text: str, i: int) -> bool:
    if i >= len(text):
        return True
    ch = text[i]
    return (
        ch.isspace()
        or ch in CFG.BOUNDARY_CHARS
        or ch == CFG.LBRACE_SENTINEL
        or ch == CFG.RBRACE_SENTINEL
    )


def _first_template(
    text: str, i: int, templates: Sequence[CompiledPattern]
) -> Optional[Tuple[CompiledPattern, MatchResult]]:
    for tmpl in templates:
        m = match_template(text, i, tmpl.pattern)
        if m is not None:
            return tmpl, m
    return None


def _first_command(text: str, i: int, commands: Sequence[CompiledPattern]) -> Optional[CompiledPattern]:
    for cmd in commands:
        if text.startswith(cmd.pattern, i) and _is_boundary(text, i + len(cmd.pattern)):
            return cmd
    return None


def _parse_frame(text: str, commands: Sequence[CompiledPattern],
                 templates: Sequence[CompiledPattern]) -> _Frame:
    out: List[str] = []
    i = 0
    n = len(text)
    while i < n:
        hit = _first_template(text, i, templates)
        if hit is not None:
            tmpl, m = hit
            log.debug("template %r at %d captured %r", tmpl.pattern, i, m.values)
            parsed = []
            for value in m.values:
                latex = yield value
                parsed.append(latex or CFG.EMPTY_PLACEHOLDER)
            out.append(tmpl.output.format(*parsed))
            i = m.end
            continue

        cmd = _first_command(text, i, commands)
        if cmd is not None:
            out.append(cmd.output)
            i += len(cmd.pattern)
            continue

        out.append(text[i])
        i += 1
    return "".join(out)


def _run(text: str, commands: Sequence[CompiledPattern], templates: Sequence[CompiledPattern]) -> str:
    """
    Drive nested frames from an explicit stack so nesting depth is bounded
    by memory rather than the interpreter's recursion limit.
    """
    stack: List[_Frame] = [_parse_frame(text, commands, templates)]
    reply: Optional[str] = None
    while True:
        try:
            value = stack[-1].send(reply)  # type: ignore[arg-type]
        except StopIteration as done:
            stack.pop()
            if not stack:
                return done.value
            reply = done.value
            continue
        if value:
            stack.append(_parse_frame(value, commands, templates))
            reply = None
        else:
            reply = ""


def _protect_braces(text: str) -> str:
    return text.replace("{", CFG.LBRACE_SENTINEL).replace("}", CFG.RBRACE_SENTINEL)


def _restore_braces(latex: str) -> str:
    return latex.replace(CFG.LBRACE_SENTINEL, CFG.ESCAPED_LBRACE).replace(
        CFG.RBRACE_SENTINEL, CFG.ESCAPED_RBRACE
    )


@lru_cache(maxsize=32)
def _dictionary_for(commands: Tuple[CommandEntry, ...],
                    templates: Tuple[TemplateEntry, ...]) -> CommandDictionary:
    return CommandDictionary(commands, templates)


def parse_command_to_latex(
    text: str,
    commands: Union[CommandDictionary, Iterable[CommandEntry]],
    templates: Iterable[TemplateEntry] = (),
) -> str:
    """
    Convert shorthand text to LaTeX.

    `commands` is either a CommandDictionary (templates included) or a
    sequence of CommandEntry, with `templates` alongside. The result is a
    pure function of (text, dictionary).
    """
    if not text or not text.strip():
        return ""

    if isinstance(commands, CommandDictionary):
        if templates:
            raise TypeError("templates are taken from the CommandDictionary; pass them there")
        dictionary = commands
    else:
        dictionary = _dictionary_for(tuple(commands), tuple(templates))
    cmd_table, tmpl_table = dictionary.tables

    latex = _run(_protect_braces(text), cmd_table, tmpl_table)
    latex = _restore_braces(latex)
    return latex.replace(",", "," + CFG.COMMA_SPACING)
