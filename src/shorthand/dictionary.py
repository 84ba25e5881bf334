# shorthand/dictionary.py
from __future__ import annotations
import logging
import string
import threading
from typing import Iterable, Iterator, Optional, Tuple

from .compiler import compile_tables, template_patterns
from .config import PLACEHOLDER
from .models import CommandEntry, CompiledPattern, TemplateEntry

log = logging.getLogger(__name__)

Tables = Tuple[Tuple[CompiledPattern, ...], Tuple[CompiledPattern, ...]]


class DictionaryError(ValueError):
    """A static dictionary entry is malformed (raised at load time, never at parse time)."""


def _output_fields(template: str) -> set[int]:
    fields: set[int] = set()
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        raise DictionaryError(f"bad output template {template!r}: {exc}") from exc
    for _, name, _, _ in parsed:
        if name is None:
            continue
        if not name.isdigit():
            raise DictionaryError(
                f"output template {template!r} must use positional fields like {{0}}, got {{{name}}}"
            )
        fields.add(int(name))
    return fields


def _check_command(cmd: CommandEntry, seen: dict[str, str]) -> None:
    if not cmd.aliases:
        raise DictionaryError(f"command {cmd.symbol!r} has no aliases")
    for alias in cmd.aliases:
        if not alias.strip():
            raise DictionaryError(f"command {cmd.symbol!r} has an empty alias")
        owner = seen.get(alias)
        if owner is not None and owner != cmd.symbol:
            raise DictionaryError(f"alias {alias!r} is shared by {owner!r} and {cmd.symbol!r}")
        seen[alias] = cmd.symbol


def _check_template(tmpl: TemplateEntry) -> None:
    if (tmpl.patterns is None) == (tmpl.aliases is None):
        raise DictionaryError(
            f"template {tmpl.template!r} needs exactly one of patterns= or aliases="
        )
    if tmpl.aliases is not None:
        if not tmpl.aliases or any(not g for g in tmpl.aliases):
            raise DictionaryError(f"template {tmpl.template!r} has an empty alias group")
        if any(not a.strip() for g in tmpl.aliases for a in g):
            raise DictionaryError(f"template {tmpl.template!r} has an empty alias")

    fields = _output_fields(tmpl.template)
    patterns = template_patterns(tmpl)
    if not patterns:
        raise DictionaryError(f"template {tmpl.template!r} has no patterns")
    for pattern in patterns:
        parts = pattern.split(PLACEHOLDER)
        holes = len(parts) - 1
        if holes == 0:
            raise DictionaryError(f"pattern {pattern!r} has no {PLACEHOLDER} placeholder")
        if not "".join(parts).strip():
            raise DictionaryError(f"pattern {pattern!r} has no literal text")
        if any(not p for p in parts[1:-1]):
            raise DictionaryError(f"pattern {pattern!r} has adjacent placeholders")
        if fields != set(range(holes)):
            raise DictionaryError(
                f"pattern {pattern!r} captures {holes} value(s) but output "
                f"{tmpl.template!r} references {sorted(fields)}"
            )


class CommandDictionary:
    """
    Immutable, validated command + template dictionary.

    Matching tables are compiled on first use, exactly once per instance,
    and shared read-only afterwards. Iterating yields the literal commands
    in declaration order.
    """

    def __init__(
        self,
        commands: Iterable[CommandEntry],
        templates: Iterable[TemplateEntry] = (),
        *,
        no_display: Iterable[str] = (),
    ) -> None:
        self.commands: Tuple[CommandEntry, ...] = tuple(commands)
        self.templates: Tuple[TemplateEntry, ...] = tuple(templates)
        self.no_display: frozenset[str] = frozenset(no_display)

        seen: dict[str, str] = {}
        for cmd in self.commands:
            _check_command(cmd, seen)
        for tmpl in self.templates:
            _check_template(tmpl)

        self._tables: Optional[Tables] = None
        self._lock = threading.Lock()

    # ------------- tables -------------

    @property
    def tables(self) -> Tables:
        tables = self._tables
        if tables is None:
            with self._lock:
                if self._tables is None:
                    self._tables = compile_tables(self.commands, self.templates)
                    log.debug("Dictionary tables ready: %d commands, %d templates",
                              len(self.commands), len(self.templates))
                tables = self._tables
        return tables

    # ------------- container protocol -------------

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def displayable(self, cmd: CommandEntry) -> bool:
        """False for symbols the palette should list without a rendered preview."""
        return cmd.symbol not in self.no_display


def default_dictionary() -> CommandDictionary:
    return DEFAULT


def _build_default() -> CommandDictionary:
    from .commands import COMMANDS, NO_DISPLAY, TEMPLATE_COMMANDS
    return CommandDictionary(COMMANDS, TEMPLATE_COMMANDS, no_display=NO_DISPLAY)


DEFAULT = _build_default()
