# shorthand/loader.py
from __future__ import annotations
import json
import logging
import os
from typing import Any, List

from .dictionary import CommandDictionary, DictionaryError
from .models import CommandEntry, TemplateEntry

log = logging.getLogger(__name__)


def _strings(raw: Any, what: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(s, str) for s in raw):
        raise DictionaryError(f"{what} must be a list of strings")
    return tuple(raw)


def _command(row: Any) -> CommandEntry:
    if not isinstance(row, dict) or "command" not in row or "symbol" not in row:
        raise DictionaryError(f"command rows need 'command' and 'symbol': {row!r}")
    return CommandEntry(
        aliases=_strings(row["command"], "command"),
        symbol=str(row["symbol"]),
        description=str(row.get("description", "")),
    )


def _template(row: Any) -> TemplateEntry:
    if not isinstance(row, dict) or "template" not in row:
        raise DictionaryError(f"template rows need 'template': {row!r}")
    patterns = row.get("patterns")
    aliases = row.get("aliases")
    if not isinstance(aliases, (list, type(None))):
        raise DictionaryError("aliases must be a list of lists of strings")
    return TemplateEntry(
        template=str(row["template"]),
        description=str(row.get("description", "")),
        patterns=_strings(patterns, "patterns") if patterns is not None else None,
        aliases=tuple(_strings(g, "alias group") for g in aliases) if aliases is not None else None,
        suffix=str(row.get("suffix", "")),
    )


def load_dictionary(path: str) -> CommandDictionary:
    """
    Read a JSON dictionary:

        {"commands":  [{"command": ["RR", "reals"], "symbol": "\\\\mathbb{R}", "description": "..."}],
         "templates": [{"patterns": ["mod {}"], "template": "\\\\!\\\\pmod{{{0}}}"},
                       {"aliases": [["if"], ["then"]], "template": "{0} \\\\implies {1}"}],
         "nodisplay": ["\\\\{"]}

    Output templates use str.format fields ({0}, {1}) with literal braces doubled.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    log.info("Loading dictionary from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise DictionaryError(f"{path}: not valid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise DictionaryError(f"{path}: top level must be an object")
    commands: List[CommandEntry] = [_command(r) for r in data.get("commands", [])]
    templates: List[TemplateEntry] = [_template(r) for r in data.get("templates", [])]
    no_display = _strings(data.get("nodisplay", []), "nodisplay")

    d = CommandDictionary(commands, templates, no_display=no_display)
    log.info("Loaded %d commands, %d templates", len(d.commands), len(d.templates))
    return d
