"""
Shorthand-to-LaTeX compiler and command palette ranking.

Turns free-form shorthand typed in an editor ("if forall x mod 3 then x in ZZ")
into LaTeX by matching a dictionary of literal aliases ("forall", "RR", "s.t.")
and templates with placeholders ("mod {}", "if {} then {}") that may nest.
The same dictionary feeds a suggestion palette ranked against a typed prefix.

Main Functions:
    parse_command_to_latex(text, commands, templates=()): shorthand -> LaTeX
    filter_commands(commands, typed_text): ranked palette rows

Example Usage:
    from shorthand import parse_command_to_latex, filter_commands
    from shorthand.commands import COMMANDS, TEMPLATE_COMMANDS

    parse_command_to_latex("forall x in RR", COMMANDS, TEMPLATE_COMMANDS)
    # '\\forall x \\in \\mathbb{R}'

    for row in filter_commands(COMMANDS, "in"):
        print(row.display_alias, row.command.symbol)
"""

# src/shorthand/__init__.py
from .dictionary import CommandDictionary, DictionaryError, default_dictionary
from .engine import Engine
from .models import CommandEntry, TemplateEntry, RankedCandidate
from .parser import parse_command_to_latex
from .ranker import filter_commands, highlight_parts

__version__ = "1.0.0"
__all__ = [
    "parse_command_to_latex",
    "filter_commands",
    "highlight_parts",
    "CommandDictionary",
    "DictionaryError",
    "default_dictionary",
    "CommandEntry",
    "TemplateEntry",
    "RankedCandidate",
    "Engine",
]
