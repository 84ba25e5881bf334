# shorthand/commands.py
"""Built-in dictionary: logic, set and number-system shorthand."""
from __future__ import annotations
from .models import CommandEntry, TemplateEntry

COMMANDS: tuple[CommandEntry, ...] = (
    CommandEntry(("forall", "for all"), "\\forall", "for all"),
    CommandEntry(("exists", "exist"), "\\exists", "there exists"),
    CommandEntry(("and",), "\\wedge", "logical and"),
    CommandEntry(("or",), "\\vee", "logical or"),
    CommandEntry(("such that", "s.t."), "\\colon", "such that"),
    CommandEntry(("neg", "not"), "\\neg", "negation"),
    CommandEntry(("in", "an element of"), "\\in", "an element of"),
    CommandEntry(("equiv", "congruent to"), "\\equiv", "logical equivalence"),
    CommandEntry(("imp", "implies"), "\\rightarrow", "implication"),
    CommandEntry(("iff", "if and only if"), "\\leftrightarrow", "if and only if"),
    CommandEntry(("NN", "naturals"), "\\mathbb{N}", "natural numbers"),
    CommandEntry(("pint", "positive integers"), "\\mathbb{Z}^+", "positive integers"),
    CommandEntry(("nint", "negative integers"), "\\mathbb{Z}^-", "negative integers"),
    CommandEntry(("ZZ", "int", "integers"), "\\mathbb{Z}", "integers"),
    CommandEntry(("QQ", "rational", "rational numbers"), "\\mathbb{Q}", "rational numbers"),
    CommandEntry(("irrational", "irrational numbers"), "\\mathbb{Q}^c", "irrational numbers"),
    CommandEntry(("RR", "reals"), "\\mathbb{R}", "real numbers"),
    CommandEntry(("CC", "complex numbers"), "\\mathbb{C}", "complex numbers"),
    CommandEntry(("{", "lbrace"), "\\{", "left curly brace"),
    CommandEntry(("}", "rbrace"), "\\}", "right curly brace"),
)

# Symbols the palette lists but does not preview
NO_DISPLAY: frozenset[str] = frozenset({"\\{", "\\}"})

TEMPLATE_COMMANDS: tuple[TemplateEntry, ...] = (
    TemplateEntry(
        template="\\frac{{{0}}}{{{1}}}",
        description="fraction",
        patterns=("{}/{}",),
    ),
    TemplateEntry(
        template="({0}) \\rightarrow ({1})",
        description="implication",
        patterns=("if {} then {}", "if {}, then {}"),
    ),
    TemplateEntry(
        template="\\!\\pmod{{{0}}}",
        description="modulo class",
        patterns=("mod {}", "(mod {})", "modulo {}"),
    ),
    # "equiv {}mod {}", "congruent to {}modulo {}", ...
    TemplateEntry(
        template="\\equiv {0} \\pmod{{{1}}}",
        description="congruence modulo n",
        aliases=(("congruent to", "equiv"), ("modulo", "mod")),
    ),
)
