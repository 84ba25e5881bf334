# src/e2e/test_parser.py

import pytest

from shorthand import CommandEntry, TemplateEntry, parse_command_to_latex
from shorthand.commands import COMMANDS, TEMPLATE_COMMANDS


def parse(text: str) -> str:
    return parse_command_to_latex(text, COMMANDS, TEMPLATE_COMMANDS)


def test_literal_aliases():
    assert parse("forall x in RR") == r"\forall x \in \mathbb{R}"


@pytest.mark.parametrize("text", ["", "   ", "\t \n"])
def test_blank_input_gives_empty_output(text):
    assert parse(text) == ""


def test_passthrough_keeps_unknown_text():
    text = "let x be a number; x+1 > 0!"
    assert parse(text) == text


def test_passthrough_spaces_commas():
    assert parse("a, b") == r"a,\, b"


def test_longest_alias_wins():
    assert parse("an element of") == r"\in"
    assert parse("x an element of y") == r"x \in y"


def test_word_boundary():
    assert parse("forall") == r"\forall"
    assert parse("forall67") == "forall67"
    assert parse("RRabc") == "RRabc"


@pytest.mark.parametrize("text,expected", [
    ("RR^2", r"\mathbb{R}^2"),
    ("NN_0", r"\mathbb{N}_0"),
    ("(RR)", r"(\mathbb{R})"),
    ("[ZZ]", r"[\mathbb{Z}]"),
    ("QQ:", r"\mathbb{Q}:"),
    ("CC.", r"\mathbb{C}."),
])
def test_structural_punctuation_is_a_boundary(text, expected):
    assert parse(text) == expected


def test_mod_template():
    assert parse("mod 5") == r"\!\pmod{5}"
    assert parse("(mod 5)") == r"\!\pmod{5}"


def test_nested_templates_are_reparsed():
    out = parse("if forall x mod 3 then x in ZZ")
    assert out == r"(\forall x \!\pmod{3}) \rightarrow (x \in \mathbb{Z})"


def test_comma_spelling_of_if_then():
    assert parse("if P, then Q") == r"(P) \rightarrow (Q)"


def test_parenthesised_capture_is_kept_whole():
    assert parse("if (x and y) then z") == r"(x \wedge y) \rightarrow (z)"


def test_parentheses_protect_inner_then():
    out = parse("if (if a then b) then c")
    assert out == r"((a) \rightarrow (b)) \rightarrow (c)"


def test_alias_group_template():
    assert parse("a equiv b mod n") == r"a \equiv b \pmod{n}"
    assert parse("a congruent to b modulo n") == r"a \equiv b \pmod{n}"


def test_equiv_without_modulus_is_plain_alias():
    assert parse("p equiv q") == r"p \equiv q"


def test_fraction():
    assert parse("1/2") == r"\frac{1}{2}"


def test_empty_capture_shows_placeholder_glyph():
    assert parse("/2") == r"\frac{\square}{2}"
    assert parse("mod ()") == r"\!\pmod{\square}"


def test_user_braces_are_escaped():
    assert parse("{x in RR}") == r"\{x \in \mathbb{R}\}"
    assert parse("mod {3}") == r"\!\pmod{\{3\}}"


def test_brace_aliases_by_name():
    assert parse("lbrace 1 rbrace") == r"\{ 1 \}"


def test_deterministic_and_stateless():
    text = "if exists x s.t. x in NN then x, y in ZZ"
    assert parse(text) == parse(text)


def test_without_templates():
    assert parse_command_to_latex("mod 5 in RR", COMMANDS) == r"mod 5 \in \mathbb{R}"


def test_deep_nesting_does_not_overflow_the_stack():
    cmds = [CommandEntry(("x",), "X")]
    tmpls = [TemplateEntry(template="m({0})", patterns=("m {}",))]
    depth = 1500
    out = parse_command_to_latex("m " * depth + "x", cmds, tmpls)
    assert out == "m(" * depth + "X" + ")" * depth


def test_accepts_a_command_dictionary():
    from shorthand import default_dictionary
    assert parse_command_to_latex("x in RR", default_dictionary()) == r"x \in \mathbb{R}"
