from shorthand.matcher import match_template, unwrap_group


def test_single_placeholder():
    m = match_template("mod 5", 0, "mod {}")
    assert m is not None
    assert m.values == ("5",)
    assert m.end == 5


def test_two_placeholders_and_end_index():
    m = match_template("if P then Q", 0, "if {} then {}")
    assert m.values == ("P", "Q")
    assert m.end == len("if P then Q")


def test_match_at_offset():
    text = "so mod 7 holds"
    m = match_template(text, 3, "mod {}")
    assert m.values == ("7 holds",)
    assert m.end == len(text)


def test_literal_mismatch_is_no_match():
    assert match_template("mod 5", 0, "modulo {}") is None
    assert match_template("if P", 0, "if {} then {}") is None


def test_only_spaces_are_skipped_before_a_capture():
    m = match_template("mod    5", 0, "mod {}")
    assert m.values == ("5",)
    m = match_template("mod \t5", 0, "mod {}")
    assert m.values == ("5",)  # tab captured, then trimmed


def test_unbalanced_close_paren_ends_capture_unconsumed():
    text = "(mod 5) rest"
    m = match_template(text, 1, "mod {}")
    assert m.values == ("5",)
    assert text[m.end] == ")"


def test_parentheses_shield_the_next_literal():
    m = match_template("if (if a then b) then c", 0, "if {} then {}")
    assert m.values == ("if a then b", "c")


def test_leading_placeholder():
    m = match_template("a+b/c", 0, "{}/{}")
    assert m.values == ("a+b", "c")
    assert match_template("abc", 0, "{}/{}") is None


def test_unwrap_group():
    assert unwrap_group("(x and y)") == "x and y"
    assert unwrap_group("(a) and (b)") == "(a) and (b)"
    assert unwrap_group("((a))") == "(a)"
    assert unwrap_group("(a") == "(a"
    assert unwrap_group("") == ""
