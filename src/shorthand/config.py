# shorthand/config.py
TOP_K: int = 8

# Placeholder marker inside template patterns ("mod {}", "if {} then {}")
PLACEHOLDER: str = "{}"

# Characters that may follow a literal alias ("RR" matches in "RR^2", not in "RRabc").
# Whitespace, end of input and the brace sentinels always count as boundaries.
BOUNDARY_CHARS: str = ",^_{}()[]:."

# /* ~~~ glyph substituted for a template slot whose value parsed to nothing ~~~ */
EMPTY_PLACEHOLDER: str = r"\square"

# Thin space inserted after every comma of the final output
COMMA_SPACING: str = r"\,"

# Private-use code points stand in for user-typed braces while matching
LBRACE_SENTINEL: str = "\ue000"
RBRACE_SENTINEL: str = "\ue001"
ESCAPED_LBRACE: str = r"\{"
ESCAPED_RBRACE: str = r"\}"

# Default JSON dictionary for the CLI / web shells (empty -> built-in table)
DICT_ENV_VAR: str = "SHORTHAND_DICT"
