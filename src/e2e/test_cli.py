import json
import pytest
from shorthand.__main__ import main

@pytest.mark.e2e
def test_cli_convert_once(capsys):
    assert main(["--q", "if forall x mod 3 then x in ZZ"]) == 0
    out = capsys.readouterr().out.strip()
    assert out == r"(\forall x \!\pmod{3}) \rightarrow (x \in \mathbb{Z})"

@pytest.mark.e2e
def test_cli_suggest_json(capsys):
    assert main(["--suggest", "in", "-k", "2", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 2
    assert rows[0]["alias"] == "in" and rows[0]["quality"] == "exact"
    for key in ("alias", "symbol", "description", "match_index", "quality"):
        assert key in rows[0]

@pytest.mark.e2e
def test_cli_suggest_table_without_color(capsys, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert main(["--suggest", "zzz"]) == 0
    assert "(no matches)" in capsys.readouterr().out

@pytest.mark.e2e
def test_cli_repl(capsys, monkeypatch):
    lines = iter(["RR^2", "?reals", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    assert main(["--repl"]) == 0
    out = capsys.readouterr().out
    assert r"\mathbb{R}^2" in out
    assert "reals" in out

@pytest.mark.e2e
def test_cli_requires_an_action():
    with pytest.raises(SystemExit):
        main([])
