import json
from pathlib import Path
import pytest
from shorthand import DictionaryError, Engine
from shorthand.loader import load_dictionary

def _seed(tmp: Path) -> str:
    path = tmp / "dict.json"
    path.write_text(json.dumps({
        "commands": [
            {"command": ["RR", "reals"], "symbol": "\\mathbb{R}", "description": "real numbers"},
            {"command": ["to"], "symbol": "\\to"},
        ],
        "templates": [
            {"aliases": [["lim"], ["as"]], "template": "\\lim_{{{1}}} {0}"},
            {"patterns": ["abs {}"], "template": "\\lvert {0} \\rvert"},
        ],
        "nodisplay": ["\\to"],
    }), encoding="utf-8")
    return str(path)

@pytest.mark.e2e
def test_json_dictionary_drives_engine(tmp_path: Path):
    eng = Engine()
    try:
        eng.load(_seed(tmp_path))
        assert eng.parse("lim abs f as x to RR") == r"\lim_{x \to \mathbb{R}} \lvert f \rvert"
        assert [r.display_alias for r in eng.complete("re")] == ["reals"]
        to = eng.complete("to")[0].command
        assert not eng.dictionary.displayable(to)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_env_var_selects_dictionary(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("SHORTHAND_DICT", _seed(tmp_path))
    eng = Engine()
    eng.load()
    assert len(eng.dictionary) == 2
    eng.shutdown()

@pytest.mark.e2e
def test_missing_and_malformed_files(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(str(tmp_path / "nope.json"))
    bad = tmp_path / "bad.json"
    bad.write_text('{"templates": [{"patterns": ["mod {}"], "template": "{0} {1}"}]}', encoding="utf-8")
    with pytest.raises(DictionaryError):
        load_dictionary(str(bad))
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(DictionaryError):
        load_dictionary(str(broken))
