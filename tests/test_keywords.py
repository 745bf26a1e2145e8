import json
import logging

from core import parse_exam
from keywords import load_stem_keywords


def test_stem_keyword_overrides_replace_named_layout(monkeypatch, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "stem_keywords.json").write_text(
        json.dumps({"inline": ["sorusunun", " "], "unknown": ["x"]}),
        encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    tables = load_stem_keywords()
    assert tables["inline"] == ["sorusunun"]
    assert "hangisi" in tables["multiline"]
    assert "unknown" not in tables


def test_non_list_override_is_ignored(tmp_path):
    p = tmp_path / "kw.json"
    p.write_text(json.dumps({"multiline": "hangisi"}), encoding="utf-8")
    assert load_stem_keywords(p) == load_stem_keywords(tmp_path / "missing.json")


def test_malformed_override_falls_back_to_defaults(tmp_path, caplog):
    p = tmp_path / "kw.json"
    p.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        tables = load_stem_keywords(p)
    assert tables == load_stem_keywords(tmp_path / "missing.json")
    assert "Ignoring keyword overrides" in caplog.text


def test_parse_exam_uses_supplied_keyword_table():
    text = "1. Giriş\nI. a\nII. b sorusunun cevabı nedir?\nA) x\nB) y"
    default = parse_exam(text)[0]
    custom = parse_exam(text, keywords={"multiline": ["sorusunun"], "inline": []})[0]
    assert default.question_stem == "Giriş"
    assert default.context_text is None
    assert custom.question_stem == "sorusunun cevabı nedir?"
    assert custom.premise_items == ["a", "b"]
    assert custom.context_text == "Giriş"
