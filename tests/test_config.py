import pytest

from cyrmetaphone.config import load_rules, parse_config, parse_rules
from cyrmetaphone.languages import Language
from cyrmetaphone.pipeline import Metaphone
from cyrmetaphone.rules import RUSSIAN


def _write(tmp_path, text):
    p = tmp_path / "rules.yaml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_extends_prefixes_base_table(tmp_path):
    path = _write(
        tmp_path,
        "name: ukr-g\n"
        "extends: ru\n"
        "rules:\n"
        "  - pattern: \"Ґ\"\n"
        "    replace: \"Г\"\n",
    )
    rules = load_rules(path)
    assert rules.name == "ukr-g"
    assert len(rules) == len(RUSSIAN) + 1
    assert rules.rules[1:] == RUSSIAN.rules
    assert Metaphone(rules).encode("Ґава") == "ГАВА"
    assert Metaphone(RUSSIAN).encode("Ґава") == "АВА"


def test_standalone_table_with_function_and_backrefs(tmp_path):
    path = _write(
        tmp_path,
        "rules:\n"
        "  - function: dedup\n"
        "  - pattern: '(А)(Б)'\n"
        "    replace: '\\2\\1'\n",
    )
    engine = Metaphone(load_rules(path))
    assert engine.encode("ааббв") == "БАВ"


def test_missing_replace_deletes():
    rules = parse_rules({"rules": [{"pattern": "[0-9]"}, {"pattern": "Х", "replace": None}]})
    assert Metaphone(rules).encode("а1х2б") == "АБ"


def test_parse_config_fields():
    cfg = parse_config({"extends": "Ukrainian", "rules": [{"function": "remove_duplicate_characters"}]})
    assert cfg.name == "custom"
    assert cfg.extends is Language.UKRAINIAN
    assert cfg.rules[0].function == "remove_duplicate_characters"


@pytest.mark.parametrize(
    "raw,msg",
    [
        (["not", "a", "dict"], "top-level"),
        ({"rules": "nope"}, "must be a list"),
        ({"rules": ["x"]}, "must be a mapping"),
        ({"rules": [{"pattern": "А", "function": "dedup"}]}, "exactly one"),
        ({"rules": [{"replace": "А"}]}, "exactly one"),
        ({"rules": [{"function": "soundex"}]}, "unknown function"),
        ({"rules": [{"pattern": "["}]}, "invalid pattern"),
        ({"rules": [{"pattern": "(А)", "replace": r"\2"}]}, "invalid replacement"),
        ({"rules": [{"pattern": "А", "replace": "\\"}]}, "invalid replacement"),
        ({"rules": []}, "non-empty"),
        ({"extends": "pl", "rules": [{"function": "dedup"}]}, "extends"),
    ],
)
def test_config_errors(raw, msg):
    with pytest.raises(ValueError, match=msg):
        parse_rules(raw)


def test_empty_file_rejected(tmp_path):
    with pytest.raises(ValueError, match="Config error"):
        load_rules(_write(tmp_path, ""))


def test_bad_replacement_rejected_at_load(tmp_path):
    path = _write(tmp_path, "rules:\n  - pattern: '(А)'\n    replace: '\\2'\n")
    with pytest.raises(ValueError, match="Config error"):
        load_rules(path)
