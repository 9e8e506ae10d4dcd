import json

import pytest

from core.config import get_settings
from core.errors import ErrorCode
from languages.russian import ConfigError, load_rules, parse_rules
from languages.russian import loader
from languages.russian.loader import DEFAULT_RULES_PATH, resolve_rules_path
from languages.russian.rules import ExceptionRule, SuffixRule
from languages.types import Gender, NamePart

from .conftest import KEEP_ALL, rule, rules_data


def test_bundled_rules_load():
    table = load_rules(DEFAULT_RULES_PATH)
    for part in NamePart:
        assert table.rule_set_for(part).suffixes
    assert table.rule_set_for(NamePart.LASTNAME).exceptions
    assert table.rule_set_for(NamePart.MIDDLENAME).exceptions == ()


def test_rules_are_typed_and_ordered():
    table = parse_rules(rules_data(lastname={
        "exceptions": [rule("male", ["лев"], KEEP_ALL)],
        "suffixes": [
            rule("female", ["а"], ["-ы", "-е", "-у", "-ой", "-е"]),
            rule("androgynous", ["о", "е"], KEEP_ALL),
        ],
    }))
    rule_set = table.rule_set_for(NamePart.LASTNAME)

    assert [r.gender for r in rule_set.suffixes] == [Gender.FEMALE, Gender.ANDROGYNOUS]
    assert rule_set.suffixes[1].test == ("о", "е")
    assert rule_set.suffixes[0].mods == ("-ы", "-е", "-у", "-ой", "-е")
    assert isinstance(rule_set.suffixes[0], SuffixRule)
    assert isinstance(rule_set.exceptions[0], ExceptionRule)


def test_unknown_keys_are_ignored():
    data = rules_data(lastname={"suffixes": [{**rule("male", ["ов"], KEEP_ALL), "tags": ["first_word"]}]})
    assert parse_rules(data).rule_set_for(NamePart.LASTNAME).suffixes[0].test == ("ов",)


def test_table_is_read_only():
    table = parse_rules(rules_data())
    with pytest.raises(TypeError):
        table.rule_sets[NamePart.LASTNAME] = None


def test_unknown_gender_is_config_error():
    data = rules_data(firstname={"suffixes": [rule("neuter", ["о"], KEEP_ALL)]})
    with pytest.raises(ConfigError) as exc_info:
        parse_rules(data)
    assert exc_info.value.code == ErrorCode.E6020_CONFIG_INVALID


@pytest.mark.parametrize("mods", [[".", ".", ".", "."], [".", ".", ".", ".", ".", "."]])
def test_wrong_mods_length_is_config_error(mods):
    with pytest.raises(ConfigError):
        parse_rules(rules_data(lastname={"suffixes": [rule("male", ["ов"], mods)]}))


def test_missing_part_is_config_error():
    data = rules_data()
    del data["middlename"]
    with pytest.raises(ConfigError):
        parse_rules(data)


def test_missing_suffixes_is_config_error():
    with pytest.raises(ConfigError):
        parse_rules(rules_data(lastname={"exceptions": []}))


def test_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_rules(tmp_path / "nope.json")
    assert exc_info.value.code == ErrorCode.E6001_FILE_NOT_FOUND


def test_invalid_json_is_config_error(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError) as exc_info:
        load_rules(path)
    assert exc_info.value.code == ErrorCode.E6020_CONFIG_INVALID


def test_load_from_custom_path(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(rules_data(
        middlename={"suffixes": [rule("male", ["ич"], ["а", "у", "а", "ем", "е"])]},
    ), ensure_ascii=False), encoding="utf-8")
    table = load_rules(str(path))
    assert table.source == str(path)
    assert len(table.rule_set_for(NamePart.MIDDLENAME).suffixes) == 1


def test_rules_path_resolution(monkeypatch, tmp_path):
    assert resolve_rules_path(tmp_path / "a.json") == tmp_path / "a.json"

    monkeypatch.setattr(get_settings(), "RULES_PATH", None)
    assert resolve_rules_path() == DEFAULT_RULES_PATH

    monkeypatch.setattr(get_settings(), "RULES_PATH", str(tmp_path / "b.json"))
    assert resolve_rules_path() == tmp_path / "b.json"


def test_malformed_file_logs_load_failure(monkeypatch, tmp_path):
    events = []

    class RecordingLogger:
        def error(self, event, **kw):
            events.append((event, kw))

        info = error

    monkeypatch.setattr(loader, "log", RecordingLogger())
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"lastname": {"suffixes": []}}), encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        load_rules(path)

    assert exc_info.value.code == ErrorCode.E6020_CONFIG_INVALID
    names = [event for event, _ in events]
    assert names == ["rules_invalid", "rules_load_failed"]
    assert events[-1][1] == {"path": str(path), "reason": "invalid_structure"}
