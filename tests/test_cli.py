from scripts.inflect_name import main


def test_default_case_is_genitive(capsys):
    assert main(["Иванов Иван Иванович"]) == 0
    assert "Иванова Ивана Ивановича" in capsys.readouterr().out.splitlines()


def test_explicit_case_and_gender(capsys):
    assert main(["Сорока Ольга", "--case", "dative", "--gender", "female"]) == 0
    assert "Сороке Ольге " in capsys.readouterr().out.splitlines()


def test_all_cases(capsys):
    assert main(["Иванов Иван Иванович", "--all-cases"]) == 0
    out = capsys.readouterr().out
    assert "   nominative: Иванов Иван Иванович" in out
    assert "instrumental: Ивановым Иваном Ивановичем" in out
    assert "prepositional: Иванове Иване Ивановиче" in out


def test_missing_rules_file(tmp_path, capsys):
    assert main(["Иванов", "--rules", str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().err.startswith("Error:")
