from languages.russian import FullName, divide, initial


def test_divide_full():
    assert divide("Иванов Иван Иванович") == FullName("Иванов", "Иван", "Иванович")


def test_divide_lastname_only():
    name = divide("Иванов")
    assert name.lastname == "Иванов"
    assert name.firstname is None
    assert name.middlename is None


def test_divide_ignores_extra_tokens():
    assert divide("Иванов Иван Иванович младший").to_dict() == {
        "lastname": "Иванов",
        "firstname": "Иван",
        "middlename": "Иванович",
    }


def test_divide_splits_on_single_spaces():
    assert divide("Иванов  Иван") == FullName("Иванов", "", "Иван")


def test_initial():
    assert initial("Иванов Иван Иванович") == "Иванов И. И."
    assert initial("Иванов Иван") == "Иванов И."
    assert initial("Иванов") == "Иванов"
    assert initial("Петрова-Водкина Ёлка Петровна") == "Петрова-Водкина Ё. П."
