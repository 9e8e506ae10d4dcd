import pytest

from engines.inflection import NameInflector
from languages.russian.loader import DEFAULT_RULES_PATH, parse_rules

KEEP_ALL = [".", ".", ".", ".", "."]


def rule(gender: str, test: list[str], mods: list[str]) -> dict:
    return {"gender": gender, "test": test, "mods": mods}


def rules_data(**parts) -> dict:
    """Raw rules structure; parts not given get an empty suffix list."""
    data = {name: {"suffixes": []} for name in ("lastname", "firstname", "middlename")}
    data.update(parts)
    return data


@pytest.fixture(scope="session")
def inflector() -> NameInflector:
    return NameInflector.from_file(DEFAULT_RULES_PATH)


@pytest.fixture
def make_inflector():
    def _make(**parts) -> NameInflector:
        return NameInflector(parse_rules(rules_data(**parts)))
    return _make
