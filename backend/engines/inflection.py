"""Name Inflection Engine

Public entry point for declining Russian full names and their parts. One
NameInflector owns one immutable RuleTable and can be shared freely between
callers.
"""
from functools import lru_cache
from pathlib import Path

from core.errors import AppError, Result
from core.logging import engine_logger
from languages.russian.declension import inflect, inflect_result
from languages.russian.gender import detect_gender
from languages.russian.loader import load_rules
from languages.russian.names import NAME_SEPARATOR, FullName, divide, initial
from languages.russian.rules import RuleTable
from languages.types import Case, Gender, NamePart

log = engine_logger()


class NameInflector:
    """Declines last names, first names and patronymics using a rule table."""

    __slots__ = ("_rules",)

    def __init__(self, rules: RuleTable):
        self._rules = rules

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "NameInflector":
        """Build from a rules file (see ``load_rules`` for path resolution)."""
        return cls(load_rules(path))

    @property
    def rules(self) -> RuleTable:
        return self._rules

    # === Single parts ===

    def inflect_part(
        self,
        part: NamePart,
        name: str,
        case: Case = Case.NOMINATIVE,
        gender: Gender = Gender.ANDROGYNOUS,
    ) -> str:
        """Inflect one name part.

        Raises:
            EmptyInputError: name is empty.
        """
        return inflect(name, case, self._rules.rule_set_for(part), gender, field=part.value)

    def inflect_part_result(
        self,
        part: NamePart,
        name: str | None,
        case: Case = Case.NOMINATIVE,
        gender: Gender = Gender.ANDROGYNOUS,
    ) -> Result[str, AppError]:
        return inflect_result(name or "", case, self._rules.rule_set_for(part), gender, field=part.value)

    def inflect_lastname(self, lastname: str, case: Case = Case.NOMINATIVE, gender: Gender = Gender.ANDROGYNOUS) -> str:
        return self.inflect_part(NamePart.LASTNAME, lastname, case, gender)

    def inflect_firstname(self, firstname: str, case: Case = Case.NOMINATIVE, gender: Gender = Gender.ANDROGYNOUS) -> str:
        return self.inflect_part(NamePart.FIRSTNAME, firstname, case, gender)

    def inflect_middlename(self, middlename: str, case: Case = Case.NOMINATIVE, gender: Gender = Gender.ANDROGYNOUS) -> str:
        return self.inflect_part(NamePart.MIDDLENAME, middlename, case, gender)

    # === Full names ===

    def inflect_full_name(
        self,
        full_name: str,
        case: Case = Case.NOMINATIVE,
        gender: Gender = Gender.ANDROGYNOUS,
    ) -> str:
        """Inflect "Фамилия Имя Отчество" into ``case``.

        When no gender is given it is detected from the patronymic and used for
        all three parts. A missing or empty part becomes an empty string, so the
        result always has exactly two separators:

            >>> inflector.inflect_full_name("Иванов Иван", Case.DATIVE, Gender.MALE)
            'Иванову Ивану '
        """
        name = divide(full_name)

        if gender == Gender.ANDROGYNOUS and name.middlename:
            gender = detect_gender(name.middlename)
            log.debug("gender_detected", middlename=name.middlename, gender=gender.name)

        parts = (
            (NamePart.LASTNAME, name.lastname),
            (NamePart.FIRSTNAME, name.firstname),
            (NamePart.MIDDLENAME, name.middlename),
        )
        inflected = []
        for part, value in parts:
            result = self.inflect_part_result(part, value, case, gender)
            if result.is_err():
                log.debug("name_part_missing", part=part.value, full_name=full_name)
            inflected.append(result.unwrap_or(""))

        return NAME_SEPARATOR.join(inflected)

    # === Helpers ===

    @staticmethod
    def detect_gender(middlename: str) -> Gender:
        return detect_gender(middlename)

    @staticmethod
    def divide(full_name: str) -> FullName:
        return divide(full_name)

    @staticmethod
    def initial(full_name: str) -> str:
        return initial(full_name)


@lru_cache
def get_inflector() -> NameInflector:
    """Default inflector built from the configured rules file."""
    return NameInflector.from_file()
