"""Rule-driven declension of Russian personal names.

A token is inflected by the first matching exception rule (whole-word,
case-insensitive) or, failing that, the first matching suffix rule
(ending, case-sensitive). Rules declared for the other gender are skipped.
A token no rule matches is returned unchanged.

Compound names are split on "-" and each part is inflected on its own:

    >>> inflect("Римский-Корсаков", Case.GENITIVE, lastnames, Gender.MALE)
    'Римского-Корсакова'
"""
from core.errors import AppError, Ok, Result, empty_input, raise_result
from core.logging import engine_logger
from languages.types import Case, Gender
from .errors import EmptyInputError
from .rules import KEEP, RuleSet, SuffixRule

log = engine_logger()

COMPOUND_SEPARATOR = "-"


def apply_rule(mods: tuple[str, ...], name: str, case: Case) -> str:
    """Rewrite the ending of ``name`` with ``mods[case]``.

    Each "-" in the pattern drops one trailing character, the rest of the
    pattern is appended: ("--ого", "Римский") -> "Римского".
    """
    pattern = mods[case]
    if pattern == KEEP:
        return name

    cut = pattern.count("-")
    return name[:len(name) - cut] + pattern.replace("-", "")


def find_exception(name: str, case: Case, rule_set: RuleSet, gender: Gender) -> str | None:
    """Inflect by the first exception rule listing ``name``; None if none does."""
    if not rule_set.exceptions:
        return None

    lowered = name.lower()
    for rule in rule_set.exceptions:
        if rule.applies_to(gender) and lowered in rule.test:
            return apply_rule(rule.mods, name, case)
    return None


def match_suffix(name: str, rule_set: RuleSet, gender: Gender) -> SuffixRule | None:
    """First suffix rule (in table order) with an ending ``name`` ends in."""
    for rule in rule_set.suffixes:
        if not rule.applies_to(gender):
            continue
        if any(name.endswith(ending) for ending in rule.test):
            return rule
    return None


def inflect_token(name: str, case: Case, rule_set: RuleSet, gender: Gender) -> str:
    """Inflect a single token without hyphens."""
    exception = find_exception(name, case, rule_set, gender)
    if exception is not None:
        return exception

    rule = match_suffix(name, rule_set, gender)
    if rule is None:
        log.debug("no_rule_matched", name=name, case=case.name, gender=gender.name)
        return name
    return apply_rule(rule.mods, name, case)


def inflect_result(
    name: str,
    case: Case,
    rule_set: RuleSet,
    gender: Gender = Gender.ANDROGYNOUS,
    field: str = "name",
) -> Result[str, AppError]:
    """Inflect ``name``; Err if it is empty, Ok with the inflected form otherwise."""
    case, gender = Case(case), Gender(gender)

    if not name:
        return empty_input(field, origin="declension")

    if case == Case.NOMINATIVE:
        return Ok(name)

    return Ok(COMPOUND_SEPARATOR.join(
        inflect_token(token, case, rule_set, gender)
        for token in name.split(COMPOUND_SEPARATOR)
    ))


def inflect(
    name: str,
    case: Case,
    rule_set: RuleSet,
    gender: Gender = Gender.ANDROGYNOUS,
    field: str = "name",
) -> str:
    """Inflect ``name`` into ``case``.

    Raises:
        EmptyInputError: name is empty.
    """
    return raise_result(inflect_result(name, case, rule_set, gender, field), EmptyInputError)
