"""Gender detection from a patronymic's ending."""
from core.errors import AppError, Ok, Result, empty_input, raise_result
from languages.types import Gender
from .errors import EmptyInputError

# Checked in order; longer Turkic patronymic markers take precedence over -ич/-на
PATRONYMIC_ENDINGS: tuple[tuple[str, Gender], ...] = (
    ("оглы", Gender.MALE),
    ("кызы", Gender.FEMALE),
    ("ич", Gender.MALE),
    ("на", Gender.FEMALE),
)


def detect_gender_result(middlename: str) -> Result[Gender, AppError]:
    if not middlename:
        return empty_input("middlename", origin="gender_detector")

    lowered = middlename.lower()
    for ending, gender in PATRONYMIC_ENDINGS:
        if lowered[-len(ending):] == ending:
            return Ok(gender)
    return Ok(Gender.ANDROGYNOUS)


def detect_gender(middlename: str) -> Gender:
    """Detect gender from a patronymic.

    Raises:
        EmptyInputError: middlename is empty.
    """
    return raise_result(detect_gender_result(middlename), EmptyInputError)
