"""Shared type definitions for name declension."""
from enum import Enum, IntEnum


class Case(IntEnum):
    """Russian grammatical case.

    Non-nominative values double as indices into a rule's ``mods``.
    """
    NOMINATIVE = -1     # именительный (never inflected)
    GENITIVE = 0        # родительный
    DATIVE = 1          # дательный
    ACCUSATIVE = 2      # винительный
    INSTRUMENTAL = 3    # творительный
    PREPOSITIONAL = 4   # предложный


class Gender(IntEnum):
    """Grammatical gender. ANDROGYNOUS means unknown and acts as a rule wildcard."""
    ANDROGYNOUS = 0
    MALE = 1
    FEMALE = 2


class NamePart(str, Enum):
    """Which part of a full name is being inflected. Values are rule file keys."""
    LASTNAME = "lastname"
    FIRSTNAME = "firstname"
    MIDDLENAME = "middlename"
