"""Language support for personal name declension."""
from .types import Case, Gender, NamePart

__all__ = [
    "Case",
    "Gender",
    "NamePart",
]
