"""Typed, immutable rule table for name declension.

A RuleTable holds one RuleSet per name part. Rule order is load order and
encodes precedence: the first matching rule wins.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from languages.types import Gender, NamePart

KEEP = "."  # mods entry meaning "leave the name unchanged"


@dataclass(frozen=True, slots=True)
class SuffixRule:
    """Ending-based rule. ``test`` holds endings compared case-sensitively."""
    gender: Gender
    test: tuple[str, ...]
    mods: tuple[str, ...]

    def applies_to(self, gender: Gender) -> bool:
        """Androgynous rules match any requested gender."""
        return self.gender == Gender.ANDROGYNOUS or self.gender == gender


@dataclass(frozen=True, slots=True)
class ExceptionRule(SuffixRule):
    """Whole-word rule. ``test`` holds lower-cased names."""


@dataclass(frozen=True, slots=True)
class RuleSet:
    suffixes: tuple[SuffixRule, ...] = ()
    exceptions: tuple[ExceptionRule, ...] = ()


@dataclass(frozen=True, slots=True)
class RuleTable:
    """Rule sets keyed by name part. Read-only after construction."""
    rule_sets: Mapping[NamePart, RuleSet] = field(default_factory=dict)
    source: str = ""

    def __post_init__(self):
        object.__setattr__(self, "rule_sets", MappingProxyType(dict(self.rule_sets)))

    def rule_set_for(self, part: NamePart) -> RuleSet:
        return self.rule_sets[part]

    def counts(self) -> dict[str, dict[str, int]]:
        """Per-part rule counts, for logging."""
        return {
            part.value: {"suffixes": len(rs.suffixes), "exceptions": len(rs.exceptions)}
            for part, rs in self.rule_sets.items()
        }
