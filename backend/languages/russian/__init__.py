"""Russian personal name declension: rules, gender detection, inflection."""
from .declension import apply_rule, inflect, inflect_result
from .errors import ConfigError, EmptyInputError
from .gender import detect_gender
from .loader import load_rules, parse_rules
from .names import FullName, divide, initial
from .rules import ExceptionRule, RuleSet, RuleTable, SuffixRule

__all__ = [
    "apply_rule",
    "inflect",
    "inflect_result",
    "ConfigError",
    "EmptyInputError",
    "detect_gender",
    "load_rules",
    "parse_rules",
    "FullName",
    "divide",
    "initial",
    "ExceptionRule",
    "RuleSet",
    "RuleTable",
    "SuffixRule",
]
