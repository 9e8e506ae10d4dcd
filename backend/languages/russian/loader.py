"""Rule file loader.

Reads the JSON rules resource, validates its shape with pydantic and builds
an immutable RuleTable. Every failure surfaces as ConfigError.
"""
import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.config import get_settings
from core.errors import config_error, file_not_found, file_read_error
from core.logging import rules_logger
from languages.types import NamePart
from .errors import ConfigError
from .maps import GENDER_MAP, MODS_LENGTH
from .rules import ExceptionRule, RuleSet, RuleTable, SuffixRule

log = rules_logger()

DEFAULT_RULES_PATH = Path(__file__).parent / "data" / "rules.json"

ORIGIN = "rules_loader"


# === Schema ===

class RuleModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    gender: Literal["male", "female", "androgynous"]
    test: list[str]
    mods: list[str] = Field(min_length=MODS_LENGTH, max_length=MODS_LENGTH)


class RuleSetModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    suffixes: list[RuleModel]
    exceptions: list[RuleModel] | None = None


class RuleFileModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lastname: RuleSetModel
    firstname: RuleSetModel
    middlename: RuleSetModel


# === Building ===

def _suffix_rule(rule: RuleModel) -> SuffixRule:
    return SuffixRule(gender=GENDER_MAP[rule.gender], test=tuple(rule.test), mods=tuple(rule.mods))


def _exception_rule(rule: RuleModel) -> ExceptionRule:
    return ExceptionRule(gender=GENDER_MAP[rule.gender], test=tuple(rule.test), mods=tuple(rule.mods))


def _rule_set(model: RuleSetModel) -> RuleSet:
    return RuleSet(
        suffixes=tuple(_suffix_rule(r) for r in model.suffixes),
        exceptions=tuple(_exception_rule(r) for r in model.exceptions or ()),
    )


def parse_rules(data: Any, source: str = "<memory>") -> RuleTable:
    """Build a RuleTable from an already decoded rules structure.

    Raises:
        ConfigError: the structure does not match the rules file shape,
            including unknown gender strings and mods of the wrong length.
    """
    try:
        model = RuleFileModel.model_validate(data)
    except ValidationError as e:
        problems = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        log.error("rules_invalid", source=source, error_count=len(problems), errors=problems[:10])
        raise ConfigError(config_error(
            f"Invalid rules structure in {source}: {len(problems)} problem(s)",
            path=source,
            origin=ORIGIN,
            cause=e,
            errors=problems,
        ).error) from e

    return RuleTable(
        rule_sets={part: _rule_set(getattr(model, part.value)) for part in NamePart},
        source=source,
    )


def resolve_rules_path(path: str | Path | None = None) -> Path:
    """Explicit path, then RULES_PATH setting, then the bundled rules file."""
    if path:
        return Path(path)
    configured = get_settings().RULES_PATH
    return Path(configured) if configured else DEFAULT_RULES_PATH


def load_rules(path: str | Path | None = None) -> RuleTable:
    """Load and validate a rules file.

    Raises:
        ConfigError: the file is missing, unreadable, not JSON, or malformed.
    """
    rules_path = resolve_rules_path(path)
    source = str(rules_path)

    try:
        raw = rules_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        log.error("rules_load_failed", path=source, reason="not_found")
        raise ConfigError(file_not_found(source, origin=ORIGIN, cause=e).error) from e
    except (OSError, UnicodeDecodeError) as e:
        log.error("rules_load_failed", path=source, reason=str(e))
        raise ConfigError(file_read_error(source, str(e), origin=ORIGIN, cause=e).error) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        log.error("rules_load_failed", path=source, reason="invalid_json", line=e.lineno, column=e.colno)
        raise ConfigError(config_error(
            f"Rules file is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            path=source,
            origin=ORIGIN,
            cause=e,
        ).error) from e

    try:
        table = parse_rules(data, source=source)
    except ConfigError:
        log.error("rules_load_failed", path=source, reason="invalid_structure")
        raise

    log.info("rules_loaded", path=source, counts=table.counts())
    return table
