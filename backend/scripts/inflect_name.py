#!/usr/bin/env python3
"""Inflect a Russian full name from the command line.

Run with: python3 -m scripts.inflect_name "Иванов Иван Иванович" --case genitive
          python3 -m scripts.inflect_name "Петрова Анна" --gender female --all-cases
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import settings
from core.logging import configure_logging
from engines.inflection import NameInflector
from languages.russian.errors import ConfigError
from languages.russian.maps import CASE_MAP, CASE_MAP_REV, GENDER_MAP


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decline a Russian full name (lastname firstname middlename)")
    parser.add_argument("name", help='Full name, e.g. "Иванов Иван Иванович"')
    parser.add_argument("--case", choices=list(CASE_MAP), default="genitive", help="Target case (default: genitive)")
    parser.add_argument("--gender", choices=list(GENDER_MAP), default="androgynous",
                        help="Gender; detected from the patronymic when androgynous")
    parser.add_argument("--rules", help="Path to a rules JSON file (default: RULES_PATH or bundled rules)")
    parser.add_argument("--all-cases", action="store_true", help="Print the name in every case")
    args = parser.parse_args(argv)

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    try:
        inflector = NameInflector.from_file(args.rules)
    except ConfigError as e:
        print(f"Error: {e.error.message}", file=sys.stderr)
        return 1

    gender = GENDER_MAP[args.gender]
    cases = CASE_MAP.values() if args.all_cases else [CASE_MAP[args.case]]
    for case in cases:
        result = inflector.inflect_full_name(args.name, case, gender)
        if args.all_cases:
            print(f"{CASE_MAP_REV[case]:>13}: {result}")
        else:
            print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
