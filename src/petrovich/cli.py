#!/usr/bin/env python3
"""
Command line interface for inflecting Russian personal names.

    petrovich inflect --case genitive --last Иванов --first Иван --middle Иванович
    petrovich inflect --all-cases --first Анна --middle Сергеевна
    petrovich detect-gender --middle Ивановна
"""

import argparse
import json
import sys
from typing import List, Optional

from .contracts import CASES, NameParts
from .data.rules_loader import load_rules
from .exceptions import InvalidCase, InvalidGender, PetrovichException
from .layers.inflection import detect_gender
from .services import Petrovich
from .utils import get_logger, setup_logging

logger = get_logger(__name__)


def _full_name(parts: NameParts) -> str:
    return " ".join(p for p in (parts.last_name, parts.first_name, parts.middle_name) if p)


def _parts_dict(parts: NameParts) -> dict:
    return {
        "last_name": parts.last_name,
        "first_name": parts.first_name,
        "middle_name": parts.middle_name,
        "gender": parts.gender.value if parts.gender else None,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petrovich", description="Inflect Russian personal names"
    )
    parser.add_argument("--log-level", default=None, help="Override log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    inflect_parser = subparsers.add_parser("inflect", help="Inflect name parts")
    inflect_parser.add_argument("--last", help="Last name")
    inflect_parser.add_argument("--first", help="First name")
    inflect_parser.add_argument("--middle", help="Middle name (patronymic)")
    inflect_parser.add_argument("--gender", help="male, female or androgynous")
    cases = inflect_parser.add_mutually_exclusive_group(required=True)
    cases.add_argument("--case", help="Grammatical case (genitive, gent, родительный, ...)")
    cases.add_argument("--all-cases", action="store_true", help="Print all six cases")
    inflect_parser.add_argument("--rules", help="Path to a YAML rule table")
    inflect_parser.add_argument("--json", action="store_true", help="Print JSON")

    gender_parser = subparsers.add_parser("detect-gender", help="Detect gender from the patronymic")
    gender_parser.add_argument("--last", help="Last name")
    gender_parser.add_argument("--first", help="First name")
    gender_parser.add_argument("--middle", help="Middle name (patronymic)")

    return parser


def _run_inflect(args: argparse.Namespace) -> int:
    parts = NameParts(last_name=args.last, first_name=args.first, middle_name=args.middle)
    if not (parts.last_name or parts.first_name or parts.middle_name):
        print("error: give at least one of --last, --first, --middle", file=sys.stderr)
        return 2

    service = Petrovich(load_rules(args.rules))

    if args.all_cases:
        table = service.declension(parts, args.gender)
        if args.json:
            print(json.dumps(
                {gcase.value: _parts_dict(result) for gcase, result in table.items()},
                ensure_ascii=False,
                indent=2,
            ))
        else:
            for gcase in CASES:
                print(f"{gcase.value}: {_full_name(table[gcase])}")
        return 0

    result = service.inflect_name_parts(parts, args.case, args.gender)
    if args.json:
        print(json.dumps(_parts_dict(result), ensure_ascii=False, indent=2))
    else:
        print(_full_name(result))
    return 0


def _run_detect_gender(args: argparse.Namespace) -> int:
    parts = NameParts(last_name=args.last, first_name=args.first, middle_name=args.middle)
    print(detect_gender(parts).value)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(log_level=args.log_level)

    try:
        if args.command == "inflect":
            return _run_inflect(args)
        return _run_detect_gender(args)
    except (InvalidCase, InvalidGender) as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2
    except PetrovichException as e:
        logger.error(f"{e.error_code}: {e.message}")
        print(f"error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
