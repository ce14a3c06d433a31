"""
petrovich - inflection of Russian last, first and middle names across the
six grammatical cases, with gender detection from the patronymic.
"""

from .contracts import CASES, Gender, GrammaticalCase, NameKind, NameParts, Rule, RuleSet, RuleTable
from .data import clear_rules, get_rules, load_default_rules, load_rules, set_rules
from .exceptions import InvalidCase, InvalidGender, PetrovichException, RulesFormatError, RulesNotLoaded
from .layers.inflection import detect_gender, inflect
from .services import (
    Petrovich,
    inflect_first_name,
    inflect_last_name,
    inflect_middle_name,
    inflect_patronymic,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "CASES",
    "Gender",
    "GrammaticalCase",
    "NameKind",
    "NameParts",
    "Rule",
    "RuleSet",
    "RuleTable",
    "clear_rules",
    "get_rules",
    "load_default_rules",
    "load_rules",
    "set_rules",
    "InvalidCase",
    "InvalidGender",
    "PetrovichException",
    "RulesFormatError",
    "RulesNotLoaded",
    "detect_gender",
    "inflect",
    "Petrovich",
    "inflect_first_name",
    "inflect_last_name",
    "inflect_middle_name",
    "inflect_patronymic",
]
