"""
Contracts for petrovich: value types and the rule table model.
"""

from .base_contracts import (
    CASES,
    MODIFIER_CASES,
    Gender,
    GrammaticalCase,
    NameKind,
    NameParts,
)
from .rule_contracts import (
    Append,
    DeleteLast,
    EditOp,
    Modifier,
    Rule,
    RuleSet,
    RuleTable,
)

__all__ = [
    "CASES",
    "MODIFIER_CASES",
    "Gender",
    "GrammaticalCase",
    "NameKind",
    "NameParts",
    "Append",
    "DeleteLast",
    "EditOp",
    "Modifier",
    "Rule",
    "RuleSet",
    "RuleTable",
]
