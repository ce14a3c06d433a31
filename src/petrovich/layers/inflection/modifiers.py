"""Case-to-modifier resolution and modifier application."""

from typing import Any

from ...contracts import MODIFIER_CASES, GrammaticalCase, Modifier, Rule
from ...contracts import Append, DeleteLast
from ...exceptions import InvalidCase

MODIFIER_INDEX = {case: index for index, case in enumerate(MODIFIER_CASES)}


def coerce_case(gcase: Any) -> GrammaticalCase:
    """
    Turn a case value into a GrammaticalCase.

    Accepts enum members, enum values or names in any letter case,
    OpenCorpora tags (``gent``) and Russian case names (``родительный``).

    Raises:
        InvalidCase: the value names no known case
    """
    if isinstance(gcase, GrammaticalCase):
        return gcase
    try:
        return GrammaticalCase(gcase)
    except (ValueError, TypeError):
        raise InvalidCase(gcase) from None


def resolve_modifier(gcase: Any, rule: Rule) -> Modifier:
    """Pick the modifier of ``rule`` for the requested case"""
    gcase = coerce_case(gcase)
    if gcase is GrammaticalCase.NOMINATIVE:
        return Modifier.IDENTITY
    return rule.mods[MODIFIER_INDEX[gcase]]


def apply_modifier(word: str, modifier: Modifier) -> str:
    """
    Run a modifier's edit operations against ``word``.

    Deleting from an empty result leaves it empty.
    """
    chars = list(word)
    for op in modifier:
        if isinstance(op, DeleteLast):
            if chars:
                chars.pop()
        elif isinstance(op, Append):
            chars.append(op.char)
    return "".join(chars)
