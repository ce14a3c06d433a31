"""Inflection of whole (possibly hyphenated) name parts."""

from typing import Any, Dict, Mapping, Optional

from ...constants import FIRST_WORD_TAG, NAME_SEPARATOR
from ...contracts import Gender, GrammaticalCase, RuleSet
from ...exceptions import RulesNotLoaded
from .modifiers import apply_modifier, coerce_case, resolve_modifier
from .rule_matcher import find_rule


def segment_tags(index: int, count: int) -> Dict[str, bool]:
    """Context tags for segment ``index`` of a name split into ``count`` segments"""
    return {FIRST_WORD_TAG: index == 0 and count > 1}


def find_and_apply(
    word: str,
    gcase: GrammaticalCase,
    gender: Gender,
    rule_set: RuleSet,
    tags: Optional[Mapping[str, bool]] = None,
) -> str:
    """Inflect a single word; words without a rule are returned unchanged"""
    rule = find_rule(word, gender, rule_set, tags)
    if rule is None:
        return word
    return apply_modifier(word, resolve_modifier(gcase, rule))


def inflect(
    name: str,
    gcase: Any,
    gender: Gender,
    rule_set: Optional[RuleSet],
) -> str:
    """
    Inflect a first, last or middle name.

    Compound names are split on hyphens and every segment is inflected on
    its own. The first segment of a compound name carries the
    ``first_word`` tag.

    Args:
        name: Name in nominative case
        gcase: Target grammatical case
        gender: Gender of the person
        rule_set: Rules for this kind of name

    Returns:
        Inflected name

    Raises:
        RulesNotLoaded: no rule set supplied
        InvalidCase: unknown grammatical case
    """
    if rule_set is None:
        raise RulesNotLoaded()
    gcase = coerce_case(gcase)

    parts = name.split(NAME_SEPARATOR)
    count = len(parts)
    return NAME_SEPARATOR.join(
        find_and_apply(part, gcase, gender, rule_set, segment_tags(index, count))
        for index, part in enumerate(parts)
    )
