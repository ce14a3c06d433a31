"""
Rule lookup.

Exceptions are tried before suffixes. Inside each list rules are tried in
stored order and the first rule that passes the tag, gender and test checks
is returned.
"""

from typing import Mapping, Optional, Sequence

from ...contracts import Gender, Rule, RuleSet


def tags_allow(tags: Mapping[str, bool], rule_tags: Sequence[str]) -> bool:
    """Every tag required by the rule must be set in ``tags``"""
    return all(tags.get(tag) for tag in rule_tags)


def gender_allows(rule: Rule, gender: Gender) -> bool:
    """Androgynous rules apply to any gender, other rules to their own only"""
    return rule.gender == Gender.ANDROGYNOUS or rule.gender == gender


def _test_matches(word: str, test: str, whole_word: bool) -> bool:
    if whole_word:
        return word == test
    return word.endswith(test)


def find(
    word: str,
    gender: Gender,
    rules: Sequence[Rule],
    whole_word: bool,
    tags: Mapping[str, bool],
) -> Optional[Rule]:
    """
    Find the first rule in ``rules`` that applies to ``word``.

    Args:
        word: Word to search a rule for
        gender: Gender of the person
        rules: Ordered rules
        whole_word: Compare the whole word instead of its ending
        tags: Context tags of the word

    Returns:
        First matching rule or None
    """
    lowered = word.lower()
    for rule in rules:
        if not (tags_allow(tags, rule.tags) and gender_allows(rule, gender)):
            continue
        for test in rule.test:
            if _test_matches(lowered, test, whole_word):
                return rule
    return None


def find_rule(
    word: str,
    gender: Gender,
    rule_set: RuleSet,
    tags: Optional[Mapping[str, bool]] = None,
) -> Optional[Rule]:
    """Search exceptions as whole words, then suffixes as word endings"""
    tags = tags or {}
    rule = find(word, gender, rule_set.exceptions, True, tags)
    if rule is None:
        rule = find(word, gender, rule_set.suffixes, False, tags)
    return rule
