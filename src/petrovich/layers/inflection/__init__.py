"""
Inflection core: gender detection, rule matching, modifier resolution and
application, and whole-name inflection.
"""

from .gender_detector import detect_gender
from .inflector import find_and_apply, inflect, segment_tags
from .modifiers import apply_modifier, coerce_case, resolve_modifier
from .rule_matcher import find, find_rule, tags_allow

__all__ = [
    "detect_gender",
    "find_and_apply",
    "inflect",
    "segment_tags",
    "apply_modifier",
    "coerce_case",
    "resolve_modifier",
    "find",
    "find_rule",
    "tags_allow",
]
