"""
Rule data for petrovich: the bundled rule table and its loader.
"""

from .rules_loader import (
    clear_rules,
    get_rules,
    load_default_rules,
    load_rules,
    parse_rules,
    rules_loaded,
    set_rules,
)

__all__ = [
    "clear_rules",
    "get_rules",
    "load_default_rules",
    "load_rules",
    "parse_rules",
    "rules_loaded",
    "set_rules",
]
