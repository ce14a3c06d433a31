"""
Rule table loader.

Reads the YAML rule table, validates it into immutable RuleTable models and
keeps the process-wide table used by the module-level inflection helpers.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..contracts import RuleTable
from ..exceptions import RulesFormatError, RulesNotLoaded
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

_current_rules: Optional[RuleTable] = None


def parse_rules(data: Any, source: Optional[str] = None) -> RuleTable:
    """
    Validate raw rule data.

    Args:
        data: Mapping keyed by ``lastname``, ``firstname`` and ``middlename``
        source: Where the data came from, for error messages

    Returns:
        Validated rule table

    Raises:
        RulesFormatError: data is not a valid rule table
    """
    if isinstance(data, RuleTable):
        return data
    if not isinstance(data, Mapping):
        raise RulesFormatError(
            f"Rule table must be a mapping, got {type(data).__name__}", source
        )
    try:
        return RuleTable.model_validate(dict(data))
    except ValidationError as e:
        raise RulesFormatError(f"Invalid rule table: {e}", source) from e


def load_rules(path: Optional[Union[str, Path]] = None) -> RuleTable:
    """
    Load a rule table from a YAML file.

    Args:
        path: Rule file. Defaults to the configured path, which itself
            defaults to the bundled rules.

    Returns:
        Validated rule table

    Raises:
        RulesFormatError: the file is missing, unreadable or invalid
    """
    if path is None:
        from ..config import get_config

        path = get_config().rules.rules_path
    path = Path(path)

    if not path.exists():
        raise RulesFormatError(f"Rules file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise RulesFormatError(f"Could not read rules file {path}: {e}", str(path)) from e

    table = parse_rules(data, str(path))
    logger.info(f"Loaded rules from {path}: {table.stats()}")
    return table


def set_rules(rules: Union[RuleTable, Mapping[str, Any]]) -> RuleTable:
    """Install ``rules`` as the current rule table"""
    global _current_rules
    table = parse_rules(rules)
    _current_rules = table
    return table


def get_rules() -> RuleTable:
    """
    Return the current rule table.

    Raises:
        RulesNotLoaded: no table has been installed
    """
    rules = _current_rules
    if rules is None:
        raise RulesNotLoaded()
    return rules


def rules_loaded() -> bool:
    return _current_rules is not None


def clear_rules() -> None:
    global _current_rules
    _current_rules = None


def load_default_rules(path: Optional[Union[str, Path]] = None) -> RuleTable:
    """Load rules from ``path`` (or the configured location) and install them"""
    return set_rules(load_rules(path))
