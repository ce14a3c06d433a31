"""
Petrovich service: inflection of last, first and middle names.

Selects the rule set for each name kind and fills in the gender from the
patronymic when the caller does not give one. The actual matching and
rewriting happens in ``layers.inflection``.
"""

from typing import Any, Dict, Mapping, Optional, Union

from ..contracts import CASES, Gender, GrammaticalCase, NameKind, NameParts, RuleTable
from ..data.rules_loader import get_rules, parse_rules
from ..exceptions import InvalidGender
from ..layers.inflection import coerce_case, detect_gender, inflect
from ..utils.logging_config import LoggingMixin

NameInput = Union[str, NameParts, Mapping[str, Any]]


def coerce_gender(gender: Any) -> Gender:
    """
    Turn a gender value into a Gender.

    Raises:
        InvalidGender: the value names no known gender
    """
    if isinstance(gender, Gender):
        return gender
    try:
        return Gender(gender)
    except (ValueError, TypeError):
        raise InvalidGender(gender) from None


def as_name_parts(name: Any) -> Any:
    """
    Turn a mapping of name fields into NameParts; other values pass through.

    Raises:
        InvalidGender: the mapping carries an unknown gender
    """
    if not isinstance(name, Mapping):
        return name
    try:
        return NameParts.from_mapping(name)
    except ValueError:
        raise InvalidGender(name.get("gender")) from None


class Petrovich(LoggingMixin):
    """Inflects personal names with a rule table.

    Without an explicit table the service reads the process-wide table from
    ``data.rules_loader`` on every call, so rules installed later are picked
    up.
    """

    def __init__(self, rules: Optional[Union[RuleTable, Mapping[str, Any]]] = None):
        self._rules = parse_rules(rules) if rules is not None else None

    @property
    def rules(self) -> RuleTable:
        """Rule table in use; raises RulesNotLoaded when there is none"""
        if self._rules is not None:
            return self._rules
        return get_rules()

    def detect_gender(self, name: Union[NameParts, Mapping[str, Any], str, None]) -> Gender:
        """Detect gender from NameParts, a mapping or a bare middle name"""
        if isinstance(name, str):
            name = NameParts(middle_name=name)
        return detect_gender(name)

    def _resolve_gender(self, name: NameInput, kind: NameKind, gender: Any) -> Gender:
        if gender:
            return coerce_gender(gender)
        if isinstance(name, NameParts):
            if name.gender:
                return coerce_gender(name.gender)
            parts = name
        else:
            parts = NameParts(**{kind.field_name: name})
        detected = detect_gender(parts)
        self.logger.debug(f"Gender not given for {kind.value}, detected {detected.value}")
        return detected

    def inflect(
        self,
        name: NameInput,
        gcase: Any,
        kind: Union[NameKind, str],
        gender: Any = None,
    ) -> Optional[str]:
        """
        Inflect one part of a person's name.

        Args:
            name: The name string, or NameParts or a mapping of name fields
                to take the ``kind`` field from
            gcase: Target grammatical case
            kind: Which rule set to use
            gender: Gender of the person; detected when omitted or empty

        Returns:
            Inflected name, or None when the name fields have no such kind

        Raises:
            RulesNotLoaded: no rule table available
            InvalidCase: unknown grammatical case
            InvalidGender: unknown gender
        """
        kind = NameKind(kind)
        name = as_name_parts(name)
        rule_set = self.rules.for_kind(kind)
        resolved_gender = self._resolve_gender(name, kind, gender)
        text = name.get(kind) if isinstance(name, NameParts) else name
        if text is None:
            coerce_case(gcase)
            return None
        return inflect(text, gcase, resolved_gender, rule_set)

    def last_name(self, name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
        return self.inflect(name, gcase, NameKind.LASTNAME, gender)

    def first_name(self, name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
        return self.inflect(name, gcase, NameKind.FIRSTNAME, gender)

    def middle_name(self, name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
        return self.inflect(name, gcase, NameKind.MIDDLENAME, gender)

    patronymic = middle_name

    def inflect_name_parts(
        self, parts: Union[NameParts, Mapping[str, Any]], gcase: Any, gender: Any = None
    ) -> NameParts:
        """
        Inflect every present field of ``parts``.

        The gender is resolved once for the whole person: explicit argument,
        then ``parts.gender``, then detection from the middle name.
        """
        gcase = coerce_case(gcase)
        parts = as_name_parts(parts)
        if not gender:
            gender = parts.gender or detect_gender(parts)
        gender = coerce_gender(gender)
        return NameParts(
            last_name=self.inflect(parts, gcase, NameKind.LASTNAME, gender),
            first_name=self.inflect(parts, gcase, NameKind.FIRSTNAME, gender),
            middle_name=self.inflect(parts, gcase, NameKind.MIDDLENAME, gender),
            gender=gender,
        )

    def declension(
        self, parts: Union[NameParts, Mapping[str, Any]], gender: Any = None
    ) -> Dict[GrammaticalCase, NameParts]:
        """Inflect ``parts`` into all six cases"""
        return {gcase: self.inflect_name_parts(parts, gcase, gender) for gcase in CASES}


_default_service = Petrovich()


def get_petrovich() -> Petrovich:
    """Service bound to the process-wide rule table"""
    return _default_service


def inflect_last_name(name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
    return _default_service.last_name(name, gcase, gender)


def inflect_first_name(name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
    return _default_service.first_name(name, gcase, gender)


def inflect_middle_name(name: NameInput, gcase: Any, gender: Any = None) -> Optional[str]:
    return _default_service.middle_name(name, gcase, gender)


inflect_patronymic = inflect_middle_name
