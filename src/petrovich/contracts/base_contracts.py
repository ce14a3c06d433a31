"""
Value types shared by every layer: genders, grammatical cases, name kinds
and the immutable NameParts record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from ..constants import CASE_ALIASES, GENDER_ALIASES


class Gender(str, Enum):
    """Grammatical gender of a person.

    ``ANDROGYNOUS`` on a rule means "any gender". On a query it is an
    ordinary value (gender unknown or irrelevant) and only matches
    androgynous rules.
    """

    MALE = "male"
    FEMALE = "female"
    ANDROGYNOUS = "androgynous"

    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            key = value.strip().lower()
            key = GENDER_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


class GrammaticalCase(str, Enum):
    """The six Russian grammatical cases"""

    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"

    @classmethod
    def _missing_(cls, value: Any):
        if isinstance(value, str):
            key = value.strip().lower()
            key = CASE_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


# All cases in declension order
CASES = tuple(GrammaticalCase)

# Order of modifiers stored on a rule
MODIFIER_CASES = (
    GrammaticalCase.GENITIVE,
    GrammaticalCase.DATIVE,
    GrammaticalCase.ACCUSATIVE,
    GrammaticalCase.INSTRUMENTAL,
    GrammaticalCase.PREPOSITIONAL,
)


class NameKind(str, Enum):
    """Name part kinds, also the top-level keys of a rule table"""

    LASTNAME = "lastname"
    FIRSTNAME = "firstname"
    MIDDLENAME = "middlename"

    @property
    def field_name(self) -> str:
        """Matching attribute on NameParts"""
        return _KIND_FIELDS[self]


_KIND_FIELDS = {
    NameKind.LASTNAME: "last_name",
    NameKind.FIRSTNAME: "first_name",
    NameKind.MIDDLENAME: "middle_name",
}


@dataclass(frozen=True)
class NameParts:
    """Last, first and middle (patronymic) name of one person.

    Any field may be missing. When ``gender`` is missing it is derived from
    ``middle_name`` alone by the gender detector.
    """

    last_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    gender: Optional[Gender] = None

    @property
    def patronymic(self) -> Optional[str]:
        return self.middle_name

    def get(self, kind: NameKind) -> Optional[str]:
        """Return the field that corresponds to a rule-table kind"""
        return getattr(self, NameKind(kind).field_name)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NameParts":
        """Build from a mapping with snake_case or camelCase keys."""
        gender = data.get("gender")
        return cls(
            last_name=data.get("last_name", data.get("lastName")),
            first_name=data.get("first_name", data.get("firstName")),
            middle_name=data.get("middle_name", data.get("middleName")),
            gender=Gender(gender) if gender else None,
        )
