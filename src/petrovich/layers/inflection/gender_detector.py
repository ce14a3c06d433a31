"""Gender detection from the patronymic ending."""

from typing import Any, Mapping, Optional

from ...constants import FEMALE_PATRONYMIC_ENDING, MALE_PATRONYMIC_ENDING
from ...contracts import Gender

PATRONYMIC_GENDERS = {
    MALE_PATRONYMIC_ENDING: Gender.MALE,
    FEMALE_PATRONYMIC_ENDING: Gender.FEMALE,
}


def _middle_name_of(name_parts: Any) -> Optional[str]:
    if name_parts is None:
        return None
    if isinstance(name_parts, Mapping):
        return name_parts.get("middle_name", name_parts.get("middleName"))
    return getattr(name_parts, "middle_name", None)


def detect_gender(name_parts: Any) -> Gender:
    """
    Return the most probable gender of a person.

    Only the middle name is inspected: "-ич" is male, "-на" is female.
    Anything else, including a missing middle name, is androgynous.

    Args:
        name_parts: NameParts, any object with ``middle_name`` or a mapping
            with a ``middle_name``/``middleName`` key

    Returns:
        Detected gender
    """
    middle_name = _middle_name_of(name_parts)
    if not middle_name:
        return Gender.ANDROGYNOUS

    ending = middle_name.lower()[-2:]
    return PATRONYMIC_GENDERS.get(ending, Gender.ANDROGYNOUS)
