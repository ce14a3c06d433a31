"""
Services for petrovich
"""

from .petrovich_service import (
    Petrovich,
    coerce_gender,
    get_petrovich,
    inflect_first_name,
    inflect_last_name,
    inflect_middle_name,
    inflect_patronymic,
)

__all__ = [
    "Petrovich",
    "coerce_gender",
    "get_petrovich",
    "inflect_first_name",
    "inflect_last_name",
    "inflect_middle_name",
    "inflect_patronymic",
]
