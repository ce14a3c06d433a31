"""
Unit tests for the Petrovich service facade
"""

import pytest

from petrovich.contracts import CASES, Gender, GrammaticalCase, NameParts
from petrovich.data.rules_loader import set_rules
from petrovich.exceptions import InvalidCase, InvalidGender, RulesNotLoaded
from petrovich.services import (
    Petrovich,
    coerce_gender,
    get_petrovich,
    inflect_first_name,
    inflect_last_name,
    inflect_middle_name,
    inflect_patronymic,
)


@pytest.fixture
def service(rule_table):
    return Petrovich(rule_table)


class TestPerKindWrappers:

    def test_last_name(self, service):
        assert service.last_name("Иванов", "genitive", "male") == "Иванова"

    def test_first_name(self, service):
        assert service.first_name("Иван", GrammaticalCase.DATIVE, Gender.MALE) == "Ивану"

    def test_middle_name_detects_gender_from_itself(self, service):
        assert service.middle_name("Иванович", "instrumental") == "Ивановичем"
        assert service.patronymic("Ивановна", "dative") == "Ивановне"

    def test_explicit_gender_strings(self, service):
        assert service.last_name("Иванова", "genitive", "female") == "Ивановой"
        assert service.last_name("Иванова", "genitive", "femn") == "Ивановой"

    def test_unknown_gender(self, service):
        with pytest.raises(InvalidGender) as exc_info:
            service.last_name("Иванов", "genitive", "robot")
        assert exc_info.value.error_code == "INVALID_GENDER"

    def test_unknown_case(self, service):
        with pytest.raises(InvalidCase):
            service.first_name("Иван", "vocative", "male")

    def test_bare_last_name_defaults_to_androgynous(self, service):
        # no patronymic to detect from: only androgynous rules apply
        assert service.last_name("Иванова", "genitive") == "Ивановы"
        assert service.last_name("Иванов", "genitive") == "Иванов"


class TestNamePartsInput:

    def test_gender_detected_from_whole_object(self, service):
        parts = NameParts(last_name="Иванова", first_name="Анна", middle_name="Сергеевна")
        assert service.last_name(parts, "genitive") == "Ивановой"
        assert service.first_name(parts, "genitive") == "Анны"

    def test_object_gender_used(self, service):
        parts = NameParts(last_name="Иванов", gender=Gender.MALE)
        assert service.last_name(parts, "genitive") == "Иванова"

    def test_argument_overrides_object_gender(self, service):
        parts = NameParts(last_name="Иванова", gender=Gender.MALE)
        assert service.last_name(parts, "genitive", "female") == "Ивановой"

    def test_missing_field(self, service):
        parts = NameParts(last_name="Иванов")
        assert service.first_name(parts, "genitive") is None
        with pytest.raises(InvalidCase):
            service.first_name(parts, "vocative")

    def test_inflect_name_parts(self, service):
        parts = NameParts(last_name="Иванов", first_name="Иван", middle_name="Иванович")
        result = service.inflect_name_parts(parts, "genitive")
        assert result == NameParts(
            last_name="Иванова",
            first_name="Ивана",
            middle_name="Ивановича",
            gender=Gender.MALE,
        )

    def test_inflect_name_parts_female(self, service):
        parts = NameParts(last_name="Петрова", first_name="Анна", middle_name="Сергеевна")
        result = service.inflect_name_parts(parts, GrammaticalCase.DATIVE)
        assert (result.last_name, result.first_name, result.middle_name) == ("Петровой", "Анне", "Сергеевне")
        assert result.gender is Gender.FEMALE

    def test_inflect_name_parts_keeps_missing_fields(self, service):
        result = service.inflect_name_parts(NameParts(first_name="Пётр"), "genitive", "male")
        assert result == NameParts(first_name="Петра", gender=Gender.MALE)

    def test_declension(self, service):
        parts = NameParts(last_name="Толстой", first_name="Лев", middle_name="Николаевич")
        table = service.declension(parts)
        assert list(table) == list(CASES)
        assert table[GrammaticalCase.NOMINATIVE].last_name == "Толстой"
        assert table[GrammaticalCase.GENITIVE] == NameParts(
            last_name="Толстого", first_name="Льва", middle_name="Николаевича", gender=Gender.MALE
        )
        assert table[GrammaticalCase.INSTRUMENTAL].first_name == "Львом"

    def test_detect_gender(self, service):
        assert service.detect_gender("Иванович") is Gender.MALE
        assert service.detect_gender(NameParts(middle_name="Ивановна")) is Gender.FEMALE
        assert service.detect_gender(None) is Gender.ANDROGYNOUS


class TestEmptyGender:

    def test_empty_gender_falls_back_to_detection(self, service):
        assert service.middle_name("Иванович", "genitive", "") == "Ивановича"
        assert service.patronymic("Ивановна", "dative", "") == "Ивановне"

    def test_empty_gender_uses_object_gender(self, service):
        parts = NameParts(last_name="Иванова", gender=Gender.FEMALE)
        assert service.last_name(parts, "genitive", "") == "Ивановой"

    def test_empty_gender_for_name_parts(self, service):
        parts = NameParts(last_name="Иванов", first_name="Иван", middle_name="Иванович")
        result = service.inflect_name_parts(parts, "genitive", "")
        assert result.gender is Gender.MALE
        assert result.last_name == "Иванова"


class TestMappingInput:

    def test_camel_case_mapping(self, service):
        parts = {"lastName": "Иванова", "firstName": "Анна", "middleName": "Сергеевна"}
        assert service.last_name(parts, "genitive") == "Ивановой"
        assert service.first_name(parts, "dative") == "Анне"

    def test_snake_case_mapping_with_gender(self, service):
        assert service.last_name({"last_name": "Иванов", "gender": "male"}, "genitive") == "Иванова"

    def test_mapping_without_field(self, service):
        assert service.middle_name({"lastName": "Иванов"}, "genitive") is None

    def test_mapping_with_unknown_gender(self, service):
        with pytest.raises(InvalidGender):
            service.last_name({"lastName": "Иванов", "gender": "robot"}, "genitive")

    def test_inflect_name_parts_from_mapping(self, service):
        result = service.inflect_name_parts({"lastName": "Петров", "middleName": "Ильич"}, "instrumental")
        assert result == NameParts(last_name="Петровым", middle_name="Ильичем", gender=Gender.MALE)


class TestRegistryBinding:

    def test_rules_not_loaded(self):
        with pytest.raises(RulesNotLoaded):
            Petrovich().last_name("Иванов", "genitive", "male")

    def test_module_functions_use_installed_rules(self, rule_table):
        with pytest.raises(RulesNotLoaded):
            inflect_last_name("Иванов", "genitive", "male")
        set_rules(rule_table)
        assert get_petrovich().rules is rule_table
        assert inflect_last_name("Иванов", "genitive", "male") == "Иванова"
        assert inflect_first_name("Мария", "instrumental", "female") == "Марией"
        assert inflect_middle_name("Петрович", "prepositional") == "Петровиче"
        assert inflect_patronymic("Петровна", "accusative") == "Петровну"

    def test_coerce_gender(self):
        assert coerce_gender("male") is Gender.MALE
        assert coerce_gender(Gender.FEMALE) is Gender.FEMALE
        with pytest.raises(InvalidGender):
            coerce_gender(None)
