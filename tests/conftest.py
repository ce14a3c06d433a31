"""
Pytest configuration for petrovich tests
"""

import sys
from pathlib import Path

import pytest

# Add src to path for module imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from petrovich.config import BUNDLED_RULES_PATH
from petrovich.contracts import RuleSet
from petrovich.data.rules_loader import clear_rules, load_rules


@pytest.fixture(scope="session")
def rule_table():
    """Bundled rule table"""
    return load_rules(BUNDLED_RULES_PATH)


@pytest.fixture(scope="session")
def sample_rule_set():
    """Small hand-written rule set with one rule per behaviour under test"""
    return RuleSet.model_validate({
        "exceptions": [
            {
                "gender": "androgynous",
                "test": ["бонч"],
                "mods": [".", ".", ".", ".", "."],
                "tags": ["first_word"],
            },
            {
                "gender": "female",
                "test": ["фекла"],
                "mods": ["-и", "-е", "-у", "-ой", "-е"],
            },
            {
                "gender": "male",
                "test": ["лев"],
                "mods": ["--ьва", "--ьву", "--ьва", "--ьвом", "--ьве"],
            },
        ],
        "suffixes": [
            {
                "gender": "female",
                "test": ["ла"],
                "mods": ["-ы", "-е", "-у", "-ой", "-е"],
            },
            {
                "gender": "male",
                "test": ["ев", "ов"],
                "mods": ["а", "у", "а", "ым", "е"],
            },
            {
                "gender": "androgynous",
                "test": ["ич"],
                "mods": ["а", "у", "а", "ем", "е"],
            },
            {
                "gender": "male",
                "test": ["ч"],
                "mods": ["а", "у", "а", "ом", "е"],
            },
        ],
    })


@pytest.fixture(autouse=True)
def reset_rules_registry():
    """Every test starts and ends without installed rules"""
    clear_rules()
    yield
    clear_rules()


@pytest.fixture(scope="session")
def sample_names():
    """Provide sample names for testing"""
    return {
        "male": ("Иванов", "Иван", "Иванович"),
        "female": ("Иванова", "Анна", "Ивановна"),
    }
