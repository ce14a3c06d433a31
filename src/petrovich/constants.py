"""
Constants for petrovich
Markers used by the rule-table notation and name splitting
"""

# Rule-table modifier notation
DELETE_LAST_MARK = "-"
IDENTITY_MARK = "."

# Compound names are split on this character
NAME_SEPARATOR = "-"

# Context tag set on the first segment of a compound name
FIRST_WORD_TAG = "first_word"

# Patronymic endings used by gender detection
MALE_PATRONYMIC_ENDING = "ич"
FEMALE_PATRONYMIC_ENDING = "на"

# Number of non-nominative cases stored on every rule
MODIFIERS_PER_RULE = 5

# Bundled rule table, relative to the package data directory
DEFAULT_RULES_FILE = "rules.yml"

# Accepted spellings of grammatical cases besides the enum values.
# OpenCorpora tags and Russian case names map onto the enum values.
CASE_ALIASES = {
    "nomn": "nominative",
    "gent": "genitive",
    "datv": "dative",
    "accs": "accusative",
    "ablt": "instrumental",
    "loct": "prepositional",
    "именительный": "nominative",
    "родительный": "genitive",
    "дательный": "dative",
    "винительный": "accusative",
    "творительный": "instrumental",
    "предложный": "prepositional",
}

# Accepted spellings of genders besides the enum values
GENDER_ALIASES = {
    "m": "male",
    "masc": "male",
    "f": "female",
    "femn": "female",
    "a": "androgynous",
    "unknown": "androgynous",
}
