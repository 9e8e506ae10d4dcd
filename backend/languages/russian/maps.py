"""String <-> enum mappings for cases and genders."""
from languages.types import Case, Gender

# Case mappings (English name -> Case)
CASE_MAP = {
    "nominative": Case.NOMINATIVE,
    "genitive": Case.GENITIVE,
    "dative": Case.DATIVE,
    "accusative": Case.ACCUSATIVE,
    "instrumental": Case.INSTRUMENTAL,
    "prepositional": Case.PREPOSITIONAL,
}
CASE_MAP_REV = {v: k for k, v in CASE_MAP.items()}

# Gender mappings as spelled in the rules file
GENDER_MAP = {
    "androgynous": Gender.ANDROGYNOUS,
    "male": Gender.MALE,
    "female": Gender.FEMALE,
}
GENDER_MAP_REV = {v: k for k, v in GENDER_MAP.items()}

# Russian grammatical cases (ordered)
CASES = list(CASE_MAP.values())

# Number of inflectable cases, i.e. required length of a rule's mods
MODS_LENGTH = len(CASES) - 1
