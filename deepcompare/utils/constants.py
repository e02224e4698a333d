# deepcompare/utils/constants.py
# Version: 1.0.0
# Fixed literals shared by the comparison engine, the data models and the
# report layer. Nothing in this module is mutated at runtime.
#
# Standard import pattern:
#   from deepcompare.utils.constants import (
#       ABSENT,
#       ROOT_PATH,
#       INVALID_DATE_MARKER,
#       DEFAULT_NAME_A,
#       DEFAULT_NAME_B,
#       REGEX_FLAG_LETTERS,
#   )

import re


# ---------------------------------------------------------------------------
# ABSENT SENTINEL
# ---------------------------------------------------------------------------
# Marks "no value was provided here". Distinct from None, which is the null
# value. Used for missing mapping keys and accepted as a comparable input.

class _AbsentType:
    """Singleton type of ABSENT. Falsy, and equal only to itself."""

    _instance = None

    def __new__(cls) -> "_AbsentType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: _AbsentType = _AbsentType()


# ---------------------------------------------------------------------------
# PATHS AND MARKERS
# ---------------------------------------------------------------------------

ROOT_PATH:           str = "(root)"        # Recorded path of a top-level discrepancy
INVALID_DATE_MARKER: str = "Invalid Date"  # Shown in place of an invalid date's ISO string


# ---------------------------------------------------------------------------
# DEFAULT SIDE LABELS
# ---------------------------------------------------------------------------

DEFAULT_NAME_A: str = "expected"
DEFAULT_NAME_B: str = "actual"


# ---------------------------------------------------------------------------
# REGEX FLAG RENDERING
# ---------------------------------------------------------------------------
# Python inline-flag letters, in the fixed order they appear in the
# canonical "/pattern/flags" form.

REGEX_FLAG_LETTERS: tuple = (
    (re.ASCII,      "a"),
    (re.IGNORECASE, "i"),
    (re.LOCALE,     "L"),
    (re.MULTILINE,  "m"),
    (re.DOTALL,     "s"),
    (re.UNICODE,    "u"),
    (re.VERBOSE,    "x"),
)
