# deepcompare/compare/classifier.py
# Type Classifier -- assigns each comparable value one coarse shape.

from enum import Enum
from typing import Any

from deepcompare.utils.type_guards import (
    is_absent,
    is_date,
    is_null,
    is_plain_mapping,
    is_regex,
    is_sequence,
)


class Classification(str, Enum):
    ABSENT    = "absent"
    NULL      = "null"
    DATE      = "date"
    REGEX     = "regex"
    SEQUENCE  = "sequence"
    MAPPING   = "mapping"
    PRIMITIVE = "primitive"


def classify(value: Any) -> Classification:
    """
    Return the shape of value. First match wins:
    absent, null, date, regex, sequence, mapping, primitive.

    Dates are classified without checking validity. Anything not recognised
    (sets, custom objects, numpy scalars) is a primitive.
    """
    if is_absent(value):
        return Classification.ABSENT
    if is_null(value):
        return Classification.NULL
    if is_date(value):
        return Classification.DATE
    if is_regex(value):
        return Classification.REGEX
    if is_sequence(value):
        return Classification.SEQUENCE
    if is_plain_mapping(value):
        return Classification.MAPPING
    return Classification.PRIMITIVE
