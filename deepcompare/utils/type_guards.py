# deepcompare/utils/type_guards.py
# Version: 1.0.0
# Leaf helpers for the comparison engine: shape predicates, host type
# families, date normalisation, path construction and key set differences.
#
# All functions are pure. No I/O. No module-level mutable state.
#
# Standard import pattern:
#   from deepcompare.utils.type_guards import build_path, is_nan_value

from __future__ import annotations

import cmath
import math
import numbers
import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterable

import numpy as np

from deepcompare.data_models.missing_values import MissingValuesResult
from deepcompare.utils.constants import ABSENT


_EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROS_PER_DAY: int = 86_400_000_000
_ONE_MICRO: timedelta = timedelta(microseconds=1)


# ---------------------------------------------------------------------------
# SHAPE PREDICATES
# ---------------------------------------------------------------------------

def is_absent(value: Any) -> bool:
    return value is ABSENT


def is_null(value: Any) -> bool:
    return value is None


def is_date(value: Any) -> bool:
    """True for datetime.date, datetime.datetime and numpy.datetime64."""
    return isinstance(value, (date, np.datetime64))


def is_valid_date(value: Any) -> bool:
    """
    False only for numpy Not-a-Time. Standard library dates cannot hold an
    invalid value.
    """
    if isinstance(value, np.datetime64):
        return not bool(np.isnat(value))
    return True


def is_regex(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_sequence(value: Any) -> bool:
    """
    list, tuple, and numpy arrays with at least one dimension.
    str and bytes are primitives, not sequences.
    """
    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, (list, tuple))


def as_indexable(value: Any) -> Any:
    """
    Sequence view safe for positional indexing. ndarray subclasses such as
    np.matrix keep their dimensionality when indexed, so they are viewed as
    a base ndarray.
    """
    if isinstance(value, np.ndarray) and type(value) is not np.ndarray:
        return np.asarray(value)
    return value


def is_plain_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def opaque_equal(value_a: Any, value_b: Any) -> bool:
    """
    Equality for leaf values. Identical objects are equal. Otherwise == is
    trusted only when it returns a plain boolean; an __eq__ that returns an
    array or raises (e.g. a dataclass holding a numpy field) leaves identity
    as the answer, so distinct objects compare unequal.
    """
    if value_a is value_b:
        return True
    try:
        result = value_a == value_b
    except Exception:  # noqa: BLE001
        return False
    if isinstance(result, (bool, np.bool_)):
        return bool(result)
    return False


def is_nan_value(value: Any) -> bool:
    """
    Not-a-Number detection for float, complex, numpy floating and Decimal
    values. A complex value is NaN if either part is.
    Any other value, including non-numeric ones, is not NaN.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (complex, np.complexfloating)):
        return cmath.isnan(value)
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


# ---------------------------------------------------------------------------
# TYPE NAMES
# ---------------------------------------------------------------------------

def get_host_type(value: Any) -> str:
    """
    Coarse host type family: "boolean", "number", "string", "bytes" or
    "object". Two values of different families are never compared by value.
    bool is checked before numbers.Number because bool subclasses int.
    """
    if isinstance(value, (bool, np.bool_)):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    return "object"


def get_type_name(value: Any) -> str:
    """Short type name for messages."""
    if value is None:
        return "null"
    if value is ABSENT:
        return "undefined"
    if is_sequence(value):
        return "array"
    if is_date(value):
        return "Date"
    if is_regex(value):
        return "RegExp"
    if is_nan_value(value):
        return "NaN"
    return get_host_type(value)


# ---------------------------------------------------------------------------
# DATES
# ---------------------------------------------------------------------------

def date_to_micros(value: Any) -> int:
    """
    Microseconds since the Unix epoch.

    Naive datetimes are read as UTC. A plain date is midnight UTC.
    numpy.datetime64 is cast to microsecond resolution. The caller must
    check is_valid_date() first: NaT has no timestamp.
    """
    if isinstance(value, np.datetime64):
        return int(value.astype("datetime64[us]").astype(np.int64))
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH) // _ONE_MICRO
    return (value - _EPOCH.date()).days * _MICROS_PER_DAY


def format_date(value: Any) -> str:
    """
    ISO-8601 UTC string with a trailing "Z". Millisecond precision unless
    the value carries sub-millisecond detail.
    """
    micros = date_to_micros(value)
    unit = "ms" if micros % 1000 == 0 else "us"
    return str(np.datetime_as_string(np.datetime64(micros, "us"), unit=unit, timezone="UTC"))


# ---------------------------------------------------------------------------
# PATHS
# ---------------------------------------------------------------------------

def build_path(base_path: str, key: Any) -> str:
    """
    Extend a property path by one step.

    Integer keys (sequence indexes) use brackets: build_path("a", 0) -> "a[0]".
    Any other key uses a dot, or stands alone at the root:
    build_path("", "a") -> "a", build_path("a", "b") -> "a.b".

    Key text is not escaped, so a key containing "." or "[" yields an
    ambiguous path.
    """
    if isinstance(key, numbers.Integral) and not isinstance(key, bool):
        return f"{base_path}[{key}]"
    key = str(key)
    return f"{base_path}.{key}" if base_path else key


# ---------------------------------------------------------------------------
# KEY SET DIFFERENCES
# ---------------------------------------------------------------------------

def detect_missing_values(items_a: Iterable, items_b: Iterable) -> MissingValuesResult:
    """
    Two-way difference of two item lists, preserving each list's order.
    """
    items_a = list(items_a)
    items_b = list(items_b)
    set_a = set(items_a)
    set_b = set(items_b)
    return MissingValuesResult(
        missing_in_a=tuple(item for item in items_b if item not in set_a),
        missing_in_b=tuple(item for item in items_a if item not in set_b),
    )


def format_missing_values(items_a: Iterable, items_b: Iterable, name_a: str, name_b: str) -> str:
    """
    "[x, y] missing in <name_a>; [z] missing in <name_b>". Empty string if
    both lists hold the same items.
    """
    result = detect_missing_values(items_a, items_b)
    parts = []
    if result.missing_in_a:
        parts.append(f"[{', '.join(str(k) for k in result.missing_in_a)}] missing in {name_a}")
    if result.missing_in_b:
        parts.append(f"[{', '.join(str(k) for k in result.missing_in_b)}] missing in {name_b}")
    return "; ".join(parts)
