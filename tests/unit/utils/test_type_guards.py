# =============================================================================
# deepcompare -- TYPE GUARD TESTS
# File:   tests/unit/utils/test_type_guards.py
# =============================================================================

import re
from datetime import date, datetime, timezone
from decimal import Decimal

import numpy as np
import pytest

from deepcompare import ABSENT, MissingValuesResult
from deepcompare.utils.type_guards import (
    as_indexable,
    build_path,
    date_to_micros,
    detect_missing_values,
    format_date,
    format_missing_values,
    get_host_type,
    get_type_name,
    is_absent,
    is_date,
    is_nan_value,
    is_null,
    is_plain_mapping,
    is_regex,
    is_sequence,
    is_valid_date,
    opaque_equal,
)


# =============================================================================
# SECTION 1 -- Predicates
# =============================================================================

class TestPredicates:

    def test_absent_and_null_are_distinct(self):
        assert is_absent(ABSENT) and not is_absent(None)
        assert is_null(None) and not is_null(ABSENT)

    def test_is_date(self):
        assert is_date(date(2025, 1, 1))
        assert is_date(datetime(2025, 1, 1))
        assert is_date(np.datetime64("2025-01-01"))
        assert not is_date("2025-01-01")

    def test_is_valid_date(self):
        assert is_valid_date(datetime(2025, 1, 1))
        assert is_valid_date(np.datetime64("2025-01-01"))
        assert not is_valid_date(np.datetime64("NaT"))

    def test_is_regex(self):
        assert is_regex(re.compile("a"))
        assert not is_regex("a")

    @pytest.mark.parametrize("value, expected", [
        ([1], True),
        ((1,), True),
        (np.array([1]), True),
        (np.array(1), False),
        ("abc", False),
        (b"abc", False),
        ({1}, False),
    ])
    def test_is_sequence(self, value, expected):
        assert is_sequence(value) is expected

    def test_is_plain_mapping(self):
        assert is_plain_mapping({})
        assert not is_plain_mapping([])

    @pytest.mark.parametrize("value, expected", [
        (float("nan"), True),
        (np.float32("nan"), True),
        (Decimal("NaN"), True),
        (complex(float("nan"), 0), True),
        (np.complex128(complex(0, float("nan"))), True),
        (1 + 2j, False),
        (1.0, False),
        (float("inf"), False),
        ("nan", False),
        (None, False),
        (True, False),
    ])
    def test_is_nan_value(self, value, expected):
        assert is_nan_value(value) is expected

    def test_as_indexable_views_matrix_as_ndarray(self):
        view = as_indexable(np.matrix([[1, 2]]))
        assert type(view) is np.ndarray
        assert view[0].ndim == 1

    def test_as_indexable_leaves_plain_values(self):
        items = [1, 2]
        assert as_indexable(items) is items


class _ArrayEq:

    def __eq__(self, other):
        return np.array([True, False])


class _RaisingEq:

    def __eq__(self, other):
        raise ValueError("ambiguous")


class TestOpaqueEqual:

    def test_boolean_eq_is_trusted(self):
        assert opaque_equal({1, 2}, {2, 1})
        assert not opaque_equal({1}, {2})

    def test_identity_wins(self):
        value = _RaisingEq()
        assert opaque_equal(value, value)

    def test_non_boolean_eq_is_unequal(self):
        assert not opaque_equal(_ArrayEq(), _ArrayEq())

    def test_raising_eq_is_unequal(self):
        assert not opaque_equal(_RaisingEq(), _RaisingEq())

    def test_numpy_bool_result(self):
        assert opaque_equal(np.int64(3), 3)


# =============================================================================
# SECTION 2 -- Type names
# =============================================================================

class TestTypeNames:

    @pytest.mark.parametrize("value, expected", [
        (True, "boolean"),
        (np.bool_(False), "boolean"),
        (1, "number"),
        (2.5, "number"),
        (Decimal("1"), "number"),
        (np.int32(1), "number"),
        ("s", "string"),
        (b"s", "bytes"),
        ([], "object"),
        ({}, "object"),
        (object(), "object"),
    ])
    def test_get_host_type(self, value, expected):
        assert get_host_type(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (None, "null"),
        (ABSENT, "undefined"),
        ([1], "array"),
        ((1,), "array"),
        (datetime(2025, 1, 1), "Date"),
        (re.compile("x"), "RegExp"),
        (float("nan"), "NaN"),
        ({}, "object"),
        ("s", "string"),
        (3, "number"),
    ])
    def test_get_type_name(self, value, expected):
        assert get_type_name(value) == expected


# =============================================================================
# SECTION 3 -- Dates
# =============================================================================

class TestDateHelpers:

    def test_epoch_is_zero(self):
        assert date_to_micros(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_one_microsecond(self):
        assert date_to_micros(datetime(1970, 1, 1, 0, 0, 0, 1)) == 1

    def test_plain_date(self):
        assert date_to_micros(date(1970, 1, 2)) == 86_400_000_000

    def test_pre_epoch(self):
        assert date_to_micros(date(1969, 12, 31)) == -86_400_000_000

    def test_datetime64_matches_datetime(self):
        assert date_to_micros(np.datetime64("2025-03-04T05:06:07.123456")) == \
            date_to_micros(datetime(2025, 3, 4, 5, 6, 7, 123456))

    def test_format_millisecond_precision(self):
        assert format_date(date(2024, 2, 29)) == "2024-02-29T00:00:00.000Z"

    def test_format_microsecond_precision(self):
        assert format_date(datetime(2024, 2, 29, 1, 2, 3, 4)) == "2024-02-29T01:02:03.000004Z"


# =============================================================================
# SECTION 4 -- Paths
# =============================================================================

class TestBuildPath:

    def test_key_at_root(self):
        assert build_path("", "a") == "a"

    def test_nested_key(self):
        assert build_path("a", "b") == "a.b"

    def test_index_at_root(self):
        assert build_path("", 0) == "[0]"

    def test_nested_index(self):
        assert build_path("a", 3) == "a[3]"

    def test_numpy_integer_index(self):
        assert build_path("a", np.int64(2)) == "a[2]"

    def test_bool_is_not_an_index(self):
        assert build_path("a", True) == "a.True"

    def test_no_escaping(self):
        assert build_path("a", "b.c") == "a.b.c"


# =============================================================================
# SECTION 5 -- Missing values
# =============================================================================

class TestMissingValues:

    def test_detect(self):
        result = detect_missing_values(["a", "b", "c"], ["b", "d"])
        assert result == MissingValuesResult(missing_in_a=("d",), missing_in_b=("a", "c"))

    def test_detect_identical(self):
        result = detect_missing_values(["a"], ["a"])
        assert result.missing_in_a == () and result.missing_in_b == ()

    def test_format_both_sides(self):
        assert format_missing_values(["a", "b"], ["b", "c", "d"], "A", "B") == \
            "[c, d] missing in A; [a] missing in B"

    def test_format_one_side(self):
        assert format_missing_values(["a"], [], "A", "B") == "[a] missing in B"

    def test_format_empty(self):
        assert format_missing_values(["a"], ["a"], "A", "B") == ""
