# =============================================================================
# deepcompare v1.0.0 -- COMPARISON ENGINE
# File:   deepcompare/compare/comparator.py
# =============================================================================
#
# SCOPE
# -----
# Recursive structural comparison of two value trees. Produces a flat list
# of Discrepancy records in traversal order. Every mismatch is reported;
# a mismatch in one branch never stops comparison of its siblings.
#
# DISPATCH ORDER (first rule that fires wins)
# -------------------------------------------
#   D1  either side ABSENT       -> undefined-mismatch, or equal if both
#   D2  either side None         -> null-mismatch, or equal if both
#   D3  host type families differ -> type-mismatch
#   D4  date / date              -> _compare_dates
#   D5  exactly one date         -> type-mismatch
#   D6  regex / regex            -> _compare_regexes; exactly one -> type-mismatch
#   D7  sequence / sequence      -> _compare_sequences; exactly one -> type-mismatch
#   D8  mapping / mapping        -> _compare_mappings
#   D9  otherwise                -> _compare_primitives
#
# D1 and D2 run before D3 so that None vs 5 reports null-mismatch rather
# than a generic type-mismatch.
#
# TRAVERSAL ORDER
# ---------------
#   Sequences: index order, 0 .. min(len_a, len_b) - 1.
#   Mappings:  keys of A in A's order, then keys only in B in B's order.
#
# CONSTRAINTS
# -----------
#   Pure function of its inputs. Inputs are never mutated.
#   No I/O. No logging. No module-level mutable state.
#   No cycle detection: recursion depth equals input nesting depth.
# =============================================================================

from __future__ import annotations

from typing import Any, List

from deepcompare.compare.classifier import Classification, classify
from deepcompare.data_models.config import ComparisonConfig, DEFAULT_CONFIG
from deepcompare.data_models.discrepancy import Discrepancy, DiscrepancyKind
from deepcompare.utils.constants import (
    ABSENT,
    INVALID_DATE_MARKER,
    REGEX_FLAG_LETTERS,
    ROOT_PATH,
)
from deepcompare.utils.type_guards import (
    as_indexable,
    build_path,
    date_to_micros,
    format_date,
    format_missing_values,
    get_host_type,
    get_type_name,
    is_nan_value,
    is_valid_date,
    opaque_equal,
)


# =============================================================================
# SECTION 1 -- RECORD HELPERS
# =============================================================================

def _discrepancy(
    path:    str,
    kind:    DiscrepancyKind,
    value_a: Any,
    value_b: Any,
    config:  ComparisonConfig,
    message: str,
) -> Discrepancy:
    return Discrepancy(
        path=path or ROOT_PATH,
        kind=kind,
        value_a=value_a,
        value_b=value_b,
        label_a=config.name_a,
        label_b=config.name_b,
        message=message,
    )


def _located(label: str, path: str) -> str:
    """'expected.a.b', 'expected[0]', or just 'expected' at the root."""
    if not path:
        return label
    if path.startswith("["):
        return label + path
    return f"{label}.{path}"


# =============================================================================
# SECTION 2 -- SPECIALIZED COMPARATORS
# =============================================================================

def _compare_dates(date_a: Any, date_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    """
    Invalid dates (numpy NaT) are checked first. Two invalid dates are
    equal. Valid dates are equal iff their UTC microsecond timestamps match.
    """
    valid_a = is_valid_date(date_a)
    valid_b = is_valid_date(date_b)

    if not valid_a or not valid_b:
        if valid_a == valid_b:
            return []
        faulty = config.name_b if valid_a else config.name_a
        return [_discrepancy(
            path,
            DiscrepancyKind.INVALID_DATE,
            format_date(date_a) if valid_a else INVALID_DATE_MARKER,
            format_date(date_b) if valid_b else INVALID_DATE_MARKER,
            config,
            f"Comparison failed: {faulty} contains an invalid date",
        )]

    if date_to_micros(date_a) != date_to_micros(date_b):
        return [_discrepancy(
            path,
            DiscrepancyKind.DATE_MISMATCH,
            format_date(date_a),
            format_date(date_b),
            config,
            "Dates do not match",
        )]
    return []


def _regex_flags(pattern: Any) -> str:
    return "".join(letter for flag, letter in REGEX_FLAG_LETTERS if pattern.flags & flag)


def _regex_source(pattern: Any) -> str:
    source = pattern.pattern
    return source if isinstance(source, str) else repr(source)


def _compare_regexes(regex_a: Any, regex_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    """Compare the canonical '/pattern/flags' forms."""
    source_a, source_b = _regex_source(regex_a), _regex_source(regex_b)
    flags_a, flags_b = _regex_flags(regex_a), _regex_flags(regex_b)
    canonical_a = f"/{source_a}/{flags_a}"
    canonical_b = f"/{source_b}/{flags_b}"

    if canonical_a == canonical_b:
        return []

    if source_a == source_b:
        message = f"Regex patterns are identical, but flags differ: /{flags_a}/ vs /{flags_b}/"
    else:
        message = f"Regex patterns are different: {canonical_a} vs {canonical_b}"
    return [_discrepancy(path, DiscrepancyKind.REGEX_MISMATCH, canonical_a, canonical_b, config, message)]


def _compare_sequences(seq_a: Any, seq_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    """
    A length mismatch is reported and element comparison still runs over
    the common prefix. Trailing elements of the longer side are not visited.
    """
    discrepancies: List[Discrepancy] = []
    seq_a, seq_b = as_indexable(seq_a), as_indexable(seq_b)
    len_a, len_b = len(seq_a), len(seq_b)

    if len_a != len_b:
        discrepancies.append(_discrepancy(
            path,
            DiscrepancyKind.ARRAY_LENGTH_MISMATCH,
            len_a,
            len_b,
            config,
            f"Array length mismatch: {_located(config.name_a, path)} has {len_a} elements, "
            f"but {_located(config.name_b, path)} has {len_b} elements",
        ))

    for index in range(min(len_a, len_b)):
        discrepancies.extend(
            _compare_values(seq_a[index], seq_b[index], build_path(path, index), config)
        )
    return discrepancies


def _compare_mappings(map_a: dict, map_b: dict, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    """
    A key-count mismatch is reported in addition to, not instead of, the
    per-key missing-key records.
    """
    discrepancies: List[Discrepancy] = []
    keys_a = list(map_a.keys())
    keys_b = list(map_b.keys())

    if len(keys_a) != len(keys_b):
        detail = format_missing_values(keys_a, keys_b, config.name_a, config.name_b)
        message = "Key count mismatch"
        if detail:
            message = f"{message}: {detail}"
        discrepancies.append(_discrepancy(
            path, DiscrepancyKind.KEY_LENGTH_MISMATCH, len(keys_a), len(keys_b), config, message,
        ))

    all_keys = keys_a + [key for key in keys_b if key not in map_a]

    for key in all_keys:
        # Mapping keys always take the dotted form, even integer keys.
        key_path = build_path(path, str(key))
        in_a = key in map_a
        in_b = key in map_b

        if not in_a:
            discrepancies.append(_discrepancy(
                key_path,
                DiscrepancyKind.MISSING_KEY,
                ABSENT,
                map_b[key],
                config,
                f'Property "{key}" is missing in {_located(config.name_a, key_path)} '
                f"but exists in {_located(config.name_b, key_path)}",
            ))
            continue

        if not in_b:
            discrepancies.append(_discrepancy(
                key_path,
                DiscrepancyKind.MISSING_KEY,
                map_a[key],
                ABSENT,
                config,
                f'Property "{key}" is missing in {_located(config.name_b, key_path)} '
                f"but exists in {_located(config.name_a, key_path)}",
            ))
            continue

        discrepancies.extend(_compare_values(map_a[key], map_b[key], key_path, config))

    return discrepancies


def _compare_primitives(value_a: Any, value_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    """
    NaN is equal to NaN here. Every other pair goes through opaque_equal,
    after the dispatcher has already ensured both sides share a host type
    family: == where it yields a boolean, identity otherwise.
    """
    nan_a = is_nan_value(value_a)
    nan_b = is_nan_value(value_b)

    if nan_a and nan_b:
        return []

    if nan_a or nan_b:
        nan_side = config.name_a if nan_a else config.name_b
        return [_discrepancy(
            path,
            DiscrepancyKind.NAN_MISMATCH,
            value_a,
            value_b,
            config,
            f"Value mismatch: {_located(nan_side, path)} is NaN (Not-a-Number) "
            "while the other side is a valid number or type",
        )]

    if not opaque_equal(value_a, value_b):
        return [_discrepancy(path, DiscrepancyKind.VALUE_MISMATCH, value_a, value_b, config, "Value mismatch")]
    return []


# =============================================================================
# SECTION 3 -- DISPATCHER
# =============================================================================

def _type_mismatch(value_a: Any, value_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    return [_discrepancy(
        path,
        DiscrepancyKind.TYPE_MISMATCH,
        value_a,
        value_b,
        config,
        f"Type mismatch: {get_type_name(value_a)} vs {get_type_name(value_b)}",
    )]


def _compare_values(value_a: Any, value_b: Any, path: str, config: ComparisonConfig) -> List[Discrepancy]:
    shape_a = classify(value_a)
    shape_b = classify(value_b)

    # D1: absent
    if shape_a is Classification.ABSENT or shape_b is Classification.ABSENT:
        if shape_a is shape_b:
            return []
        missing, present = (
            (config.name_a, config.name_b) if shape_a is Classification.ABSENT
            else (config.name_b, config.name_a)
        )
        return [_discrepancy(
            path,
            DiscrepancyKind.UNDEFINED_MISMATCH,
            value_a,
            value_b,
            config,
            f"Value is undefined in {missing} but defined in {present}",
        )]

    # D2: null
    if shape_a is Classification.NULL or shape_b is Classification.NULL:
        if shape_a is shape_b:
            return []
        if shape_a is Classification.NULL:
            message = f"{config.name_a} is null, but {config.name_b} has a value"
        else:
            message = f"{config.name_a} has a value, but {config.name_b} is null"
        return [_discrepancy(path, DiscrepancyKind.NULL_MISMATCH, value_a, value_b, config, message)]

    # D3: host type family
    if get_host_type(value_a) != get_host_type(value_b):
        return _type_mismatch(value_a, value_b, path, config)

    # D4 .. D7: structured shapes must match exactly
    for shape, handler in (
        (Classification.DATE,     _compare_dates),
        (Classification.REGEX,    _compare_regexes),
        (Classification.SEQUENCE, _compare_sequences),
    ):
        if shape_a is shape and shape_b is shape:
            return handler(value_a, value_b, path, config)
        if shape_a is shape or shape_b is shape:
            return _type_mismatch(value_a, value_b, path, config)

    # D8: mappings
    if shape_a is Classification.MAPPING and shape_b is Classification.MAPPING:
        return _compare_mappings(value_a, value_b, path, config)

    # D9: primitives and opaque objects
    return _compare_primitives(value_a, value_b, path, config)


# =============================================================================
# SECTION 4 -- PUBLIC ENTRY POINT
# =============================================================================

def compare_objects(
    value_a: Any,
    value_b: Any,
    path:    str = "",
    config:  ComparisonConfig = DEFAULT_CONFIG,
) -> List[Discrepancy]:
    """
    Deeply compare two values and return every discrepancy found.

    Parameters
    ----------
    value_a, value_b : Any
        Values to compare. None is null; ABSENT marks a missing value.
        Dates, compiled regexes, lists/tuples/numpy arrays and dicts are
        compared structurally; everything else by ==.
    path : str
        Path prefix for recorded discrepancies. "" is the root, recorded as
        "(root)".
    config : ComparisonConfig
        Side labels used in records and messages.

    Returns
    -------
    list[Discrepancy]
        Empty iff the values are structurally equal.

    Example
    -------
    >>> compare_objects({"name": "John"}, {"name": "Jane"})[0].path
    'name'
    """
    return _compare_values(value_a, value_b, path, config)
