# deepcompare/utils/__init__.py

from .type_guards import (
    build_path,
    detect_missing_values,
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
)

__all__ = [
    "build_path",
    "detect_missing_values",
    "format_missing_values",
    "get_host_type",
    "get_type_name",
    "is_absent",
    "is_date",
    "is_nan_value",
    "is_null",
    "is_plain_mapping",
    "is_regex",
    "is_sequence",
    "is_valid_date",
]
