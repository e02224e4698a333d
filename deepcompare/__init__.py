# deepcompare/__init__.py
# Structural deep comparison of Python values.
#
# Compares primitives, dicts, lists/tuples/numpy arrays, dates and compiled
# regular expressions, and returns every discrepancy with its path instead
# of a single boolean.
#
# Standard import pattern:
#   from deepcompare import compare_objects, ComparisonConfig, DiscrepancyKind

from .version import __version__
from .utils.constants import ABSENT
from .data_models import (
    ComparisonConfig,
    DEFAULT_CONFIG,
    Discrepancy,
    DiscrepancyKind,
    MissingValuesResult,
)
from .compare import Classification, classify, compare_objects
from .utils import (
    build_path,
    detect_missing_values,
    format_missing_values,
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
from .report import format_discrepancies
from .exceptions import DeepCompareError, DiscrepancyAssertionError
from .assertions import assert_no_discrepancies

__all__ = [
    "__version__",
    # Comparison
    "compare_objects",
    "classify",
    "Classification",
    # Data models
    "ABSENT",
    "ComparisonConfig",
    "DEFAULT_CONFIG",
    "Discrepancy",
    "DiscrepancyKind",
    "MissingValuesResult",
    # Helpers
    "build_path",
    "detect_missing_values",
    "format_missing_values",
    "get_type_name",
    "is_absent",
    "is_date",
    "is_nan_value",
    "is_null",
    "is_plain_mapping",
    "is_regex",
    "is_sequence",
    "is_valid_date",
    # Reporting and assertions
    "format_discrepancies",
    "assert_no_discrepancies",
    "DeepCompareError",
    "DiscrepancyAssertionError",
]
