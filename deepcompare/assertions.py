# deepcompare/assertions.py
# Assertion helper for test suites: fail with the full discrepancy list
# instead of a bare "assert a == b".

from __future__ import annotations

from typing import Any

from deepcompare.compare.comparator import compare_objects
from deepcompare.data_models.config import ComparisonConfig, DEFAULT_CONFIG
from deepcompare.exceptions import DiscrepancyAssertionError


def assert_no_discrepancies(
    value_a: Any,
    value_b: Any,
    config: ComparisonConfig = DEFAULT_CONFIG,
) -> None:
    """
    Raise DiscrepancyAssertionError if value_a and value_b differ.

    The raised error carries every discrepancy and lists them in its
    message. Returns None when the values are structurally equal.
    """
    discrepancies = compare_objects(value_a, value_b, "", config)
    if discrepancies:
        raise DiscrepancyAssertionError(discrepancies)
