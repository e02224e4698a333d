# deepcompare/data_models/missing_values.py
# Result of a two-way set difference over key lists.

from dataclasses import dataclass


@dataclass(frozen=True)
class MissingValuesResult:
    """
    missing_in_a -- items present in B but not in A, in B's order.
    missing_in_b -- items present in A but not in B, in A's order.
    """
    missing_in_a: tuple    # tuple of str, immutable
    missing_in_b: tuple    # tuple of str, immutable
