# =============================================================================
# deepcompare v1.0.0 -- EXCEPTIONS
# File:   deepcompare/exceptions.py
# =============================================================================
#
# The comparison engine itself never raises: mismatches are returned as
# Discrepancy records. Exceptions exist only for callers that turn a
# non-empty discrepancy list into a failure.
#
# EXCEPTION HIERARCHY
# -------------------
#   DeepCompareError(Exception)                                   -- base
#     DiscrepancyAssertionError(DeepCompareError, AssertionError) -- values differ
#
# Message content is derived only from constructor arguments.
# =============================================================================

from __future__ import annotations

from typing import Iterable

from deepcompare.data_models.discrepancy import Discrepancy
from deepcompare.report.formatter import format_discrepancies


class DeepCompareError(Exception):
    """Base class for all deepcompare exceptions."""


class DiscrepancyAssertionError(DeepCompareError, AssertionError):
    """
    Raised by assert_no_discrepancies() when the compared values differ.

    Subclasses AssertionError so test runners report it as a failed
    assertion rather than an error.

    Attributes
    ----------
    discrepancies : tuple
        Every Discrepancy found, in traversal order.
    """

    def __init__(self, discrepancies: Iterable[Discrepancy]) -> None:
        self.discrepancies = tuple(discrepancies)
        lines = [
            f"Values differ: {len(self.discrepancies)} discrepancy(ies) detected.",
            format_discrepancies(self.discrepancies),
        ]
        super().__init__("\n".join(lines))
