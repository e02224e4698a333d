# deepcompare/data_models/__init__.py

from .config import ComparisonConfig, DEFAULT_CONFIG
from .discrepancy import Discrepancy, DiscrepancyKind
from .missing_values import MissingValuesResult

__all__ = [
    "ComparisonConfig",
    "DEFAULT_CONFIG",
    "Discrepancy",
    "DiscrepancyKind",
    "MissingValuesResult",
]
