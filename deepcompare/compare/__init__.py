# deepcompare/compare/__init__.py

from .classifier import Classification, classify
from .comparator import compare_objects

__all__ = [
    "Classification",
    "classify",
    "compare_objects",
]
