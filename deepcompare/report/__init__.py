# deepcompare/report/__init__.py

from .formatter import format_discrepancies

__all__ = ["format_discrepancies"]
