# deepcompare/data_models/discrepancy.py
# Discrepancy record and the fixed discrepancy-kind taxonomy.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class DiscrepancyKind(str, Enum):
    """
    Kind of mismatch recorded by the comparator.

    Inherits from str, so DiscrepancyKind.VALUE_MISMATCH == "value-mismatch"
    and the member serialises as its literal value.
    """
    TYPE_MISMATCH         = "type-mismatch"
    NULL_MISMATCH         = "null-mismatch"
    UNDEFINED_MISMATCH    = "undefined-mismatch"
    DATE_MISMATCH         = "date-mismatch"
    INVALID_DATE          = "invalid-date"
    ARRAY_LENGTH_MISMATCH = "array-length-mismatch"
    KEY_LENGTH_MISMATCH   = "key-length-mismatch"
    MISSING_KEY           = "missing-key"
    VALUE_MISMATCH        = "value-mismatch"
    NAN_MISMATCH          = "nan-mismatch"
    REGEX_MISMATCH        = "regex-mismatch"


@dataclass(frozen=True)
class Discrepancy:
    """
    Record of a single mismatch between the two compared values.

    Fields:
      path     -- location inside the compared structure, e.g. "a[0].b".
                  "(root)" for a mismatch of the top-level values.
      kind     -- DiscrepancyKind member.
      value_a  -- observed value on the left side (ABSENT when missing).
      value_b  -- observed value on the right side (ABSENT when missing).
      label_a  -- display label of the left side.
      label_b  -- display label of the right side.
      message  -- human-readable description. May be empty.
    """
    path:    str
    kind:    DiscrepancyKind
    value_a: Any
    value_b: Any
    label_a: str
    label_b: str
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """
        Label-keyed form: {"path", "type", <label_a>, <label_b>, "message"}.

        If both labels are equal, value_b overwrites value_a under the shared
        key. A label equal to "path", "type" or "message" overwrites that
        field in the same way.
        """
        out: Dict[str, Any] = {"path": self.path, "type": self.kind.value}
        out[self.label_a] = self.value_a
        out[self.label_b] = self.value_b
        out["message"] = self.message
        return out
