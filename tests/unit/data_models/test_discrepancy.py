import dataclasses
import pickle

import pytest

from deepcompare import (
    ABSENT,
    DEFAULT_CONFIG,
    ComparisonConfig,
    Discrepancy,
    DiscrepancyKind,
)
from deepcompare.utils.constants import _AbsentType


def _record(**overrides):
    defaults = dict(
        path="a.b",
        kind=DiscrepancyKind.VALUE_MISMATCH,
        value_a=1,
        value_b=2,
        label_a="expected",
        label_b="actual",
        message="Value mismatch",
    )
    defaults.update(overrides)
    return Discrepancy(**defaults)


class TestDiscrepancyKind:
    def test_literal_values(self):
        assert {k.value for k in DiscrepancyKind} == {
            "type-mismatch", "null-mismatch", "undefined-mismatch",
            "date-mismatch", "invalid-date", "array-length-mismatch",
            "key-length-mismatch", "missing-key", "value-mismatch",
            "nan-mismatch", "regex-mismatch",
        }

    def test_str_subclass(self):
        assert DiscrepancyKind.MISSING_KEY == "missing-key"
        assert isinstance(DiscrepancyKind.MISSING_KEY, str)

    def test_from_string(self):
        assert DiscrepancyKind("nan-mismatch") is DiscrepancyKind.NAN_MISMATCH

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            DiscrepancyKind("Value Mismatch")


class TestDiscrepancy:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            _record().path = "x"

    def test_message_defaults_to_empty(self):
        d = Discrepancy("p", DiscrepancyKind.MISSING_KEY, 1, ABSENT, "l", "r")
        assert d.message == ""

    def test_to_dict_uses_labels_as_keys(self):
        assert _record(label_a="objA", label_b="objB").to_dict() == {
            "path": "a.b",
            "type": "value-mismatch",
            "objA": 1,
            "objB": 2,
            "message": "Value mismatch",
        }

    def test_to_dict_identical_labels_collide(self):
        out = _record(label_a="same", label_b="same").to_dict()
        assert out["same"] == 2
        assert len(out) == 4


class TestComparisonConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG == ComparisonConfig("expected", "actual")

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.name_a = "x"

    def test_labels_not_validated(self):
        assert ComparisonConfig(name_a="", name_b="").name_a == ""


class TestAbsent:
    def test_singleton(self):
        assert _AbsentType() is ABSENT

    def test_falsy(self):
        assert not ABSENT

    def test_repr(self):
        assert repr(ABSENT) == "ABSENT"

    def test_not_none(self):
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711

    def test_pickle_preserves_identity(self):
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT
