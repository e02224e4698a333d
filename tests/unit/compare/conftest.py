import pytest

from deepcompare import ComparisonConfig


@pytest.fixture
def custom_config() -> ComparisonConfig:
    """Non-default labels, so label threading is visible in records."""
    return ComparisonConfig(name_a="left", name_b="right")


@pytest.fixture
def nested_record() -> dict:
    """A value tree touching every comparable shape. Contains no NaN."""
    import re
    from datetime import date, datetime, timezone

    import numpy as np

    return {
        "id": 7,
        "name": "widget",
        "active": True,
        "ratio": 0.25,
        "missing": None,
        "created": datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
        "day": date(2024, 2, 29),
        "stamp": np.datetime64("2025-01-01T00:00:00"),
        "pattern": re.compile(r"^w\d+$", re.IGNORECASE),
        "tags": ["a", "b", ("c", 1)],
        "matrix": np.array([[1, 2], [3, 4]]),
        "children": [{"id": 1, "meta": {"depth": 2}}, {"id": 2, "meta": {}}],
    }
