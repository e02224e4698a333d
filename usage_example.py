# usage_example.py
# Minimal usage example for deepcompare.compare_objects.
# This file is not part of the deepcompare package. For reference only.

import re
from datetime import datetime, timezone

import numpy as np

from deepcompare import ABSENT, ComparisonConfig, compare_objects, format_discrepancies

date_ref = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

# Inputs
object_a = {
    "profile": {
        "name": "Developer",
        "status": None,
        "settings": {
            "flags": re.compile("debug", re.MULTILINE),
            "theme": "dark",
            "preferences": ABSENT,
        },
    },
    "metrics": [10, float("nan"), {"value": 100, "timestamp": date_ref}, ["level1", ["level2"]]],
    "metadata": {
        "last_seen": datetime(2024, 12, 31, tzinfo=timezone.utc),
        "version": 1.0,
        "tags": ["alpha", "beta"],
    },
    "extra": "should be missing",
}

object_b = {
    "profile": {
        "name": "Developer",
        "status": ABSENT,                                         # undefined-mismatch
        "settings": {
            "flags": re.compile("debug", re.IGNORECASE),          # regex-mismatch (flags)
            "theme": "light",                                     # value-mismatch
        },                                                        # key-length + missing-key
    },
    "metrics": [
        "10",                                                     # type-mismatch
        float("nan"),                                             # equal
        {"value": 101, "timestamp": np.datetime64("NaT")},        # value-mismatch, invalid-date
        ["level1"],                                               # array-length-mismatch
    ],
    "metadata": {
        "last_seen": datetime(2025, 1, 1, tzinfo=timezone.utc),   # date-mismatch
        "version": 1,                                             # equal (1.0 == 1)
    },                                                            # key-length + missing-key
}                                                                 # key-length + missing-key

# Compute
config = ComparisonConfig(name_a="obj_a", name_b="obj_b")
discrepancies = compare_objects(object_a, object_b, "", config)

# Inspect
print(format_discrepancies(discrepancies))

# Expected paths, in order:
# (root), profile.status, profile.settings, profile.settings.flags,
# profile.settings.theme, profile.settings.preferences, metrics[0],
# metrics[2].value, metrics[2].timestamp, metrics[3], metadata,
# metadata.last_seen, metadata.tags, extra
