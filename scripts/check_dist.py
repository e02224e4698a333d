#!/usr/bin/env python3
# =============================================================================
# deepcompare -- DISTRIBUTION CHECK
# File:   scripts/check_dist.py
# =============================================================================
#
# PURPOSE
# -------
# Pre-publish gate: verifies that the source archive for the current
# project version has been built and staged in packed_versions/.
#
# Exit codes:
#   0 -- Archive present. Safe to publish.
#   1 -- Archive missing, or project metadata unreadable.
#
# Usage:
#   python scripts/check_dist.py
# =============================================================================

from __future__ import annotations

import sys

from dist_common import staged_archive_path


def main() -> int:
    try:
        archive = staged_archive_path()
    except (OSError, KeyError, RuntimeError) as exc:
        print(f"CHECK-DIST ERROR: cannot read project metadata: {exc}", file=sys.stderr)
        return 1

    if not archive.is_file():
        print(
            f"CHECK-DIST ERROR: archive {archive.name} not found in {archive.parent}. "
            "Run scripts/build_dist.py first.",
            file=sys.stderr,
        )
        return 1

    print(f"CHECK-DIST: found archive {archive.name}. Safe to publish.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
