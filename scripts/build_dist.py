#!/usr/bin/env python3
# =============================================================================
# deepcompare -- BUILD SOURCE DISTRIBUTION
# File:   scripts/build_dist.py
# =============================================================================
#
# PURPOSE
# -------
# Builds the sdist for the current version and stages it:
#   Step 1: python -m build --sdist          (writes into dist/)
#   Step 2: move the archive into packed_versions/
#   Step 3: verify the staged archive exists
#
# Exit codes:
#   0 -- Archive built and staged.
#   1 -- Build failed.
#   2 -- Archive missing after build or staging.
#
# Usage:
#   python scripts/build_dist.py
#
# Requires the "build" package (pip install -e .[dev]).
# =============================================================================

from __future__ import annotations

import shutil
import subprocess
import sys

from dist_common import (
    DIST_DIR,
    REPO_ROOT,
    STAGING_DIR,
    archive_name,
    read_project_metadata,
    separator,
)

_PYTHON = sys.executable


def main() -> int:
    name, version = read_project_metadata()
    archive = archive_name(name, version)

    print(separator())
    print(f"BUILD-DIST: packing {name} {version}")
    print(separator("-"))
    sys.stdout.flush()

    rc = subprocess.run(
        [_PYTHON, "-m", "build", "--sdist", "--outdir", str(DIST_DIR)],
        cwd=str(REPO_ROOT),
    ).returncode
    if rc != 0:
        print(f"BUILD-DIST ERROR: build exited with code {rc}", file=sys.stderr)
        return 1

    built = DIST_DIR / archive
    if not built.is_file():
        print(f"BUILD-DIST ERROR: expected {built} was not produced", file=sys.stderr)
        return 2

    STAGING_DIR.mkdir(parents=True, exist_ok=True)
    staged = STAGING_DIR / archive
    shutil.move(str(built), str(staged))

    if not staged.is_file():
        print(f"BUILD-DIST ERROR: archive {archive} not found after staging", file=sys.stderr)
        return 2

    print(separator("-"))
    print(f"BUILD-DIST: staged {staged.relative_to(REPO_ROOT)}")
    print(separator())
    return 0


if __name__ == "__main__":
    sys.exit(main())
