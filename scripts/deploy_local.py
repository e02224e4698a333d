#!/usr/bin/env python3
# =============================================================================
# deepcompare -- LOCAL DEPLOY
# File:   scripts/deploy_local.py
# =============================================================================
#
# PURPOSE
# -------
# Builds and stages the sdist (scripts/build_dist.py), then installs the
# staged archive into a target interpreter so the package can be tried
# from another project before publishing.
#
# Exit codes:
#   0 -- Archive installed.
#   1 -- Build stage failed.
#   2 -- Install stage failed.
#
# Usage:
#   python scripts/deploy_local.py [--python /path/to/other/venv/bin/python]
# =============================================================================

from __future__ import annotations

import argparse
import subprocess
import sys

import build_dist
from dist_common import separator, staged_archive_path


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build deepcompare and install the archive locally",
        prog="python scripts/deploy_local.py",
    )
    parser.add_argument(
        "--python",
        default=sys.executable,
        help="Interpreter whose environment receives the package (default: this one)",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()

    if build_dist.main() != 0:
        print("DEPLOY-LOCAL: build stage failed, nothing installed.", file=sys.stderr)
        return 1

    archive = staged_archive_path()
    print(f"DEPLOY-LOCAL: installing {archive.name} into {args.python}")
    print(separator("-"))
    sys.stdout.flush()

    rc = subprocess.run(
        [args.python, "-m", "pip", "install", "--force-reinstall", str(archive)],
    ).returncode
    if rc != 0:
        print(f"DEPLOY-LOCAL ERROR: pip exited with code {rc}", file=sys.stderr)
        return 2

    print(separator())
    print(f"DEPLOY-LOCAL: {archive.name} installed. You can now test the package.")
    print(separator())
    return 0


if __name__ == "__main__":
    sys.exit(main())
