#!/usr/bin/env python3
# =============================================================================
# deepcompare -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the full CI gate in sequential stages:
#   Stage 1: pytest (all tests + coverage enforcement >= 90%)
#   Stage 2: build and stage the source distribution
#   Stage 3: verify the staged archive is publishable
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 (pytest) failed.
#   2 -- Stage 2 (build) failed.
#   3 -- Stage 3 (dist check) failed.
#
# Usage:
#   python scripts/run_ci_checks.py
# =============================================================================

from __future__ import annotations

import pathlib
import subprocess
import sys

from dist_common import separator

_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent
_SCRIPTS   = _REPO_ROOT / "scripts"
_PYTHON    = sys.executable

# (label, command, exit code on failure)
_STAGES = (
    ("pytest (tests + coverage >= 90%)", [_PYTHON, "-m", "pytest"], 1),
    ("build sdist", [_PYTHON, str(_SCRIPTS / "build_dist.py")], 2),
    ("dist check", [_PYTHON, str(_SCRIPTS / "check_dist.py")], 3),
)


def _run(cmd: list[str], label: str) -> int:
    """
    Run a subprocess command, stream stdout/stderr live, return exit code.
    """
    print(separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(cmd, cwd=str(_REPO_ROOT))
    return proc.returncode


def main() -> int:
    print(separator())
    print("deepcompare CI GATE -- starting")
    print(separator())
    sys.stdout.flush()

    for label, cmd, fail_code in _STAGES:
        rc = _run(cmd, label)
        if rc != 0:
            print(separator())
            print(f"CI RESULT: FAIL  [stage={label}  exit_code={rc}]")
            print("Merge BLOCKED.")
            print(separator())
            sys.stdout.flush()
            return fail_code
        print(separator("-"))
        print(f"CI STAGE {label}: PASS")
        sys.stdout.flush()

    print(separator())
    print("CI RESULT: PASS  [stages=pytest,build,dist-check]")
    print("Merge permitted.")
    print(separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
