# scripts/dist_common.py
# Shared helpers for the packaging scripts: project metadata and the
# location of the staged source archive.
#
# Not part of the deepcompare package. Stdlib only (tomllib on 3.11+,
# tomli before that).

from __future__ import annotations

import pathlib
import re
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

REPO_ROOT:    pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
PYPROJECT:    pathlib.Path = REPO_ROOT / "pyproject.toml"
VERSION_FILE: pathlib.Path = REPO_ROOT / "deepcompare" / "version.py"
DIST_DIR:     pathlib.Path = REPO_ROOT / "dist"
STAGING_DIR:  pathlib.Path = REPO_ROOT / "packed_versions"

_VERSION_RE = re.compile(r'^__version__\s*(?::\s*str\s*)?=\s*"([^"]+)"', re.MULTILINE)


def separator(char: str = "=", width: int = 72) -> str:
    return char * width


def read_project_metadata() -> tuple[str, str]:
    """
    Return (name, version). The name comes from pyproject.toml; the
    version is declared dynamic there and read from deepcompare/version.py.
    """
    with PYPROJECT.open("rb") as fh:
        project = tomllib.load(fh)["project"]
    name = project["name"]
    version = project.get("version")
    if version is None:
        match = _VERSION_RE.search(VERSION_FILE.read_text(encoding="utf-8"))
        if match is None:
            raise RuntimeError(f"No __version__ assignment found in {VERSION_FILE}")
        version = match.group(1)
    return name, version


def archive_name(name: str, version: str) -> str:
    """sdist file name as produced by setuptools (name normalised)."""
    normalized = re.sub(r"[-_.]+", "_", name).lower()
    return f"{normalized}-{version}.tar.gz"


def staged_archive_path() -> pathlib.Path:
    name, version = read_project_metadata()
    return STAGING_DIR / archive_name(name, version)
