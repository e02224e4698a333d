# deepcompare/version.py
# Package version constant. Single authoritative definition.
# Read by pyproject.toml (dynamic version) and by scripts/build_dist.py
# through the project metadata.

__version__: str = "1.0.0"
