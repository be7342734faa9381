"""Top-level package for the puzzle toolkit.

Provides subpackages:
- puzzle_toolkit.errors – error taxonomy shared by every stage
- puzzle_toolkit.core – value models, priority map, schemas
- puzzle_toolkit.engines – intersection, rule-resolution and aggregation engines
- puzzle_toolkit.loading – input reading, line grammars and grouping
- puzzle_toolkit.solvers – one solver per puzzle plus the registry
- puzzle_toolkit.reporting – text/JSON rendering of results
"""


def _get_version() -> str:
    """Get version from installed metadata, falling back for source checkouts."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("puzzle-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
