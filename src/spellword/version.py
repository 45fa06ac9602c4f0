"""Version lookup shared by ``spellword --version`` and ``GET /health``."""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION = "spellword"
PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _project_table(path: Path) -> Iterator[tuple[str, str]]:
    """Yield ``key = value`` pairs of the ``[project]`` table in ``path``."""

    table = None
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line.startswith("["):
            table = line
        elif table == "[project]" and "=" in line:
            key, _, value = line.partition("=")
            yield key.strip(), value.strip().strip("\"'")


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the spellword version.

    An installed distribution reports its own metadata. A plain source
    checkout (tests run against ``src/``) reads ``pyproject.toml`` instead.
    """

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass

    if PYPROJECT.is_file():
        for key, value in _project_table(PYPROJECT):
            if key == "version" and value:
                return value

    raise RuntimeError(f"No spellword version found in package metadata or {PYPROJECT}")


__all__ = ["get_project_version"]
