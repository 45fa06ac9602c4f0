"""Alphabet loader wrapping the packaged YAML definitions."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from .catalog import Catalog
from .models import Alphabet
from .schema import AlphabetDefinition, AlphabetManifest, InvalidAlphabetError

DATA_DIRECTORY = Path(__file__).resolve().parent / "data"
MANIFEST_FILE = DATA_DIRECTORY / "manifest.yaml"

_LOGGER = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise InvalidAlphabetError(f"{path.name} must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_manifest() -> AlphabetManifest:
    """Load and cache the alphabet manifest."""

    if not MANIFEST_FILE.exists():
        raise FileNotFoundError("Alphabet manifest not found")

    raw_manifest = _load_yaml(MANIFEST_FILE)

    try:
        return AlphabetManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise InvalidAlphabetError(f"Manifest validation failed: {error}") from error


def available_alphabets() -> Sequence[str]:
    """Return the alphabet names declared in the manifest."""

    return load_manifest().names


def parse_alphabet(raw: dict[str, Any]) -> Alphabet:
    """Convert a raw alphabet payload into an :class:`Alphabet`."""

    try:
        definition = AlphabetDefinition.model_validate(raw)
    except ValidationError as error:
        raise InvalidAlphabetError(f"Alphabet validation failed: {error}") from error

    return Alphabet.from_pairs(definition.name, definition.pairs(), title=definition.title)


@lru_cache(maxsize=32)
def load_alphabet(name: str) -> Alphabet:
    """Load the built-in alphabet called ``name`` from disk."""

    try:
        manifest_entry = load_manifest().get_entry(name)
    except KeyError as exc:
        raise FileNotFoundError(f"Alphabet '{name}' not declared in manifest") from exc

    data_file = DATA_DIRECTORY / manifest_entry.resolved_filename
    if not data_file.exists():
        raise FileNotFoundError(f"Alphabet file for '{name}' missing: {data_file.name}")

    alphabet = parse_alphabet(_load_yaml(data_file))

    if alphabet.key != manifest_entry.name.lower():
        raise InvalidAlphabetError(
            f"Alphabet name mismatch: expected {manifest_entry.name}, found {alphabet.name}"
        )

    _LOGGER.debug("Loaded alphabet %s from %s", alphabet.key, data_file.name)
    return alphabet


def build_catalog(names: Sequence[str] | None = None) -> Catalog:
    """Return a new catalogue populated with the built-in alphabets."""

    targets = names or available_alphabets()
    return Catalog(load_alphabet(name) for name in targets)


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return a shared catalogue of every built-in alphabet."""

    return build_catalog()


__all__ = [
    "DATA_DIRECTORY",
    "MANIFEST_FILE",
    "available_alphabets",
    "build_catalog",
    "default_catalog",
    "load_alphabet",
    "load_manifest",
    "parse_alphabet",
]
