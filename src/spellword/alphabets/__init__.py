"""Spelling alphabet catalogue backed by the packaged YAML definitions."""

from .catalog import Catalog, normalise_name
from .loader import available_alphabets, build_catalog, default_catalog, load_alphabet
from .models import Alphabet, AlphabetEntry, fold_character
from .schema import (
    AlphabetError,
    DuplicateAlphabetError,
    InvalidAlphabetError,
    UnknownAlphabetError,
)

__all__ = [
    "Alphabet",
    "AlphabetEntry",
    "AlphabetError",
    "Catalog",
    "DuplicateAlphabetError",
    "InvalidAlphabetError",
    "UnknownAlphabetError",
    "available_alphabets",
    "build_catalog",
    "default_catalog",
    "fold_character",
    "load_alphabet",
    "normalise_name",
]
