"""Spell out text with phonetic spelling alphabets such as NATO's."""

from spellword.alphabets import (
    Alphabet,
    Catalog,
    DuplicateAlphabetError,
    InvalidAlphabetError,
    UnknownAlphabetError,
    build_catalog,
    default_catalog,
)
from spellword.services.translator import (
    CharacterSpelling,
    TranslationResult,
    Translator,
    WordTranslation,
    translate,
)

__all__ = [
    "Alphabet",
    "Catalog",
    "CharacterSpelling",
    "DuplicateAlphabetError",
    "InvalidAlphabetError",
    "TranslationResult",
    "Translator",
    "UnknownAlphabetError",
    "WordTranslation",
    "build_catalog",
    "default_catalog",
    "translate",
]
