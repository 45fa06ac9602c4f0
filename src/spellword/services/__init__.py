"""Service-layer helpers for spellword."""

from .formatting import render_alphabet, render_alphabet_list, render_translation
from .translator import (
    CharacterSpelling,
    TranslationResult,
    Translator,
    WordTranslation,
    translate,
)

__all__ = [
    "CharacterSpelling",
    "TranslationResult",
    "Translator",
    "WordTranslation",
    "render_alphabet",
    "render_alphabet_list",
    "render_translation",
    "translate",
]
