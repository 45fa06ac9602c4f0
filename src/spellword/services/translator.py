"""Translate free-form text into codewords of a spelling alphabet.

Input is split on runs of whitespace and every character of every word is
looked up in the alphabet after case folding. Characters the alphabet does
not define (punctuation, accented letters, digits in letter-only alphabets)
keep their place in the breakdown with an empty codeword slot so that the
result always lines up word for word with the input.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from spellword.alphabets.models import Alphabet


@dataclass(frozen=True)
class CharacterSpelling:
    """One character of a word and its codeword, if the alphabet has one."""

    character: str
    codeword: str | None

    def as_dict(self) -> dict[str, Any]:
        return {"character": self.character, "codeword": self.codeword}


@dataclass(frozen=True)
class WordTranslation:
    """Codeword breakdown of a single whitespace-delimited word."""

    original: str
    characters: tuple[CharacterSpelling, ...]

    @property
    def codewords(self) -> list[str | None]:
        return [spelling.codeword for spelling in self.characters]

    @property
    def spelled(self) -> list[str]:
        """Codewords with unmapped characters dropped."""

        return [spelling.codeword for spelling in self.characters if spelling.codeword]

    def as_dict(self) -> dict[str, Any]:
        return {
            "original": self.original,
            "characters": [spelling.as_dict() for spelling in self.characters],
        }


@dataclass(frozen=True)
class TranslationResult:
    """Ordered word-by-word translation of an input string."""

    alphabet: str
    words: tuple[WordTranslation, ...]

    def __iter__(self) -> Iterator[WordTranslation]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> WordTranslation:
        return self.words[index]

    def as_dict(self) -> dict[str, Any]:
        return {
            "alphabet": self.alphabet,
            "words": [word.as_dict() for word in self.words],
        }


def translate_word(alphabet: Alphabet, word: str) -> WordTranslation:
    """Return the codeword breakdown for a single ``word``."""

    characters = tuple(
        CharacterSpelling(character, alphabet.codeword_for(character)) for character in word
    )
    return WordTranslation(original=word, characters=characters)


def translate(alphabet: Alphabet, text: str) -> TranslationResult:
    """Translate ``text`` into its codeword breakdown under ``alphabet``."""

    words = tuple(translate_word(alphabet, word) for word in text.split())
    return TranslationResult(alphabet=alphabet.key, words=words)


@dataclass(frozen=True)
class Translator:
    """Callable helper bound to a single alphabet."""

    alphabet: Alphabet

    def __call__(self, text: str) -> TranslationResult:
        return translate(self.alphabet, text)


__all__ = [
    "CharacterSpelling",
    "TranslationResult",
    "Translator",
    "WordTranslation",
    "translate",
    "translate_word",
]
