"""Runtime representation of a spelling alphabet."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

LATIN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"


def fold_character(character: str) -> str:
    """Return the canonical uppercase form used for codeword lookups.

    Folding goes through the lowercase form first so that ``ẞ`` and ``ß``
    meet. When the uppercase form would expand to several characters (as for
    ``ß``) the single lowercase character is the canonical form.
    """

    lower = character.lower()
    if len(lower) != 1:
        lower = character
    upper = lower.upper()
    return upper if len(upper) == 1 else lower


def character_sort_key(character: str) -> tuple[int, str]:
    """Order Latin letters first, other letters next and digits last."""

    if character in LATIN_LETTERS:
        return (0, character)
    if character in DIGITS:
        return (2, character)
    return (1, character)


@dataclass(frozen=True)
class AlphabetEntry:
    """A character and the codeword spoken for it."""

    character: str
    codeword: str


@dataclass(frozen=True)
class Alphabet:
    """Immutable spelling alphabet keyed by canonical character."""

    name: str
    title: str
    entries: tuple[AlphabetEntry, ...]
    _lookup: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Later duplicates never win; the validator reports them instead.
        lookup: dict[str, str] = {}
        for entry in self.entries:
            lookup.setdefault(fold_character(entry.character), entry.codeword)
        object.__setattr__(self, "_lookup", MappingProxyType(lookup))

    @classmethod
    def from_pairs(
        cls, name: str, pairs: Iterable[tuple[str, str]], *, title: str = ""
    ) -> Alphabet:
        entries = tuple(AlphabetEntry(character, codeword) for character, codeword in pairs)
        return cls(name=name, title=title or name, entries=entries)

    @property
    def key(self) -> str:
        """Case-insensitive identifier used by the catalogue."""

        return self.name.strip().lower()

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._lookup

    def codeword_for(self, character: str) -> str | None:
        """Return the codeword for ``character`` or ``None`` when unmapped."""

        return self._lookup.get(fold_character(character))

    def sorted_entries(self) -> list[tuple[str, str]]:
        return sorted(self._lookup.items(), key=lambda item: character_sort_key(item[0]))


__all__ = [
    "Alphabet",
    "AlphabetEntry",
    "DIGITS",
    "LATIN_LETTERS",
    "character_sort_key",
    "fold_character",
]
