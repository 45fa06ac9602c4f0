"""Registry of spelling alphabets keyed by case-insensitive name."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .models import Alphabet
from .schema import DuplicateAlphabetError, UnknownAlphabetError
from .validator import ensure_valid

_LOGGER = logging.getLogger(__name__)


def normalise_name(name: str | None) -> str:
    """Normalise a requested alphabet name to its catalogue key."""

    return (name or "").strip().lower()


class Catalog:
    """Holds the known alphabets and resolves names to alphabet data.

    A catalogue is populated through :meth:`register` while it is being built
    and only read afterwards, so a shared instance can serve concurrent
    callers without locking.
    """

    def __init__(self, alphabets: Iterable[Alphabet] = ()) -> None:
        self._alphabets: dict[str, Alphabet] = {}
        for alphabet in alphabets:
            self.register(alphabet)

    def register(self, alphabet: Alphabet) -> Alphabet:
        """Validate and add ``alphabet`` to the catalogue."""

        ensure_valid(alphabet)

        key = alphabet.key
        if key in self._alphabets:
            raise DuplicateAlphabetError(alphabet.name)

        self._alphabets[key] = alphabet
        _LOGGER.debug(
            "Registered alphabet %s with %d entries", key, len(alphabet.entries)
        )
        return alphabet

    def resolve(self, name: str) -> Alphabet:
        """Return the alphabet registered under ``name`` (case-insensitive)."""

        try:
            return self._alphabets[normalise_name(name)]
        except KeyError:
            raise UnknownAlphabetError(name) from None

    def list_names(self) -> Iterator[str]:
        """Yield the registered names in sorted order."""

        yield from sorted(self._alphabets)

    def summaries(self) -> list[tuple[str, str]]:
        """Return ``(name, title)`` pairs in name order."""

        return [(name, self._alphabets[name].title) for name in self.list_names()]

    def describe(self, name: str) -> list[tuple[str, str]]:
        """Return the character to codeword mapping of ``name`` in display order."""

        return self.resolve(name).sorted_entries()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalise_name(name) in self._alphabets

    def __iter__(self) -> Iterator[Alphabet]:
        return (self._alphabets[name] for name in self.list_names())

    def __len__(self) -> int:
        return len(self._alphabets)


__all__ = ["Catalog", "normalise_name"]
