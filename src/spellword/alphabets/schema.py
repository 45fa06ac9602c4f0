"""Pydantic models describing the spelling alphabet data files."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, computed_field, field_validator, model_validator
from typing_extensions import Self


class AlphabetError(ValueError):
    """Base class for alphabet catalogue failures."""


class UnknownAlphabetError(AlphabetError, LookupError):
    """Raised when a requested alphabet name has no match in the catalogue."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown alphabet: {name}")
        self.name = name


class InvalidAlphabetError(AlphabetError):
    """Raised when an alphabet definition violates the data invariants."""

    def __init__(self, message: str, issues: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.issues = tuple(issues)


class DuplicateAlphabetError(AlphabetError):
    """Raised when two alphabets are registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Alphabet '{name}' is already registered")
        self.name = name


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class EntryDefinition(ImmutableModel):
    """A single ``"<character> <codeword>"`` line of an alphabet file."""

    character: str
    codeword: str

    @model_validator(mode="before")
    @classmethod
    def _split_line(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data

        character, _, codeword = data.strip().partition(" ")
        return {"character": character, "codeword": codeword.strip()}

    @field_validator("character", "codeword", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        # YAML reads bare digits such as ``0`` as integers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class AlphabetDefinition(ImmutableModel):
    """Structure of one alphabet data file."""

    name: str
    title: str
    entries: Sequence[EntryDefinition]

    @field_validator("name")
    @classmethod
    def _normalise_name(cls, value: str) -> str:
        normalised = value.strip().lower()
        if not normalised:
            raise ValueError("Alphabet names must be non-empty")
        return normalised

    @model_validator(mode="after")
    def _validate_entries(self) -> Self:
        if not self.entries:
            raise ValueError(f"Alphabet '{self.name}' defines no entries")
        return self

    def pairs(self) -> tuple[tuple[str, str], ...]:
        return tuple((entry.character, entry.codeword) for entry in self.entries)


class AlphabetManifestEntry(ImmutableModel):
    """Entry describing a built-in alphabet in the manifest."""

    name: str
    filename: str | None = None

    @computed_field
    @property
    def resolved_filename(self) -> str:
        return self.filename or f"{self.name}.yaml"


class AlphabetManifest(ImmutableModel):
    """Manifest listing the alphabet files shipped with the package."""

    alphabets: Sequence[AlphabetManifestEntry]

    @model_validator(mode="after")
    def _validate_names(self) -> Self:
        seen: set[str] = set()
        for entry in self.alphabets:
            key = entry.name.lower()
            if key in seen:
                raise ValueError(
                    f"Duplicate alphabet '{entry.name}' declared in the manifest"
                )
            seen.add(key)
        return self

    def get_entry(self, name: str) -> AlphabetManifestEntry:
        key = name.strip().lower()
        for entry in self.alphabets:
            if entry.name.lower() == key:
                return entry
        raise KeyError(name)

    @computed_field
    @property
    def names(self) -> tuple[str, ...]:
        return tuple(sorted(entry.name.lower() for entry in self.alphabets))


__all__ = [
    "AlphabetDefinition",
    "AlphabetError",
    "AlphabetManifest",
    "AlphabetManifestEntry",
    "DuplicateAlphabetError",
    "EntryDefinition",
    "ImmutableModel",
    "InvalidAlphabetError",
    "UnknownAlphabetError",
]
