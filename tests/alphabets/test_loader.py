import pytest

from spellword.alphabets import InvalidAlphabetError, load_alphabet
from spellword.alphabets.loader import (
    available_alphabets,
    build_catalog,
    default_catalog,
    load_manifest,
    parse_alphabet,
)

EXPECTED_NAMES = (
    "de",
    "es",
    "fr",
    "icao",
    "it",
    "joint-army-navy",
    "lapd",
    "nato",
    "nl",
    "sv",
)


def test_manifest_lists_builtin_alphabets() -> None:
    assert load_manifest().names == EXPECTED_NAMES
    assert tuple(available_alphabets()) == EXPECTED_NAMES


def test_load_alphabet_reads_entries_in_authored_order() -> None:
    nato = load_alphabet("nato")

    assert nato.key == "nato"
    assert nato.title == "NATO phonetic alphabet"
    assert nato.entries[0].character == "A"
    assert nato.entries[0].codeword == "Alfa"
    assert nato.entries[-1].character == "9"
    assert nato.entries[-1].codeword == "Nine"


def test_load_alphabet_keeps_codewords_with_spaces() -> None:
    italian = load_alphabet("it")

    assert italian.codeword_for("w") == "vu doppia"


def test_load_alphabet_rejects_unknown_name() -> None:
    with pytest.raises(FileNotFoundError):
        load_alphabet("klingon")


def test_parse_alphabet_coerces_integer_keys() -> None:
    alphabet = parse_alphabet(
        {"name": "Digits", "title": "Numbers", "entries": [{"character": 7, "codeword": "Seven"}]}
    )

    assert alphabet.key == "digits"
    assert alphabet.codeword_for("7") == "Seven"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "demo", "title": "Demo"},
        {"name": "demo", "title": "Demo", "entries": []},
        {"name": "  ", "title": "Demo", "entries": ["A Alfa"]},
        {"name": "demo", "title": "Demo", "entries": ["A Alfa"], "extra": True},
    ],
)
def test_parse_alphabet_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(InvalidAlphabetError):
        parse_alphabet(payload)


def test_build_catalog_registers_every_manifest_entry() -> None:
    catalog = build_catalog()

    assert tuple(catalog.list_names()) == EXPECTED_NAMES


def test_build_catalog_accepts_a_subset() -> None:
    catalog = build_catalog(["nato", "de"])

    assert list(catalog.list_names()) == ["de", "nato"]


def test_default_catalog_is_shared() -> None:
    assert default_catalog() is default_catalog()
