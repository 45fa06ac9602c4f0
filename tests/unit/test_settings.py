"""Tests for environment-driven settings."""

from __future__ import annotations

import logging

from spellword.settings import (
    DEFAULT_ALPHABET,
    DEFAULT_MAX_TEXT_LENGTH,
    load_settings,
)


def test_load_settings_defaults() -> None:
    settings = load_settings({})

    assert settings.default_alphabet == DEFAULT_ALPHABET
    assert settings.max_text_length == DEFAULT_MAX_TEXT_LENGTH


def test_load_settings_reads_environment() -> None:
    settings = load_settings(
        {"SPELLWORD_ALPHABET": " lapd ", "SPELLWORD_MAX_TEXT_LENGTH": "64"}
    )

    assert settings.default_alphabet == "lapd"
    assert settings.max_text_length == 64


def test_load_settings_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("SPELLWORD_ALPHABET", "icao")

    assert load_settings().default_alphabet == "icao"


def test_load_settings_ignores_invalid_lengths(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="spellword.settings"):
        invalid = load_settings({"SPELLWORD_MAX_TEXT_LENGTH": "lots"})
        negative = load_settings({"SPELLWORD_MAX_TEXT_LENGTH": "-5"})

    assert invalid.max_text_length == DEFAULT_MAX_TEXT_LENGTH
    assert negative.max_text_length == DEFAULT_MAX_TEXT_LENGTH
    assert "Ignoring invalid value for SPELLWORD_MAX_TEXT_LENGTH" in caplog.text
    assert "Ignoring non-positive value for SPELLWORD_MAX_TEXT_LENGTH" in caplog.text
