"""Runtime settings sourced from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ALPHABET_ENV = "SPELLWORD_ALPHABET"
MAX_TEXT_LENGTH_ENV = "SPELLWORD_MAX_TEXT_LENGTH"

DEFAULT_ALPHABET = "nato"
DEFAULT_MAX_TEXT_LENGTH = 10_000


def _parse_positive_int(value: str | None, *, env: str) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


@dataclass(frozen=True)
class Settings:
    """Defaults shared by the command line and HTTP surfaces."""

    default_alphabet: str = DEFAULT_ALPHABET
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``environ`` (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ

    alphabet = (env.get(ALPHABET_ENV) or "").strip() or DEFAULT_ALPHABET
    max_length = _parse_positive_int(env.get(MAX_TEXT_LENGTH_ENV), env=MAX_TEXT_LENGTH_ENV)

    return Settings(
        default_alphabet=alphabet,
        max_text_length=max_length or DEFAULT_MAX_TEXT_LENGTH,
    )


__all__ = [
    "ALPHABET_ENV",
    "DEFAULT_ALPHABET",
    "DEFAULT_MAX_TEXT_LENGTH",
    "MAX_TEXT_LENGTH_ENV",
    "Settings",
    "load_settings",
]
