"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from flask import current_app, jsonify

from spellword.alphabets import Catalog, UnknownAlphabetError
from spellword.settings import Settings

EXTENSION_KEY = "spellword"


@dataclass(frozen=True)
class AppState:
    """Catalogue and settings attached to the Flask application."""

    catalog: Catalog
    settings: Settings


def get_state() -> AppState:
    """Return the :class:`AppState` of the active application."""

    return current_app.extensions[EXTENSION_KEY]


@dataclass(frozen=True)
class ProblemResponse:
    """JSON error body returned by every spellword endpoint.

    ``error`` is a stable machine-readable code such as ``unknown_alphabet``
    or ``text_too_long``; ``message`` is meant for people.
    """

    error: str
    status: int
    message: str | None = None
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    **extra: Any,
) -> ProblemResponse:
    """Describe a failed request; extra keywords become top-level body fields."""

    return ProblemResponse(error=error, status=status, message=message, extra=extra or None)


def unknown_alphabet_problem(error: UnknownAlphabetError, catalog: Catalog) -> ProblemResponse:
    """404 body naming the missing alphabet and listing the valid choices."""

    return problem_response(
        "unknown_alphabet",
        status=404,
        message=str(error),
        alphabet=error.name,
        available=list(catalog.list_names()),
    )


__all__ = [
    "AppState",
    "EXTENSION_KEY",
    "ProblemResponse",
    "get_state",
    "problem_response",
    "unknown_alphabet_problem",
]
