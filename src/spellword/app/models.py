"""Pydantic models describing the public API surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

__all__ = ["TranslationRequest", "format_validation_error"]


class TranslationRequest(BaseModel):
    """Body of ``POST /api/v1/translations``."""

    model_config = ConfigDict(extra="forbid")

    text: str
    alphabet: str | None = None

    @field_validator("alphabet")
    @classmethod
    def _blank_alphabet_is_default(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid translation payload: {details}"
