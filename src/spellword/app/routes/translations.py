"""REST endpoint translating text into spelling alphabet codewords."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Blueprint, Request, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from spellword.app.http import get_state, problem_response
from spellword.app.models import TranslationRequest, format_validation_error
from spellword.services import translate

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1")


def parse_translation_payload(req: Request) -> TranslationRequest:
    """Extract and validate the JSON body of ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    try:
        return TranslationRequest.model_validate(dict(data))
    except ValidationError as error:
        raise ValueError(format_validation_error(error)) from error


@blueprint.post("/translations")
def create_translation() -> tuple[Any, int]:
    """Translate the submitted text with the requested or default alphabet."""

    state = get_state()
    payload = parse_translation_payload(request)

    if len(payload.text) > state.settings.max_text_length:
        return problem_response(
            "text_too_long",
            status=413,
            message=f"Text exceeds {state.settings.max_text_length} characters",
        ).to_response()

    alphabet = state.catalog.resolve(payload.alphabet or state.settings.default_alphabet)
    result = translate(alphabet, payload.text)

    body = result.as_dict()
    body["title"] = alphabet.title
    return jsonify(body), 200
