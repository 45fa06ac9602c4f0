"""Application factory for the spellword JSON API."""

from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from spellword.alphabets import Catalog, UnknownAlphabetError, default_catalog
from spellword.settings import Settings, load_settings
from spellword.version import get_project_version

from .http import EXTENSION_KEY, AppState, problem_response, unknown_alphabet_problem
from .routes import register_routes


def create_app(catalog: Catalog | None = None, settings: Settings | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    state = AppState(
        catalog=catalog if catalog is not None else default_catalog(),
        settings=settings if settings is not None else load_settings(),
    )
    app.extensions[EXTENSION_KEY] = state

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "default_alphabet": state.settings.default_alphabet,
            "alphabets": list(state.catalog.list_names()),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(UnknownAlphabetError)
    def handle_unknown_alphabet(error: UnknownAlphabetError):
        """Report unknown alphabet names together with the valid choices."""

        return unknown_alphabet_problem(error, state.catalog).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface request validation errors to clients."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app


__all__ = ["create_app"]
