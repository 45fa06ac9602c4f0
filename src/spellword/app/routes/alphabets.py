"""Expose the alphabet catalogue to API consumers."""

from __future__ import annotations

from flask import Blueprint, jsonify

from spellword.app.http import get_state

blueprint = Blueprint("alphabets", __name__, url_prefix="/api/v1/alphabets")


@blueprint.get("/")
def list_alphabets():
    """Return the available alphabets and the configured default."""

    state = get_state()
    alphabets = [
        {"name": name, "title": title} for name, title in state.catalog.summaries()
    ]
    return jsonify({"alphabets": alphabets, "default": state.settings.default_alphabet}), 200


@blueprint.get("/<name>")
def show_alphabet(name: str):
    """Return every character and codeword of a single alphabet."""

    catalog = get_state().catalog
    alphabet = catalog.resolve(name)
    entries = [
        {"character": character, "codeword": codeword}
        for character, codeword in catalog.describe(alphabet.key)
    ]
    return jsonify({"name": alphabet.key, "title": alphabet.title, "entries": entries}), 200
