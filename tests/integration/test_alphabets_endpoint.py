"""Integration tests for the alphabet catalogue API."""

from __future__ import annotations

from http import HTTPStatus

from flask.testing import FlaskClient


def test_alphabets_endpoint_lists_catalogue(client: FlaskClient) -> None:
    response = client.get("/api/v1/alphabets/")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    names = [item["name"] for item in payload["alphabets"]]
    assert names == sorted(names)
    assert {"name": "lapd", "title": "LAPD radio alphabet"} in payload["alphabets"]
    assert payload["default"] == "nato"


def test_alphabet_endpoint_describes_entries(client: FlaskClient) -> None:
    response = client.get("/api/v1/alphabets/ES")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["name"] == "es"
    assert payload["entries"][0] == {"character": "A", "codeword": "Antonio"}
    assert {"character": "Ñ", "codeword": "Ñoño"} in payload["entries"]
    assert len(payload["entries"]) == 27


def test_alphabet_endpoint_reports_unknown_alphabet(client: FlaskClient) -> None:
    response = client.get("/api/v1/alphabets/klingon")
    assert response.status_code == HTTPStatus.NOT_FOUND
    payload = response.get_json()

    assert payload["error"] == "unknown_alphabet"
    assert "klingon" in payload["message"]
    assert payload["alphabet"] == "klingon"
    assert "nato" in payload["available"]
