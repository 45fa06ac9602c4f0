"""Integration tests for the translation endpoint."""

from __future__ import annotations

from http import HTTPStatus

from flask.testing import FlaskClient


def test_translation_endpoint_uses_default_alphabet(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations", json={"text": "Go, go!"})
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["alphabet"] == "nato"
    assert payload["title"] == "NATO phonetic alphabet"
    assert [word["original"] for word in payload["words"]] == ["Go,", "go!"]
    assert [item["codeword"] for item in payload["words"][0]["characters"]] == [
        "Golf",
        "Oscar",
        None,
    ]


def test_translation_endpoint_respects_alphabet(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations", json={"text": "ja", "alphabet": "SV"})
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()

    assert payload["alphabet"] == "sv"
    assert [item["codeword"] for item in payload["words"][0]["characters"]] == [
        "Johan",
        "Adam",
    ]


def test_translation_endpoint_handles_empty_text(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations", json={"text": "   "})
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["words"] == []


def test_translation_endpoint_rejects_unknown_alphabet(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations", json={"text": "hi", "alphabet": "doesnotexist"}
    )
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json()["error"] == "unknown_alphabet"


def test_translation_endpoint_rejects_invalid_json(client: FlaskClient) -> None:
    response = client.post(
        "/api/v1/translations", data="not json", content_type="application/json"
    )
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.get_json()["error"] == "bad_request"


def test_translation_endpoint_rejects_missing_text(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations", json={"alphabet": "nato"})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    payload = response.get_json()

    assert payload["error"] == "validation_error"
    assert "text" in payload["message"]


def test_translation_endpoint_limits_text_length(client: FlaskClient) -> None:
    response = client.post("/api/v1/translations", json={"text": "a" * 201})
    assert response.status_code == 413
    assert response.get_json()["error"] == "text_too_long"
