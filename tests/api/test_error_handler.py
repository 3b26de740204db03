"""Tests for the error response builder."""

import json

import pytest
from starlette.requests import Request

from src.api.middleware.error_handler import build_error_response
from src.core.exceptions import NotFoundError, RequiredFieldsError


def make_request(path: str = "/api/barang/9") -> Request:
    return Request(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("test", 80),
            "path": path,
            "query_string": b"",
            "headers": [],
        }
    )


def test_not_found_maps_to_404():
    response = build_error_response(make_request(), NotFoundError("9"))
    body = json.loads(response.body)
    assert response.status_code == 404
    assert body["error_code"] == "RECORD_NOT_FOUND"
    assert body["hint"]


def test_required_fields_map_to_400():
    response = build_error_response(make_request(), RequiredFieldsError(["code"]))
    assert response.status_code == 400
    assert json.loads(response.body)["error_code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("exc", [KeyError("batch_number"), ValueError("bad")])
def test_builtin_errors_are_server_errors(exc: Exception):
    response = build_error_response(make_request(), exc)
    body = json.loads(response.body)
    assert response.status_code == 500
    assert body["error_code"] == type(exc).__name__
    assert body["hint"] == "An internal error occurred. Check server logs."
