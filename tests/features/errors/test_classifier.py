"""Tests for raw failure classification."""

from __future__ import annotations

from typing import Any

import pytest

from querysync.features.errors import AppError, ErrorKind, classify
from querysync.features.errors.domain.models import (
    DEFAULT_ERROR_MESSAGE,
    NETWORK_MESSAGE,
    TIMEOUT_MESSAGE,
)
from querysync.platform.http import FetchFailure, HttpFailure, RequestTimeout


class _Shape:
    """Plain object exposing failure fields as attributes."""

    def __init__(self, **fields: Any) -> None:
        for name, value in fields.items():
            setattr(self, name, value)


class _ExplodingShape:
    @property
    def message(self) -> str:
        raise RuntimeError("boom")


@pytest.mark.parametrize("raw", [None, "oops", b"bytes", 0, 3.5, True])
def test_scalars_map_to_generic_default(raw: object) -> None:
    """Non-object values never carry a usable shape."""

    assert classify(raw) == AppError(message=DEFAULT_ERROR_MESSAGE)


def test_timeout_marker_wins_over_status() -> None:
    error = classify({"message": "Request timeout", "status": 500})

    assert error.is_timeout is True
    assert error.kind is ErrorKind.TIMEOUT
    assert error.message == TIMEOUT_MESSAGE
    assert error.status is None


def test_fetch_error_marks_network_failure() -> None:
    error = classify({"status": "FETCH_ERROR"})

    assert error.is_network_error is True
    assert error.kind is ErrorKind.NETWORK
    assert error.message == NETWORK_MESSAGE


def test_fetch_error_prefers_transport_reason() -> None:
    error = classify({"status": "FETCH_ERROR", "error": "TypeError: Failed to fetch"})

    assert error.message == "TypeError: Failed to fetch"
    assert error.is_network_error is True


@pytest.mark.parametrize(
    "status, kind, message",
    [
        (400, ErrorKind.VALIDATION, "Invalid request."),
        (401, ErrorKind.AUTH, "Session expired. Please log in again."),
        (403, ErrorKind.PERMISSION, "You do not have permission to perform this action."),
        (404, ErrorKind.NOT_FOUND, "Requested resource was not found."),
        (409, ErrorKind.GENERIC, "Request failed."),
        (500, ErrorKind.SERVER, "Server error. Please try again later."),
        (503, ErrorKind.SERVER, "Server error. Please try again later."),
    ],
)
def test_status_dispatch_preserves_status(status: int, kind: ErrorKind, message: str) -> None:
    error = classify({"status": status})

    assert error.status == status
    assert error.kind is kind
    assert error.message == message
    assert error.is_auth_error is (status == 401)


def test_status_body_message_used_for_400_and_other_client_errors() -> None:
    bad_request = classify({"status": 400, "data": {"message": "Name is required"}})
    conflict = classify({"status": 409, "data": {"message": "Slot already booked"}})

    assert bad_request.message == "Name is required"
    assert conflict.message == "Slot already booked"


def test_status_body_message_ignored_for_fixed_messages() -> None:
    error = classify({"status": 404, "data": {"message": "Location 42 missing"}})

    assert error.message == "Requested resource was not found."
    assert error.is_not_found is True


def test_error_code_taken_from_body() -> None:
    error = classify({"status": 403, "data": {"errorCode": "FORBIDDEN", "message": "x"}})

    assert error.code == "FORBIDDEN"
    assert error.is_forbidden is True


def test_bool_status_is_not_numeric() -> None:
    assert classify({"status": True, "message": "custom"}).message == "custom"


def test_validation_details_joined() -> None:
    raw = {"data": {"error": {"details": {"name": "Name is required", "email": "Email is invalid"}}}}

    error = classify(raw)

    assert error.message == "Name is required, Email is invalid"
    assert error.kind is ErrorKind.VALIDATION
    assert error.validation_errors == {"name": "Name is required", "email": "Email is invalid"}
    assert error.status is None


def test_message_passes_through_verbatim() -> None:
    assert classify({"message": "Kid already linked to parent"}).message == (
        "Kid already linked to parent"
    )


def test_exception_message_read_from_args() -> None:
    error = classify(ValueError("Invalid session window"))

    assert error == AppError(message="Invalid session window")


def test_exception_with_timeout_message_is_timeout() -> None:
    assert classify(RuntimeError("Request timeout")).is_timeout is True


def test_unknown_shapes_fall_back_to_default() -> None:
    assert classify({"unexpected": 1}).message == DEFAULT_ERROR_MESSAGE
    assert classify([1, 2, 3]).message == DEFAULT_ERROR_MESSAGE
    assert classify(object()).message == DEFAULT_ERROR_MESSAGE
    assert classify({"message": ""}).message == DEFAULT_ERROR_MESSAGE


def test_attribute_shapes_classify_like_mappings() -> None:
    from_object = classify(_Shape(status=404, data=_Shape(message="gone")))
    from_mapping = classify({"status": 404, "data": {"message": "gone"}})

    assert from_object == from_mapping


def test_hostile_shapes_never_raise() -> None:
    assert classify(_ExplodingShape()).message == DEFAULT_ERROR_MESSAGE


def test_classification_is_deterministic() -> None:
    raw = {"status": 401, "data": {"message": "jwt expired"}}

    assert classify(raw) == classify(raw)
    assert raw == {"status": 401, "data": {"message": "jwt expired"}}


def test_transport_failures_classify_by_shape() -> None:
    assert classify(RequestTimeout()).is_timeout is True
    assert classify(FetchFailure("connection refused")).message == "connection refused"

    http_error = classify(HttpFailure(400, {"message": "Session is full", "errorCode": "FULL"}))
    assert http_error.status == 400
    assert http_error.message == "Session is full"
    assert http_error.code == "FULL"
