"""Unit tests for the API Gateway response helpers."""

import base64
import json

import pytest

from core.errors import (
    AuthenticationError,
    BackpackError,
    ErrorCode,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from core.responses import api_handler, current_user_id, error_response, json_response, parse_json_body


def _body(response):
    return json.loads(response["body"])


def test_json_response_has_cors_headers():
    response = json_response(200, [{"id": 1}])

    assert response["statusCode"] == 200
    assert response["headers"]["Access-Control-Allow-Origin"] == "*"
    assert response["headers"]["Content-Type"] == "application/json"
    assert _body(response) == [{"id": 1}]


def test_validation_error_body_lists_errors():
    response = error_response(ValidationError("startDate is required", errors=["startDate is required", "endDate is required"]))

    assert response["statusCode"] == 400
    assert _body(response) == {
        "msg": "startDate is required",
        "code": "VALIDATION_ERROR",
        "errors": [{"msg": "startDate is required"}, {"msg": "endDate is required"}],
    }


def test_upstream_error_body_carries_details():
    response = error_response(UpstreamError("Error from flight API: quota", upstream_status=429, details={"message": "quota"}))

    assert response["statusCode"] == 429
    assert _body(response)["details"] == {"message": "quota"}


def test_parse_json_body_variants():
    assert parse_json_body({"body": None}) == {}
    assert parse_json_body({"body": '{"a": 1}'}) == {"a": 1}
    encoded = base64.b64encode(b'{"a": 2}').decode()
    assert parse_json_body({"body": encoded, "isBase64Encoded": True}) == {"a": 2}


def test_parse_json_body_invalid():
    with pytest.raises(ValidationError) as exc_info:
        parse_json_body({"body": "{not json"})
    assert exc_info.value.code == ErrorCode.INVALID_REQUEST


def test_current_user_id(api_event):
    assert current_user_id(api_event()) == "user-123"
    with pytest.raises(AuthenticationError):
        current_user_id(api_event(user_id=None))


def test_api_handler_maps_backpack_errors(api_event):
    @api_handler
    def handler(event, context):
        raise NotFoundError("Trip not found")

    response = handler(api_event(), None)

    assert response["statusCode"] == 404
    assert _body(response) == {"msg": "Trip not found", "code": "TRIP_NOT_FOUND"}


def test_api_handler_hides_unexpected_errors(api_event):
    @api_handler
    def handler(event, context):
        raise RuntimeError("secret stack detail")

    response = handler(api_event(), None)

    assert response["statusCode"] == 500
    assert _body(response)["code"] == ErrorCode.INTERNAL_ERROR.value
    assert "secret" not in response["body"]


def test_api_handler_hides_storage_details(api_event):
    @api_handler
    def handler(event, context):
        raise BackpackError("DynamoDB put_item failed: creds", code=ErrorCode.STORAGE_ERROR)

    body = _body(handler(api_event(), None))

    assert body["msg"] == "Unable to reach the trip store. Please try again."
