import json

import pytest

from services.shared.applications import (
    Conflict,
    NotFound,
    UnexpectedFailure,
    ValidationFailed,
)
from services.shared.utils.http_response import (
    api_response,
    bad_request,
    failure_response,
)


def test_api_response_serializes_body():
    response = api_response(201, {"id": "f0001"})

    assert response["statusCode"] == 201
    assert response["headers"] == {"Content-Type": "application/json"}
    assert json.loads(response["body"]) == {"id": "f0001"}


@pytest.mark.parametrize(
    "failure, status_code",
    [
        (ValidationFailed("name is required"), 400),
        (NotFound("flight not found"), 404),
        (Conflict("flight is not bookable"), 409),
        (UnexpectedFailure("failed to transition flight state"), 500),
    ],
)
def test_failure_response_maps_status_code(failure, status_code):
    response = failure_response(failure)

    assert response["statusCode"] == status_code
    assert json.loads(response["body"]) == {"error": failure.error}


def test_bad_request():
    response = bad_request("invalid JSON")
    assert response["statusCode"] == 400
    assert json.loads(response["body"]) == {"error": "invalid JSON"}
