"""Tests for monday_graphql.client.errors."""

import json

import pytest

from monday_graphql.client.errors import (
    AuthorizationError,
    ComplexityError,
    InternalServerError,
    InvalidRequestError,
    MondayClientError,
    RateLimitError,
    ResourceNotFoundError,
    classify,
    response_error,
    response_error_code,
    status_code_error,
)
from monday_graphql.models import Response

STATUS_CODE_ERROR_MAP = [
    (500, InternalServerError),
    (429, RateLimitError),
    (404, ResourceNotFoundError),
    (403, AuthorizationError),
    (401, AuthorizationError),
    (400, InvalidRequestError),
]

RESPONSE_ERROR_MAP = [
    ("ComplexityException", (ComplexityError, 429)),
    ("UserUnauthorizedException", (AuthorizationError, 403)),
    ("ResourceNotFoundException", (ResourceNotFoundError, 404)),
    ("InvalidUserIdException", (InvalidRequestError, 400)),
    ("InvalidVersionException", (InvalidRequestError, 400)),
    ("InvalidColumnIdException", (InvalidRequestError, 400)),
    ("InvalidBoardIdException", (InvalidRequestError, 400)),
    ("InvalidArgumentException", (InvalidRequestError, 400)),
    ("CreateBoardException", (InvalidRequestError, 400)),
    ("ItemsLimitationException", (InvalidRequestError, 400)),
    ("ItemNameTooLongException", (InvalidRequestError, 400)),
    ("ColumnValueException", (InvalidRequestError, 400)),
    ("CorrectedValueException", (InvalidRequestError, 400)),
    ("InvalidWorkspaceIdException", (InvalidRequestError, 400)),
]


class TestMondayClientError:
    def test_without_params(self):
        error = MondayClientError()
        assert error.message is None
        assert error.code is None
        assert error.error_data == {}
        assert str(error) == ""

    def test_with_params(self):
        error = MondayClientError(message="Error message", code=500)
        assert error.message == "Error message"
        assert error.code == 500
        assert str(error) == "Error message"

    def test_message_from_response(self):
        response = Response(status=200, body={"error_message": "Board not found"})
        error = MondayClientError(message="InvalidBoardIdException", response=response)
        assert error.message == "InvalidBoardIdException: Board not found"

    def test_message_falls_back_to_errors_text(self):
        errors = [{"message": "Field 'foo' doesn't exist"}]
        error = MondayClientError(response=Response(status=200, body={"errors": errors}))
        assert error.message == json.dumps(errors)

    def test_code_prefers_body_status_code(self):
        response = Response(status=200, body={"status_code": 429, "error_message": "Slow down"})
        assert MondayClientError(response=response).code == 429

    def test_code_falls_back_to_status(self):
        assert MondayClientError(response=Response(status=502, body={})).code == 502

    def test_error_data(self):
        response = Response(status=200, body={"error_code": "X", "error_data": {"board_id": 1}})
        assert MondayClientError(response=response).error_data == {"board_id": 1}

    def test_error_data_defaults_to_empty(self):
        assert MondayClientError(response=Response(status=500, body={})).error_data == {}

    @pytest.mark.parametrize("error_class", [c for _, c in STATUS_CODE_ERROR_MAP] + [ComplexityError])
    def test_kinds_share_the_base_class(self, error_class):
        assert issubclass(error_class, MondayClientError)


class TestStatusCodeError:
    @pytest.mark.parametrize("status,error_class", STATUS_CODE_ERROR_MAP)
    def test_known_status(self, status, error_class):
        assert status_code_error(status) is error_class

    @pytest.mark.parametrize("status", [502, 503, 418])
    def test_other_status(self, status):
        assert status_code_error(status) is MondayClientError


class TestResponseError:
    @pytest.mark.parametrize("error_code,mapping", RESPONSE_ERROR_MAP)
    def test_known_error_code(self, error_code, mapping):
        assert response_error(error_code) == mapping

    def test_unknown_error_code(self):
        assert response_error("InvalidErrorCode") == (MondayClientError, 400)
        assert response_error("SomethingElse") == (MondayClientError, 400)


class TestResponseErrorCode:
    def test_top_level_error_code(self):
        response = Response(status=200, body={"error_code": "ComplexityException", "errors": []})
        assert response_error_code(response) == "ComplexityException"

    def test_extensions_code(self):
        body = {"errors": [{"message": "x", "extensions": {"code": "InvalidBoardIdException"}}]}
        assert response_error_code(Response(status=200, body=body)) == "InvalidBoardIdException"

    def test_extensions_error_code(self):
        body = {"errors": [{"message": "x", "extensions": {"error_code": "ColumnValueException"}}]}
        assert response_error_code(Response(status=200, body=body)) == "ColumnValueException"

    @pytest.mark.parametrize(
        "body",
        [
            {"error_message": "no code"},
            {"errors": []},
            {"errors": "not a list"},
            {"errors": ["not a dict"]},
            {"errors": [{"message": "x"}]},
            {"errors": [{"extensions": "bad"}]},
        ],
    )
    def test_missing_code(self, body):
        assert response_error_code(Response(status=200, body=body)) is None


class TestClassify:
    @pytest.mark.parametrize("status", [401, 403])
    def test_authorization_status(self, status):
        response = Response(status=status, body={"errors": [{"message": "Not Authenticated"}]})
        error = classify(response)
        assert type(error) is AuthorizationError
        assert error.code == status
        assert error.response is response

    def test_status_wins_over_body_status_code(self):
        error = classify(Response(status=500, body={"status_code": 200, "error_message": "boom"}))
        assert type(error) is InternalServerError
        assert error.code == 500
        assert error.message == "boom"

    def test_other_status_is_generic(self):
        error = classify(Response(status=502, body={}))
        assert type(error) is MondayClientError
        assert error.code == 502

    def test_200_with_invalid_board_id(self):
        body = {
            "error_code": "InvalidBoardIdException",
            "error_message": "Board not found",
            "error_data": {"board_id": 123},
            "status_code": 200,
        }
        error = classify(Response(status=200, body=body))
        assert type(error) is InvalidRequestError
        assert error.code == 400
        assert error.message == "InvalidBoardIdException: Board not found"
        assert error.error_data == body["error_data"]

    def test_200_with_complexity_error(self):
        errors = [{"message": "Complexity budget exhausted", "extensions": {"code": "ComplexityException"}}]
        error = classify(Response(status=200, body={"errors": errors}))
        assert type(error) is ComplexityError
        assert error.code == 429
        assert error.message == f"ComplexityException: {json.dumps(errors)}"

    def test_200_with_unknown_error_code(self):
        error = classify(Response(status=200, body={"error_code": "NewException", "error_message": "?"}))
        assert type(error) is MondayClientError
        assert error.code == 400
        assert error.message == "NewException: ?"

    def test_200_without_error_code(self):
        errors = [{"message": "Parse error on \"}\""}]
        error = classify(Response(status=200, body={"errors": errors}))
        assert type(error) is MondayClientError
        assert error.code == 200
        assert error.message == json.dumps(errors)

    @pytest.mark.parametrize(
        "body",
        [{}, {"errors": None}, {"errors": [None]}, {"error_message": None, "errors": 5}, {"error_code": 17}],
    )
    def test_never_raises(self, body):
        assert isinstance(classify(Response(status=200, body=body)), MondayClientError)
