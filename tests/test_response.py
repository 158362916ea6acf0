"""Tests for monday_graphql.models.response."""

import json

import httpx
import pytest

from monday_graphql.models import Response


class TestFromHttp:
    def test_wraps_status_body_and_headers(self):
        raw = httpx.Response(200, json={"data": "Success data"}, headers={"X-Request-Id": "abc"})
        response = Response.from_http(raw)

        assert response.status == 200
        assert response.body == {"data": "Success data"}
        assert response.headers["x-request-id"] == "abc"

    @pytest.mark.parametrize(
        "text,payload",
        [("null", None), ('["bad gateway"]', ["bad gateway"]), ('"bad gateway"', "bad gateway"), ("42", 42)],
    )
    def test_non_object_body_is_kept_under_data(self, text, payload):
        response = Response.from_http(httpx.Response(502, text=text))

        assert response.body == {"data": payload}
        assert response.success is False

    def test_non_object_body_with_2xx_status(self):
        response = Response.from_http(httpx.Response(200, json=[1, 2]))
        assert response.success is True
        assert response.dig("data", 1) == 2

    def test_malformed_body_raises(self):
        raw = httpx.Response(502, text="<html>Bad Gateway</html>")
        with pytest.raises(json.JSONDecodeError):
            Response.from_http(raw)


class TestSuccess:
    def test_2xx_without_errors(self):
        assert Response(status=200, body={"data": "success"}).success is True

    @pytest.mark.parametrize("status", [201, 204, 299])
    def test_other_2xx_statuses(self, status):
        assert Response(status=status, body={"data": {}}).success is True

    @pytest.mark.parametrize("status", [199, 300, 400, 404, 500])
    def test_non_2xx_is_never_successful(self, status):
        assert Response(status=status, body={"data": "success"}).success is False

    @pytest.mark.parametrize(
        "body",
        [
            {"error_message": "Error message"},
            {"errors": [{"message": "Parse error"}]},
            {"error_code": "ComplexityException"},
            {"status_code": 429, "data": {}},
        ],
    )
    def test_200_with_embedded_error(self, body):
        response = Response(status=200, body=body)
        assert response.success is False
        assert response.has_errors is True


class TestDig:
    def test_nested_lookup(self):
        response = Response(status=200, body={"data": {"boards": [{"id": "1", "items_page": {"cursor": "c"}}]}})
        assert response.dig("data", "boards", 0, "items_page", "cursor") == "c"

    def test_missing_path_returns_default(self):
        response = Response(status=200, body={"data": {"boards": []}})
        assert response.dig("data", "boards", 0, "id") is None
        assert response.dig("data", "missing", default=[]) == []
        assert response.dig("data", "boards", "id") is None


def test_response_is_immutable():
    response = Response(status=200, body={})
    with pytest.raises(Exception):
        response.status = 500


class TestReadOnlyContainers:
    def test_body_cannot_be_mutated(self):
        response = Response(status=200, body={"data": {}})

        with pytest.raises(TypeError):
            response.body["errors"] = ["x"]

        assert response.success is True

    def test_headers_cannot_be_mutated(self):
        response = Response.from_http(httpx.Response(200, json={"data": {}}))
        with pytest.raises(TypeError):
            response.headers["x-extra"] = "1"

    def test_source_dict_is_copied(self):
        body = {"data": {}}
        response = Response(status=200, body=body)

        body["error_message"] = "late"

        assert response.success is True
