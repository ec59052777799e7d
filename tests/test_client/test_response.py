"""Tests for the httpx-to-ApiResponse bridge."""

from __future__ import annotations

import httpx
import pytest

from apidoc_client.client.response import to_api_response
from apidoc_client.models import ApiResponse


def _make_response(status_code: int, text: str = "", **kwargs) -> httpx.Response:
    return httpx.Response(
        status_code=status_code,
        text=text,
        request=httpx.Request("PUT", "http://api.apidoc.me/acme/svc/0.0.1"),
        **kwargs,
    )


class TestToApiResponse:
    def test_ok(self) -> None:
        result = to_api_response(_make_response(200, '{"version":"0.0.1"}'))
        assert result == ApiResponse(status_code=200, reason="OK", message='{"version":"0.0.1"}')

    def test_no_content(self) -> None:
        result = to_api_response(_make_response(204))
        assert str(result) == "httpresponsecode=204reason=No Contentmessage="

    @pytest.mark.parametrize(
        "status, reason",
        [(401, "Unauthorized"), (404, "Not Found"), (409, "Conflict"), (500, "Internal Server Error")],
    )
    def test_error_statuses_are_kept_verbatim(self, status: int, reason: str) -> None:
        result = to_api_response(_make_response(status, "details"))
        assert result.status_code == status
        assert result.reason == reason
        assert result.message == "details"

    def test_body_is_not_parsed(self) -> None:
        body = '{\n  "errors": [1, 2]\n}'
        assert to_api_response(_make_response(422, body)).message == body

    def test_unknown_status_has_empty_reason(self) -> None:
        assert to_api_response(_make_response(599)).reason == ""

    def test_custom_reason_phrase_from_http1_extension(self) -> None:
        response = _make_response(409, extensions={"reason_phrase": b"Already There"})
        assert to_api_response(response).reason == "Already There"
