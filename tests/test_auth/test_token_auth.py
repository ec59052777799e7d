"""Tests for token encoding and the Basic Authorization header."""

from __future__ import annotations

import base64

import pytest

from apidoc_client.auth import AuthResult, encode_token, mask_authorization, token_auth


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestEncodeToken:
    def test_plain_token(self) -> None:
        assert encode_token("abcdef") == _b64("abcdef")

    def test_embedded_space_and_newline(self) -> None:
        assert encode_token("ab cd\nef") == _b64("abcdef")

    @pytest.mark.parametrize(
        "token",
        [
            " abcdef",
            "abcdef\n",
            "ab\tcd\ref",
            "a b c d e f",
            "\n\nabc\r\ndef  \t",
            "abc\x0bdef\x0c",
        ],
    )
    def test_whitespace_type_and_position_do_not_matter(self, token: str) -> None:
        assert encode_token(token) == _b64("abcdef")

    def test_no_colon_joining(self) -> None:
        """The token alone is encoded, not a user:password pair."""
        decoded = base64.b64decode(encode_token("secret")).decode("utf-8")
        assert decoded == "secret"

    def test_empty_token(self) -> None:
        assert encode_token(" \n ") == ""

    def test_non_ascii_token_is_utf8(self) -> None:
        assert base64.b64decode(encode_token("tök en")) == "tök".encode("utf-8") + b"en"


class TestTokenAuth:
    def test_header(self) -> None:
        result = token_auth("ab cd\nef")
        assert isinstance(result, AuthResult)
        assert result.headers == {"Authorization": f"Basic {_b64('abcdef')}"}

    def test_auth_result_defaults_to_no_headers(self) -> None:
        assert AuthResult().headers == {}


class TestMaskAuthorization:
    def test_masks_credential(self) -> None:
        assert mask_authorization("Basic YWJjZGVm") == "Basic YWJj****"

    def test_value_without_scheme(self) -> None:
        assert mask_authorization("YWJjZGVm") == "****"
