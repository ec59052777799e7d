"""Token authentication for the apidoc service.

The service accepts the user's API token in an HTTP Basic ``Authorization``
header. Unlike :rfc:`7617` there is no ``username:password`` pair: the token
alone, with all whitespace removed, is Base64-encoded. Tokens copied from
the web site often carry line breaks or stray spaces, hence the stripping.

Example::

    >>> encode_token("ab cd\\nef")
    'YWJjZGVm'
    >>> token_auth("abcdef").headers
    {'Authorization': 'Basic YWJjZGVm'}
"""

from __future__ import annotations

import base64
import re

_WHITESPACE = re.compile(r"\s+")


class AuthResult:
    """Container for authentication headers to inject into HTTP requests.

    Built by :func:`token_auth` and merged into every outgoing request by
    :class:`~apidoc_client.client.sync_client.SyncClient`.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Basic ..."}``).
    """

    def __init__(self, headers: dict[str, str] | None = None):
        self.headers = headers or {}


def encode_token(token: str) -> str:
    """Strip every whitespace character from *token* and Base64-encode it."""
    compact = _WHITESPACE.sub("", token)
    return base64.b64encode(compact.encode("utf-8")).decode("ascii")


def token_auth(token: str) -> AuthResult:
    """Return an :class:`AuthResult` carrying ``Authorization: Basic <encoded token>``."""
    return AuthResult(headers={"Authorization": f"Basic {encode_token(token)}"})


def mask_authorization(value: str) -> str:
    """Hide the credential part of an ``Authorization`` header value for display."""
    scheme, _, credential = value.partition(" ")
    if not credential:
        return "****"
    return f"{scheme} {credential[:4]}****"
