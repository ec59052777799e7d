"""Response bridge -- maps :class:`httpx.Response` to :class:`~apidoc_client.models.ApiResponse`.

The service answers in plain text, and callers decide for themselves what a
status code means, so the body is kept as text and never parsed.
"""

from __future__ import annotations

import httpx

from apidoc_client.models import ApiResponse


def to_api_response(response: httpx.Response) -> ApiResponse:
    """Capture status code, reason phrase and body text of *response* verbatim.

    A missing reason phrase (HTTP/2, or a non-standard status) becomes ``""``.
    """
    return ApiResponse(
        status_code=response.status_code,
        reason=response.reason_phrase or "",
        message=response.text,
    )
