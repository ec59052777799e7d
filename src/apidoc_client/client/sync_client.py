"""Synchronous HTTP client with auth injection and dry-run.

This module provides :class:`SyncClient`, the blocking HTTP client used by
:class:`~apidoc_client.client.apidoc.ApidocClient`. It wraps
:class:`httpx.Client` and layers on:

- **Auth injection** -- headers from :class:`~apidoc_client.auth.AuthResult`
  are merged into every outgoing request.
- **Fixed content negotiation** -- every request declares a JSON body and
  asks for a plain-text response.
- **Dry-run mode** -- prints the request to stderr and returns a synthetic
  200 response without sending traffic.
- **Transport error mapping** -- network failures become
  :class:`~apidoc_client.exceptions.ConnectionError_`.

HTTP error statuses are *not* mapped to exceptions: a 409 or 500 is
returned like any other response. There is no retry.
"""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from apidoc_client.auth import AuthResult, mask_authorization
from apidoc_client.exceptions import ConnectionError_
from apidoc_client.models import ClientSettings
from apidoc_client.output import get_output

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "text/plain",
}


class SyncClient:
    """Synchronous HTTP client for one apidoc call.

    Must be used as a context manager so that the underlying transport is
    opened and closed around the request.

    Args:
        settings: Base URL, timeout and SSL verification.
        auth: Headers to add to every request. ``None`` sends no credentials.
        dry_run: When ``True``, requests are printed to stderr and a
            synthetic 200 response is returned without network I/O.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        with SyncClient(settings, auth=token_auth(token)) as client:
            response = client.delete("/acme/acmeservice")
    """

    def __init__(
        self,
        settings: ClientSettings,
        auth: Optional[AuthResult] = None,
        dry_run: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._auth = auth
        self._dry_run = dry_run
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._client = httpx.Client(
            timeout=self._settings.timeout,
            verify=self._settings.verify_ssl,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def url_for(self, path: str) -> str:
        """Join the configured base URL and *path* with exactly one slash."""
        return f"{self._settings.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        body: Optional[BaseModel] = None,
    ) -> httpx.Response:
        """Send one request and return the server's response untouched.

        Args:
            method: HTTP method (POST, PUT, DELETE).
            path: URL path appended to the base URL.
            body: Pydantic model serialised as the JSON request body.

        Returns:
            The :class:`httpx.Response`, whatever its status code.

        Raises:
            ConnectionError_: On network or timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        headers = dict(DEFAULT_HEADERS)
        if self._auth is not None:
            headers.update(self._auth.headers)

        url = self.url_for(path)
        payload = body.model_dump(mode="json") if body is not None else None

        if self._dry_run:
            return self._print_dry_run(method, url, headers, payload)

        output = get_output()
        output.debug(f"{method} {url}")

        kwargs: dict[str, Any] = {"headers": headers}
        if payload is not None:
            kwargs["content"] = json.dumps(payload).encode("utf-8")

        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            raise ConnectionError_(f"{method} {url} failed: {exc}") from exc

        output.debug(f"{method} {url} -> {response.status_code} {response.reason_phrase}")
        return response

    def post(self, path: str, body: Optional[BaseModel] = None) -> httpx.Response:
        """Send a POST request."""
        return self.request("POST", path, body)

    def put(self, path: str, body: Optional[BaseModel] = None) -> httpx.Response:
        """Send a PUT request."""
        return self.request("PUT", path, body)

    def delete(self, path: str) -> httpx.Response:
        """Send a DELETE request."""
        return self.request("DELETE", path)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _print_dry_run(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        payload: Any,
    ) -> httpx.Response:
        """Print request details to stderr and return a synthetic 200 response."""
        output = get_output()
        output.info(f"[dry-run] {method} {url}")

        for key, value in headers.items():
            if key.lower() == "authorization":
                value = mask_authorization(value)
            output.info(f"  Header: {key}: {value}")

        if payload is not None:
            output.info(f"  Body (JSON): {json.dumps(payload, indent=2)}")

        return httpx.Response(
            status_code=200,
            headers={"content-type": "text/plain"},
            text="dry run: request was not sent",
            request=httpx.Request(method=method, url=url),
        )
