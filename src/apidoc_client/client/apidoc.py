"""The three apidoc service operations.

Key concepts of the service's URL scheme:

* **organization key** (``orgkey``) -- first path segment, e.g.
  ``http://apidoc.me/acme``.
* **application key** (``appkey``) -- unique within an organization, e.g.
  ``acmeservice``. The application's display name ("Acme Service") is
  separate and only shown in listings.
* **version** -- a semver-shaped path segment below the application, e.g.
  ``/acme/acmeservice/0.0.1``. When uploading a version, the ``name`` in the
  documentation JSON must match the application key.

Each operation opens its own :class:`~apidoc_client.client.sync_client.SyncClient`,
sends exactly one request, and returns an
:class:`~apidoc_client.models.ApiResponse`. No status code is interpreted.
"""

from __future__ import annotations

from typing import Optional

import httpx

from apidoc_client.auth import token_auth
from apidoc_client.client.response import to_api_response
from apidoc_client.client.sync_client import SyncClient
from apidoc_client.models import (
    ApiResponse,
    ApplicationForm,
    ClientSettings,
    VersionForm,
    Visibility,
)


class ApidocClient:
    """Client for the apidoc service.

    Holds no credentials and no connection: the token is passed to every
    call, and every call builds a fresh HTTP client.

    Args:
        settings: Connection settings. Defaults point at ``http://api.apidoc.me/``.
        dry_run: Preview requests on stderr instead of sending them.
        transport: Optional httpx transport forwarded to each
            :class:`SyncClient`.

    Example::

        client = ApidocClient()
        result = client.delete_app(token, "acme", "acmeservice")
        print(result.status_code)  # 204 on success
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        dry_run: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._dry_run = dry_run
        self._transport = transport

    def _open(self, token: str) -> SyncClient:
        return SyncClient(
            self._settings,
            auth=token_auth(token),
            dry_run=self._dry_run,
            transport=self._transport,
        )

    def create_app(
        self,
        token: str,
        org_key: str,
        app_name: str,
        app_key: str,
        description: str,
        visibility: Visibility,
    ) -> ApiResponse:
        """Create an application. Insert-only, not an upsert.

        Returns:
            200 on success, 409 if the application key already exists.
        """
        form = ApplicationForm(
            name=app_name,
            key=app_key,
            description=description,
            visibility=visibility,
        )
        with self._open(token) as client:
            return to_api_response(client.post(org_key, form))

    def delete_app(self, token: str, org_key: str, app_key: str) -> ApiResponse:
        """Delete an application together with all of its versions.

        Returns:
            204 on success.
        """
        with self._open(token) as client:
            return to_api_response(client.delete(f"{org_key}/{app_key}"))

    def create_app_version(
        self,
        token: str,
        org_key: str,
        app_key: str,
        version: str,
        document: str,
        visibility: Visibility,
    ) -> ApiResponse:
        """Create or replace one version of an application (upsert).

        Args:
            token: API token from the service's web site.
            org_key: Organization key.
            app_key: Application key; must match ``name`` in *document*.
            version: Version path segment, normally semver (not validated).
            document: Raw apidoc JSON, sent as a string.
            visibility: Visibility of the new version.

        Returns:
            200 on success.
        """
        form = VersionForm.for_document(document, visibility)
        with self._open(token) as client:
            return to_api_response(client.put(f"{org_key}/{app_key}/{version}", form))
