"""HTTP client module for apidoc_client.

Classes:
    :class:`SyncClient` -- blocking wrapper around :class:`httpx.Client`
    with auth injection, dry-run mode, and transport error mapping.
    :class:`ApidocClient` -- the create-app, delete-app and
    create-app-version operations.

Example::

    from apidoc_client.client import ApidocClient
    from apidoc_client.models import Visibility

    client = ApidocClient()
    result = client.create_app(
        token, "acme", "Acme Service", "acmeservice", "Orders API",
        Visibility.ORGANIZATION,
    )
"""

from apidoc_client.client.apidoc import ApidocClient
from apidoc_client.client.sync_client import SyncClient

__all__ = ["ApidocClient", "SyncClient"]
