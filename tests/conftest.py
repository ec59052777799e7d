"""Shared test fixtures for apidoc_client.

Provides an in-memory stand-in for the apidoc service (served through
:class:`httpx.MockTransport`), isolated config environments, output state
management, and a CLI runner. These fixtures are automatically discovered
by pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from apidoc_client.models import ClientSettings
from apidoc_client.output import OutputManager, reset_output, set_output


BASE_URL = "http://api.apidoc.test/"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager's Rich console keeps a reference to sys.stderr from
    creation time. When Typer's CliRunner redirects the stream and the test
    finishes, the cached reference goes stale. Resetting forces a fresh
    manager on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Fake apidoc service
# ---------------------------------------------------------------------------


class FakeApidocService:
    """Minimal in-memory model of the apidoc REST API.

    * ``POST /{org}`` inserts an application (409 if the key exists).
    * ``DELETE /{org}/{app}`` removes an application and its versions
      (404 if unknown).
    * ``PUT /{org}/{app}/{version}`` stores a version, replacing any
      previous upload.

    Every request must carry a Basic ``Authorization`` header. All requests
    are recorded in :attr:`requests` for inspection.
    """

    def __init__(self) -> None:
        self.apps: dict[tuple[str, str], dict] = {}
        self.versions: dict[tuple[str, str, str], dict] = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if not request.headers.get("authorization", "").startswith("Basic "):
            return httpx.Response(401, text="unauthorized")

        segments = [s for s in request.url.path.split("/") if s]

        if request.method == "POST" and len(segments) == 1:
            body = json.loads(request.content)
            key = (segments[0], body["key"])
            if key in self.apps:
                return httpx.Response(409, text=f"application {body['key']} already exists")
            self.apps[key] = body
            return httpx.Response(200, text=json.dumps(body))

        if request.method == "DELETE" and len(segments) == 2:
            key = (segments[0], segments[1])
            if key not in self.apps:
                return httpx.Response(404, text="")
            del self.apps[key]
            for version_key in [v for v in self.versions if v[:2] == key]:
                del self.versions[version_key]
            return httpx.Response(204)

        if request.method == "PUT" and len(segments) == 3:
            body = json.loads(request.content)
            self.versions[(segments[0], segments[1], segments[2])] = body
            return httpx.Response(200, text=json.dumps(body))

        return httpx.Response(405, text="method not allowed")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_service() -> FakeApidocService:
    """A fresh, empty fake apidoc service."""
    return FakeApidocService()


@pytest.fixture
def settings() -> ClientSettings:
    """Client settings pointing at the fake service's base URL."""
    return ClientSettings(base_url=BASE_URL, timeout=5)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, and clears all APIDOC_*
    environment variables.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setattr("apidoc_client.config._is_xdg_platform", lambda: True)

    for var in [
        "APIDOC_BASE_URL",
        "APIDOC_TIMEOUT",
        "APIDOC_VERIFY_SSL",
        "APIDOC_TOKEN",
    ]:
        monkeypatch.delenv(var, raising=False)

    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet, colourless output manager for tests that ignore stderr."""
    output = OutputManager(no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
