"""Settings resolution with XDG paths and precedence.

This module decides *where* requests go and *how long* they may take:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apidoc-client/`` on macOS and Windows. See :func:`get_config_dir`
  and :func:`get_data_dir`.
* **User config** -- an optional ``config.json`` in the config directory
  holding ``base_url``, ``timeout`` and ``verify_ssl``.
* **Precedence resolution** -- :func:`resolve_settings` merges CLI flags,
  environment variables, the user config file, and defaults into one
  :class:`~apidoc_client.models.ClientSettings`.

The client never writes configuration, credentials, or responses; the
only file it may create is a crash log under :func:`get_data_dir`.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from apidoc_client.exceptions import ConfigError
from apidoc_client.models import ClientSettings

_APP_NAME = "apidoc-client"
_CONFIG_FILENAME = "config.json"

ENV_BASE_URL = "APIDOC_BASE_URL"
ENV_TIMEOUT = "APIDOC_TIMEOUT"
ENV_VERIFY_SSL = "APIDOC_VERIFY_SSL"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory. It is not created.

    On Linux/BSD: ``$XDG_CONFIG_HOME/apidoc-client/`` (default
    ``~/.config/apidoc-client/``). On macOS/Windows: ``~/.apidoc-client/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apidoc-client/`` (default
    ``~/.local/share/apidoc-client/``). On macOS/Windows:
    ``~/.apidoc-client/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- User config ---


def _user_config_path() -> Path:
    """Path to the user config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_user_config() -> dict[str, Any]:
    """Load the user configuration file.

    Returns:
        The parsed JSON object, or an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = _user_config_path()
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a JSON object")
    return data


def _env_settings() -> dict[str, Any]:
    """Collect settings overrides from ``APIDOC_*`` environment variables."""
    values: dict[str, Any] = {}

    base_url = os.environ.get(ENV_BASE_URL, "").strip()
    if base_url:
        values["base_url"] = base_url

    timeout = os.environ.get(ENV_TIMEOUT, "").strip()
    if timeout:
        try:
            values["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got: {timeout}") from exc

    verify = os.environ.get(ENV_VERIFY_SSL, "").strip().lower()
    if verify:
        if verify in _TRUTHY:
            values["verify_ssl"] = True
        elif verify in _FALSY:
            values["verify_ssl"] = False
        else:
            raise ConfigError(f"{ENV_VERIFY_SSL} must be a boolean, got: {verify}")

    return values


# --- Precedence resolution ---


def resolve_settings(
    cli_base_url: Optional[str] = None,
    cli_timeout: Optional[float] = None,
) -> ClientSettings:
    """Resolve connection settings with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_base_url``, ``cli_timeout``)
        2. Environment variables (``APIDOC_BASE_URL``, ``APIDOC_TIMEOUT``,
           ``APIDOC_VERIFY_SSL``)
        3. User config (``~/.config/apidoc-client/config.json``)
        4. Defaults

    Raises:
        ConfigError: If any layer supplies an invalid value.
    """
    merged: dict[str, Any] = {}
    merged.update(load_user_config())
    merged.update(_env_settings())
    if cli_base_url is not None:
        merged["base_url"] = cli_base_url
    if cli_timeout is not None:
        merged["timeout"] = cli_timeout

    try:
        return ClientSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
