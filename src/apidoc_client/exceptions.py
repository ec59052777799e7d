"""Exception hierarchy for apidoc_client.

All exceptions inherit from :class:`ApidocError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`apidoc_client.exit_codes`. The CLI command catches ``ApidocError``,
prints the message to stderr and exits with the matching code.

HTTP responses are never turned into exceptions; only argument problems,
configuration problems, and transport failures are.

Subclass hierarchy::

    ApidocError (exit 1)
    +-- InvalidUsageError       (exit 2)
    |   +-- InvalidVisibilityError (exit 2)
    +-- MissingActionError      (exit 1)
    +-- ConnectionError_        (exit 6)
    +-- ConfigError             (exit 1)
"""

from apidoc_client.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class ApidocError(Exception):
    """Base exception for all apidoc_client errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ApidocError):
    """Raised when a required flag is missing for the selected action."""

    exit_code = EXIT_INVALID_USAGE


class InvalidVisibilityError(InvalidUsageError):
    """Raised when ``--visibility`` is not one of public, user, organization."""


class MissingActionError(ApidocError):
    """Raised when none of ``--create``, ``--delete``, ``--createversion`` is given."""

    exit_code = EXIT_GENERIC_FAILURE


class ConnectionError_(ApidocError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(ApidocError):
    """Raised for configuration problems (invalid JSON, bad values)."""

    exit_code = EXIT_GENERIC_FAILURE
