"""Pydantic models shared across apidoc_client.

This is the single source of truth for data shapes in the project. The
models fall into three groups:

**Request bodies** -- serialised as JSON and sent to the service:
    :class:`ApplicationForm` and :class:`VersionForm`, both carrying a
    :class:`Visibility`.

**Results** -- :class:`ApiResponse`, the uninterpreted status, reason and
    body of one HTTP exchange.

**Settings** -- :class:`ClientSettings`, produced by
    :func:`~apidoc_client.config.resolve_settings`.

All models are frozen: every value is built fresh for a single call and
never mutated afterwards.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from apidoc_client.exceptions import InvalidVisibilityError

DEFAULT_BASE_URL = "http://api.apidoc.me/"
DEFAULT_TIMEOUT = 30.0


# --- Visibility ---


class Visibility(str, enum.Enum):
    """Who may see an application or version on the service.

    Serialised as its lowercase value in outgoing JSON. Use :meth:`parse`
    to convert user input; it is the only place where case is folded.
    """

    PUBLIC = "public"
    USER = "user"
    ORGANIZATION = "organization"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Visibility:
        """Convert *text* to a member, ignoring case.

        Raises:
            InvalidVisibilityError: If *text* names no member.
        """
        try:
            return cls(text.lower())
        except ValueError:
            raise InvalidVisibilityError(
                "visibility must be one of organization, public, user"
            ) from None


# --- Request bodies ---


class ApplicationForm(BaseModel):
    """Body of ``POST /{orgKey}``: describes a new application.

    ``key`` becomes a URL path segment on the service, so it must be
    URL-safe; the client does not check this.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    key: str
    description: str
    visibility: Visibility


class VersionForm(BaseModel):
    """Body of ``PUT /{orgKey}/{appKey}/{version}``.

    The documentation payload is sent verbatim as a string under
    ``original_form.data``; the service parses it.
    """

    model_config = ConfigDict(frozen=True)

    original_form: dict[str, str]
    visibility: Visibility

    @classmethod
    def for_document(cls, document: str, visibility: Visibility) -> VersionForm:
        """Wrap a raw documentation *document* for upload."""
        return cls(original_form={"data": document}, visibility=visibility)


# --- Results ---


class ApiResponse(BaseModel):
    """Status, reason phrase and body text returned by the service.

    No interpretation is applied: a 409 or 500 is a perfectly normal
    ``ApiResponse``. JSON output uses the field names ``httpresponsecode``,
    ``reason`` and ``message``.

    Example::

        >>> str(ApiResponse(status_code=204, reason="No Content", message=""))
        'httpresponsecode=204reason=No Contentmessage='
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="httpresponsecode")
    reason: str = ""
    message: str = ""

    def __str__(self) -> str:
        return f"httpresponsecode={self.status_code}reason={self.reason}message={self.message}"


# --- Settings ---


class ClientSettings(BaseModel):
    """Connection settings for the service, resolved once per invocation.

    See Also:
        :func:`~apidoc_client.config.resolve_settings` for the precedence
        chain that builds this model.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Service base URL")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
