"""Typer command and CLI entry point for apidoc_client.

The CLI is a single flat command: one of ``--create``, ``--delete`` or
``--createversion`` selects the operation, the remaining flags supply its
arguments, and the service's answer is printed to stdout as
``httpresponsecode=<n>reason=<text>message=<body>``.

Dispatch order matters and is fixed:

1. ``--help`` prints a one-line options summary and processing continues.
2. Flags required by the selected actions must be present. ``--help``
   skips this up-front check.
3. ``--delete`` runs immediately, regardless of any other action flag and
   without looking at ``--visibility``.
4. Without any action flag the usage line is printed to stdout and the
   command exits with code 1.
5. ``--visibility`` is validated (an invalid value prints its usage line to
   stdout), then ``--create`` or ``--createversion`` runs. The version
   document is read from stdin.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and writes a crash log
for unexpected exceptions.
"""

from __future__ import annotations

import re
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional, TextIO

import typer

from apidoc_client import __version__
from apidoc_client.client import ApidocClient
from apidoc_client.config import resolve_settings
from apidoc_client.exceptions import (
    ApidocError,
    InvalidUsageError,
    InvalidVisibilityError,
    MissingActionError,
)
from apidoc_client.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED
from apidoc_client.models import ApiResponse, Visibility
from apidoc_client.output import (
    OutputFormat,
    OutputManager,
    debug,
    error,
    print_data,
    print_result,
    set_output,
)

OPTIONS_SUMMARY = (
    "Options: create delete createversion token orgkey appkey appname "
    "description visibility version"
)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


app = typer.Typer(
    name="apidoc-client",
    help="Create, delete and version applications on apidoc.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --client-version is passed."""
    if value:
        typer.echo(f"apidoc-client {__version__}")
        raise typer.Exit()


def read_document(stream: TextIO) -> str:
    """Read all of *stream* and join its lines with no separator.

    Line terminators (``\\n``, ``\\r\\n``, ``\\r``) are dropped, so a
    pretty-printed JSON document arrives as a single line.
    """
    return _LINE_BREAK.sub("", stream.read())


def _stdin() -> TextIO:
    """Return stdin decoded as UTF-8, with malformed bytes replaced."""
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors="replace")
    return sys.stdin


def _require(values: dict[str, Optional[str]], reason: str = "") -> None:
    """Raise :class:`InvalidUsageError` for the first missing flag in *values*."""
    for flag, value in values.items():
        if value is None:
            suffix = f" (required with {reason})" if reason else ""
            raise InvalidUsageError(f"Missing option '--{flag}'{suffix}")


def dispatch(
    client: ApidocClient,
    *,
    create: bool,
    delete: bool,
    createversion: bool,
    token: Optional[str],
    orgkey: Optional[str],
    appkey: Optional[str],
    appname: Optional[str],
    description: Optional[str],
    visibility: Optional[str],
    version: Optional[str],
    stdin: TextIO,
    show_help: bool = False,
) -> ApiResponse:
    """Validate the flag combination and run exactly one operation.

    With *show_help* the up-front presence checks are skipped, so ``--help``
    on its own ends in :class:`MissingActionError`. Flags an action actually
    needs are still checked before its request is built.

    Raises:
        InvalidUsageError: A flag required by the selected action is missing.
        MissingActionError: No action flag was given.
        InvalidVisibilityError: ``visibility`` is not a known value.
        ConnectionError_: The request could not be sent.
    """
    base = {"token": token, "orgkey": orgkey, "appkey": appkey}
    for_create = {"appname": appname, "description": description, "visibility": visibility}
    for_version = {"visibility": visibility, "version": version}

    if not show_help:
        _require(base)
        if create:
            _require(for_create, "--create")
        if createversion:
            _require(for_version, "--createversion")

    if delete:
        _require(base)
        assert token is not None and orgkey is not None and appkey is not None
        debug(f"Deleting {orgkey}/{appkey}")
        return client.delete_app(token, orgkey, appkey)

    if not (create or createversion):
        raise MissingActionError("Must specify one of create, delete, createversion")

    _require(base)
    if create:
        _require(for_create, "--create")
    else:
        _require(for_version, "--createversion")

    assert token is not None and orgkey is not None and appkey is not None
    assert visibility is not None
    vis = Visibility.parse(visibility)

    if create:
        assert appname is not None and description is not None
        debug(f"Creating application {orgkey}/{appkey} ({vis})")
        return client.create_app(token, orgkey, appname, appkey, description, vis)

    assert version is not None
    document = read_document(stdin)
    debug(f"Uploading {len(document)} characters as {orgkey}/{appkey}/{version} ({vis})")
    return client.create_app_version(token, orgkey, appkey, version, document, vis)


@app.command(context_settings={"help_option_names": []})
def run(
    create: bool = typer.Option(False, "--create", help="Create an application."),
    delete: bool = typer.Option(
        False, "--delete", help="Delete an application and all its versions."
    ),
    createversion: bool = typer.Option(
        False, "--createversion", help="Create or replace a version, read from stdin."
    ),
    token: Optional[str] = typer.Option(
        None, "--token", envvar="APIDOC_TOKEN", help="API token."
    ),
    orgkey: Optional[str] = typer.Option(None, "--orgkey", help="Organization key."),
    appkey: Optional[str] = typer.Option(None, "--appkey", help="Application key."),
    appname: Optional[str] = typer.Option(
        None, "--appname", help="Application display name (--create)."
    ),
    description: Optional[str] = typer.Option(
        None, "--description", help="Application description (--create)."
    ),
    visibility: Optional[str] = typer.Option(
        None, "--visibility", help="public, user or organization."
    ),
    version: Optional[str] = typer.Option(
        None, "--version", help="Version to upload (--createversion)."
    ),
    show_help: bool = typer.Option(
        False, "--help", "-h", help="Print the options summary."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Service base URL (overrides APIDOC_BASE_URL)."
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Request timeout in seconds (overrides APIDOC_TIMEOUT)."
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Preview the request without sending it."
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
    client_version: bool = typer.Option(
        False,
        "--client-version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Run one apidoc operation and print the service's response."""
    set_output(
        OutputManager(
            format=OutputFormat.JSON if json_output else OutputFormat.TEXT,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )

    if show_help:
        print_data(OPTIONS_SUMMARY)

    try:
        client = ApidocClient(resolve_settings(base_url, timeout), dry_run=dry_run)
        response = dispatch(
            client,
            create=create,
            delete=delete,
            createversion=createversion,
            token=token,
            orgkey=orgkey,
            appkey=appkey,
            appname=appname,
            description=description,
            visibility=visibility,
            version=version,
            stdin=_stdin(),
            show_help=show_help,
        )
    except (MissingActionError, InvalidVisibilityError) as exc:
        print_data(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except ApidocError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    print_result(response)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    from apidoc_client.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``apidoc-client`` console script.

    Expected failures (:class:`~apidoc_client.exceptions.ApidocError`) are
    reported by the command itself. Anything else produces a crash log and
    a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        log_path = _write_crash_log(exc)
        error(f"Unexpected error: {exc}. Debug log: {log_path}")
        sys.exit(EXIT_GENERIC_FAILURE)


if __name__ == "__main__":
    main()
