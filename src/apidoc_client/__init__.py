"""apidoc_client -- command-line client for the apidoc documentation service.

This package maps a single CLI invocation onto one HTTP request against
``http://api.apidoc.me/`` and prints the raw response. Three operations are
supported: creating an application, deleting an application with all of its
versions, and creating or replacing one version of an application.

Typical usage::

    apidoc-client --create --token=T --orgkey=acme --appkey=acmeservice \\
        --appname="Acme Service" --description="..." --visibility=organization
    apidoc-client --createversion --token=T --orgkey=acme --appkey=acmeservice \\
        --version=0.0.1 --visibility=organization < service.json
    apidoc-client --delete --token=T --orgkey=acme --appkey=acmeservice

Modules:
    app: Typer command and console-script entry point.
    models: Pydantic models for request bodies, responses, and settings.
    auth: Token encoding into an HTTP Basic ``Authorization`` header.
    client: httpx wrapper and the three service operations.
    config: XDG-aware settings resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stdout/stderr output discipline with Rich support.
"""

__version__ = "0.1.0"
