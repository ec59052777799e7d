"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~apidoc_client.exceptions.ApidocError` subclass.
Note that an HTTP error response from the service is *not* a failure of the
client: it is printed and the process exits with 0.

Example::

    $ apidoc-client --token=T --orgkey=acme --appkey=svc
    Must specify one of create, delete, createversion
    $ echo $?
    1
"""

EXIT_GENERIC_FAILURE = 1
"""No action was selected, or an unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""A required flag is missing or a flag value (e.g. visibility) is invalid."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
