"""Exception hierarchy for swaggergo.

All exceptions inherit from :class:`SwaggerGoError`, which carries an
``exit_code`` attribute taken from :mod:`swaggergo.exit_codes`. The
top-level handler in :func:`swaggergo.app.main` catches ``SwaggerGoError``,
prints the message, and exits with that code. None of these errors are
retried.

Subclass hierarchy::

    SwaggerGoError (exit 1)
    +-- UsageError           (exit 1)
    +-- ConfigError          (exit 1)
    +-- DefinitionReadError  (exit 1)
    +-- ConnectivityError    (exit 1)

An HTTP response with a 4xx or 5xx status is *not* an error: it is the
result of the publish and is reported as such.
"""

from swaggergo.exit_codes import EXIT_FAILURE


class SwaggerGoError(Exception):
    """Base exception for all swaggergo errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UsageError(SwaggerGoError):
    """Raised for missing or misplaced command-line arguments."""


class ConfigError(SwaggerGoError):
    """Raised when a required option is missing or an option value is malformed."""


class DefinitionReadError(SwaggerGoError):
    """Raised when the OpenAPI definition file cannot be read."""


class ConnectivityError(SwaggerGoError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""
