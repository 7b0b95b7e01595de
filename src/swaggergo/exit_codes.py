"""Numeric process exit codes.

CI pipelines only need to tell success from failure, so every error
category shares :data:`EXIT_FAILURE`. A registry response with a non-2xx
status is still a completed publish and exits with :data:`EXIT_SUCCESS`.

Example::

    $ swaggergo openapi.yml --api acme
    Error: api is in the wrong format, expected <owner>/<name> but got 'acme'
    $ echo $?
    1
"""

EXIT_SUCCESS = 0
"""The definition was sent and the registry answered (with any status)."""

EXIT_FAILURE = 1
"""Invalid usage, bad configuration, unreadable file, or no connection."""

EXIT_INTERRUPTED = 130
"""The process received SIGINT (Ctrl-C)."""
