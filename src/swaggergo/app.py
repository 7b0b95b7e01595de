"""Typer application factory and CLI entry point for swaggergo.

:func:`create_app` builds the single-command Typer application for a given
program name and version. :func:`main` is the console-script entry point
declared in ``pyproject.toml``: it applies the invocation rules that Typer
cannot express (``--version`` must come first, the definition path must be
the first argument unless ``--file`` is used), runs the app, and maps every
error to a one-line message and an exit code.

See Also:
    :mod:`swaggergo.config`: Option resolution.
    :mod:`swaggergo.publisher`: The HTTP call.
"""

from __future__ import annotations

import signal
import sys
from typing import Any, Optional

import click
import typer

from swaggergo import PROGRAM_NAME, __version__
from swaggergo.config import OPTION_SOURCES, resolve_options
from swaggergo.exceptions import SwaggerGoError, UsageError
from swaggergo.exit_codes import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS
from swaggergo.output import (
    OutputManager,
    debug,
    error,
    print_data,
    set_output,
    success,
    suggest,
    warning,
)
from swaggergo.publisher import Publisher, read_definition

FLAG_PREFIX = "-"

_USAGE = """\
{name} is a utility for publishing OpenAPI definitions to SwaggerHub.

Usage:

  $ {name} path/to/openapi.yml --type yml --oas 3.0.0 --api owner/sample-api --access-token TOKEN

Environment variables can also be used:

  $ export SWAGGERHUB_ACCESS_TOKEN="..."

  $ export SWAGGERHUB_API="..."

  $ {name} --file path/to/openapi.yml --type json

Version:

  $ {name} --version
"""


def _env_help(field: str) -> str:
    """Describe the environment variable backing *field*, if any."""
    for source in OPTION_SOURCES:
        if source.field == field and source.env:
            return f" Falls back to {source.env}."
    return ""


def resolve_definition_path(positional: Optional[str], file_option: Optional[str]) -> str:
    """Pick the definition path from the positional argument or ``--file``.

    Raises:
        UsageError: If neither or both are given.
    """
    if positional and file_option:
        raise UsageError("give the definition file either as the first argument or with --file, not both")
    path = positional or file_option
    if not path:
        raise UsageError("missing definition file")
    return path


def check_invocation(args: list[str], name: str, version: str) -> None:
    """Apply the positional rules on the raw argument list.

    Prints the version and exits when ``--version`` is the first argument.

    Raises:
        UsageError: If there are no arguments, or the first argument is a
            flag (long or short) and ``--file`` is not given anywhere.
    """
    if not args:
        raise UsageError("invalid usage")

    first = args[0]
    if first == "--version":
        print_data(f"{name} version {version}")
        sys.exit(EXIT_SUCCESS)

    if first.startswith(FLAG_PREFIX) and first != "--help":
        has_file_flag = any(a == "--file" or a.startswith("--file=") for a in args)
        if not has_file_flag:
            raise UsageError(
                "invalid usage, the definition file must be the first argument or given with --file"
            )


def create_app(name: str, version: str) -> typer.Typer:
    """Build the Typer application.

    Args:
        name: Program name shown in usage and version text.
        version: Program version shown by ``--version``.

    Returns:
        A single-command :class:`typer.Typer` application.
    """
    app = typer.Typer(
        name=name,
        add_completion=False,
        rich_markup_mode="rich",
    )

    @app.command(
        help=_USAGE.format(name=name),
        epilog=f"{name} {version}",
    )
    def publish(
        file: Optional[str] = typer.Argument(
            None, metavar="FILE", help="OpenAPI definition to publish.", show_default=False
        ),
        file_option: Optional[str] = typer.Option(
            None, "--file", help="OpenAPI definition to publish (instead of FILE)."
        ),
        api: Optional[str] = typer.Option(
            None, "--api", help=f"API identifier as owner/name.{_env_help('api')}"
        ),
        access_token: Optional[str] = typer.Option(
            None,
            "--access-token",
            help=f"SwaggerHub API key.{_env_help('access_token')}",
        ),
        file_type: Optional[str] = typer.Option(
            None, "--type", help="Definition format: yml or json. Defaults to yml."
        ),
        oas: Optional[str] = typer.Option(
            None, "--oas", help="OpenAPI version of the definition. Defaults to 3.0.0."
        ),
        dry_run: bool = typer.Option(
            False, "--dry-run", "-n", help="Show the request without sending it."
        ),
        quiet: bool = typer.Option(
            False, "--quiet", "-q", help="Suppress non-essential output."
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Show the response body."
        ),
        no_color: bool = typer.Option(
            False, "--no-color", help="Disable color output."
        ),
    ) -> None:
        set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))
        path = resolve_definition_path(file, file_option)
        options = resolve_options(
            {
                "access_token": access_token,
                "api": api,
                "file_type": file_type,
                "oas": oas,
            }
        )
        content = read_definition(path)
        debug(f"Publishing {path} to {options.api} (oas {options.oas})")

        publisher = Publisher()
        request = publisher.build_request(options, content)
        if dry_run:
            publisher.preview(request)
            return

        with publisher:
            result = publisher.publish(request)

        message = f"Published with response: {result.status_line}"
        if result.ok:
            success(message)
        else:
            warning(message)

    return app


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point invoked by the ``swaggergo`` console script.

    Args:
        argv: Arguments after the program name. Defaults to ``sys.argv[1:]``.

    Raises:
        SystemExit: Always raised, with ``0`` on success and ``1`` on any
            usage, configuration, read, or connectivity error.
    """
    _setup_signal_handlers()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        check_invocation(args, PROGRAM_NAME, __version__)
        app = create_app(PROGRAM_NAME, __version__)
        rv = app(args=args, prog_name=PROGRAM_NAME, standalone_mode=False)
    except SystemExit:
        raise
    except (KeyboardInterrupt, click.exceptions.Abort):
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except click.exceptions.ClickException as exc:
        # Unknown flags, missing option values.
        exc.show()
        sys.exit(EXIT_FAILURE)
    except SwaggerGoError as exc:
        error(str(exc))
        if isinstance(exc, UsageError):
            suggest(f"See '{PROGRAM_NAME} --help'")
        sys.exit(exc.exit_code)
    except Exception as exc:
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_FAILURE)

    # ``--help`` returns its exit code instead of raising in non-standalone mode.
    sys.exit(rv if isinstance(rv, int) else EXIT_SUCCESS)
