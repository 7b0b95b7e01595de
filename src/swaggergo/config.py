"""Option resolution with flag, environment, and default precedence.

Every publish option is described by one row of :data:`OPTION_SOURCES`,
which names the CLI flag, the environment variable (if any), the built-in
default (if any), and whether the option is required. :func:`resolve_options`
walks that table and builds a frozen :class:`~swaggergo.models.PublishOptions`.

Precedence (high to low):
    1. CLI flag (``--access-token``, ``--api``, ``--type``, ``--oas``)
    2. Environment variable (``SWAGGERHUB_ACCESS_TOKEN``, ``SWAGGERHUB_API``)
    3. Built-in default

An empty string is treated as "not set" at every level.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from swaggergo.exceptions import ConfigError
from swaggergo.models import FileType, PublishOptions

SWAGGERHUB_URL = "https://api.swaggerhub.com/apis"
"""Base URL of the SwaggerHub registry API."""

REQUEST_TIMEOUT = 10.0
"""Seconds allowed for connecting to and hearing back from the registry."""


@dataclass(frozen=True)
class OptionSource:
    """Where one :class:`~swaggergo.models.PublishOptions` field comes from.

    Attributes:
        field: Name of the ``PublishOptions`` field.
        flag: Long CLI flag, without the ``--`` prefix.
        env: Environment variable consulted when the flag is unset.
        default: Value used when neither flag nor environment supply one.
        required: Whether resolution fails when no value is found.
    """

    field: str
    flag: str
    env: Optional[str] = None
    default: Optional[str] = None
    required: bool = False


OPTION_SOURCES: tuple[OptionSource, ...] = (
    OptionSource(
        field="access_token",
        flag="access-token",
        env="SWAGGERHUB_ACCESS_TOKEN",
        required=True,
    ),
    OptionSource(field="api", flag="api", env="SWAGGERHUB_API", required=True),
    OptionSource(field="file_type", flag="type", default=FileType.YML.value),
    OptionSource(field="oas", flag="oas", default="3.0.0"),
)


def _missing_message(source: OptionSource) -> str:
    message = f"missing --{source.flag}"
    if source.env:
        message += f" (or set {source.env})"
    return message


def resolve_value(
    source: OptionSource,
    flag_values: Mapping[str, Optional[str]],
    environ: Mapping[str, str],
) -> str:
    """Resolve a single option through the precedence chain.

    Args:
        source: The table row describing the option.
        flag_values: Parsed CLI values keyed by field name. Missing keys and
            ``None`` both mean the flag was not given.
        environ: Environment mapping to consult.

    Returns:
        The resolved value, possibly an empty string for optional fields
        without a default.

    Raises:
        ConfigError: If the option is required and no source supplies it.
    """
    value = flag_values.get(source.field) or ""
    if not value and source.env:
        value = environ.get(source.env, "")
    if not value and source.default is not None:
        value = source.default
    if source.required and not value:
        raise ConfigError(_missing_message(source))
    return value


def split_api_identifier(api: str) -> tuple[str, str]:
    """Split an ``owner/name`` identifier into its two segments.

    Args:
        api: The API identifier, e.g. ``acme/widgets``.

    Returns:
        A ``(owner, name)`` tuple.

    Raises:
        ConfigError: Unless *api* has exactly one ``/`` with text on both
            sides.
    """
    parts = api.split("/")
    if len(parts) != 2 or not all(parts):
        raise ConfigError(
            f"api is in the wrong format, expected <owner>/<name> but got '{api}'"
        )
    return parts[0], parts[1]


def _parse_file_type(value: str) -> FileType:
    try:
        return FileType(value)
    except ValueError as exc:
        choices = ", ".join(ft.value for ft in FileType)
        raise ConfigError(
            f"invalid --type '{value}', expected one of: {choices}"
        ) from exc


def resolve_options(
    flag_values: Mapping[str, Optional[str]],
    environ: Optional[Mapping[str, str]] = None,
) -> PublishOptions:
    """Merge CLI flags, environment variables, and defaults into options.

    Rows of :data:`OPTION_SOURCES` are resolved in order, so the first
    missing required option is the one reported.

    Args:
        flag_values: Parsed CLI values keyed by ``PublishOptions`` field name.
        environ: Environment mapping. Defaults to :data:`os.environ`.

    Returns:
        A frozen :class:`~swaggergo.models.PublishOptions`.

    Raises:
        ConfigError: If a required option is missing, ``--type`` is not a
            known format, or ``--api`` is not of the form ``owner/name``.
    """
    if environ is None:
        environ = os.environ

    values = {
        source.field: resolve_value(source, flag_values, environ)
        for source in OPTION_SOURCES
    }

    split_api_identifier(values["api"])

    return PublishOptions(
        access_token=values["access_token"],
        api=values["api"],
        file_type=_parse_file_type(values["file_type"]),
        oas=values["oas"],
    )
