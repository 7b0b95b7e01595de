"""Publishing an OpenAPI definition to SwaggerHub.

This module provides :func:`read_definition`, which loads the definition
file, and :class:`Publisher`, a thin wrapper around :class:`httpx.Client`
that builds and sends exactly one ``POST`` per publish.

The publisher never retries and never interprets the status code: a
registry answer of any status is returned as a
:class:`~swaggergo.models.PublishResult`. Only transport failures
(timeouts, DNS errors, refused connections) raise, as
:class:`~swaggergo.exceptions.ConnectivityError`.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Union

import httpx

from swaggergo.config import REQUEST_TIMEOUT, SWAGGERHUB_URL, split_api_identifier
from swaggergo.exceptions import ConnectivityError, DefinitionReadError
from swaggergo.models import PublishOptions, PublishRequest, PublishResult
from swaggergo.output import debug, info


def read_definition(path: Union[str, Path]) -> bytes:
    """Read the whole definition file into memory.

    The content is not decoded or validated; it is uploaded byte for byte.

    Args:
        path: Filesystem path of the definition.

    Returns:
        The raw file content.

    Raises:
        DefinitionReadError: If the file is missing, is a directory, or
            cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise DefinitionReadError(f"can't read the file {path}: {exc.strerror or exc}") from exc


class Publisher:
    """Synchronous SwaggerHub publisher.

    Must be used as a context manager so that the underlying transport is
    opened and closed around the single request.

    Args:
        base_url: Registry API base, without a trailing slash.
        timeout: Seconds allowed for the whole exchange, from connecting
            until the last byte of the response arrives.
        transport: Optional custom httpx transport, e.g.
            :class:`httpx.MockTransport` in tests.

    Example::

        with Publisher() as publisher:
            request = publisher.build_request(options, content)
            result = publisher.publish(request)
    """

    def __init__(
        self,
        base_url: str = SWAGGERHUB_URL,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Publisher:
        self._client = httpx.Client(
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
            follow_redirects=False,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def build_request(self, options: PublishOptions, content: bytes) -> PublishRequest:
        """Build the upload request for *content*.

        Args:
            options: Resolved publish options.
            content: Raw definition bytes, sent unchanged as the body.

        Returns:
            The request to send.

        Raises:
            ConfigError: If ``options.api`` is not of the form ``owner/name``.
        """
        owner, name = split_api_identifier(options.api)
        url = f"{self._base_url}/{owner}/{name}?oas={options.oas}"
        media_type = options.file_type.media_type
        headers = {
            "Authorization": options.access_token.get_secret_value(),
            "Accept": "application/json",
            "Content-Type": media_type,
        }
        return PublishRequest(
            url=url,
            media_type=media_type,
            headers=headers,
            content=content,
        )

    def publish(self, request: PublishRequest) -> PublishResult:
        """Send *request* once and return the registry's answer.

        Any HTTP status, including 4xx and 5xx, is returned as a result.
        The response is streamed so that the timeout bounds the whole
        exchange, not each read.

        Raises:
            ConnectivityError: If the request could not be sent or the full
                response did not arrive before the deadline.
        """
        assert self._client is not None, "Publisher not initialised -- use as context manager"

        info(f"POST {request.url}")

        deadline = time.monotonic() + self._timeout
        try:
            with self._client.stream(
                "POST",
                request.url,
                content=request.content,
                headers=request.headers,
            ) as response:
                chunks: list[bytes] = []
                self._check_deadline(deadline)
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    self._check_deadline(deadline)
        except httpx.TransportError as exc:
            raise ConnectivityError(
                f"problem connecting to swaggerhub: {str(exc) or type(exc).__name__}"
            ) from exc

        body = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
        debug(f"Response body: {body}")
        return PublishResult(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=body,
        )

    def _check_deadline(self, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise ConnectivityError(
                f"problem connecting to swaggerhub: no complete response within {self._timeout:g}s"
            )

    def preview(self, request: PublishRequest) -> None:
        """Print *request* to stderr without sending it.

        The ``Authorization`` value is masked.
        """
        info(f"[dry-run] POST {request.url}")
        for key, value in request.headers.items():
            if key == "Authorization":
                value = _mask(value)
            info(f"  Header: {key}: {value}")
        info(f"  Body: {len(request.content)} bytes")


def _mask(secret: str) -> str:
    """Keep the last four characters of *secret* visible."""
    if len(secret) <= 4:
        return "****"
    return "*" * (len(secret) - 4) + secret[-4:]
