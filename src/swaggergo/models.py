"""Pydantic models shared across swaggergo.

Three shapes flow through a single invocation:

* :class:`PublishOptions` -- the resolved configuration, built once by
  :func:`~swaggergo.config.resolve_options` and frozen afterwards.
* :class:`PublishRequest` -- the outbound HTTP request derived from the
  options and the definition bytes.
* :class:`PublishResult` -- what the registry answered.

All three are frozen so nothing downstream can alter them after they are
built.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class FileType(str, enum.Enum):
    """Serialisation format of the definition file."""

    YML = "yml"
    JSON = "json"

    @property
    def media_type(self) -> str:
        """The ``Content-Type`` sent with a definition of this format."""
        if self is FileType.JSON:
            return "application/json"
        return "application/yaml"


class PublishOptions(BaseModel):
    """Fully resolved options for one publish.

    Example::

        PublishOptions(
            access_token="tkn123",
            api="acme/widgets",
            file_type=FileType.YML,
            oas="3.0.0",
        )
    """

    model_config = ConfigDict(frozen=True)

    access_token: SecretStr = Field(description="SwaggerHub API key, sent verbatim")
    api: str = Field(description="API identifier in the form owner/name")
    file_type: FileType = FileType.YML
    oas: str = Field(default="3.0.0", description="OpenAPI version query parameter")


class PublishRequest(BaseModel):
    """A fully built outbound request. Never persisted."""

    model_config = ConfigDict(frozen=True)

    url: str
    media_type: str
    headers: dict[str, str] = Field(default_factory=dict, repr=False)
    content: bytes = Field(default=b"", repr=False)


class PublishResult(BaseModel):
    """The registry's answer to a publish request."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str = ""
    body: str = ""

    @property
    def status_line(self) -> str:
        """Status code and reason phrase, e.g. ``201 Created``."""
        return f"{self.status_code} {self.reason}".rstrip()

    @property
    def ok(self) -> bool:
        """Whether the registry accepted the definition (2xx)."""
        return 200 <= self.status_code < 300
