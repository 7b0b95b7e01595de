"""Tests for the publish models."""

from __future__ import annotations

import pytest

from swaggergo.models import FileType, PublishOptions, PublishRequest, PublishResult


class TestFileType:
    def test_media_types(self) -> None:
        assert FileType.YML.media_type == "application/yaml"
        assert FileType.JSON.media_type == "application/json"

    def test_from_string(self) -> None:
        assert FileType("json") is FileType.JSON
        with pytest.raises(ValueError):
            FileType("yaml")


class TestPublishOptions:
    def test_defaults(self) -> None:
        options = PublishOptions(access_token="t", api="a/b")
        assert options.file_type is FileType.YML
        assert options.oas == "3.0.0"


class TestPublishRequest:
    def test_repr_hides_headers_and_body(self) -> None:
        request = PublishRequest(
            url="https://example.com/apis/a/b?oas=3.0.0",
            media_type="application/yaml",
            headers={"Authorization": "secret-token"},
            content=b"openapi: 3.0.0\n",
        )
        assert "secret-token" not in repr(request)
        assert "openapi" not in repr(request)


class TestPublishResult:
    def test_status_line(self) -> None:
        assert PublishResult(status_code=201, reason="Created").status_line == "201 Created"

    def test_status_line_without_reason(self) -> None:
        assert PublishResult(status_code=299).status_line == "299"

    @pytest.mark.parametrize(
        ("status", "ok"),
        [(200, True), (201, True), (301, False), (400, False), (409, False), (503, False)],
    )
    def test_ok(self, status: int, ok: bool) -> None:
        assert PublishResult(status_code=status).ok is ok
