"""Tests for roost.http.response — Response chaining and FileResponse."""

import pytest

from roost.http.response import HTML, FileResponse, Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == HTML
        assert r.headers == ()

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_header_lookup_is_case_insensitive(self) -> None:
        r = Response().with_header("Cache-Control", "no-cache")
        assert r.header("cache-control") == "no-cache"
        assert r.header("x-missing") is None

    def test_body_conversions(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()
        assert Response(b"bytes").text == "bytes"

    def test_immutable(self) -> None:
        r = Response()
        with pytest.raises(AttributeError):
            r.status = 500  # type: ignore[misc]


class TestFileResponse:
    def test_with_header_returns_copy(self) -> None:
        original = FileResponse(file=None, size=3)
        updated = original.with_header("Cache-Control", "public")
        assert original.headers == ()
        assert updated.headers == (("Cache-Control", "public"),)
