"""Tests for the dispatcher and the httpx transport adapter."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from adapters.http_client import HttpxTransport, build_async_client
from core.config import AppSettings
from core.domain.errors import TransportError
from core.domain.models import ResponseDescriptor
from core.services.dispatcher import dispatch, encode_json_body
from core.services.renderer import render
from core.services.request_builder import build_get, build_post


def _dispatch_with(handler, descriptor) -> ResponseDescriptor:
    async def go() -> ResponseDescriptor:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await dispatch(descriptor, HttpxTransport(client))

    return asyncio.run(go())


class _FakeTransport:
    """Duck-typed HttpTransport that records every call."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    async def send(self, method, url, *, headers=None, content=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "content": content})
        return ResponseDescriptor(http_version="HTTP/1.1", status_code=204, status_text="No Content")


class TestDispatchRequests:
    def test_get_sends_no_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"ok")

        response = _dispatch_with(handler, build_get("https://example.test/status/200"))

        assert response.status_code == 200
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert str(seen[0].url) == "https://example.test/status/200"
        assert seen[0].content == b""

    def test_post_sends_json_object_in_order(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        _dispatch_with(handler, build_post("https://example.test/echo", ["a=1", "b=two"]))

        request = seen[0]
        assert request.method == "POST"
        assert request.headers["content-type"] == "application/json"
        payload = json.loads(request.content)
        assert payload == {"a": "1", "b": "two"}
        assert list(payload) == ["a", "b"]

    def test_post_without_pairs_sends_empty_object(self):
        transport = _FakeTransport()
        asyncio.run(dispatch(build_post("https://example.test/echo"), transport))

        assert len(transport.calls) == 1
        assert transport.calls[0]["content"] == b"{}"
        assert transport.calls[0]["headers"] == {"Content-Type": "application/json"}

    def test_get_makes_exactly_one_call(self):
        transport = _FakeTransport()
        response = asyncio.run(dispatch(build_get("https://example.test/"), transport))

        assert response.status_code == 204
        assert transport.calls == [
            {"method": "GET", "url": "https://example.test/", "headers": None, "content": None}
        ]


class TestEncodeJsonBody:
    def test_duplicate_keys_overwrite_earlier_values(self):
        descriptor = build_post("https://example.test/", ["a=1", "b=2", "a=3"])
        payload = json.loads(encode_json_body(descriptor.body))
        assert payload == {"a": "3", "b": "2"}
        assert list(payload) == ["a", "b"]

    def test_non_ascii_is_utf8(self):
        descriptor = build_post("https://example.test/", ["name=José"])
        assert encode_json_body(descriptor.body) == '{"name": "José"}'.encode("utf-8")


class TestResponseConversion:
    def test_error_status_is_a_response(self, highlighter):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "missing"})

        response = _dispatch_with(handler, build_get("https://example.test/status/404"))

        assert response.status_code == 404
        assert response.status_text == "Not Found"
        assert response.http_version == "HTTP/1.1"

        render(response, highlighter)
        assert [language for _, language in highlighter.calls] == ["json"]

    def test_headers_keep_order_case_and_duplicates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers=[
                    ("X-Trace-Id", "t-1"),
                    ("Set-Cookie", "a=1"),
                    ("Set-Cookie", "b=2"),
                ],
            )

        response = _dispatch_with(handler, build_get("https://example.test/"))

        names = [name for name, _ in response.headers]
        assert names[:3] == ["X-Trace-Id", "Set-Cookie", "Set-Cookie"]
        assert response.headers[1:3] == (("Set-Cookie", "a=1"), ("Set-Cookie", "b=2"))
        assert response.header("set-cookie") == "a=1"

    def test_charset_is_carried_to_the_descriptor(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Type": "text/plain; charset=latin-1"},
                content="café".encode("latin-1"),
            )

        response = _dispatch_with(handler, build_get("https://example.test/"))

        assert response.encoding == "latin-1"
        assert response.body_text() == "café"


class TestTransportErrors:
    def test_connect_error_is_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as excinfo:
            _dispatch_with(handler, build_get("https://example.test/"))

        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
        assert "connection refused" in str(excinfo.value)

    def test_timeout_is_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError):
            _dispatch_with(handler, build_post("https://example.test/", ["a=1"]))


class TestBuildAsyncClient:
    def test_applies_settings(self):
        settings = AppSettings(
            http_timeout_seconds=5.0,
            follow_redirects=False,
            max_redirects=3,
            user_agent="test-agent/1",
        )

        async def go():
            async with build_async_client(settings) as client:
                return client.timeout, client.follow_redirects, client.max_redirects, client.headers

        timeout, follow, max_redirects, headers = asyncio.run(go())
        assert timeout.read == 5.0
        assert timeout.connect == 5.0
        assert follow is False
        assert max_redirects == 3
        assert headers["user-agent"] == "test-agent/1"
