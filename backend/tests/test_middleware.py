import asyncio
import json

import pytest

from api.middleware import BodySizeLimitMiddleware


def _run(headers, chunks=(b"",), max_body_bytes=100):
    """Drives the middleware with a raw ASGI request and returns (status, body, app_called)."""
    messages = [{"type": "http.request", "body": c, "more_body": i < len(chunks) - 1} for i, c in enumerate(chunks)]
    sent = []
    calls = []

    async def app(scope, receive, send):
        calls.append(scope["path"])
        while (await receive()).get("more_body"):
            pass
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"ok"})

    async def receive():
        return messages.pop(0)

    async def send(message):
        sent.append(message)

    scope = {"type": "http", "method": "POST", "path": "/api/summarize", "headers": headers}
    asyncio.run(BodySizeLimitMiddleware(app, max_body_bytes=max_body_bytes)(scope, receive, send))

    status = sent[0]["status"]
    body = b"".join(m.get("body", b"") for m in sent[1:])
    return status, body, bool(calls)


def test_declared_length_within_limit_passes_through():
    status, body, app_called = _run([(b"content-length", b"5")], chunks=(b"hello",))
    assert (status, body, app_called) == (200, b"ok", True)


def test_declared_length_over_limit():
    status, body, app_called = _run([(b"content-length", b"101")])
    assert status == 413
    assert json.loads(body) == {"error": "Request body too large"}
    assert not app_called


@pytest.mark.parametrize("value", ["²".encode("latin-1"), b"12a", b"-1", b""])
def test_non_ascii_or_non_numeric_length_is_a_client_error(value):
    status, body, app_called = _run([(b"content-length", value)])
    assert status == 400
    assert json.loads(body) == {"error": "Invalid Content-Length header"}
    assert not app_called


def test_other_scopes_are_untouched():
    seen = []

    async def app(scope, receive, send):
        seen.append(scope["type"])

    asyncio.run(BodySizeLimitMiddleware(app, max_body_bytes=1)({"type": "lifespan"}, None, None))
    assert seen == ["lifespan"]
