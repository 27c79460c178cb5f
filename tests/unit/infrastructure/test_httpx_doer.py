"""
Unit tests for the httpx-backed HTTP doer.
"""

import ssl

import httpx
import pytest

from lifecycle_hooks.domain.ports import HTTPDoerError, HTTPResponseToHTTPSClientError
from lifecycle_hooks.domain.value_objects import HTTPRequest
from lifecycle_hooks.infrastructure.http import HttpxDoer, is_plaintext_reply_error


@pytest.mark.asyncio
async def test_returns_response_body_and_status():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["foo"] = request.headers.get_list("Foo")
        return httpx.Response(503, content=b"not ready")

    doer = HttpxDoer(transport=httpx.MockTransport(handler))
    try:
        response = await doer.do(
            HTTPRequest(method="GET", url="http://foo:8080/bar", headers=(("Foo", "a"), ("Foo", "b")))
        )
    finally:
        await doer.close()

    assert response.status_code == 503
    assert response.body == b"not ready"
    assert seen["url"] == "http://foo:8080/bar"
    assert seen["foo"] == ["a", "b"]


@pytest.mark.asyncio
async def test_connect_error_raises_doer_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    doer = HttpxDoer(transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(HTTPDoerError) as exc_info:
            await doer.do(HTTPRequest(method="GET", url="http://foo:8080/"))
    finally:
        await doer.close()

    assert "connection refused" in str(exc_info.value)
    assert not isinstance(exc_info.value, HTTPResponseToHTTPSClientError)


@pytest.mark.asyncio
async def test_plaintext_reply_to_tls_classified():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[SSL: WRONG_VERSION_NUMBER] wrong version number (_ssl.c:1006)", request=request)

    doer = HttpxDoer(transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(HTTPResponseToHTTPSClientError):
            await doer.do(HTTPRequest(method="GET", url="https://foo:8443/"))
    finally:
        await doer.close()


@pytest.mark.asyncio
async def test_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(302, headers={"Location": "http://foo:8080/new"})
        return httpx.Response(200, content=b"moved")

    doer = HttpxDoer(transport=httpx.MockTransport(handler))
    try:
        response = await doer.do(HTTPRequest(method="GET", url="http://foo:8080/old"))
    finally:
        await doer.close()

    assert response.body == b"moved"


def test_is_plaintext_reply_error_walks_chain():
    cause = ssl.SSLError(1, "[SSL: RECORD_LAYER_FAILURE] record layer failure")
    try:
        try:
            raise cause
        except ssl.SSLError as e:
            raise RuntimeError("handshake failed") from e
    except RuntimeError as wrapped:
        assert is_plaintext_reply_error(wrapped) is True


def test_is_plaintext_reply_error_other_failures():
    assert is_plaintext_reply_error(ConnectionRefusedError("refused")) is False
    assert is_plaintext_reply_error(ssl.SSLError(1, "[SSL: CERTIFICATE_VERIFY_FAILED] bad cert")) is False


def test_timeout_configuration():
    doer = HttpxDoer(connect_timeout=2.0, read_timeout=7.0)

    assert doer.timeout == httpx.Timeout(7.0, connect=2.0)
