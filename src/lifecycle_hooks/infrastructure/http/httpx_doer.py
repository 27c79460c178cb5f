"""
HTTP doer backed by httpx.

Implements IHTTPDoerPort for HTTPGet lifecycle hooks. Every response is
returned as-is; only failures to obtain one are raised, as HTTPDoerError.
"""

import ssl
from typing import Optional

import httpx

from lifecycle_hooks.domain.ports import (
    HTTPDoerError,
    HTTPResponseToHTTPSClientError,
    IHTTPDoerPort,
)
from lifecycle_hooks.domain.value_objects import HTTPRequest, HTTPResponse
from lifecycle_hooks.infrastructure.logging import get_logger


logger = get_logger(__name__)

# OpenSSL reasons reported when a TLS client reads a plaintext HTTP reply.
_PLAINTEXT_REPLY_MARKERS = (
    "WRONG_VERSION_NUMBER",
    "RECORD_LAYER_FAILURE",
    "PACKET_LENGTH_TOO_LONG",
)


def is_plaintext_reply_error(exc: BaseException) -> bool:
    """
    Check whether a TLS failure was caused by the server speaking plain HTTP.

    Walks the exception chain looking for an ssl.SSLError (or its rendered
    text, as wrapped by httpcore) carrying one of the known reasons.
    """
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, ssl.SSLError) and getattr(current, "reason", None) in _PLAINTEXT_REPLY_MARKERS:
            return True
        text = str(current).upper().replace(" ", "_")
        if any(marker in text for marker in _PLAINTEXT_REPLY_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


class HttpxDoer(IHTTPDoerPort):
    """
    Async HTTP doer for lifecycle hooks.

    Features:
    - Redirects are followed
    - Certificates are not verified unless configured
    - Proxy environment variables are ignored, hooks target pods directly
    - Plaintext replies to TLS handshakes are reported distinctly
    """

    def __init__(
        self,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        verify: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize HTTP doer.

        Args:
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds
            verify: Whether to verify server certificates
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self.verify = verify
        self._transport = transport

        # Lazy-initialized async client
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                verify=self.verify,
                follow_redirects=True,
                trust_env=False,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """
        Close the HTTP client.

        Implementation of IHTTPDoerPort.close().
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    async def do(self, request: HTTPRequest) -> HTTPResponse:
        """
        Perform one HTTP request.

        Implementation of IHTTPDoerPort.do().

        Raises:
            HTTPResponseToHTTPSClientError: If a TLS server replied in plaintext
            HTTPDoerError: For any other transport failure
        """
        client = self._get_client()

        logger.debug("Sending lifecycle hook request", method=request.method, url=request.url)

        try:
            response = await client.request(
                request.method,
                request.url,
                headers=list(request.headers),
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            if request.url.startswith("https://") and is_plaintext_reply_error(e):
                raise HTTPResponseToHTTPSClientError(
                    f"http: server gave HTTP response to HTTPS client: {message}"
                ) from e
            raise HTTPDoerError(message) from e

        return HTTPResponse(status_code=response.status_code, body=response.content)
