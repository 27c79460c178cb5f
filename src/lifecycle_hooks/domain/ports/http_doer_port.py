"""
HTTP Doer Port Interface

Defines the contract for issuing a single HTTP request.
This is an output port - implemented by infrastructure layer.
"""

from abc import ABC, abstractmethod

from lifecycle_hooks.domain.value_objects import HTTPRequest, HTTPResponse


class HTTPDoerError(Exception):
    """
    Raised by an HTTP doer on transport-level failure.

    Attributes:
        body: Partial response body, if any was received
    """

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(message)


class HTTPResponseToHTTPSClientError(HTTPDoerError):
    """The server answered a TLS handshake with a plaintext HTTP response."""
    pass


class IHTTPDoerPort(ABC):
    """
    Port interface for HTTP transport.

    Any received response, whatever its status, is returned. Only failures
    to obtain a response are raised.
    """

    @abstractmethod
    async def do(self, request: HTTPRequest) -> HTTPResponse:
        """
        Perform one HTTP request.

        Args:
            request: Request to send

        Returns:
            HTTPResponse with status code and full body

        Raises:
            HTTPDoerError: For connection, TLS, timeout and protocol errors
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release transport resources.

        Should be called during shutdown.
        """
        pass
