"""HTTP transport used by TeamcityClient."""

import json
from typing import Any, Protocol, runtime_checkable

import httpx
import structlog

from .models import RequestDescriptor, TransportResponse

logger = structlog.get_logger(__name__)


@runtime_checkable
class HttpTransport(Protocol):
    """
    Anything that can perform one HTTP request.

    Implementations raise on failure (network error, or a non-success status
    by their own policy); the client propagates those errors unchanged.
    """

    async def request(self, descriptor: RequestDescriptor) -> TransportResponse:
        ...


def _encode_body(body: Any) -> str | bytes | None:
    if body is None or isinstance(body, (str, bytes)):
        return body
    return json.dumps(body)


class HttpxTransport:
    """
    Default transport backed by ``httpx.AsyncClient``.

    Non-2xx responses raise ``httpx.HTTPStatusError`` and connection problems
    raise ``httpx.RequestError``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
            client: Existing AsyncClient to use. It is not closed by this transport.
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        return self._client

    async def request(self, descriptor: RequestDescriptor) -> TransportResponse:
        client = self._get_client()
        response = await client.request(
            descriptor.method,
            descriptor.url,
            headers=descriptor.headers,
            content=_encode_body(descriptor.body),
        )
        response.raise_for_status()
        return TransportResponse(
            data=response.text,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("HttpxTransport closed")
