"""TeamCity REST API request helper."""

from typing import Any, Mapping

import structlog

from . import auth
from .config import TeamcityConfig
from .json_utils import to_json
from .models import AuthMode, RequestDescriptor
from .transport import HttpTransport, HttpxTransport

logger = structlog.get_logger(__name__)


class TeamcityClient:
    """
    Async helper for the TeamCity REST API.

    Calls go to the guest realm when no credentials are configured, to the
    ``/httpAuth`` realm with user and password embedded in the URL, or to the
    unprefixed API with a bearer token when only an API key is configured.
    Every call issues exactly one request; nothing is retried or cached.

    Example:
        ```python
        from teamcity_client import TeamcityClient, TeamcityConfig

        config = TeamcityConfig(host="ci.example.com", apikey="token")
        async with TeamcityClient(config) as client:
            projects = await client.read_json("projects")
            build = await client.send_json(
                "buildQueue", {"buildType": {"id": "Main_Build"}}
            )
        ```
    """

    def __init__(
        self,
        config: TeamcityConfig | Mapping[str, Any],
        transport: HttpTransport | None = None,
    ) -> None:
        """
        Initialize TeamCity client.

        Args:
            config: Connection configuration, or a mapping of its options
            transport: HTTP transport to use. If None, an HttpxTransport is
                created on first use and closed by ``close()``.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        if not isinstance(config, TeamcityConfig):
            config = TeamcityConfig.from_options(config)
        self.config = config.validated()
        self._transport = transport
        self._owns_transport = transport is None
        logger.info(
            "TeamcityClient initialized",
            host=self.config.host,
            auth_mode=self.auth_mode.value,
        )

    async def __aenter__(self) -> "TeamcityClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_transport(self) -> HttpTransport:
        """Get or create the HTTP transport."""
        if self._transport is None:
            self._transport = HttpxTransport(
                timeout=self.config.timeout,
                verify_ssl=self.config.verify_ssl,
            )
        return self._transport

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.close()
            self._transport = None
            logger.info("TeamcityClient closed")

    # =========================================================================
    # Derived configuration
    # =========================================================================

    @property
    def http_access(self) -> bool:
        return auth.http_access(self.config)

    @property
    def api_key_usage(self) -> bool:
        return auth.api_key_usage(self.config)

    @property
    def auth_mode(self) -> AuthMode:
        return auth.auth_mode(self.config)

    @property
    def access_type(self) -> str:
        return auth.access_type(self.config)

    @property
    def auth_url_part(self) -> str:
        return auth.auth_url_part(self.config)

    @property
    def api_url(self) -> str:
        return auth.api_url(self.config)

    @property
    def json_header(self) -> dict[str, str]:
        return auth.json_header()

    @property
    def api_key_header(self) -> dict[str, str]:
        return auth.api_key_header(self.config)

    @property
    def auth(self) -> str | None:
        """Precomputed Basic credentials value, None without user and password."""
        return auth.basic_auth_token(self.config)

    # =========================================================================
    # Requests
    # =========================================================================

    async def _send(self, api_path: str, descriptor: RequestDescriptor) -> Any:
        logger.debug(
            "TeamCity request",
            method=descriptor.method,
            api_path=api_path,
            access_type=self.access_type,
            headers=sorted(descriptor.headers),
        )
        try:
            response = await self._get_transport().request(descriptor)
        except Exception as e:
            logger.error(
                "TeamCity request failed",
                method=descriptor.method,
                api_path=api_path,
                error=str(e),
            )
            raise
        return response.data

    async def read(
        self,
        api_path: str,
        method: str = "GET",
        add_headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform a request and return the raw response payload.

        Args:
            api_path: Path relative to the REST API root (e.g., "projects")
            method: HTTP method
            add_headers: Extra headers. The API key header wins on conflict.

        Returns:
            Response body as text

        Raises:
            Whatever the transport raises, unchanged
        """
        headers = {**(add_headers or {}), **self.api_key_header}
        descriptor = RequestDescriptor(
            url=f"{self.api_url}{api_path}",
            method=method,
            headers=headers,
        )
        return await self._send(api_path, descriptor)

    async def read_json(
        self,
        api_path: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform a request asking for JSON and parse the response.

        Caller headers override the Accept header. A body that is not valid
        JSON is returned as-is.
        """
        body = await self.read(api_path, method, {**self.json_header, **(headers or {})})
        return to_json(body)

    async def send_json(
        self,
        api_path: str,
        body: Any,
        method: str = "POST",
        add_headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Send a JSON body and parse the JSON response.

        Args:
            api_path: Path relative to the REST API root
            body: Payload. Non-string values are serialized to JSON.
            method: HTTP method
            add_headers: Extra headers. Accept and the API key header win on
                conflict; Content-Type can be overridden.

        Returns:
            Parsed response, or the raw body if it is not valid JSON
        """
        headers = {
            "Content-Type": "application/json",
            **(add_headers or {}),
            **self.json_header,
            **self.api_key_header,
        }
        descriptor = RequestDescriptor(
            url=f"{self.api_url}{api_path}",
            method=method,
            headers=headers,
            body=body,
        )
        return to_json(await self._send(api_path, descriptor))
