"""Connection configuration for the TeamCity client."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from .exceptions import ConfigurationError

DEFAULT_PROTOCOL = "http://"


@dataclass(frozen=True)
class TeamcityConfig:
    """
    Connection configuration for a TeamCity server.

    Attributes:
        host: Server host, optionally with port and context path (e.g., "ci.example.com:8111")
        protocol: URL scheme prefix including "://" (default: "http://")
        user: Username for basic authentication
        password: Password for basic authentication
        apikey: Access token sent as a bearer header
        timeout: Request timeout in seconds for the default transport (default: 30.0)
        verify_ssl: Whether the default transport verifies SSL certificates (default: True)

    Example:
        ```python
        config = TeamcityConfig(
            host="ci.example.com",
            protocol="https://",
            apikey="your-access-token",
        )
        ```
    """

    host: str | None = None
    protocol: str | None = None
    user: str | None = None
    password: str | None = None
    apikey: str | None = None
    timeout: float = 30.0
    verify_ssl: bool = True

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "TeamcityConfig":
        """Build a config from a plain options mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in options.items() if key in known})

    def validated(self) -> "TeamcityConfig":
        """
        Validate the configuration and return a copy with defaults applied.

        Returns:
            New TeamcityConfig with ``protocol`` defaulted

        Raises:
            ConfigurationError: If only one of user/password is given, host is
                missing, or timeout is not positive
        """
        user_given = isinstance(self.user, str)
        password_given = isinstance(self.password, str)

        if user_given and not password_given:
            raise ConfigurationError("Incorrect password type", field="password")
        if password_given and not user_given:
            raise ConfigurationError("Incorrect user type", field="user")

        if not self.host:
            raise ConfigurationError("host is required", field="host")

        if not isinstance(self.timeout, (int, float)) or isinstance(self.timeout, bool):
            raise ConfigurationError("timeout must be a number", field="timeout")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be greater than 0", field="timeout")

        return replace(self, protocol=self.protocol or DEFAULT_PROTOCOL)
