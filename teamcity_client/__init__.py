"""
teamcity-client - async request helper for the TeamCity REST API.

Example:
    ```python
    from teamcity_client import TeamcityClient, TeamcityConfig

    # Guest access
    client = TeamcityClient(TeamcityConfig(host="ci.example.com"))

    # Basic auth
    client = TeamcityClient({"host": "ci.example.com", "user": "bob", "password": "secret"})

    # Access token
    async with TeamcityClient(TeamcityConfig(host="ci.example.com", apikey="token")) as client:
        builds = await client.read_json("builds?locator=count:10")
    ```
"""

from .client import TeamcityClient
from .config import DEFAULT_PROTOCOL, TeamcityConfig
from .exceptions import ConfigurationError, TeamcityError
from .json_utils import parse_json, to_json
from .models import AuthMode, RequestDescriptor, TransportResponse
from .transport import HttpTransport, HttpxTransport

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "TeamcityClient",
    # Configuration
    "TeamcityConfig",
    "DEFAULT_PROTOCOL",
    # Exceptions
    "TeamcityError",
    "ConfigurationError",
    # Transport
    "HttpTransport",
    "HttpxTransport",
    # Models
    "AuthMode",
    "RequestDescriptor",
    "TransportResponse",
    # JSON helpers
    "parse_json",
    "to_json",
]
