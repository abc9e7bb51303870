"""
Authentication and URL derivation.

Every function here is a pure function of a TeamcityConfig. The client
calls them on each access, so a result always reflects the configuration.
"""

import base64

from .config import TeamcityConfig
from .models import AuthMode

GUEST_AUTH = "/guestAuth"
HTTP_AUTH = "/httpAuth"

_ACCESS_TYPES = {
    AuthMode.basic: HTTP_AUTH,
    AuthMode.api_key: "",
    AuthMode.guest: GUEST_AUTH,
}


def http_access(config: TeamcityConfig) -> bool:
    """Check if both basic credentials are configured."""
    return isinstance(config.user, str) and isinstance(config.password, str)


def api_key_usage(config: TeamcityConfig) -> bool:
    """Check if an API key is configured."""
    return isinstance(config.apikey, str)


def auth_mode(config: TeamcityConfig) -> AuthMode:
    """Select the auth mode. Basic credentials take precedence over an API key."""
    if http_access(config):
        return AuthMode.basic
    if api_key_usage(config):
        return AuthMode.api_key
    return AuthMode.guest


def access_type(config: TeamcityConfig) -> str:
    """URL path segment selecting the server's auth realm."""
    return _ACCESS_TYPES[auth_mode(config)]


def auth_url_part(config: TeamcityConfig) -> str:
    """Userinfo prefix for the URL authority, empty unless basic auth is used."""
    if http_access(config):
        return f"{config.user}:{config.password}@"
    return ""


def api_url(config: TeamcityConfig) -> str:
    """
    Compose the REST API root.

    Examples:
        host "x", guest            -> "http://x/guestAuth/app/rest/"
        host "x", apikey "k"       -> "http://x/app/rest/"
        host "x", user/password    -> "http://a:b@x/httpAuth/app/rest/"
    """
    return (
        f"{config.protocol}{auth_url_part(config)}{config.host}"
        f"{access_type(config)}/app/rest/"
    )


def json_header() -> dict[str, str]:
    return {"Accept": "application/json"}


def api_key_header(config: TeamcityConfig) -> dict[str, str]:
    """Bearer header for the API key, attached whatever the access type."""
    if api_key_usage(config):
        return {"Authorization": f"Bearer {config.apikey}"}
    return {}


def basic_auth_token(config: TeamcityConfig) -> str | None:
    """Base64 ``user:password`` for a Basic header, or None without credentials."""
    if not http_access(config):
        return None
    credentials = f"{config.user}:{config.password}"
    return base64.b64encode(credentials.encode()).decode()
