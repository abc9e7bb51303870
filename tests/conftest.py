"""Pytest configuration for teamcity-client tests."""

import pytest

from teamcity_client import TeamcityConfig, TransportResponse


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def guest_config():
    return TeamcityConfig(host="teamcity.test:8111")


@pytest.fixture
def basic_config():
    return TeamcityConfig(host="teamcity.test:8111", user="alice", password="s3cret")


@pytest.fixture
def apikey_config():
    return TeamcityConfig(host="teamcity.test:8111", apikey="token-123")


@pytest.fixture
def make_response():
    """Build a TransportResponse carrying a raw body."""

    def _make(data, status_code=200):
        return TransportResponse(data=data, status_code=status_code)

    return _make
