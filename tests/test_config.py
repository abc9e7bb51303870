"""Tests for TeamcityConfig."""

import pytest

from teamcity_client import ConfigurationError, TeamcityConfig


def test_config_defaults():
    """Test default configuration values."""
    config = TeamcityConfig(host="ci")
    assert config.protocol is None
    assert config.user is None
    assert config.password is None
    assert config.apikey is None
    assert config.timeout == 30.0
    assert config.verify_ssl is True


def test_validated_defaults_protocol():
    """Test that a missing protocol defaults to http://."""
    config = TeamcityConfig(host="ci")
    validated = config.validated()
    assert validated.protocol == "http://"


def test_validated_does_not_mutate_original():
    """Test that validation returns a new object."""
    config = TeamcityConfig(host="ci")
    validated = config.validated()
    assert validated is not config
    assert config.protocol is None


def test_validated_keeps_explicit_protocol():
    config = TeamcityConfig(host="ci", protocol="https://")
    assert config.validated().protocol == "https://"


def test_empty_protocol_is_defaulted():
    config = TeamcityConfig(host="ci", protocol="")
    assert config.validated().protocol == "http://"


def test_user_without_password_raises():
    """Test that a user without password is rejected."""
    with pytest.raises(ConfigurationError, match="Incorrect password type") as exc_info:
        TeamcityConfig(host="ci", user="alice").validated()
    assert exc_info.value.field == "password"


def test_password_without_user_raises():
    """Test that a password without user is rejected."""
    with pytest.raises(ConfigurationError, match="Incorrect user type") as exc_info:
        TeamcityConfig(host="ci", password="s3cret").validated()
    assert exc_info.value.field == "user"


def test_non_string_password_raises():
    with pytest.raises(ConfigurationError, match="Incorrect password type"):
        TeamcityConfig(host="ci", user="alice", password=1234).validated()


@pytest.mark.parametrize(
    "user,password",
    [("alice", "s3cret"), (None, None), ("", "")],
)
def test_both_or_neither_credentials_accepted(user, password):
    config = TeamcityConfig(host="ci", user=user, password=password).validated()
    assert config.user == user
    assert config.password == password


def test_missing_host_raises():
    with pytest.raises(ConfigurationError, match="host is required"):
        TeamcityConfig().validated()


def test_invalid_timeout_raises():
    with pytest.raises(ConfigurationError, match="timeout must be greater than 0"):
        TeamcityConfig(host="ci", timeout=0).validated()


def test_config_is_frozen():
    config = TeamcityConfig(host="ci")
    with pytest.raises(AttributeError):
        config.host = "other"


def test_from_options_ignores_unknown_keys():
    """Test building a config from a plain mapping."""
    config = TeamcityConfig.from_options(
        {"host": "ci", "apikey": "k", "debug": True}
    )
    assert config.host == "ci"
    assert config.apikey == "k"


def test_configuration_error_to_dict():
    error = ConfigurationError("Incorrect user type", field="user")
    assert error.to_dict() == {
        "error": "ConfigurationError",
        "message": "Incorrect user type",
        "details": {"field": "user"},
    }


@pytest.mark.parametrize("timeout", [None, "30", True])
def test_non_numeric_timeout_raises(timeout):
    """Test that a non-numeric timeout is a configuration error."""
    with pytest.raises(ConfigurationError, match="timeout must be a number") as exc_info:
        TeamcityConfig(host="ci", timeout=timeout).validated()
    assert exc_info.value.field == "timeout"


def test_validated_returns_copy_with_explicit_protocol():
    config = TeamcityConfig(host="ci", protocol="https://")
    validated = config.validated()
    assert validated is not config
    assert validated == config
