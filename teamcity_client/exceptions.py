"""
TeamCity client exceptions.

Transport failures are not wrapped here: whatever the HTTP transport raises
reaches the caller unchanged.
"""

from typing import Any


class TeamcityError(Exception):
    """Base exception for all teamcity-client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details})"


class ConfigurationError(TeamcityError):
    """Invalid connection configuration provided."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """
        Initialize ConfigurationError.

        Args:
            message: Error message
            field: Name of the configuration field at fault
        """
        super().__init__(message, details={"field": field} if field else None)
        self.field = field
