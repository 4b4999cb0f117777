"""Custom exceptions for gh-act."""

from typing import Any


class GhActError(Exception):
    """Base exception for all gh-act errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize gh-act error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GhActError):
    """Raised when configuration is invalid or missing."""


class CredentialMissingError(ConfigurationError):
    """Raised when no authorization token is available where one is required."""

    def __init__(self) -> None:
        super().__init__("unable to read the authorization token")


class AccountNotFoundError(GhActError):
    """Raised when neither the organization nor the user endpoint knows an account."""

    def __init__(self, account: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"GitHub user '{account}' not found", details)
        self.account = account


class FeedUnavailableError(GhActError):
    """Raised when an account's activity feed cannot be fetched and no usable cache exists."""

    def __init__(self, account: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"unable to fetch GitHub user '{account}' events", details)
        self.account = account


class UsageError(GhActError):
    """Raised when the command line is invalid."""


class UnknownEventTypeError(UsageError):
    """Raised when an event type filter is not in the catalog."""

    def __init__(self, event_type: str) -> None:
        super().__init__(f"unrecognized GitHub event type '{event_type}'", {"event_type": event_type})
        self.event_type = event_type


class CacheError(GhActError):
    """Raised when cache operations fail."""
