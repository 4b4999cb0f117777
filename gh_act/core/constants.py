"""
Constants and configuration values for gh-act.
"""

from enum import IntEnum, StrEnum

# Command name and version
CMD = "gh-act"
CMD_VERSION = "v1.0.0"

# GitHub REST API
API_BASE_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = f"{CMD}/{CMD_VERSION}"


class APIConstants(IntEnum):
    """API-related limits and constants."""

    REQUEST_TIMEOUT = 30
    HTTP_NOT_MODIFIED = 304
    HTTP_SERVER_ERROR = 500


class ResourceKind(StrEnum):
    """Kinds of remote resource cached per account."""

    IDENTITY = "user"
    FEED = "events"


class FormattingConstants:
    """Output formatting constants."""

    JSON_INDENT = 2
    LIST_PAD_WIDTH = 30
    CACHE_FILE_SUFFIX = ".json"


# GitHub logins and organization names: alphanumerics and single hyphens, at most 39 characters
ACCOUNT_NAME_PATTERN = r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$"
