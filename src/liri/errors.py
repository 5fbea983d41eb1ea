"""
Errors - Failure kinds raised by the clients and the fallback file reader.
"""

from typing import Optional


class LiriError(Exception):
    """Base class for every failure that ends the current invocation."""

    exit_code = 1


class RemoteApiError(LiriError):
    """Transport or authentication failure from a remote API."""

    exit_code = 2

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NoMatchError(LiriError):
    """A search returned zero results."""

    exit_code = 3


class MalformedResponseError(LiriError):
    """A response body could not be parsed or lacks required fields."""

    exit_code = 4


class DataSourceError(LiriError):
    """The local fallback file is missing or malformed."""

    exit_code = 5
