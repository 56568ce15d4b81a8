"""Errors raised by the catalog core."""

from typing import Optional


class RatingsHubError(Exception):
    """Base error for the ratings hub."""


class ConfigurationError(RatingsHubError):
    """Required tracker parameters are missing."""


class TransportError(RatingsHubError):
    """Non-success response (or network failure) from the issue tracker."""
    
    def __init__(self, status_code: Optional[int], message: str) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"GitHub API request failed: {message}")
        else:
            super().__init__(f"GitHub API error ({status_code}): {message}")
