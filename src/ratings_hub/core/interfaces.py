"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Union

from ratings_hub.core.entities import RawComment, RawIssue


class IssueTracker(ABC):
    """Interface for reading issues and comments from a tracker."""
    
    @abstractmethod
    async def list_issues(self, label: str, per_page: int) -> list[RawIssue]:
        """Fetch every open issue carrying the label."""
        pass
    
    @abstractmethod
    async def list_comments(
        self, issue: Union[int, str], per_page: int
    ) -> list[RawComment]:
        """Fetch every comment of an issue, by number or comments URL."""
        pass
    
    @abstractmethod
    async def get_issue(self, number: int) -> RawIssue:
        """Fetch a single issue."""
        pass
