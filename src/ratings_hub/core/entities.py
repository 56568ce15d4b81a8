"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class UserRef:
    """Tracker user."""
    
    login: str
    html_url: str = ""


@dataclass(frozen=True)
class RawIssue:
    """Issue record as returned by the tracker."""
    
    number: int
    title: str
    body: str
    created_at: datetime
    html_url: str
    author: UserRef
    comments_url: str
    comment_count: int = 0


@dataclass(frozen=True)
class Comment:
    """Comment on an issue. Read-only."""
    
    id: int
    author: UserRef
    body: str
    created_at: datetime


RawComment = Comment


@dataclass(frozen=True)
class Item:
    """Catalog entry derived from one tracker issue."""
    
    number: int
    title: str
    url: Optional[str]
    thumbnail: Optional[str]
    summary: str
    created_at: datetime
    detail_url: str
    author: UserRef
    
    def __post_init__(self) -> None:
        if self.number <= 0:
            raise ValueError("Item number must be positive")


@dataclass(frozen=True)
class RatingMark:
    """Rating parsed from the first line of a comment."""
    
    author: UserRef
    value: int
    timestamp: datetime


@dataclass(frozen=True)
class RatingStat:
    """Count and average of the latest rating per author."""
    
    count: int = 0
    average: float = 0.0


@dataclass(frozen=True)
class RatingSummary:
    """Rating statistics plus the marks that were counted."""
    
    stat: RatingStat
    marks: list[RatingMark] = field(default_factory=list)


@dataclass(frozen=True)
class ThreadEntry:
    """Comment annotated with its rating badge, if any."""
    
    comment: Comment
    mark: Optional[RatingMark]
    text: str


@dataclass(frozen=True)
class FrontMatter:
    """Parsed metadata block and the text that follows it."""
    
    meta: dict[str, str]
    content: str


@dataclass(frozen=True)
class RatedItem:
    """Item paired with its rating statistics (None when not fetched)."""
    
    item: Item
    stats: Optional[RatingStat] = None


@dataclass
class Catalog:
    """Latest and top rated items."""
    
    latest: list[RatedItem]
    top: list[RatedItem]


@dataclass
class ItemDetail:
    """Single item with its ratings and comment thread."""
    
    item: Item
    stats: RatingStat
    marks: list[RatingMark]
    thread: list[ThreadEntry]
