"""Core domain layer."""

from ratings_hub.core.entities import (
    Catalog,
    Comment,
    FrontMatter,
    Item,
    ItemDetail,
    RatedItem,
    RatingMark,
    RatingStat,
    RatingSummary,
    RawComment,
    RawIssue,
    ThreadEntry,
    UserRef,
)
from ratings_hub.core.exceptions import (
    ConfigurationError,
    RatingsHubError,
    TransportError,
)
from ratings_hub.core.extractor import (
    extract_item,
    item_body_template,
    strip_title_prefix,
)
from ratings_hub.core.front_matter import parse_front_matter, render_front_matter
from ratings_hub.core.interfaces import IssueTracker
from ratings_hub.core.ranking import rank_by_quality, rank_by_recency
from ratings_hub.core.ratings import (
    aggregate_ratings,
    annotate_thread,
    parse_rating_mark,
    rating_stats,
    rating_template,
)

__all__ = [
    "Catalog",
    "Comment",
    "FrontMatter",
    "Item",
    "ItemDetail",
    "RatedItem",
    "RatingMark",
    "RatingStat",
    "RatingSummary",
    "RawComment",
    "RawIssue",
    "ThreadEntry",
    "UserRef",
    "ConfigurationError",
    "RatingsHubError",
    "TransportError",
    "IssueTracker",
    "extract_item",
    "item_body_template",
    "strip_title_prefix",
    "parse_front_matter",
    "render_front_matter",
    "rank_by_quality",
    "rank_by_recency",
    "aggregate_ratings",
    "annotate_thread",
    "parse_rating_mark",
    "rating_stats",
    "rating_template",
]
