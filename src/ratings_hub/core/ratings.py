"""Rating extraction and aggregation from comment streams."""

import re
from typing import Iterable, Optional

from ratings_hub.core.entities import (
    Comment,
    RatingMark,
    RatingStat,
    RatingSummary,
    ThreadEntry,
)

RATING_PATTERN = re.compile(r"^rating:\s*([1-5])$", re.IGNORECASE)
MIN_RATING = 1
MAX_RATING = 5

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _first_line(body: Optional[str]) -> str:
    return _LINE_SPLIT_RE.split(body or "", maxsplit=1)[0].strip()


def parse_rating_mark(comment: Comment) -> Optional[RatingMark]:
    """Return the rating marker on the comment's first line, if any."""
    match = RATING_PATTERN.match(_first_line(comment.body))
    if not match:
        return None
    
    return RatingMark(
        author=comment.author,
        value=int(match.group(1)),
        timestamp=comment.created_at,
    )


def aggregate_ratings(comments: Iterable[Comment]) -> RatingSummary:
    """Fold comments into rating statistics, keeping the latest mark per author.
    
    A later mark replaces the held one when its timestamp is greater or
    equal, so on equal timestamps the later comment in the input wins.
    
    Returns:
        RatingSummary with the stat and the retained marks in input order
    """
    latest: dict[str, tuple[int, RatingMark]] = {}
    
    for position, comment in enumerate(comments):
        mark = parse_rating_mark(comment)
        if mark is None:
            continue
        
        held = latest.get(mark.author.login)
        if held is None or mark.timestamp >= held[1].timestamp:
            latest[mark.author.login] = (position, mark)
    
    marks = [mark for _, mark in sorted(latest.values(), key=lambda x: x[0])]
    count = len(marks)
    average = sum(mark.value for mark in marks) / count if count else 0.0
    
    return RatingSummary(stat=RatingStat(count=count, average=average), marks=marks)


def rating_stats(comments: Iterable[Comment]) -> RatingStat:
    """Shortcut for the statistics part of :func:`aggregate_ratings`."""
    return aggregate_ratings(comments).stat


def comment_text(comment: Comment) -> str:
    """Comment body without the rating marker line and the blank line after it."""
    body = comment.body or ""
    if parse_rating_mark(comment) is None:
        return body.strip()
    
    lines = _LINE_SPLIT_RE.split(body)[1:]
    if lines and not lines[0].strip():
        lines = lines[1:]
    return "\n".join(lines).strip()


def annotate_thread(comments: Iterable[Comment]) -> list[ThreadEntry]:
    """Pair every comment with its rating badge and free commentary."""
    return [
        ThreadEntry(
            comment=comment,
            mark=parse_rating_mark(comment),
            text=comment_text(comment),
        )
        for comment in comments
    ]


def rating_template(value: int) -> str:
    """Comment text a user pastes on the tracker to rate an item."""
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return f"rating: {value}\n\nYour comment here..."
