"""Ordering of catalog items."""

from typing import Optional, Sequence

from ratings_hub.core.entities import RatedItem


def _apply_limit(entries: list[RatedItem], limit: Optional[int]) -> list[RatedItem]:
    if limit is None:
        return entries
    if limit < 0:
        raise ValueError("Limit cannot be negative")
    return entries[:limit]


def rank_by_recency(
    entries: Sequence[RatedItem], limit: Optional[int] = None
) -> list[RatedItem]:
    """Newest first. Items created at the same time keep their input order."""
    ordered = sorted(entries, key=lambda e: e.item.created_at, reverse=True)
    return _apply_limit(ordered, limit)


def rank_by_quality(
    entries: Sequence[RatedItem], limit: Optional[int] = None
) -> list[RatedItem]:
    """Best rated first: average, then count, then recency, all descending.
    
    Only rated entries take part. The raw average is used, so a single
    5-star rating outranks any number of 4-star ratings.
    """
    rated = [e for e in entries if e.stats is not None and e.stats.count > 0]
    ordered = sorted(
        rated,
        key=lambda e: (e.stats.average, e.stats.count, e.item.created_at),
        reverse=True,
    )
    return _apply_limit(ordered, limit)
