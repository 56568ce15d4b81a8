"""Business logic use cases."""

import asyncio
from dataclasses import replace
from typing import Optional

from ratings_hub.core import (
    Catalog,
    IssueTracker,
    Item,
    ItemDetail,
    RatedItem,
    RawComment,
    RawIssue,
    aggregate_ratings,
    annotate_thread,
    extract_item,
    rank_by_quality,
    rank_by_recency,
    rating_stats,
    strip_title_prefix,
)


class CatalogService:
    """Build the ranked catalog from tracker issues and their comments."""
    
    def __init__(
        self,
        tracker: IssueTracker,
        label: str = "type:item",
        per_page: int = 100,
        title_prefix: str = "[Item]",
        concurrent_comments: bool = True,
        verbose: bool = False,
    ) -> None:
        self.tracker = tracker
        self.label = label
        self.per_page = per_page
        self.title_prefix = title_prefix
        self.concurrent_comments = concurrent_comments
        self.verbose = verbose
    
    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)
    
    def to_item(self, issue: RawIssue) -> Item:
        """Extract an item and normalize its title."""
        item = extract_item(issue)
        return replace(item, title=strip_title_prefix(item.title, self.title_prefix))
    
    async def load_issues(self) -> list[RawIssue]:
        """Fetch every labelled issue."""
        self._log(f"📥 Loading issues labelled '{self.label}'...")
        issues = await self.tracker.list_issues(self.label, self.per_page)
        self._log(f"  └─ Found: {len(issues)} issues")
        return issues
    
    async def _comments_for(self, issue: RawIssue) -> list[RawComment]:
        if issue.comment_count == 0:
            return []
        return await self.tracker.list_comments(
            issue.comments_url or issue.number, self.per_page
        )
    
    async def enrich(self, issues: list[RawIssue]) -> list[RatedItem]:
        """Pair each issue's item with its rating stats.
        
        Any failing comment fetch aborts the whole enrichment.
        """
        self._log(f"⭐ Collecting ratings for {len(issues)} items...")
        
        if self.concurrent_comments:
            threads = await asyncio.gather(
                *(self._comments_for(issue) for issue in issues)
            )
        else:
            threads = []
            for issue in issues:
                threads.append(await self._comments_for(issue))
        
        entries = [
            RatedItem(item=self.to_item(issue), stats=rating_stats(comments))
            for issue, comments in zip(issues, threads)
        ]
        
        rated = sum(1 for e in entries if e.stats and e.stats.count > 0)
        self._log(f"  └─ Rated items: {rated}")
        return entries
    
    async def latest(self, limit: Optional[int] = None) -> list[RatedItem]:
        """Most recent items, without rating stats."""
        issues = await self.load_issues()
        entries = [RatedItem(item=self.to_item(issue)) for issue in issues]
        return rank_by_recency(entries, limit)
    
    async def top(self, limit: Optional[int] = None) -> list[RatedItem]:
        """Best rated items."""
        issues = await self.load_issues()
        return rank_by_quality(await self.enrich(issues), limit)
    
    async def build_catalog(
        self, latest_limit: Optional[int] = None, top_limit: Optional[int] = None
    ) -> Catalog:
        """Latest and top lists from a single issue listing."""
        issues = await self.load_issues()
        entries = await self.enrich(issues)
        return Catalog(
            latest=rank_by_recency(entries, latest_limit),
            top=rank_by_quality(entries, top_limit),
        )
    
    async def item_detail(self, number: int) -> ItemDetail:
        """One item with its ratings and annotated comment thread."""
        self._log(f"🔎 Loading item #{number}...")
        issue = await self.tracker.get_issue(number)
        comments = await self._comments_for(issue)
        summary = aggregate_ratings(comments)
        
        return ItemDetail(
            item=self.to_item(issue),
            stats=summary.stat,
            marks=summary.marks,
            thread=annotate_thread(comments),
        )
