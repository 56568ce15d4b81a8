"""CLI entry point for the ratings hub."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ratings_hub.adapters.github import GitHubIssuesClient
from ratings_hub.config import Settings, get_settings
from ratings_hub.core import (
    ItemDetail,
    RatedItem,
    RatingsHubError,
    item_body_template,
    rating_template,
)
from ratings_hub.use_cases import CatalogService

app = typer.Typer(help="Ranked catalog of items collected as GitHub issues.")

SUMMARY_PREVIEW = 240

ConfigOption = typer.Option(Path("config.yaml"), "--config", "-c", help="Path to config.yaml")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Show progress")


def build_service(settings: Settings, verbose: bool = False) -> CatalogService:
    """Wire the GitHub client into the catalog service."""
    return CatalogService(
        tracker=GitHubIssuesClient(settings.tracker),
        label=settings.label,
        per_page=settings.per_page,
        title_prefix=settings.catalog.title_prefix,
        concurrent_comments=settings.catalog.concurrent_comments,
        verbose=verbose,
    )


def _preview(text: str) -> str:
    if len(text) <= SUMMARY_PREVIEW:
        return text
    return text[:SUMMARY_PREVIEW] + "..."


def print_entries(entries: list[RatedItem], with_stats: bool) -> None:
    """Print a list of catalog entries."""
    if not entries:
        print("  No rated items yet." if with_stats else "  No items yet.")
        return
    
    for position, entry in enumerate(entries, start=1):
        item = entry.item
        line = f"{position:>2}. #{item.number} {item.title}"
        if with_stats and entry.stats:
            line += f"  ⭐ {entry.stats.average:.2f} ({entry.stats.count} ratings)"
        print(line)
        if item.summary:
            print(f"    {_preview(item.summary)}")
        print(f"    └─ {item.detail_url}")
        if item.url:
            print(f"    └─ Source: {item.url}")


def print_detail(detail: ItemDetail) -> None:
    """Print one item with its comment thread."""
    item = detail.item
    print("\n" + "=" * 70)
    print(f"#{item.number} {item.title}")
    print("=" * 70)
    print(f"Submitted by @{item.author.login} on {item.created_at:%Y-%m-%d %H:%M}")
    
    if detail.stats.count:
        print(f"Average rating: {detail.stats.average:.1f} ({detail.stats.count} ratings)")
    else:
        print("Average rating: — (0 ratings)")
    
    if item.url:
        print(f"Source: {item.url}")
    if item.thumbnail:
        print(f"Thumbnail: {item.thumbnail}")
    if item.summary:
        print(f"\n{item.summary}")
    
    print("\nComments:")
    if not detail.thread:
        print("  No comments yet.")
    for entry in detail.thread:
        badge = f"[{entry.mark.value}★] " if entry.mark else ""
        comment = entry.comment
        print(f"  • {badge}@{comment.author.login} on {comment.created_at:%Y-%m-%d %H:%M}")
        for line in entry.text.splitlines():
            print(f"    {line}")
    
    print(f"\nRate or comment: {item.detail_url}#new_comment_field")


def _run(coro):
    try:
        return asyncio.run(coro)
    except (RatingsHubError, ValueError) as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)


def _load_service(config: Path, verbose: bool) -> tuple[Settings, CatalogService]:
    settings = get_settings(config)
    try:
        return settings, build_service(settings, verbose)
    except RatingsHubError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)


@app.command()
def latest(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Number of items"),
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the most recently submitted items."""
    settings, service = _load_service(config, verbose)
    entries = _run(service.latest(limit if limit is not None else settings.catalog.latest_limit))
    print("\n🆕 Latest items")
    print_entries(entries, with_stats=False)


@app.command()
def top(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=0, help="Number of items"),
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the best rated items."""
    settings, service = _load_service(config, verbose)
    entries = _run(service.top(limit if limit is not None else settings.catalog.top_limit))
    print("\n🏆 Top rated items")
    print_entries(entries, with_stats=True)


@app.command()
def show(
    number: int = typer.Argument(..., help="Issue number of the item"),
    config: Path = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show one item with its ratings and comments."""
    _, service = _load_service(config, verbose)
    print_detail(_run(service.item_detail(number)))


@app.command()
def template(value: int = typer.Argument(..., help="Rating from 1 to 5")) -> None:
    """Print the comment template for rating an item."""
    try:
        print(rating_template(value))
    except ValueError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)


@app.command()
def add(config: Path = ConfigOption) -> None:
    """Show where and how to submit a new item."""
    settings = get_settings(config)
    try:
        client = GitHubIssuesClient(settings.tracker)
    except RatingsHubError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)
    
    print("➕ Submit a new item through the issue form:")
    print(f"  └─ {client.new_issue_url()}")
    print(f"\nLabel it '{settings.label}' and start the body with:\n")
    print(item_body_template())


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
