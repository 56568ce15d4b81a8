"""GitHub issue tracker adapter."""

from ratings_hub.adapters.github.client import GitHubIssuesClient

__all__ = ["GitHubIssuesClient"]
