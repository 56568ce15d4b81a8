"""GitHub issues client with full pagination."""

from datetime import datetime
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx

from ratings_hub.config import TrackerConfig
from ratings_hub.core import IssueTracker, RawComment, RawIssue, TransportError, UserRef


class GitHubIssuesClient(IssueTracker):
    """Read issues and comments of one repository through the REST API."""
    
    def __init__(
        self,
        config: TrackerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        # Fails before any request when owner/repo are missing
        self.repo_path = config.repo_path
        self.config = config
        self.api_base = config.api_base.rstrip("/")
        self.web_base = config.web_base.rstrip("/")
        self._transport = transport
    
    async def fetch_all(
        self, url: str, params: Optional[dict[str, Any]] = None
    ) -> list[dict]:
        """Drain a paginated collection, following ``Link: rel="next"``.
        
        Args:
            url: Collection URL
            params: Query parameters for the first request; continuation
                links already carry them
        
        Returns:
            Records of every page, in server order
        
        Raises:
            TransportError: on the first failing page; nothing partial is returned
        """
        records: list[dict] = []
        next_url: Optional[str] = url
        next_params = params
        
        async with self._client() as client:
            while next_url:
                response = await self._get(client, next_url, next_params)
                page = self._json(response)
                if not isinstance(page, list):
                    raise TransportError(
                        response.status_code, f"Expected a JSON array from {next_url}"
                    )
                records.extend(page)
                
                next_url = response.links.get("next", {}).get("url")
                next_params = None
        
        return records
    
    async def list_issues(self, label: str, per_page: int) -> list[RawIssue]:
        """Fetch all open issues with the label. Pull requests are skipped."""
        data = await self.fetch_all(
            f"{self.api_base}/repos/{self.repo_path}/issues",
            params={
                "state": "open",
                "labels": label,
                "sort": "created",
                "direction": "desc",
                "per_page": per_page,
            },
        )
        return [self._to_issue(issue) for issue in data if "pull_request" not in issue]
    
    async def list_comments(
        self, issue: Union[int, str], per_page: int
    ) -> list[RawComment]:
        """Fetch all comments of an issue, given its number or comments URL."""
        if isinstance(issue, int):
            url = f"{self.api_base}/repos/{self.repo_path}/issues/{issue}/comments"
        else:
            url = issue
        
        data = await self.fetch_all(url, params={"per_page": per_page})
        return [self._to_comment(comment) for comment in data]
    
    async def get_issue(self, number: int) -> RawIssue:
        """Fetch a single issue by number."""
        async with self._client() as client:
            response = await self._get(
                client, f"{self.api_base}/repos/{self.repo_path}/issues/{number}"
            )
        return self._to_issue(self._json(response))
    
    def issue_url(self, number: int) -> str:
        """Web URL of an issue."""
        return f"{self.web_base}/{self.repo_path}/issues/{number}"
    
    def new_issue_url(self, template: str = "item.yml") -> str:
        """Web URL for submitting a new item through the issue template."""
        return f"{self.web_base}/{self.repo_path}/issues/new?template={quote(template)}"
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self._get_headers(),
            timeout=self.config.timeout,
            transport=self._transport,
        )
    
    async def _get(
        self,
        client: httpx.AsyncClient,
        url: str,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        try:
            response = await client.get(url, params=params)
        except httpx.RequestError as e:
            raise TransportError(None, str(e)) from e
        
        if not response.is_success:
            raise TransportError(response.status_code, response.text)
        
        return response
    
    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                response.status_code, f"Invalid JSON from {response.request.url}"
            ) from e
    
    def _get_headers(self) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
    
    @staticmethod
    def _parse_timestamp(value: str) -> datetime:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    
    @staticmethod
    def _to_user(user: Optional[dict]) -> UserRef:
        user = user or {}
        return UserRef(login=user.get("login", "ghost"), html_url=user.get("html_url", ""))
    
    def _to_issue(self, issue: dict) -> RawIssue:
        return RawIssue(
            number=issue["number"],
            title=issue.get("title") or "",
            body=issue.get("body") or "",
            created_at=self._parse_timestamp(issue["created_at"]),
            html_url=issue.get("html_url") or self.issue_url(issue["number"]),
            author=self._to_user(issue.get("user")),
            comments_url=issue.get("comments_url", ""),
            comment_count=issue.get("comments", 0),
        )
    
    def _to_comment(self, comment: dict) -> RawComment:
        return RawComment(
            id=comment["id"],
            author=self._to_user(comment.get("user")),
            body=comment.get("body") or "",
            created_at=self._parse_timestamp(comment["created_at"]),
        )
