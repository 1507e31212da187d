"""GitHub data fetching via REST API."""

import logging
from typing import Optional

import httpx

from github_summary.config import DEFAULT_API_URL
from github_summary.decoders import (
    decode_issues,
    decode_notifications,
    decode_repositories,
    decode_repository,
    decode_search,
)
from github_summary.errors import HTTPStatusError, NetworkError
from github_summary.models import Issue, Notification, Repository, SearchResult

logger = logging.getLogger(__name__)


def parse_repo_slug(value: str) -> tuple[str, str]:
    """Split ``owner/name`` into its two parts.

    >>> parse_repo_slug("octocat/Hello-World")
    ('octocat', 'Hello-World')
    """
    owner, sep, name = value.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"expected OWNER/REPO, got {value!r}")
    return owner, name


class GitHubClient:
    """Fetches repositories, issues and notifications from the GitHub REST API."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
    ) -> None:
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: Optional[httpx.Client] = None

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "Authorization": f"Bearer {self.token}",
        }

    def _client_instance(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    def get(self, path: str, params: Optional[dict[str, str]] = None) -> httpx.Response:
        """Issue one authenticated GET. Status codes are left to the caller."""
        client = self._client_instance()
        logger.debug("GET %s params=%s", path, params)
        try:
            resp = client.get(path, params=params)
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {self.base_url}{path} failed: {e}") from e
        logger.debug("GET %s -> %s", path, resp.status_code)
        return resp

    def close(self) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Repositories ──────────────────────────────────────────────────────

    def fetch_user_repos(self) -> list[Repository]:
        """Repositories of the authenticated user."""
        resp = self.get("/user/repos")
        return decode_repositories(resp.content)

    def search_repositories(self, query: str) -> SearchResult:
        """Search repositories by name or keyword."""
        resp = self.get("/search/repositories", params={"q": query})
        return decode_search(resp.content)

    def fetch_repository(self, slug: str) -> Repository:
        """Fetch one repository; non-2xx answers raise :class:`HTTPStatusError`."""
        owner, name = parse_repo_slug(slug)
        resp = self.get(f"/repos/{owner}/{name}")
        if not resp.is_success:
            raise HTTPStatusError(
                f"{resp.status_code} {resp.reason_phrase}".rstrip(), resp.text
            )
        return decode_repository(resp.content)

    # ── Issues ────────────────────────────────────────────────────────────

    def fetch_issues(self, slug: str) -> list[Issue]:
        """Issues of a repository, as GitHub lists them by default."""
        owner, name = parse_repo_slug(slug)
        resp = self.get(f"/repos/{owner}/{name}/issues")
        return decode_issues(resp.content)

    # ── Notifications ─────────────────────────────────────────────────────

    def fetch_notifications(self) -> list[Notification]:
        """Unread notifications of the authenticated user."""
        resp = self.get("/notifications")
        return decode_notifications(resp.content)
