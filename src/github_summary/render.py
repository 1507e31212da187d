"""Plain-text rendering of GitHub records.

Every function returns the complete list of lines so nothing is printed
until a whole report has been built.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Optional

from github_summary.models import Issue, Notification, Repository, SearchResult

NO_LANGUAGE = "(none)"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _text(value: Optional[str]) -> str:
    return value if value is not None else ""


def _timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        return value.strftime(TIMESTAMP_FORMAT)
    return value.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT) + " UTC"


# ── Repositories ──────────────────────────────────────────────────────────

def render_search_results(result: SearchResult) -> list[str]:
    lines: list[str] = []
    for item in result.items:
        lines += [
            f"Repository Name: {item.name}",
            f"Description: {_text(item.description)}",
            f"Owner: {item.owner_login}",
            f"Stars: {item.stars}",
            f"Forks: {item.forks}",
            f"URL: {item.url}",
            "",
        ]
    return lines


def render_repository(repo: Repository) -> list[str]:
    return [
        f"Repository Name: {repo.name}",
        f"Description: {_text(repo.description)}",
        f"Owner: {repo.owner_login}",
        f"Language: {_text(repo.language)}",
        f"Default Branch: {repo.default_branch}",
        f"License: {_text(repo.license_name)}",
        f"Size: {repo.size} KB",
        f"Stars: {repo.stars}",
        f"Forks: {repo.forks}",
        f"URL: {repo.url}",
    ]


def language_histogram(repos: Iterable[Repository]) -> dict[str, int]:
    """Count repositories per primary language, keys in alphabetical order."""
    counts = Counter(repo.language or NO_LANGUAGE for repo in repos)
    return {
        lang: counts[lang]
        for lang in sorted(counts, key=lambda name: (name.casefold(), name))
    }


def render_repository_list(repos: list[Repository]) -> list[str]:
    if not repos:
        return ["No repositories found!"]

    lines: list[str] = []
    for repo in repos:
        lines += [
            f"Repository Name: {repo.name}",
            f"Description: {_text(repo.description)}",
            f"Language: {_text(repo.language)}",
            f"Stars: {repo.stars}",
            f"Forks: {repo.forks}",
            f"Size: {repo.size} KB",
            f"URL: {repo.url}",
            "",
        ]

    if len(repos) == 1:
        lines.append("1 repository found!")
    else:
        lines.append(f"{len(repos)} repositories found!")
    lines.append("Languages:")
    lines += [f"  {lang}: {count}" for lang, count in language_histogram(repos).items()]
    return lines


# ── Issues ────────────────────────────────────────────────────────────────

def render_issues(issues: list[Issue]) -> list[str]:
    lines: list[str] = []
    for issue in issues:
        lines += [
            f"Title: {issue.title}",
            f"State: {issue.state}",
            f"URL: {issue.url}",
            f"Labels: {', '.join(issue.labels)}",
            f"Created At: {_timestamp(issue.created_at)}",
            "",
        ]
    return lines


# ── Notifications ─────────────────────────────────────────────────────────

def render_notifications(notifications: list[Notification]) -> list[str]:
    lines: list[str] = []
    for notification in notifications:
        lines += [
            f"Notification Title: {notification.title}",
            f"URL: {_text(notification.url)}",
            f"Updated At: {_timestamp(notification.updated_at)}",
            "",
        ]
    return lines
