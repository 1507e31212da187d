"""Decode GitHub response bodies into typed records."""

from typing import TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from github_summary.errors import ParseError
from github_summary.models import Issue, Notification, Repository, SearchResult

T = TypeVar("T")

Body = Union[str, bytes, bytearray]

_repository = TypeAdapter(Repository)
_repositories = TypeAdapter(list[Repository])
_issues = TypeAdapter(list[Issue])
_notifications = TypeAdapter(list[Notification])
_search = TypeAdapter(SearchResult)


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    more = error.error_count() - 1
    suffix = f" (and {more} more)" if more > 0 else ""
    return f"{location}: {first['msg']}{suffix}"


def _decode(adapter: TypeAdapter[T], body: Body, what: str) -> T:
    try:
        return adapter.validate_json(body)
    except ValidationError as e:
        raise ParseError(f"Error parsing {what}: {_describe(e)}") from e


def decode_repository(body: Body) -> Repository:
    return _decode(_repository, body, "repository")


def decode_repositories(body: Body) -> list[Repository]:
    return _decode(_repositories, body, "repositories")


def decode_issues(body: Body) -> list[Issue]:
    """Issues come back in the order GitHub listed them, labels included."""
    return _decode(_issues, body, "issues")


def decode_notifications(body: Body) -> list[Notification]:
    return _decode(_notifications, body, "notifications")


def decode_search(body: Body) -> SearchResult:
    """A missing or non-list ``items`` is a :class:`ParseError`."""
    return _decode(_search, body, "search results")
