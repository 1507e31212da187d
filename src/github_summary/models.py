"""Data models for github-summary.

Read-only projections of GitHub REST API payloads. Keys GitHub documents as
nullable must still be present in the payload but may be ``null``.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Shared pieces ─────────────────────────────────────────────────────────

class Owner(_Record):
    """The account that owns a repository."""

    login: str


class License(_Record):
    """A repository's detected license."""

    name: str


# ── Repositories ──────────────────────────────────────────────────────────

class Repository(_Record):
    """A GitHub repository (``/repos/{owner}/{repo}``, ``/user/repos``)."""

    name: str
    description: Optional[str]
    owner: Owner
    language: Optional[str]
    default_branch: str
    license: Optional[License]
    size: int  # KB
    stars: int = Field(alias="stargazers_count")
    forks: int = Field(alias="forks_count")
    url: str = Field(alias="html_url")

    @property
    def owner_login(self) -> str:
        return self.owner.login

    @property
    def license_name(self) -> Optional[str]:
        return self.license.name if self.license else None


class SearchItem(_Record):
    """One hit from ``/search/repositories``."""

    name: str
    description: Optional[str]
    owner: Owner
    stars: int = Field(alias="stargazers_count")
    forks: int = Field(alias="forks_count")
    url: str = Field(alias="html_url")

    @property
    def owner_login(self) -> str:
        return self.owner.login


class SearchResult(_Record):
    """The envelope returned by ``/search/repositories``."""

    total_count: Optional[int] = None
    items: list[SearchItem]


# ── Issues ────────────────────────────────────────────────────────────────

class Issue(_Record):
    """A GitHub issue, with its labels reduced to their names."""

    title: str
    state: str
    url: str = Field(alias="html_url")
    labels: list[str]
    created_at: datetime

    @field_validator("labels", mode="before")
    @classmethod
    def _label_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                label["name"] if isinstance(label, dict) and "name" in label else label
                for label in value
            ]
        return value


# ── Notifications ─────────────────────────────────────────────────────────

class NotificationSubject(_Record):
    """What a notification is about."""

    title: str
    url: Optional[str]


class Notification(_Record):
    """A notification thread from ``/notifications``."""

    id: str
    subject: NotificationSubject
    updated_at: datetime

    @property
    def title(self) -> str:
        return self.subject.title

    @property
    def url(self) -> Optional[str]:
        return self.subject.url
