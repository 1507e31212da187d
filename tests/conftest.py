"""Pytest configuration and fixtures."""

import pytest


def make_repo(name="hello", language="Go", **overrides):
    """A /repos or /user/repos payload entry."""
    repo = {
        "name": name,
        "description": f"{name} description",
        "owner": {"login": "octocat"},
        "language": language,
        "default_branch": "main",
        "license": {"name": "MIT License"},
        "size": 128,
        "stargazers_count": 5,
        "forks_count": 2,
        "html_url": f"https://github.com/octocat/{name}",
    }
    repo.update(overrides)
    return repo


def make_issue(title="Bug", labels=(), **overrides):
    issue = {
        "title": title,
        "state": "open",
        "html_url": "https://github.com/octocat/hello/issues/1",
        "labels": [{"name": label, "color": "ededed"} for label in labels],
        "created_at": "2025-01-15T10:00:00Z",
    }
    issue.update(overrides)
    return issue


@pytest.fixture
def sample_repo():
    return make_repo()


@pytest.fixture
def sample_notification():
    return {
        "id": "1234",
        "subject": {
            "title": "Fix the build",
            "url": "https://api.github.com/repos/octocat/hello/pulls/7",
            "type": "PullRequest",
        },
        "updated_at": "2025-02-01T08:30:00Z",
    }


@pytest.fixture
def token_file(tmp_path):
    return tmp_path / "github_token.txt"


@pytest.fixture
def cli_env(monkeypatch, token_file):
    """Point the CLI at a temporary token file and the default API URL."""
    monkeypatch.setenv("GITHUB_SUMMARY_TOKEN_FILE", str(token_file))
    monkeypatch.delenv("GITHUB_SUMMARY_API_URL", raising=False)
    monkeypatch.delenv("GITHUB_SUMMARY_TIMEOUT", raising=False)
    monkeypatch.delenv("GITHUB_SUMMARY_LOG_LEVEL", raising=False)
    return token_file
