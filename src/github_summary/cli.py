"""CLI entry point for github-summary."""

import logging
from typing import Callable, Optional

import typer
from rich.console import Console

from github_summary.client import GitHubClient, parse_repo_slug
from github_summary.config import Settings, load_settings
from github_summary.errors import GitHubSummaryError
from github_summary.logging import configure_logging
from github_summary.render import (
    render_issues,
    render_notifications,
    render_repository,
    render_repository_list,
    render_search_results,
)
from github_summary.token_store import TokenStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="githubcli",
    help="Summaries of GitHub repositories, issues and notifications.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Summaries are data, not markup: print them exactly as built.
console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, markup=False, highlight=False, soft_wrap=True)

USAGE = """\
Usage: githubcli [options]
Options:
  -save-token                   Save GitHub Token
  -all-repo                     Fetch all repositories for the authenticated user
  -search-repo <query>          Search for a GitHub repository
  -show-repo <owner/repo>       Show details of a GitHub repository
  -query-issues <owner/repo>    Query issues for a specific repository
  -notify                       Check notifications for the user
  -verbose                      Log debug output to stderr"""


def _repo_slug(value: str, option: str) -> str:
    """Check OWNER/REPO for the option that is about to run."""
    try:
        parse_repo_slug(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=f"'{option}'")
    return value.strip()


def _print(lines: list[str]) -> None:
    for line in lines:
        console.print(line)


# ── Operations ────────────────────────────────────────────────────────────

def save_token(store: TokenStore) -> None:
    token = typer.prompt("Enter your GitHub Personal Access Token", hide_input=True)
    store.save(token)
    console.print("Token saved successfully!", style="green")


def _with_client(
    settings: Settings, store: TokenStore, fetch: Callable[[GitHubClient], list[str]]
) -> None:
    """Load the token, run *fetch*, then print everything it rendered."""
    token = store.load()
    with GitHubClient(token, base_url=settings.api_url, timeout=settings.timeout) as client:
        lines = fetch(client)
    _print(lines)


# ── Command ───────────────────────────────────────────────────────────────

@app.command()
def main(
    save_token_flag: bool = typer.Option(
        False, "-save-token", "--save-token", help="Save GitHub Token."
    ),
    all_repo: bool = typer.Option(
        False,
        "-all-repo",
        "--all-repo",
        help="Fetch all repositories for the authenticated user.",
    ),
    search_repo: Optional[str] = typer.Option(
        None,
        "-search-repo",
        "--search-repo",
        metavar="QUERY",
        help="Search for a GitHub repository.",
    ),
    show_repo: Optional[str] = typer.Option(
        None,
        "-show-repo",
        "--show-repo",
        metavar="OWNER/REPO",
        help="Show details of a GitHub repository.",
    ),
    query_issues: Optional[str] = typer.Option(
        None,
        "-query-issues",
        "--query-issues",
        metavar="OWNER/REPO",
        help="Query issues for a specific repository.",
    ),
    notify: bool = typer.Option(
        False, "-notify", "--notify", help="Check notifications for the user."
    ),
    verbose: bool = typer.Option(
        False, "-verbose", "--verbose", help="Log debug output to stderr."
    ),
) -> None:
    """Summaries of GitHub repositories, issues and notifications."""
    try:
        settings = load_settings()
        configure_logging("DEBUG" if verbose else settings.log_level)
        store = TokenStore(settings.token_file)

        # First selected operation wins, in this order.
        if save_token_flag:
            save_token(store)
        elif all_repo:
            _with_client(
                settings, store,
                lambda c: render_repository_list(c.fetch_user_repos()),
            )
        elif search_repo is not None:
            _with_client(
                settings, store,
                lambda c: render_search_results(c.search_repositories(search_repo)),
            )
        elif show_repo is not None:
            slug = _repo_slug(show_repo, "-show-repo")
            _with_client(
                settings, store,
                lambda c: render_repository(c.fetch_repository(slug)),
            )
        elif query_issues is not None:
            slug = _repo_slug(query_issues, "-query-issues")
            _with_client(
                settings, store,
                lambda c: render_issues(c.fetch_issues(slug)),
            )
        elif notify:
            _with_client(
                settings, store,
                lambda c: render_notifications(c.fetch_notifications()),
            )
        else:
            _print(USAGE.splitlines())
    except GitHubSummaryError as e:
        logger.debug("Command failed", exc_info=True)
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(code=e.exit_code)


if __name__ == "__main__":
    app()
