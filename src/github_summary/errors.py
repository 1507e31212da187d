"""Error taxonomy for github-summary.

Library code raises these; only the CLI turns them into messages and exit
codes.
"""


class GitHubSummaryError(Exception):
    """Base class for every error the CLI knows how to report."""

    exit_code = 1


class ConfigError(GitHubSummaryError):
    """Configuration is missing or invalid."""

    exit_code = 1


class NotConfiguredError(ConfigError):
    """No token has been saved yet."""


class TokenFileError(GitHubSummaryError):
    """The token file could not be read or written."""

    exit_code = 3


class NetworkError(GitHubSummaryError):
    """The request never produced a response."""

    exit_code = 4


class HTTPStatusError(GitHubSummaryError):
    """GitHub answered with a non-2xx status."""

    exit_code = 5

    def __init__(self, status_line: str, body: str) -> None:
        self.status_line = status_line
        self.body = body
        super().__init__(
            f"GitHub API returned an error: {status_line}\nDetails: {body}"
        )


class ParseError(GitHubSummaryError):
    """A response body did not match the expected JSON shape."""

    exit_code = 6
