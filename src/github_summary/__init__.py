"""GitHub Summary — command-line summaries of GitHub repositories,
issues and notifications.

Authenticates against the GitHub REST API with a saved personal access
token and prints plain-text reports.
"""

__version__ = "0.1.0"
