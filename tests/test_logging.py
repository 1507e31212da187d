"""Tests for logging setup."""

import logging

import pytest

from github_summary.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_single_handler_on_reconfigure(self):
        configure_logging("info")
        configure_logging("warning")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING

    def test_httpx_quiet_unless_debug(self):
        configure_logging("INFO")
        assert logging.getLogger("httpx").level == logging.WARNING
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.DEBUG
