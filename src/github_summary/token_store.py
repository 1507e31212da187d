"""Persist and retrieve the GitHub personal access token."""

import logging
import os
from pathlib import Path
from typing import Union

from github_summary.errors import ConfigError, NotConfiguredError, TokenFileError

logger = logging.getLogger(__name__)

TOKEN_FILE_MODE = 0o600

MISSING_TOKEN_MESSAGE = (
    "GitHub Token not found. Please save your token using the -save-token flag."
)

NON_ASCII_TOKEN_MESSAGE = (
    "GitHub Token contains non-ASCII characters. "
    "Save it again using the -save-token flag."
)


class TokenStore:
    """A single plaintext token in a file only its owner can read.

    Concurrent invocations are not synchronized; the last writer wins.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, token: str) -> None:
        """Write *token* verbatim, replacing any previous one."""
        if not token.isascii():
            raise ConfigError(NON_ASCII_TOKEN_MESSAGE)
        try:
            fd = os.open(
                self.path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                TOKEN_FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(token)
            # os.open only applies the mode when it creates the file.
            os.chmod(self.path, TOKEN_FILE_MODE)
        except OSError as e:
            raise TokenFileError(f"Failed to save token to {self.path}: {e}") from e
        logger.info("Token saved to %s", self.path)

    def load(self) -> str:
        """Return the stored token exactly as it was saved."""
        try:
            with open(self.path, encoding="utf-8", newline="") as fh:
                token = fh.read()
        except FileNotFoundError as e:
            raise NotConfiguredError(MISSING_TOKEN_MESSAGE) from e
        except UnicodeDecodeError as e:
            raise ConfigError(NON_ASCII_TOKEN_MESSAGE) from e
        except OSError as e:
            raise TokenFileError(f"Failed to read token from {self.path}: {e}") from e
        if not token:
            raise NotConfiguredError(MISSING_TOKEN_MESSAGE)
        if not token.isascii():
            # HTTP header values must be ASCII.
            raise ConfigError(NON_ASCII_TOKEN_MESSAGE)
        logger.debug("Token loaded from %s", self.path)
        return token
