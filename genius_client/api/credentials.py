"""
Credential store module.

This module holds the bearer token used to authorize Genius API requests.
Each client owns its own store, so independently configured clients can
live side by side in the same process.
"""

import getpass
import logging
import os
from typing import Callable, Optional

from ..constants import TOKEN_ENV_VAR
from .errors import MissingCredentialError

logger = logging.getLogger(__name__)

TokenPrompt = Callable[[str], str]

PROMPT_MESSAGE = (
    f"The '{TOKEN_ENV_VAR}' environment variable is not set. "
    "Please enter your Genius API token: "
)


def prompt_for_token(message: str = PROMPT_MESSAGE) -> str:
    """Read a token from the terminal without echoing it."""
    return getpass.getpass(message)


class CredentialStore:
    """
    Holds a single bearer token for one client.

    Lookup order on ``get``:
    1. Token set explicitly (constructor or ``set``)
    2. Environment variable, read at call time
    3. One-time prompt callback, if configured

    The token is never written to disk.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        env_var: Optional[str] = TOKEN_ENV_VAR,
        prompt: Optional[TokenPrompt] = None,
    ):
        self._token: Optional[str] = None
        self.env_var = env_var
        self.prompt = prompt
        if token is not None:
            self.set(token)

    def set(self, token: str) -> None:
        """Set or overwrite the token for this store."""
        if token is None or not token.strip():
            raise MissingCredentialError(
                "The Genius API token cannot be empty. Please provide a valid token."
            )
        self._token = token.strip()
        logger.debug("Genius API token has been set")

    def clear(self) -> None:
        self._token = None

    @property
    def is_set(self) -> bool:
        return self._token is not None

    def peek(self) -> Optional[str]:
        """Return the token if available without prompting."""
        if self._token:
            return self._token
        if self.env_var:
            env_token = os.getenv(self.env_var, "").strip()
            if env_token:
                return env_token
        return None

    def get(self) -> str:
        """
        Return the token, prompting once if it is not available.

        Raises:
            MissingCredentialError: If no token can be obtained
        """
        token = self.peek()
        if token:
            return token

        if self.prompt is not None:
            entered = (self.prompt(PROMPT_MESSAGE) or "").strip()
            if entered:
                self._token = entered
                logger.info("Genius API token provided interactively")
                return entered

        raise MissingCredentialError()
