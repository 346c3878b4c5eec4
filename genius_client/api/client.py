"""
Genius API client management module.

This module handles client creation and the single authorized GET that
every endpoint wrapper is built on.
"""

import logging
import time
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import httpx

from ..constants import DEFAULT_BASE_URL, TEXT_FORMATS
from ..utils.logging import log_request_event, log_request_failure
from .credentials import CredentialStore, TokenPrompt
from .errors import RequestFailedError

if TYPE_CHECKING:
    from ..config import Env

logger = logging.getLogger(__name__)


class GeniusClient:
    """
    Authorized, read-only client for the Genius REST API.

    Each instance owns its credential store and its HTTP connection pool.
    Every ``execute`` call issues exactly one GET request; there are no
    retries and no caching.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        credentials: Optional[CredentialStore] = None,
        prompt: Optional[TokenPrompt] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        if credentials is None:
            credentials = CredentialStore(token=token, prompt=prompt)
        elif token is not None:
            credentials.set(token)
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    @classmethod
    def from_env(cls, env: "Env", **kwargs) -> "GeniusClient":
        """Create a client from a loaded ``Env`` configuration."""
        return cls(token=env.GENIUS_API_TOKEN, base_url=env.GENIUS_API_BASE_URL, **kwargs)

    def set_token(self, token: str) -> None:
        self.credentials.set(token)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def execute(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        text_format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Issue one authorized GET request and return the parsed JSON document.

        Args:
            path: Path relative to the API base (e.g. ``songs/378195``)
            params: Query parameters; entries whose value is None are omitted
            text_format: Optional text format (dom, plain or html)

        Returns:
            Parsed JSON document with nested objects preserved

        Raises:
            MissingCredentialError: If no token is available
            RequestFailedError: If the server answers with a status other than 200
            ValueError: If ``text_format`` is not a supported format
        """
        query: Dict[str, Any] = {}
        if params:
            query.update({key: value for key, value in params.items() if value is not None})

        if text_format is not None:
            if text_format not in TEXT_FORMATS:
                raise ValueError(
                    f"Invalid text_format '{text_format}'. Choose from: {', '.join(TEXT_FORMATS)}"
                )
            query["text_format"] = text_format

        token = self.credentials.get()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

        started = time.monotonic()
        response = self._http.get(self.url_for(path), params=query, headers=headers)
        duration = time.monotonic() - started
        log_request_event(path, query, response.status_code, duration, logger=logger)

        if response.status_code != 200:
            body = response.text
            log_request_failure(path, response.status_code, body, logger=logger)
            raise RequestFailedError(response.status_code, body, path=path)

        return response.json()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "GeniusClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_genius_client(
    token: Optional[str] = None,
    base_url: Optional[str] = None,
    **kwargs,
) -> GeniusClient:
    """
    Create and initialize a Genius client.

    When no explicit token or base URL is given, values are taken from the
    loaded environment configuration if one exists.
    """
    from ..config import ConfigError, Env

    try:
        env = Env.current()
    except ConfigError:
        env = None

    if env is not None:
        token = token if token is not None else env.GENIUS_API_TOKEN
        base_url = base_url or env.GENIUS_API_BASE_URL

    client = GeniusClient(token=token, base_url=base_url or DEFAULT_BASE_URL, **kwargs)
    logger.info("Genius client initialized successfully")
    return client
