"""
Todoist API client.

Client wraps the REST API (one method per endpoint, mixed in from the
resource modules) and owns a Sync object for the Sync API. Both share
the API key and the HTTP session.
"""

from __future__ import annotations
import logging
from types import TracebackType
from typing import Any, Optional, TYPE_CHECKING

import requests

from .comments import CommentsMixin
from .errors import TransportError, require
from .labels import LabelsMixin
from .projects import ProjectsMixin
from .sections import SectionsMixin
from .sync import Sync
from .tasks import TasksMixin
from .transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SYNC_URL, encode_query, send
from .types import to_payload

if TYPE_CHECKING:
    from .config import Config

__all__ = [
    'Client',
    'DEFAULT_BASE_URL',
]


class Client(TasksMixin, ProjectsMixin, SectionsMixin, LabelsMixin, CommentsMixin):
    """
    Todoist REST + Sync client.

    Holds no per-call state: REST methods may be called from several
    threads. The `sync` attribute is stateful (token, command queue) and
    must be used from one logical session at a time.

    Usage:
        with Client(api_key) as client:
            tasks, cursor = client.get_tasks(TaskFilters(limit=50))
            snapshot = client.sync.read_resources(["projects", "items"])
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        sync_url: str = SYNC_URL,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Todoist API key (sent as a Bearer token)
            base_url: Versioned REST base, e.g. https://api.todoist.com/api/v1
            timeout: Default request timeout in seconds
            session: HTTP session to use; one is created (and owned) if omitted
            sync_url: Sync API endpoint; independent of base_url
        """
        require(api_key, "API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.sync = Sync(
            api_key,
            sync_url,
            session=self.session,
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: "Config", session: Optional[requests.Session] = None) -> "Client":
        """Build a client from a Config."""
        return cls(
            config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            session=session,
            sync_url=config.sync_url,
        )

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> "Client":
        """Build a client from TODOIST_* environment variables."""
        from .config import Config

        return cls.from_config(Config.from_env(), session=session)

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: Any = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """
        Send one request to the REST API.

        Args:
            method: HTTP method
            path: Path relative to base_url, e.g. "/tasks"
            body: Options dataclass or mapping, sent as JSON
            query: Filters dataclass or mapping, encoded as query parameters
            timeout: Overrides the client timeout for this call

        Returns:
            The response (status < 400); decoding is up to the caller

        Raises:
            ValidationError: If the query cannot be encoded
            TransportError: If the body cannot be serialized or no response was obtained
            APIError: If the API answered with status >= 400
        """
        url = f'{self.base_url}{path}'
        params = encode_query(query) if query is not None else None
        try:
            json_body = to_payload(body) if body is not None else None
        except (TypeError, ValueError) as e:
            raise TransportError(f"Could not serialize request body: {e}", e) from e
        return send(
            self.session,
            method,
            url,
            api_key=self.api_key,
            params=params,
            json_body=json_body,
            timeout=timeout if timeout is not None else self.timeout,
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()
            logging.debug("Todoist client session closed")

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
