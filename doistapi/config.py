"""
Configuration via environment variables.

Environment variables:
  TODOIST_API_KEY   - Todoist API key (required)
  TODOIST_BASE_URL  - REST base URL (default: https://api.todoist.com/api/v1)
  TODOIST_SYNC_URL  - Sync API endpoint (default: https://api.todoist.com/api/v1/sync)
  TODOIST_TIMEOUT   - Request timeout in seconds (default: 30)
  TODOIST_DEBUG     - Enable debug logging (any non-empty value = true)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SYNC_URL


@dataclass(frozen=True)
class Config:
    """Runtime configuration for a Client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    sync_url: str = SYNC_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("API key is required")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If the API key is missing or the timeout is not a number
        """
        env = os.environ if environ is None else environ

        api_key = env.get('TODOIST_API_KEY', '')
        if not api_key:
            logging.error(
                "No API key set. Set the environment variable TODOIST_API_KEY."
            )
            raise ValueError("API key is required")

        raw_timeout = env.get('TODOIST_TIMEOUT', '')
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"TODOIST_TIMEOUT must be a number, got {raw_timeout!r}") from None

        return cls(
            api_key=api_key,
            base_url=env.get('TODOIST_BASE_URL') or DEFAULT_BASE_URL,
            sync_url=env.get('TODOIST_SYNC_URL') or SYNC_URL,
            timeout=timeout,
            debug=bool(env.get('TODOIST_DEBUG')),
        )


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for applications using doistapi.

    Args:
        debug: If True, set level to DEBUG (logs every request URL)
    """
    level = logging.DEBUG if debug else logging.INFO

    fmt = '%(asctime)s %(levelname)-8s %(message)s'
    datefmt = '%Y-%m-%d %H:%M:%S'

    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt=datefmt,
        handlers=[logging.StreamHandler()],
    )
