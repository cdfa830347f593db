"""
HTTP transport shared by the REST client and the Sync API.

One function issues one request: no retries, no backoff, no rate-limit
handling. Failures are mapped onto the doistapi error taxonomy:

  - requests exceptions      -> TransportError (cause chained)
  - HTTP status >= 400        -> APIError (body truncated to 100 chars)
  - malformed response bodies -> DecodeError
"""

from __future__ import annotations
import json
import logging
from typing import Any, Mapping, Optional

import requests

from .errors import APIError, DecodeError, TransportError, ValidationError
from .pagination import PaginationResponse
from .types import from_payload, to_payload

DEFAULT_BASE_URL = "https://api.todoist.com/api/v1"
LEGACY_REST_BASE_URL = "https://api.todoist.com/rest/v2"
# The Sync API only exists under v1, whatever REST base is in use
SYNC_URL = "https://api.todoist.com/api/v1/sync"
DEFAULT_TIMEOUT = 30.0

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def send(
    session: requests.Session,
    method: str,
    url: str,
    *,
    api_key: str,
    params: Optional[Mapping[str, str]] = None,
    json_body: Any = None,
    form: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> requests.Response:
    """
    Issue a single authenticated request.

    Args:
        session: requests.Session (or compatible) used to send the request
        method: HTTP method
        url: Absolute URL
        api_key: Bearer token
        params: Already-encoded query parameters
        json_body: JSON-ready body, sent as application/json
        form: Form fields, sent as application/x-www-form-urlencoded
        timeout: Seconds before the request is abandoned

    Returns:
        The response, status < 400

    Raises:
        TransportError: If no response was obtained
        APIError: If the API answered with status >= 400
    """
    headers = {'Authorization': f'Bearer {api_key}'}
    data: Any = None

    if json_body is not None:
        try:
            data = json.dumps(json_body)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Could not serialize request body: {e}", e) from e
        headers['Content-Type'] = JSON_CONTENT_TYPE
    elif form is not None:
        data = dict(form)
        headers['Content-Type'] = FORM_CONTENT_TYPE

    logging.debug("%s %s", method, url)
    try:
        response = session.request(
            method,
            url,
            params=params or None,
            data=data,
            headers=headers,
            timeout=timeout,
        )
    except requests.RequestException as e:
        logging.error("Request %s %s failed: %s", method, url, e)
        raise TransportError(f"{method} {url} failed: {e}", e) from e

    if response.status_code >= 400:
        status = f"{response.status_code} {response.reason or ''}".strip()
        error = APIError(response.status_code, status, response.text)
        logging.error("HTTP error from %s %s: %s", method, url, error)
        raise error

    return response


def _stringify(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, dict)):
        raise ValidationError(
            f"query parameter '{key}' must be a single value; join lists before encoding"
        )
    return str(value)


def encode_query(query: Any) -> dict[str, str]:
    """
    Encode a filters object into query parameters.

    The value goes through a JSON round-trip into a generic map (this applies
    the per-field presence policy and JSON key names), then each value is
    rendered with its default string form. None values are dropped.

    Args:
        query: Filters dataclass, mapping, or None

    Returns:
        Mapping of parameter name to string value

    Raises:
        ValidationError: If a value is a list or object
    """
    if query is None:
        return {}
    try:
        generic = json.loads(json.dumps(to_payload(query)))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Could not encode query parameters: {e}") from e

    return {
        key: _stringify(key, value)
        for key, value in generic.items()
        if value is not None
    }


def decode_json(response: requests.Response) -> Any:
    """Parse the response body as JSON, raising DecodeError on failure."""
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e


def decode_model(response: requests.Response, cls: type) -> Any:
    """Decode the response body into a single entity of type `cls`."""
    return from_payload(cls, decode_json(response))


def decode_page(response: requests.Response, cls: Optional[type] = None) -> PaginationResponse:
    """
    Decode a paginated response.

    A bare JSON array (non-paginated or legacy REST v2 endpoints) is
    treated as a single, final page.

    Args:
        response: HTTP response
        cls: Entity type for each result; None keeps raw values

    Returns:
        PaginationResponse with decoded results
    """
    payload = decode_json(response)

    if isinstance(payload, list):
        items, next_cursor = payload, None
    elif isinstance(payload, dict):
        items = payload.get('results')
        next_cursor = payload.get('next_cursor')
        if not isinstance(items, list):
            raise DecodeError(
                "Paginated response has no 'results' array. Keys: %s" % list(payload.keys())
            )
        if next_cursor is not None and not isinstance(next_cursor, str):
            raise DecodeError(f"next_cursor must be a string or null, got {next_cursor!r}")
    else:
        raise DecodeError(f"Unexpected paginated response type {type(payload).__name__}")

    if cls is not None:
        items = [from_payload(cls, item) for item in items]
    return PaginationResponse(results=items, next_cursor=next_cursor)
