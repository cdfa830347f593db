"""
Cursor pagination.

Paginated endpoints answer with {"results": [...], "next_cursor": ...}.
A null next_cursor means there are no more pages. A non-null cursor is an
opaque string that must be sent back unchanged as the `cursor` parameter,
together with the same filter values used for the previous request.

List operations return `(results, next_cursor)`. To walk every page:

    for page in iter_pages(client.get_tasks, TaskFilters(project_id="42")):
        ...

or collect everything at once with flatten_pages().
"""

from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .types import OMIT_EMPTY, body_field

T = TypeVar("T")
F = TypeVar("F", bound="PaginationFilters")


@dataclass
class PaginationFilters:
    """Page size and cursor for a paginated request. Base of every list filter."""

    cursor: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    limit: Optional[int] = body_field(None, policy=OMIT_EMPTY)


@dataclass
class PaginationResponse(Generic[T]):
    """One decoded page."""

    results: list[T] = field(default_factory=list)
    next_cursor: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_cursor)


def iter_pages(
    fetch: Callable[[F], tuple[list[T], Optional[str]]],
    filters: Optional[F] = None,
) -> Iterator[list[T]]:
    """
    Yield the results of each page in order until the cursor runs out.

    A None cursor ends iteration, and so does "": an empty cursor is
    the same as no cursor (it is never sent), so following it would
    fetch the first page again.

    Args:
        fetch: A list operation taking a filters object and returning
            (results, next_cursor), e.g. client.get_tasks
        filters: Initial filters; defaults to PaginationFilters()

    Yields:
        The list of results of every page
    """
    current: Any = filters if filters is not None else PaginationFilters()
    page_no = 0
    while True:
        results, next_cursor = fetch(current)
        page_no += 1
        logging.debug("Fetched page %d (%d results)", page_no, len(results))
        yield results
        if not next_cursor:
            return
        current = dataclasses.replace(current, cursor=next_cursor)


def flatten_pages(
    fetch: Callable[[F], tuple[list[T], Optional[str]]],
    filters: Optional[F] = None,
) -> list[T]:
    """
    Fetch every page and concatenate the results.

    Args:
        fetch: A list operation, see iter_pages()
        filters: Initial filters

    Returns:
        Flattened list of all items across pages, in page order
    """
    result: list[T] = []
    for page in iter_pages(fetch, filters):
        result.extend(page)
    return result
