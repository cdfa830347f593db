"""
Label endpoints.

Personal labels are full objects. Shared labels only exist as names on
tasks, so they are handled as plain strings.
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .errors import require
from .pagination import PaginationFilters
from .transport import decode_model, decode_page
from .types import OMIT_EMPTY, Maybe, body_field


@dataclass
class Label:
    id: str
    name: str
    color: Optional[str] = None
    order: Optional[int] = None
    is_favorite: bool = False


@dataclass
class LabelOptions:
    """Body parameters for creating or updating a personal label."""

    name: Maybe[str] = body_field()
    order: Maybe[int] = body_field()
    color: Maybe[str] = body_field()
    is_favorite: Maybe[bool] = body_field()


@dataclass
class SharedLabelFilters(PaginationFilters):
    """Set omit_personal to leave the user's personal label names out."""

    omit_personal: Optional[bool] = body_field(None, policy=OMIT_EMPTY)


class LabelsMixin:
    """Label operations. Mixed into Client, which provides request()."""

    request: Callable[..., requests.Response]

    def get_labels(
        self,
        pagination: Optional[PaginationFilters] = None,
    ) -> tuple[list[Label], Optional[str]]:
        """
        List personal labels.

        Returns:
            (labels, next_cursor)
        """
        page = decode_page(self.request("GET", "/labels", query=pagination), Label)
        return page.results, page.next_cursor

    def create_label(self, name: str, options: Optional[LabelOptions] = None) -> Label:
        """
        Create a personal label.

        Args:
            name: Label name (required, overrides options.name)
            options: Additional label fields
        """
        require(name, "label name is required")
        body = dataclasses.replace(options or LabelOptions(), name=name)
        return decode_model(self.request("POST", "/labels", body=body), Label)

    def get_label(self, label_id: str) -> Label:
        require(label_id, "label ID is required")
        return decode_model(self.request("GET", f"/labels/{label_id}"), Label)

    def update_label(self, label_id: str, options: LabelOptions) -> Label:
        require(label_id, "label ID is required")
        require(options, "label options are required")
        response = self.request("POST", f"/labels/{label_id}", body=options)
        return decode_model(response, Label)

    def delete_label(self, label_id: str) -> None:
        """Delete a personal label. It is removed from every task."""
        require(label_id, "label ID is required")
        self.request("DELETE", f"/labels/{label_id}")

    def get_shared_labels(
        self,
        filters: Optional[SharedLabelFilters] = None,
    ) -> tuple[list[str], Optional[str]]:
        """
        List the distinct label names used on active tasks.

        Personal label names are included unless filters.omit_personal is set.

        Returns:
            (label names, next_cursor)
        """
        page = decode_page(self.request("GET", "/labels/shared", query=filters))
        return page.results, page.next_cursor

    def remove_shared_label(self, name: str) -> None:
        """
        Remove a shared label from every active task. Succeeds even when
        no task carries the label.
        """
        require(name, "label name is required")
        self.request("POST", "/labels/shared/remove", body={"name": name})

    def rename_shared_label(self, name: str, new_name: str) -> None:
        """Rename a shared label on every active task."""
        require(name, "label name is required")
        require(new_name, "new label name is required")
        self.request(
            "POST",
            "/labels/shared/rename",
            body={"new_name": new_name},
            query={"name": name},
        )
