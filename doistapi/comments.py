"""
Comment endpoints.

A comment is attached to exactly one task or one project. Listing and
creating therefore take exactly one of task_id / project_id; passing
neither or both is rejected before any request is sent.
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from .errors import require, require_exactly_one
from .pagination import PaginationFilters
from .transport import decode_model, decode_page
from .types import ALWAYS, OMIT_EMPTY, Maybe, body_field


@dataclass
class Comment:
    id: str
    content: str
    posted_uid: Optional[str] = None
    posted_at: Optional[str] = None
    item_id: Optional[str] = None
    project_id: Optional[str] = None
    file_attachment: Optional[dict[str, Any]] = None
    uids_to_notify: Optional[list[str]] = None
    is_deleted: bool = False
    reactions: Optional[dict[str, Any]] = None


@dataclass
class CommentFilters(PaginationFilters):
    """Exactly one of task_id or project_id must be set."""

    task_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    project_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)


@dataclass
class CommentOptions:
    """
    Body parameters for creating a comment. Exactly one of task_id or
    project_id must be set; content is passed separately.
    """

    content: str = body_field("", policy=ALWAYS)
    task_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    project_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    attachment: Maybe[dict[str, Any]] = body_field()
    uids_to_notify: Maybe[list[str]] = body_field()


class CommentsMixin:
    """Comment operations. Mixed into Client, which provides request()."""

    request: Callable[..., requests.Response]

    def get_comments(self, filters: CommentFilters) -> tuple[list[Comment], Optional[str]]:
        """
        List the comments of a task or of a project.

        Returns:
            (comments, next_cursor)

        Raises:
            ValidationError: Unless exactly one of task_id / project_id is set
        """
        filters = filters or CommentFilters()
        require_exactly_one(task_id=filters.task_id, project_id=filters.project_id)
        page = decode_page(self.request("GET", "/comments", query=filters), Comment)
        return page.results, page.next_cursor

    def create_comment(self, content: str, options: CommentOptions) -> Comment:
        """
        Add a comment to a task or a project.

        Args:
            content: Comment text (required, overrides options.content)
            options: Target (task_id or project_id) and optional attachment
        """
        require(content, "comment content is required")
        options = options or CommentOptions()
        require_exactly_one(task_id=options.task_id, project_id=options.project_id)
        body = dataclasses.replace(options, content=content)
        return decode_model(self.request("POST", "/comments", body=body), Comment)

    def get_comment(self, comment_id: str) -> Comment:
        require(comment_id, "comment ID is required")
        return decode_model(self.request("GET", f"/comments/{comment_id}"), Comment)

    def update_comment(self, comment_id: str, content: str) -> Comment:
        require(comment_id, "comment ID is required")
        require(content, "comment content is required")
        response = self.request("POST", f"/comments/{comment_id}", body={"content": content})
        return decode_model(response, Comment)

    def delete_comment(self, comment_id: str) -> None:
        require(comment_id, "comment ID is required")
        self.request("DELETE", f"/comments/{comment_id}")
