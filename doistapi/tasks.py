"""
Task endpoints.

Tasks are called "items" in the Sync API; both return the same shape, so
Task is used for REST responses and for SyncReadResponse.items.
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import requests

from .errors import require, require_exactly_one
from .pagination import PaginationFilters
from .transport import decode_model, decode_page
from .types import OMIT_EMPTY, Maybe, body_field


@dataclass
class Task:
    """A Todoist task, as returned by the API."""

    id: str
    content: str
    user_id: Optional[str] = None
    project_id: Optional[str] = None
    section_id: Optional[str] = None
    parent_id: Optional[str] = None
    added_by_uid: Optional[str] = None
    assigned_by_uid: Optional[str] = None
    responsible_uid: Optional[str] = None
    labels: list[str] = field(default_factory=list)
    deadline: Optional[dict[str, Any]] = None
    duration: Optional[dict[str, Any]] = None
    checked: bool = False
    is_deleted: bool = False
    added_at: Optional[str] = None
    completed_at: Optional[str] = None
    updated_at: Optional[str] = None
    due: Optional[dict[str, Any]] = None
    priority: int = 1
    child_order: int = 0
    description: str = ""
    note_count: int = 0
    day_order: int = 0
    is_collapsed: bool = False


@dataclass
class TaskOptions:
    """
    Body parameters for creating or updating a task.

    Fields left UNSET are not sent. `duration` requires `duration_unit`
    ("minute" or "day").
    """

    content: Maybe[str] = body_field()
    description: Maybe[str] = body_field()
    project_id: Maybe[str] = body_field()
    section_id: Maybe[str] = body_field()
    parent_id: Maybe[str] = body_field()
    order: Maybe[int] = body_field()
    labels: Maybe[list[str]] = body_field()
    priority: Maybe[int] = body_field()
    assignee_id: Maybe[str] = body_field()
    due_string: Maybe[str] = body_field()
    due_date: Maybe[str] = body_field()
    due_datetime: Maybe[str] = body_field()
    due_lang: Maybe[str] = body_field()
    duration: Maybe[int] = body_field()
    duration_unit: Maybe[str] = body_field()
    deadline_date: Maybe[str] = body_field()
    deadline_lang: Maybe[str] = body_field()


@dataclass
class TaskFilters(PaginationFilters):
    """Query parameters for listing active tasks."""

    project_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    section_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    parent_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    label: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    # Comma separated list of task IDs
    ids: Optional[str] = body_field(None, policy=OMIT_EMPTY)


@dataclass
class TaskFilterQuery(PaginationFilters):
    """Query parameters for searching tasks with Todoist filter syntax."""

    query: Optional[str] = body_field(None, policy=OMIT_EMPTY)
    lang: Optional[str] = body_field(None, policy=OMIT_EMPTY)


class TasksMixin:
    """Task operations. Mixed into Client, which provides request()."""

    request: Callable[..., requests.Response]

    def create_task(self, content: str, options: Optional[TaskOptions] = None) -> Task:
        """
        Create a task.

        Args:
            content: Task content (required, overrides options.content)
            options: Additional task fields

        Returns:
            The created Task
        """
        require(content, "task content is required")
        body = dataclasses.replace(options or TaskOptions(), content=content)
        return decode_model(self.request("POST", "/tasks", body=body), Task)

    def get_tasks(self, filters: Optional[TaskFilters] = None) -> tuple[list[Task], Optional[str]]:
        """
        List active tasks.

        Returns:
            (tasks, next_cursor); next_cursor is None on the last page
        """
        page = decode_page(self.request("GET", "/tasks", query=filters), Task)
        return page.results, page.next_cursor

    def get_tasks_by_filter(
        self,
        query: str,
        lang: Optional[str] = None,
        pagination: Optional[PaginationFilters] = None,
    ) -> tuple[list[Task], Optional[str]]:
        """
        List tasks matching a filter query such as "today | overdue".

        Returns:
            (tasks, next_cursor)
        """
        require(query, "filter query is required")
        pagination = pagination or PaginationFilters()
        params = TaskFilterQuery(
            cursor=pagination.cursor,
            limit=pagination.limit,
            query=query,
            lang=lang,
        )
        page = decode_page(self.request("GET", "/tasks/filter", query=params), Task)
        return page.results, page.next_cursor

    def quick_add_task(
        self,
        text: str,
        note: Optional[str] = None,
        reminder: Optional[str] = None,
        auto_reminder: Optional[bool] = None,
    ) -> Task:
        """
        Create a task from natural language, the way the Todoist quick add
        bar does ("Buy milk tomorrow at 5pm #Errands @shop").
        """
        require(text, "quick add text is required")
        body: dict[str, Any] = {"text": text}
        if note:
            body["note"] = note
        if reminder:
            body["reminder"] = reminder
        if auto_reminder is not None:
            body["auto_reminder"] = auto_reminder
        return decode_model(self.request("POST", "/tasks/quick", body=body), Task)

    def get_task(self, task_id: str) -> Task:
        require(task_id, "task ID is required")
        return decode_model(self.request("GET", f"/tasks/{task_id}"), Task)

    def update_task(self, task_id: str, options: TaskOptions) -> Task:
        """Update the given task. Only fields set in options are sent."""
        require(task_id, "task ID is required")
        require(options, "task options are required")
        return decode_model(self.request("POST", f"/tasks/{task_id}", body=options), Task)

    def move_task(
        self,
        task_id: str,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        parent_id: Optional[str] = None,
    ) -> Task:
        """Move a task to exactly one of a project, a section or a parent task."""
        require(task_id, "task ID is required")
        target = require_exactly_one(
            project_id=project_id, section_id=section_id, parent_id=parent_id
        )
        destination = {
            "project_id": project_id,
            "section_id": section_id,
            "parent_id": parent_id,
        }[target]
        response = self.request("POST", f"/tasks/{task_id}/move", body={target: destination})
        return decode_model(response, Task)

    def close_task(self, task_id: str) -> None:
        """Complete a task. Recurring tasks move to their next occurrence."""
        require(task_id, "task ID is required")
        self.request("POST", f"/tasks/{task_id}/close")

    def reopen_task(self, task_id: str) -> None:
        """Reopen a completed task."""
        require(task_id, "task ID is required")
        self.request("POST", f"/tasks/{task_id}/reopen")

    def delete_task(self, task_id: str) -> None:
        require(task_id, "task ID is required")
        self.request("DELETE", f"/tasks/{task_id}")
