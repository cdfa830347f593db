"""
Project endpoints.

Personal and workspace projects share most of their keys, so both are
decoded into a single Project type; workspace-only keys stay None for
personal projects.
"""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from .errors import require
from .models import Collaborator
from .pagination import PaginationFilters
from .transport import decode_model, decode_page
from .types import Maybe, body_field


@dataclass
class Project:
    """A Todoist project."""

    id: str
    name: str
    can_assign_tasks: bool = False
    child_order: int = 0
    color: Optional[str] = None
    created_at: Optional[str] = None
    is_archived: bool = False
    is_deleted: bool = False
    is_favorite: bool = False
    is_frozen: bool = False
    updated_at: Optional[str] = None
    view_style: Optional[str] = None
    default_order: int = 0
    description: str = ""
    access: Optional[dict[str, Any]] = None
    collaborator_role_default: Optional[str] = None
    folder_id: Optional[str] = None
    is_invite_only: Optional[bool] = None
    is_link_sharing_enabled: bool = False
    role: Optional[str] = None
    status: Optional[str] = None
    workspace_id: Optional[str] = None
    parent_id: Optional[str] = None
    inbox_project: bool = False
    is_collapsed: bool = False
    is_shared: bool = False


@dataclass
class ProjectOptions:
    """
    Body parameters for creating or updating a project.

    parent_id=None is sent as null, which moves the project to the root.
    """

    name: Maybe[str] = body_field()
    description: Maybe[str] = body_field()
    parent_id: Maybe[str] = body_field()
    color: Maybe[str] = body_field()
    is_favorite: Maybe[bool] = body_field()
    view_style: Maybe[str] = body_field()


class ProjectsMixin:
    """Project operations. Mixed into Client, which provides request()."""

    request: Callable[..., requests.Response]

    def get_projects(
        self,
        pagination: Optional[PaginationFilters] = None,
    ) -> tuple[list[Project], Optional[str]]:
        """
        List active projects.

        Returns:
            (projects, next_cursor); next_cursor is None on the last page
        """
        page = decode_page(self.request("GET", "/projects", query=pagination), Project)
        return page.results, page.next_cursor

    def get_archived_projects(
        self,
        pagination: Optional[PaginationFilters] = None,
    ) -> tuple[list[Project], Optional[str]]:
        """List archived projects."""
        page = decode_page(self.request("GET", "/projects/archived", query=pagination), Project)
        return page.results, page.next_cursor

    def create_project(self, name: str, options: Optional[ProjectOptions] = None) -> Project:
        """
        Create a project.

        Args:
            name: Project name (required, overrides options.name)
            options: Additional project fields
        """
        require(name, "project name is required")
        body = dataclasses.replace(options or ProjectOptions(), name=name)
        return decode_model(self.request("POST", "/projects", body=body), Project)

    def get_project(self, project_id: str) -> Project:
        require(project_id, "project ID is required")
        return decode_model(self.request("GET", f"/projects/{project_id}"), Project)

    def update_project(self, project_id: str, options: ProjectOptions) -> Project:
        require(project_id, "project ID is required")
        require(options, "project options are required")
        response = self.request("POST", f"/projects/{project_id}", body=options)
        return decode_model(response, Project)

    def archive_project(self, project_id: str) -> None:
        """Archive a project and its descendants."""
        require(project_id, "project ID is required")
        self.request("POST", f"/projects/{project_id}/archive")

    def unarchive_project(self, project_id: str) -> None:
        require(project_id, "project ID is required")
        self.request("POST", f"/projects/{project_id}/unarchive")

    def delete_project(self, project_id: str) -> None:
        """Delete a project together with its sections and tasks."""
        require(project_id, "project ID is required")
        self.request("DELETE", f"/projects/{project_id}")

    def get_project_collaborators(
        self,
        project_id: str,
        pagination: Optional[PaginationFilters] = None,
    ) -> tuple[list[Collaborator], Optional[str]]:
        """List the collaborators of a shared project."""
        require(project_id, "project ID is required")
        response = self.request("GET", f"/projects/{project_id}/collaborators", query=pagination)
        page = decode_page(response, Collaborator)
        return page.results, page.next_cursor
