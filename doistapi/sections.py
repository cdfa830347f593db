"""
Section endpoints. A section always belongs to a project.
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
class Section:
    id: str
    name: str
    project_id: Optional[str] = None
    user_id: Optional[str] = None
    added_at: Optional[str] = None
    updated_at: Optional[str] = None
    archived_at: Optional[str] = None
    # Position among the other sections of the same project
    section_order: int = 0
    is_archived: bool = False
    is_deleted: bool = False
    is_collapsed: bool = False


@dataclass
class SectionOptions:
    """Body parameters for creating or updating a section."""

    name: Maybe[str] = body_field()
    project_id: Maybe[str] = body_field()
    order: Maybe[int] = body_field()


@dataclass
class SectionFilters(PaginationFilters):
    """Query parameters for listing sections, optionally of one project."""

    project_id: Optional[str] = body_field(None, policy=OMIT_EMPTY)


class SectionsMixin:
    """Section operations. Mixed into Client, which provides request()."""

    request: Callable[..., requests.Response]

    def create_section(
        self,
        name: str,
        project_id: str,
        options: Optional[SectionOptions] = None,
    ) -> Section:
        """
        Create a section in a project.

        Args:
            name: Section name (required, overrides options.name)
            project_id: Owning project (required, overrides options.project_id)
            options: Additional section fields
        """
        require(name, "section name is required")
        require(project_id, "project ID is required")
        body = dataclasses.replace(options or SectionOptions(), name=name, project_id=project_id)
        return decode_model(self.request("POST", "/sections", body=body), Section)

    def get_sections(
        self,
        filters: Optional[SectionFilters] = None,
    ) -> tuple[list[Section], Optional[str]]:
        """
        List active sections of every project, or of filters.project_id.

        Returns:
            (sections, next_cursor)
        """
        page = decode_page(self.request("GET", "/sections", query=filters), Section)
        return page.results, page.next_cursor

    def get_section(self, section_id: str) -> Section:
        require(section_id, "section ID is required")
        return decode_model(self.request("GET", f"/sections/{section_id}"), Section)

    def update_section(self, section_id: str, name: str) -> Section:
        """Rename a section."""
        require(section_id, "section ID is required")
        require(name, "section name is required")
        response = self.request("POST", f"/sections/{section_id}", body=SectionOptions(name=name))
        return decode_model(response, Section)

    def delete_section(self, section_id: str) -> None:
        """Delete a section and all of its tasks."""
        require(section_id, "section ID is required")
        self.request("DELETE", f"/sections/{section_id}")
