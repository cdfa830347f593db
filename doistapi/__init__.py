"""
doistapi - Python client for the Todoist REST and Sync APIs.

Re-exports the public API.
"""

from .api import Client
from .comments import Comment, CommentFilters, CommentOptions
from .config import Config, setup_logging
from .errors import (
    APIError,
    DecodeError,
    TodoistError,
    TransportError,
    ValidationError,
)
from .labels import Label, LabelOptions, SharedLabelFilters
from .pagination import PaginationFilters, PaginationResponse, flatten_pages, iter_pages
from .projects import Project, ProjectOptions
from .sections import Section, SectionFilters, SectionOptions
from .sync import Command, Sync, SyncReadResponse, SyncWriteResponse
from .tasks import Task, TaskFilters, TaskOptions
from .transport import DEFAULT_BASE_URL, LEGACY_REST_BASE_URL, SYNC_URL
from .types import UNSET

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "Client",
    "Command",
    "Comment",
    "CommentFilters",
    "CommentOptions",
    "Config",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "LEGACY_REST_BASE_URL",
    "Label",
    "LabelOptions",
    "PaginationFilters",
    "PaginationResponse",
    "Project",
    "ProjectOptions",
    "Section",
    "SectionFilters",
    "SectionOptions",
    "SYNC_URL",
    "SharedLabelFilters",
    "Sync",
    "SyncReadResponse",
    "SyncWriteResponse",
    "Task",
    "TaskFilters",
    "TaskOptions",
    "TodoistError",
    "TransportError",
    "UNSET",
    "ValidationError",
    "flatten_pages",
    "iter_pages",
    "setup_logging",
]
