"""
Todoist Sync API.

The Sync API is a single form-encoded POST endpoint used two ways:

  - read:  send a sync_token and a list of resource types, receive a
           snapshot of those collections plus a new sync_token
  - write: send a batch of queued commands, receive a per-command status
           (keyed by command UUID) and the real IDs of created resources
           (keyed by the temp_id chosen by the client)

Sync Token Convention
=====================
  - "*" requests a full sync of every requested resource type
  - any other value requests only the changes since that token

The token returned by each call is stored on the Sync object. Persist
`sync.sync_token` (and any unsent `sync.commands`) yourself if incremental
sync must survive a restart.

Resource types: labels, projects, items, notes, sections, filters,
reminders, reminders_location, locations, user, live_notifications,
collaborators, user_settings, notification_settings, user_plan_limits,
completed_info, stats, workspaces, workspace_users. "all" selects every
type and a "-" prefix excludes one, e.g. ["all", "-projects"].
"""

from __future__ import annotations
import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence
from uuid import uuid4

import requests

from .comments import Comment
from .errors import TransportError, ValidationError
from .labels import Label
from .models import (
    Collaborator,
    CollaboratorState,
    CompletedInfo,
    Filter,
    Reminder,
    User,
    UserPlanLimits,
    Workspace,
    WorkspaceUser,
)
from .projects import Project
from .sections import Section
from .tasks import Task
from .transport import DEFAULT_TIMEOUT, decode_json, send
from .types import from_payload, nested

FULL_SYNC_TOKEN = "*"
SYNC_STATUS_OK = "ok"

_COMPACT_JSON = (",", ":")


@dataclass
class Command:
    """
    A queued write for the Sync API.

    Args are passed through untouched since command types are defined by
    the API (item_add, project_update, ...). Give a temp_id to commands
    that create a resource so later commands in the same batch can refer
    to it before its real ID is known.
    """

    type: str
    args: dict[str, Any] = field(default_factory=dict)
    uuid: str = field(default_factory=lambda: str(uuid4()))
    temp_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type, "args": self.args, "uuid": self.uuid}
        if self.temp_id:
            data["temp_id"] = self.temp_id
        return data


@dataclass
class SyncReadResponse:
    """
    Snapshot returned by a read sync.

    Only the requested collections are present; every other collection
    stays None. Incremental syncs only contain changed objects.
    """

    sync_token: str
    full_sync: bool = False
    user: Optional[User] = nested(User)
    projects: Optional[list[Project]] = nested(Project, many=True)
    items: Optional[list[Task]] = nested(Task, many=True)
    notes: Optional[list[Comment]] = nested(Comment, many=True)
    project_notes: Optional[list[Comment]] = nested(Comment, many=True)
    sections: Optional[list[Section]] = nested(Section, many=True)
    labels: Optional[list[Label]] = nested(Label, many=True)
    filters: Optional[list[Filter]] = nested(Filter, many=True)
    day_orders: Optional[dict[str, int]] = None
    reminders: Optional[list[Reminder]] = nested(Reminder, many=True)
    collaborators: Optional[list[Collaborator]] = nested(Collaborator, many=True)
    collaborator_states: Optional[list[CollaboratorState]] = nested(CollaboratorState, many=True)
    completed_info: Optional[list[CompletedInfo]] = nested(CompletedInfo, many=True)
    # Entries differ in shape per notification type, kept raw
    live_notifications: Optional[list[dict[str, Any]]] = None
    live_notifications_last_read: Optional[str] = None
    user_settings: Optional[dict[str, Any]] = None
    user_plan_limits: Optional[UserPlanLimits] = nested(UserPlanLimits)
    workspaces: Optional[list[Workspace]] = nested(Workspace, many=True)
    # Only included in incremental syncs
    workspace_users: Optional[list[WorkspaceUser]] = nested(WorkspaceUser, many=True)


@dataclass
class SyncWriteResponse:
    """
    Result of a command batch.

    sync_status maps each command UUID to "ok" or to an error object.
    temp_id_mapping maps each temp_id to the real ID assigned by the server.
    """

    sync_token: Optional[str] = None
    sync_status: dict[str, Any] = field(default_factory=dict)
    temp_id_mapping: dict[str, str] = field(default_factory=dict)

    def failed(self) -> dict[str, Any]:
        """Return {uuid: error} for every command that did not succeed."""
        return {
            command_uuid: status
            for command_uuid, status in self.sync_status.items()
            if status != SYNC_STATUS_OK
        }


class Sync:
    """
    Stateful Sync API session: sync token, resource selection and the
    pending command queue.

    Queue mutation is locked, but a Sync object still represents a single
    logical session: do not interleave read_resources()/write_commands()
    from several threads.
    """

    def __init__(
        self,
        api_key: str,
        url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the sync state.

        Args:
            api_key: Todoist API key
            url: Absolute URL of the sync endpoint
            session: HTTP session, shared with the owning Client
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.url = url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.sync_token: str = FULL_SYNC_TOKEN
        self.resource_types: list[str] = []
        self.commands: list[Command] = []
        self._lock = threading.Lock()

    def add_command(self, command: Command) -> None:
        """
        Queue a command for the next write_commands() call.

        No I/O and no validation of the command type or args.
        """
        with self._lock:
            self.commands.append(command)

    def reset(self) -> None:
        """Forget the sync token so the next read is a full sync."""
        self.sync_token = FULL_SYNC_TOKEN

    @property
    def pending_changes(self) -> int:
        """Number of commands waiting in the queue."""
        return len(self.commands)

    def read_resources(self, resource_types: Sequence[str]) -> SyncReadResponse:
        """
        Fetch the given resource types since the current sync token.

        Args:
            resource_types: Resource type names, e.g. ["projects", "items"]
                or ["all"]. Required: there is no implicit default.

        Returns:
            Decoded snapshot; its sync_token becomes the current token

        Raises:
            ValidationError: If resource_types is empty
            TransportError, APIError, DecodeError: On request failures
        """
        if not resource_types:
            raise ValidationError("resource_types cannot be empty")
        if isinstance(resource_types, str):
            raise ValidationError("resource_types must be a list of names, not a string")

        self.resource_types = list(resource_types)
        form = {
            'sync_token': self.sync_token,
            'resource_types': json.dumps(self.resource_types, separators=_COMPACT_JSON),
        }
        response = send(
            self.session,
            'POST',
            self.url,
            api_key=self.api_key,
            form=form,
            timeout=self.timeout,
        )
        result = from_payload(SyncReadResponse, decode_json(response))
        self._store_token(result.sync_token)
        logging.debug(
            "Read sync (%s) of %s complete",
            "full" if result.full_sync else "incremental",
            ",".join(self.resource_types),
        )
        return result

    def write_commands(self) -> Optional[SyncWriteResponse]:
        """
        Send every queued command in one batch.

        Commands are removed from the queue only once the API accepted the
        batch; on failure they stay queued so the same UUIDs can be resent
        (the API ignores UUIDs it has already processed).

        Returns:
            The write response, or None if the queue was empty

        Raises:
            TransportError: If a command's args are not JSON serializable,
                or no response was obtained
            APIError, DecodeError: On request failures
        """
        with self._lock:
            batch = list(self.commands)
        if not batch:
            logging.debug("No commands in queue, skipping sync.")
            return None

        try:
            commands = json.dumps([c.to_dict() for c in batch], separators=_COMPACT_JSON)
        except (TypeError, ValueError) as e:
            raise TransportError(f"Could not serialize sync commands: {e}", e) from e

        form = {'sync_token': self.sync_token, 'commands': commands}
        try:
            response = send(
                self.session,
                'POST',
                self.url,
                api_key=self.api_key,
                form=form,
                timeout=self.timeout,
            )
            result = from_payload(SyncWriteResponse, decode_json(response))
        except Exception as e:
            logging.error("Error syncing %d command(s) with Todoist: %s", len(batch), e)
            raise

        with self._lock:
            flushed = {c.uuid for c in batch}
            self.commands = [c for c in self.commands if c.uuid not in flushed]
        if result.sync_token:
            self._store_token(result.sync_token)

        for command_uuid, error in result.failed().items():
            logging.warning("Command %s was rejected: %s", command_uuid, error)
        logging.info(
            "%d command%s committed to Todoist.",
            len(batch), "" if len(batch) == 1 else "s",
        )
        return result

    def _store_token(self, token: str) -> None:
        if token != self.sync_token:
            logging.debug("Sync token updated")
        self.sync_token = token
