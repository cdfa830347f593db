"""
Resource shapes that have no REST endpoints in this client and are only
seen in Sync API snapshots (plus Collaborator, shared with projects).

These are plain records: every key is owned by the Todoist API version,
optional keys default to None and unknown keys are ignored on decode.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from .types import nested


@dataclass
class Collaborator:
    """A user sharing at least one project with the current user."""

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    full_name: Optional[str] = None
    image_id: Optional[str] = None
    timezone: Optional[str] = None


@dataclass
class CollaboratorState:
    """Membership of a collaborator in a project ("active" or "invited")."""

    project_id: str
    user_id: str
    state: Optional[str] = None
    is_deleted: bool = False
    role: Optional[str] = None


@dataclass
class CompletedInfo:
    """Completed item counters for a project, section or parent item."""

    project_id: Optional[str] = None
    section_id: Optional[str] = None
    item_id: Optional[str] = None
    completed_items: int = 0
    archived_sections: int = 0


@dataclass
class Filter:
    id: str
    name: str
    query: str = ""
    color: Optional[str] = None
    item_order: int = 0
    is_deleted: bool = False
    is_favorite: bool = False
    is_frozen: bool = False


@dataclass
class ReminderDue:
    date: Optional[str] = None
    timezone: Optional[str] = None
    is_recurring: bool = False
    string: Optional[str] = None
    lang: Optional[str] = None


@dataclass
class Reminder:
    """
    A task reminder. `type` is "relative", "absolute" or "location";
    location reminders fill the loc_* keys instead of due/minute_offset.
    """

    id: str
    item_id: Optional[str] = None
    notify_uid: Optional[str] = None
    type: Optional[str] = None
    due: Optional[ReminderDue] = nested(ReminderDue)
    minute_offset: Optional[int] = None
    name: Optional[str] = None
    loc_lat: Optional[str] = None
    loc_long: Optional[str] = None
    loc_trigger: Optional[str] = None
    radius: Optional[int] = None
    is_deleted: bool = False


@dataclass
class User:
    """The current user, from the `user` sync resource."""

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    activated_user: bool = False
    auto_reminder: Optional[int] = None
    avatar_big: Optional[str] = None
    avatar_medium: Optional[str] = None
    avatar_s640: Optional[str] = None
    avatar_small: Optional[str] = None
    business_account_id: Optional[str] = None
    daily_goal: Optional[int] = None
    date_format: Optional[int] = None
    days_off: list[int] = field(default_factory=list)
    deleted_at: Optional[str] = None
    feature_identifier: Optional[str] = None
    features: Optional[dict[str, Any]] = None
    has_magic_number: Optional[bool] = None
    has_password: bool = False
    has_started_trial: Optional[bool] = None
    image_id: Optional[str] = None
    inbox_project_id: Optional[str] = None
    is_celebrations_enabled: bool = False
    is_deleted: Optional[bool] = None
    is_premium: bool = False
    joinable_workspace: Optional[bool] = None
    joined_at: Optional[str] = None
    karma: Optional[float] = None
    karma_disabled: Optional[int] = None
    karma_trend: Optional[str] = None
    lang: Optional[str] = None
    mfa_enabled: bool = False
    next_week: Optional[int] = None
    onboarding_completed: Optional[bool] = None
    onboarding_initiated: Optional[bool] = None
    onboarding_level: Optional[str] = None
    onboarding_persona: Optional[str] = None
    onboarding_started: Optional[bool] = None
    onboarding_team_mode: Optional[bool] = None
    onboarding_use_cases: Optional[list[str]] = None
    premium_status: Optional[str] = None
    premium_until: Optional[str] = None
    shard_id: Optional[int] = None
    share_limit: Optional[int] = None
    sort_order: Optional[int] = None
    start_day: Optional[int] = None
    start_page: Optional[str] = None
    theme_id: Optional[str] = None
    time_format: Optional[int] = None
    token: Optional[str] = None
    tz_info: Optional[dict[str, Any]] = None
    unique_prefix: Optional[int] = None
    verification_status: Optional[str] = None
    web_socket_url: Optional[str] = None
    weekend_start_day: Optional[int] = None
    weekly_goal: Optional[int] = None


@dataclass
class UserPlanInfo:
    """Feature flags and limits of one plan."""

    plan_name: Optional[str] = None
    activity_log: bool = False
    activity_log_limit: Optional[int] = None
    advanced_permissions: bool = False
    automatic_backups: bool = False
    calendar_feeds: bool = False
    calendar_layout: bool = False
    comments: bool = False
    completed_tasks: bool = False
    customization_color: bool = False
    deadlines: bool = False
    durations: bool = False
    email_ai_forwarding: bool = False
    email_forwarding: bool = False
    filters: bool = False
    labels: bool = False
    max_calendar_accounts: Optional[int] = None
    max_collaborators: Optional[int] = None
    max_filters: Optional[int] = None
    max_folders_per_workspace: Optional[int] = None
    max_free_workspaces_created: Optional[int] = None
    max_guests_per_workspace: Optional[int] = None
    max_labels: Optional[int] = None
    max_projects: Optional[int] = None
    max_projects_joined: Optional[int] = None
    max_reminders_location: Optional[int] = None
    max_reminders_time: Optional[int] = None
    max_sections: Optional[int] = None
    max_tasks: Optional[int] = None
    max_user_templates: Optional[int] = None
    reminders: bool = False
    reminders_at_due: bool = False
    templates: bool = False
    upload_limit_mb: Optional[int] = None
    uploads: bool = False
    weekly_trends: bool = False


@dataclass
class UserPlanLimits:
    """
    Limits of the current plan. `next` is None when no upgrade is available.
    """

    current: Optional[UserPlanInfo] = nested(UserPlanInfo)
    next: Optional[UserPlanInfo] = nested(UserPlanInfo)


@dataclass
class Workspace:
    id: str
    name: str
    description: Optional[str] = None
    plan: Optional[str] = None
    is_link_sharing_enabled: bool = False
    is_guest_allowed: bool = False
    invite_code: Optional[str] = None
    # ADMIN, MEMBER or GUEST
    role: Optional[str] = None
    logo_big: Optional[str] = None
    logo_medium: Optional[str] = None
    logo_small: Optional[str] = None
    logo_s640: Optional[str] = None
    limits: Optional[dict[str, Any]] = None
    creator_id: Optional[str] = None
    created_at: Optional[str] = None
    is_deleted: bool = False
    is_collapsed: bool = False
    domain_name: Optional[str] = None
    domain_discovery: Optional[bool] = None
    restrict_email_domains: Optional[bool] = None
    pending_invitations: Optional[list[str]] = None
    pending_invites_by_type: Optional[dict[str, int]] = None
    member_count_by_type: Optional[dict[str, int]] = None
    current_active_projects: Optional[int] = None
    current_member_count: Optional[int] = None
    current_template_count: Optional[int] = None
    properties: Optional[dict[str, Any]] = None


@dataclass
class WorkspaceUser:
    """
    A member of one of the user's workspaces.

    Only sent by incremental syncs: list the members once, then apply
    the deltas. Workspace users are not collaborators; two members of a
    workspace need not share a project.
    """

    user_id: str
    workspace_id: str
    user_email: Optional[str] = None
    full_name: Optional[str] = None
    timezone: Optional[str] = None
    avatar_big: Optional[str] = None
    avatar_medium: Optional[str] = None
    avatar_s640: Optional[str] = None
    avatar_small: Optional[str] = None
    image_id: Optional[str] = None
    role: Optional[str] = None
    is_deleted: bool = False
