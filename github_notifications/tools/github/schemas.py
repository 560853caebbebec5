"""
Argument schemas for the GitHub notification tools
"""

from datetime import datetime
from typing import Literal, Optional

import pytz
from pydantic import BaseModel, Field, field_validator

MAX_PER_PAGE = 100  # GitHub API max is 100 per page

# Characters GitHub allows in user, organization and repository names
NAME_PATTERN = r"^[A-Za-z0-9_.-]+$"


def to_github_timestamp(value: Optional[datetime]) -> Optional[str]:
    """ISO 8601 in UTC as GitHub expects it. Naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = pytz.UTC.localize(value)
    return value.astimezone(pytz.UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class SetGitHubTokenArgs(BaseModel):
    token: str = Field(
        ...,
        min_length=1,
        description="GitHub personal access token with the 'notifications' or 'repo' scope"
    )


class RepositoryArgs(BaseModel):
    owner: str = Field(..., min_length=1, pattern=NAME_PATTERN, description="The account owner of the repository. The name is not case sensitive.")
    repo: str = Field(..., min_length=1, pattern=NAME_PATTERN, description="The name of the repository without the .git extension. The name is not case sensitive.")

    @field_validator("owner", "repo")
    @classmethod
    def not_a_relative_path(cls, value: str) -> str:
        if value in (".", ".."):
            raise ValueError("must be a repository or account name")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class NotificationFilterArgs(BaseModel):
    all: Optional[bool] = Field(None, description="If true, show notifications marked as read")
    participating: Optional[bool] = Field(
        None,
        description="If true, only shows notifications where user is directly participating or mentioned"
    )
    since: Optional[datetime] = Field(None, description="ISO 8601 timestamp - only show notifications updated after this time")
    before: Optional[datetime] = Field(None, description="ISO 8601 timestamp - only show notifications updated before this time")
    page: int = Field(1, ge=1, description="Page number for pagination (default: 1)")

    def query(self, per_page: int) -> dict:
        return {
            "all": self.all,
            "participating": self.participating,
            "since": to_github_timestamp(self.since),
            "before": to_github_timestamp(self.before),
            "page": self.page,
            "per_page": per_page,
        }


class ListNotificationsArgs(NotificationFilterArgs):
    per_page: int = Field(50, ge=1, le=MAX_PER_PAGE, description="Number of results per page (max 100, default: 50)")


class ListRepoNotificationsArgs(RepositoryArgs, NotificationFilterArgs):
    per_page: int = Field(30, ge=1, le=MAX_PER_PAGE, description="Number of results per page (max 100, default: 30)")


class MarkNotificationsReadArgs(BaseModel):
    last_read_at: Optional[datetime] = Field(
        None,
        description="ISO 8601 timestamp - marks notifications updated at or before this time as read. Default is current time."
    )
    read: bool = Field(True, description="Whether to mark notifications as read or unread")

    def body(self) -> dict:
        body = {"read": self.read}
        if self.last_read_at is not None:
            body["last_read_at"] = to_github_timestamp(self.last_read_at)
        return body


class MarkRepoNotificationsReadArgs(RepositoryArgs, MarkNotificationsReadArgs):
    pass


class ThreadArgs(BaseModel):
    thread_id: str = Field(..., pattern=r"^\d+$", description="The numeric ID of the notification thread")


class SetThreadSubscriptionArgs(ThreadArgs):
    ignored: bool = Field(False, description="If true, notifications from this thread will be ignored")


class RepoSubscriptionOptions(BaseModel):
    subscribed: Optional[bool] = Field(None, description="Whether to receive notifications from this repository")
    ignored: Optional[bool] = Field(None, description="Whether to ignore all notifications from this repository")


class ManageRepoSubscriptionArgs(RepositoryArgs):
    action: Literal["all_activity", "default", "ignore", "get"] = Field(
        ...,
        description=(
            "The action to perform: all_activity (watch all), default (participating and @mentions only), "
            "ignore (mute notifications), or get (view current settings)"
        )
    )
    options: Optional[RepoSubscriptionOptions] = Field(
        None,
        description="Optional overrides for the subscription sent by all_activity and ignore"
    )
