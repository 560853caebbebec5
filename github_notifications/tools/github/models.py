"""
GitHub API records used by the notification tools

Only the fields the tools render are declared; everything else is ignored.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class ApiRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NotificationRepository(ApiRecord):
    full_name: str
    html_url: Optional[str] = None
    private: bool = False


class NotificationSubject(ApiRecord):
    title: str
    type: str
    url: Optional[str] = None
    latest_comment_url: Optional[str] = None


class Notification(ApiRecord):
    id: str
    unread: bool
    reason: str
    subject: NotificationSubject
    repository: NotificationRepository
    updated_at: Optional[str] = None
    last_read_at: Optional[str] = None
    url: Optional[str] = None
    subscription_url: Optional[str] = None


class ThreadSubscription(ApiRecord):
    subscribed: bool
    ignored: bool
    reason: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    thread_url: Optional[str] = None


class RepositorySubscription(ApiRecord):
    subscribed: bool
    ignored: bool
    reason: Optional[str] = None
    created_at: Optional[str] = None
    url: Optional[str] = None
    repository_url: Optional[str] = None


# Reason codes documented at
# https://docs.github.com/en/rest/activity/notifications#about-notification-reasons
NOTIFICATION_REASONS = {
    "approval_requested": "You were requested to review and approve a deployment",
    "assign": "You were assigned to the issue",
    "author": "You created the thread",
    "comment": "You commented on the thread",
    "ci_activity": "A GitHub Actions workflow run that you triggered was completed",
    "invitation": "You accepted an invitation to contribute to the repository",
    "manual": "You subscribed to the thread",
    "member_feature_requested": "Organization members have requested to enable a feature",
    "mention": "You were specifically @mentioned in the content",
    "review_requested": "You, or a team you're a member of, were requested to review a pull request",
    "security_alert": "GitHub discovered a security vulnerability in your repository",
    "security_advisory_credit": "You were credited for contributing to a security advisory",
    "state_change": "You changed the thread state",
    "subscribed": "You're watching the repository",
    "team_mention": "You were on a team that was mentioned",
}
