"""
Text formatting for GitHub notification records
"""

import re
from datetime import datetime
from typing import Any, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import pytz

from .models import NOTIFICATION_REASONS, Notification, RepositorySubscription, ThreadSubscription

# /{owner}/{repo}/pulls/{number} -> /{owner}/{repo}/pull/{number}
_PULL_PATH = re.compile(r"^(/[^/]+/[^/]+)/pulls/(\d+)(?=/|$)")


def convert_api_url_to_html_url(api_url: Optional[str]) -> str:
    """
    Convert a GitHub API resource URL into the URL of the same resource on github.com

    https://api.github.com/repos/nodejs/node/pulls/57557/comments
        -> https://github.com/nodejs/node/pull/57557/comments

    GitHub Enterprise Server URLs (https://host/api/v3/repos/...) are handled the
    same way. Input that doesn't look like an API URL is returned unchanged.
    """
    if not api_url:
        return ""

    try:
        parts = urlsplit(api_url)
    except ValueError:
        return api_url

    host = parts.netloc
    path = parts.path

    if host.startswith("api."):
        host = host[len("api."):]
    elif path.startswith("/api/v3/"):
        path = path[len("/api/v3"):]

    if path.startswith("/repos/"):
        path = path[len("/repos"):]

    path = _PULL_PATH.sub(r"\1/pull/\2", path)
    return urlunsplit((parts.scheme, host, path, parts.query, parts.fragment))


def format_timestamp(value: Optional[str], tz_name: str = "UTC") -> str:
    """Render an ISO 8601 timestamp from the API in the display timezone"""
    if not value:
        return "Unknown"

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        tz = pytz.timezone(tz_name)
    except (ValueError, pytz.UnknownTimeZoneError):
        return value

    if parsed.tzinfo is None:
        parsed = pytz.UTC.localize(parsed)
    return parsed.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S %Z")


def describe_reason(reason: str) -> str:
    description = NOTIFICATION_REASONS.get(reason)
    if description:
        return f"{reason} ({description})"
    return reason


def format_notification(notification: Union[Notification, dict], tz_name: str = "UTC") -> str:
    """
    Format a notification as a multi-line block

    Args:
        notification: Notification record, or the raw API dict
        tz_name: Timezone used for the timestamps

    Returns:
        Human readable description of the notification
    """
    if isinstance(notification, dict):
        notification = Notification.model_validate(notification)

    subject = notification.subject
    repository = notification.repository
    web_url = convert_api_url_to_html_url(subject.url) or repository.html_url or ""
    last_read = format_timestamp(notification.last_read_at, tz_name) if notification.last_read_at else "Never"

    lines = [
        f"[{notification.id}] {subject.title}",
        f"Repository: {repository.full_name}{' (private)' if repository.private else ''}",
        f"Type: {subject.type}",
        f"Reason: {describe_reason(notification.reason)}",
        f"Status: {'Unread' if notification.unread else 'Read'}",
        f"Updated: {format_timestamp(notification.updated_at, tz_name)}",
        f"Last read: {last_read}",
    ]
    if web_url:
        lines.append(f"URL: {web_url}")
    return "\n".join(lines)


def format_subscription(
    subscription: Union[ThreadSubscription, RepositorySubscription, dict],
    tz_name: str = "UTC"
) -> str:
    """Format a thread or repository subscription"""
    if isinstance(subscription, dict):
        if "repository_url" in subscription:
            subscription = RepositorySubscription.model_validate(subscription)
        else:
            subscription = ThreadSubscription.model_validate(subscription)

    lines = [
        f"Subscribed: {'Yes' if subscription.subscribed else 'No'}",
        f"Ignored: {'Yes' if subscription.ignored else 'No'}",
        f"Reason: {subscription.reason or 'None'}",
        f"Created: {format_timestamp(subscription.created_at, tz_name)}",
    ]
    if isinstance(subscription, ThreadSubscription) and subscription.thread_url:
        lines.append(f"Thread: {subscription.thread_url}")
    if isinstance(subscription, RepositorySubscription) and subscription.repository_url:
        lines.append(f"Repository: {convert_api_url_to_html_url(subscription.repository_url)}")
    return "\n".join(lines)


def format_error(context: str, error: Any) -> str:
    """Combine a context phrase with an error's message"""
    if isinstance(error, BaseException):
        message = str(error) or error.__class__.__name__
    else:
        message = str(error)
    return f"{context}: {message}"
