"""
GitHub notification listing and mark-as-read tools
"""

from typing import Any, List

from .base import ToolContext, format_page_hint, github_tool
from .formatters import format_notification, format_timestamp
from .models import Notification
from .schemas import (
    ListNotificationsArgs,
    ListRepoNotificationsArgs,
    MarkNotificationsReadArgs,
    MarkRepoNotificationsReadArgs,
    to_github_timestamp,
)


def _render_notifications(raw: Any, page: int, per_page: int, scope: str, context: ToolContext) -> str:
    notifications: List[Notification] = [Notification.model_validate(item) for item in raw or []]

    if not notifications:
        return f"No notifications found{scope} with the given criteria."

    formatted = "\n\n".join(format_notification(n, context.timezone) for n in notifications)
    hint = format_page_hint(len(notifications), page, per_page)
    return f"{len(notifications)} notifications found{scope}:\n\n{formatted}{hint}"


@github_tool(
    "list-notifications",
    "List GitHub notifications for the authenticated user",
    ListNotificationsArgs,
    failure="Failed to fetch notifications"
)
async def list_notifications(args: ListNotificationsArgs, context: ToolContext) -> str:
    """
    List notifications for the authenticated user

    Args:
        args: Read/participating filters, time window, page and page size
        context: Credentials and settings for the call

    Returns:
        The formatted notifications, or a message saying none matched
    """
    github = context.github()
    data = await github.get("/notifications", args.query(args.per_page))
    return _render_notifications(data, args.page, args.per_page, "", context)


@github_tool(
    "list-repo-notifications",
    "List GitHub notifications for a specific repository",
    ListRepoNotificationsArgs,
    failure="Failed to fetch notifications for repository {owner}/{repo}"
)
async def list_repo_notifications(args: ListRepoNotificationsArgs, context: ToolContext) -> str:
    """
    List notifications for one repository

    Args:
        args: Repository owner and name plus the same filters as list-notifications
        context: Credentials and settings for the call

    Returns:
        The formatted notifications, or a message saying none matched
    """
    github = context.github()
    data = await github.get(f"/repos/{args.owner}/{args.repo}/notifications", args.query(args.per_page))
    return _render_notifications(data, args.page, args.per_page, f" for repository {args.full_name}", context)


def _mark_read_message(response: Any, args: MarkNotificationsReadArgs, target: str, context: ToolContext) -> str:
    # 202 Accepted: GitHub marks the notifications in the background and says so
    if isinstance(response, dict) and response.get("message"):
        return str(response["message"])

    state = "read" if args.read else "unread"
    text = f"Successfully marked {target} as {state}."
    if args.last_read_at is not None:
        cutoff = format_timestamp(to_github_timestamp(args.last_read_at), context.timezone)
        text += f" Notifications updated on or before {cutoff} were affected."
    return text


@github_tool(
    "mark-notifications-read",
    "Mark GitHub notifications as read",
    MarkNotificationsReadArgs,
    failure="Failed to mark notifications as read"
)
async def mark_notifications_read(args: MarkNotificationsReadArgs, context: ToolContext) -> str:
    """
    Mark every notification as read or unread

    Args:
        args: Target state and optional last_read_at cut-off
        context: Credentials and settings for the call

    Returns:
        GitHub's message when it processes the request in the background,
        otherwise a confirmation
    """
    github = context.github()
    response = await github.put("/notifications", args.body())
    return _mark_read_message(response, args, "notifications", context)


@github_tool(
    "mark-repo-notifications-read",
    "Mark GitHub notifications for a specific repository as read",
    MarkRepoNotificationsReadArgs,
    failure="Failed to mark notifications as read for repository {owner}/{repo}"
)
async def mark_repo_notifications_read(args: MarkRepoNotificationsReadArgs, context: ToolContext) -> str:
    """Same as mark-notifications-read, limited to one repository"""
    github = context.github()
    response = await github.put(f"/repos/{args.owner}/{args.repo}/notifications", args.body())
    return _mark_read_message(response, args, f"notifications for repository {args.full_name}", context)
