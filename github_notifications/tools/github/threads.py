"""
Notification thread tools: mark read/done and thread subscriptions
"""

from .base import ToolContext, github_tool
from .errors import ApiError
from .formatters import format_subscription
from .models import ThreadSubscription
from .schemas import SetThreadSubscriptionArgs, ThreadArgs


def _thread_path(args: ThreadArgs) -> str:
    return f"/notifications/threads/{args.thread_id}"


@github_tool(
    "mark-thread-read",
    "Mark a GitHub notification thread as read",
    ThreadArgs,
    failure="Failed to mark thread {thread_id} as read"
)
async def mark_thread_read(args: ThreadArgs, context: ToolContext) -> str:
    """Mark a single thread as read"""
    github = context.github()
    await github.patch(_thread_path(args))
    return f"Successfully marked thread {args.thread_id} as read."


@github_tool(
    "mark-thread-done",
    "Mark a GitHub notification thread as done",
    ThreadArgs,
    failure="Failed to mark thread {thread_id} as done"
)
async def mark_thread_done(args: ThreadArgs, context: ToolContext) -> str:
    """Mark a single thread as done, which removes it from the inbox"""
    github = context.github()
    await github.delete(_thread_path(args))
    return f"Successfully marked thread {args.thread_id} as done."


@github_tool(
    "get-thread-subscription",
    "Get subscription status for a GitHub notification thread",
    ThreadArgs,
    failure="Failed to fetch subscription for thread {thread_id}"
)
async def get_thread_subscription(args: ThreadArgs, context: ToolContext) -> str:
    """
    Show whether the user is subscribed to a thread

    Args:
        args: The thread ID
        context: Credentials and settings for the call

    Returns:
        The formatted subscription. A 404 means there is no subscription
        and is reported as such, not as an error.
    """
    github = context.github()
    try:
        data = await github.get(f"{_thread_path(args)}/subscription")
    except ApiError as e:
        if e.not_found:
            return f"You are not subscribed to thread {args.thread_id}."
        raise

    subscription = ThreadSubscription.model_validate(data)
    return f"Subscription status for thread {args.thread_id}:\n\n{format_subscription(subscription, context.timezone)}"


@github_tool(
    "set-thread-subscription",
    "Subscribe to a GitHub notification thread, or ignore it",
    SetThreadSubscriptionArgs,
    failure="Failed to update subscription for thread {thread_id}"
)
async def set_thread_subscription(args: SetThreadSubscriptionArgs, context: ToolContext) -> str:
    """
    Subscribe to a thread, or ignore it

    Args:
        args: The thread ID and whether to ignore it
        context: Credentials and settings for the call

    Returns:
        Confirmation with the resulting subscription
    """
    github = context.github()
    data = await github.put(f"{_thread_path(args)}/subscription", {"ignored": args.ignored})

    status = "ignoring" if args.ignored else "subscribing to"
    text = f"Successfully updated subscription by {status} thread {args.thread_id}"
    if not data:
        return f"{text}."
    subscription = ThreadSubscription.model_validate(data)
    return f"{text}:\n\n{format_subscription(subscription, context.timezone)}"


@github_tool(
    "delete-thread-subscription",
    "Unsubscribe from a GitHub notification thread",
    ThreadArgs,
    failure="Failed to unsubscribe from thread {thread_id}"
)
async def delete_thread_subscription(args: ThreadArgs, context: ToolContext) -> str:
    """
    Unsubscribe from a thread

    Args:
        args: The thread ID
        context: Credentials and settings for the call

    Returns:
        Confirmation, or a note that there was no subscription to remove
    """
    github = context.github()
    try:
        await github.delete(f"{_thread_path(args)}/subscription")
    except ApiError as e:
        if e.not_found:
            return f"You were not subscribed to thread {args.thread_id}."
        raise
    return f"Successfully unsubscribed from thread {args.thread_id}."
