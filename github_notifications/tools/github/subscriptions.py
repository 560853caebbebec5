"""
Repository watch settings
"""

from .base import ToolContext, github_tool
from .errors import ApiError
from .formatters import convert_api_url_to_html_url, format_timestamp
from .models import RepositorySubscription
from .schemas import ManageRepoSubscriptionArgs

# PUT bodies for the actions that change the subscription
ACTION_BODIES = {
    "all_activity": {"subscribed": True, "ignored": False},
    "ignore": {"subscribed": False, "ignored": True},
}

ACTION_SUMMARIES = {
    "all_activity": "watch all activity",
    "ignore": "ignore all notifications",
}


def _web_url(args: ManageRepoSubscriptionArgs, context: ToolContext) -> str:
    api_url = context.settings.github_api_url.rstrip("/")
    return convert_api_url_to_html_url(f"{api_url}/repos/{args.owner}/{args.repo}")


async def _get_subscription(args: ManageRepoSubscriptionArgs, path: str, context: ToolContext) -> str:
    github = context.github()
    web_url = _web_url(args, context)
    try:
        data = await github.get(path)
    except ApiError as e:
        # No subscription resource: the repository uses the default settings
        # (or custom ones that only the web interface exposes)
        if e.not_found:
            return (
                f"Subscription status for {args.full_name}:\n"
                f"• Default settings (participating and @mentions only)\n"
                f"• or Custom through the GitHub web interface at:\n"
                f"  {web_url}"
            )
        raise

    subscription = RepositorySubscription.model_validate(data)
    lines = [
        f"Subscription status for {args.full_name}:",
        f"• API Subscription: {'Watching all activity' if subscription.subscribed else 'Not watching'}",
        f"• Notifications: {'Ignored' if subscription.ignored else 'Active'}",
    ]
    if subscription.reason:
        lines.append(f"• Reason: {subscription.reason}")
    lines.append(f"• Created at: {format_timestamp(subscription.created_at, context.timezone)}")
    lines.append(f"• Web Interface: {web_url}")
    return "\n".join(lines)


@github_tool(
    "manage-repo-subscription",
    "Manage repository subscription settings including fine-grained notification preferences",
    ManageRepoSubscriptionArgs,
    failure="Failed to manage repository subscription for {owner}/{repo}"
)
async def manage_repo_subscription(args: ManageRepoSubscriptionArgs, context: ToolContext) -> str:
    """
    Read or change how the user watches a repository

    Args:
        args: Repository, action (all_activity, default, ignore, get) and optional overrides
        context: Credentials and settings for the call

    Returns:
        The current settings for get, otherwise a confirmation
    """
    path = f"/repos/{args.owner}/{args.repo}/subscription"

    if args.action == "get":
        return await _get_subscription(args, path, context)

    github = context.github()

    if args.action == "default":
        try:
            await github.delete(path)
        except ApiError as e:
            if not e.not_found:
                raise
            return f"{args.full_name} already uses the default settings (participating and @mentions only)"
        return f"Successfully set {args.full_name} to default settings (participating and @mentions only)"

    body = dict(ACTION_BODIES[args.action])
    if args.options is not None:
        body.update(args.options.model_dump(exclude_none=True))

    await github.put(path, body)
    return f"Successfully set {args.full_name} to {ACTION_SUMMARIES[args.action]}"
