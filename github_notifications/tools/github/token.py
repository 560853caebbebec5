"""
Runtime token configuration
"""

from ...auth.credentials import mask_token
from .base import ToolContext, github_tool
from .errors import GitHubToolError
from .schemas import SetGitHubTokenArgs


@github_tool(
    "set-github-token",
    "Set the GitHub personal access token used by the other tools. Only needed when GITHUB_TOKEN is not configured.",
    SetGitHubTokenArgs,
    failure="Failed to set GitHub token"
)
async def set_github_token(args: SetGitHubTokenArgs, context: ToolContext) -> str:
    """Store the token for this server process. Fails if one is already set."""
    try:
        context.credentials.set_token(args.token)
    except ValueError as e:
        raise GitHubToolError(str(e)) from e
    return f"GitHub token {mask_token(context.credentials.token)} configured. Notification tools are now available."
