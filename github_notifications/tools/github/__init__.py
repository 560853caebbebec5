"""
GitHub notification tools for the MCP server
"""

from .base import TOOLS, ToolContext, ToolDefinition, ToolResponse, run_tool
from .client import GitHubClient
from .errors import ApiError, AuthenticationError, GitHubToolError, ToolValidationError, TransportError

# Importing the tool modules registers their tools in TOOLS
from . import token, notifications, threads, subscriptions  # noqa: F401

__all__ = [
    'TOOLS',
    'ToolContext',
    'ToolDefinition',
    'ToolResponse',
    'run_tool',
    'GitHubClient',
    'ApiError',
    'AuthenticationError',
    'GitHubToolError',
    'ToolValidationError',
    'TransportError',
]
