"""
Error types raised by the GitHub notification tools

Every error is caught at the tool boundary and turned into an error response.
"""

from typing import Optional


class GitHubToolError(Exception):
    """Base class for errors reported back to the caller"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ToolValidationError(GitHubToolError):
    """Arguments did not match the tool schema"""


class AuthenticationError(GitHubToolError):
    """No GitHub token is configured"""

    def __init__(self, message: str = "Not authenticated. Set GITHUB_TOKEN or call the set-github-token tool first"):
        super().__init__(message)


class ApiError(GitHubToolError):
    """Non-2xx response from the GitHub API"""

    def __init__(self, status: Optional[int], message: str):
        super().__init__(message)
        self.status = status

    @property
    def not_found(self) -> bool:
        return self.status == 404

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.message} (HTTP {self.status})"


class TransportError(ApiError):
    """The request never produced an HTTP response"""

    def __init__(self, message: str):
        super().__init__(None, message)
