"""
GitHub credential holder shared by every tool invocation
"""

from typing import Optional


def mask_token(token: str) -> str:
    """Show only enough of a token to recognise it"""
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}...{token[-4:]}"


class GitHubCredentials:
    """Holds the personal access token. The token can be set only once per process."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_configured(self) -> bool:
        return self._token is not None

    def set_token(self, token: str) -> None:
        """
        Store the token

        Raises:
            ValueError: if the token is empty or one is already configured
        """
        token = token.strip()
        if not token:
            raise ValueError("GitHub token must not be empty")
        if self._token is not None:
            raise ValueError("A GitHub token is already configured for this server")
        self._token = token

    def __repr__(self) -> str:
        shown = mask_token(self._token) if self._token else None
        return f"GitHubCredentials(token={shown!r})"
