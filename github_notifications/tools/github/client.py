"""
GitHub API client for the notification tools
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from .errors import ApiError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"

# Used when the error body carries no message
STATUS_MESSAGES = {
    401: "Authentication failed. Please check your GitHub token",
    403: "Access forbidden. The token may lack the notifications scope or you hit the rate limit",
    404: "Resource not found",
    422: "Validation failed",
}


def _query_params(params: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Drop unset values and encode booleans the way GitHub expects"""
    query = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


class GitHubClient:
    """Authenticated GitHub REST client. Failed calls raise ApiError, never retry."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        api_version: str = "2022-11-28",
        user_agent: str = "github-notifications-mcp"
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": api_version,
            "User-Agent": user_agent,
            "Authorization": f"Bearer {token}",
        }

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request to GitHub API"""
        return await self._request("GET", path, params=params)

    async def put(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Make a PUT request to GitHub API"""
        return await self._request("PUT", path, body=body)

    async def patch(self, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        """Make a PATCH request to GitHub API"""
        return await self._request("PATCH", path, body=body)

    async def delete(self, path: str) -> Any:
        """Make a DELETE request to GitHub API"""
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GitHub %s %s", method, path)

        async with aiohttp.ClientSession(headers=self.headers) as session:
            try:
                async with session.request(method, url, params=_query_params(params), json=body) as response:
                    if 200 <= response.status < 300:
                        if response.status in (204, 205):
                            return None
                        return await response.json(content_type=None)

                    message = await self._error_message(response)
                    logger.warning("GitHub %s %s failed with %s: %s", method, path, response.status, message)
                    raise ApiError(response.status, message)
            except aiohttp.ClientError as e:
                logger.warning("GitHub %s %s network error: %s", method, path, e)
                raise TransportError(f"Network error: {e}") from e
            except asyncio.TimeoutError as e:
                logger.warning("GitHub %s %s timed out", method, path)
                raise TransportError("Network error: request timed out") from e

    @staticmethod
    async def _error_message(response: aiohttp.ClientResponse) -> str:
        generic = STATUS_MESSAGES.get(response.status, f"GitHub API error: {response.status}")
        try:
            payload = await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError):
            return generic

        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return generic
