import pytest

from github_notifications.auth.credentials import GitHubCredentials
from github_notifications.config.settings import Settings
from github_notifications.tools.github import TOOLS, ToolContext, run_tool


class FakeGitHub:
    """Stands in for GitHubClient. Records every call, answers from a canned table."""

    def __init__(self):
        self.responses = {}
        self.calls = []

    def respond(self, method, path, result):
        self.responses[(method, path)] = result

    async def _call(self, method, path, payload):
        self.calls.append((method, path, payload))
        result = self.responses.get((method, path))
        if isinstance(result, Exception):
            raise result
        return result

    async def get(self, path, params=None):
        return await self._call("GET", path, params)

    async def put(self, path, body=None):
        return await self._call("PUT", path, body)

    async def patch(self, path, body=None):
        return await self._call("PATCH", path, body)

    async def delete(self, path):
        return await self._call("DELETE", path, None)


def make_notification(notification_id="1", title="Fix the parser", unread=True, reason="mention", **overrides):
    notification = {
        "id": notification_id,
        "unread": unread,
        "reason": reason,
        "updated_at": "2025-03-01T12:00:00Z",
        "last_read_at": None,
        "subject": {
            "title": title,
            "type": "PullRequest",
            "url": "https://api.github.com/repos/octo/hello/pulls/42",
            "latest_comment_url": None,
        },
        "repository": {
            "full_name": "octo/hello",
            "html_url": "https://github.com/octo/hello",
            "private": False,
        },
        "url": f"https://api.github.com/notifications/threads/{notification_id}",
        "subscription_url": f"https://api.github.com/notifications/threads/{notification_id}/subscription",
    }
    notification.update(overrides)
    return notification


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        github_token="ghp_testtoken1234",
        github_api_url="https://api.github.com",
        display_timezone="UTC",
    )


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def credentials():
    return GitHubCredentials("ghp_testtoken1234")


@pytest.fixture
def context(credentials, test_settings, fake_github):
    return ToolContext(credentials, test_settings, client_factory=lambda *args, **kwargs: fake_github)


@pytest.fixture
def call_tool(context):
    async def call(name, arguments=None):
        return await run_tool(TOOLS[name], arguments, context)
    return call
