import pytest

from github_notifications.tools.github.errors import ApiError
from github_notifications.tools.github.formatters import (
    convert_api_url_to_html_url,
    format_error,
    format_notification,
    format_subscription,
    format_timestamp,
)
from github_notifications.tools.github.models import Notification

from .conftest import make_notification


@pytest.mark.parametrize(
    "api_url, html_url",
    [
        ("https://api.github.com/repos/nodejs/node/pulls/57557", "https://github.com/nodejs/node/pull/57557"),
        ("https://api.github.com/repos/nodejs/node/issues/12345", "https://github.com/nodejs/node/issues/12345"),
        ("https://api.github.com/repos/nodejs/node", "https://github.com/nodejs/node"),
        (
            "https://api.github.com/repos/nodejs/node/pulls/57557/comments",
            "https://github.com/nodejs/node/pull/57557/comments",
        ),
    ],
)
def test_convert_api_url_to_html_url(api_url, html_url):
    assert convert_api_url_to_html_url(api_url) == html_url


def test_convert_keeps_pulls_without_numeric_id():
    assert convert_api_url_to_html_url("https://api.github.com/repos/nodejs/node/pulls") == "https://github.com/nodejs/node/pulls"


def test_convert_does_not_touch_repository_named_pulls():
    url = "https://api.github.com/repos/octo/pulls/issues/3"
    assert convert_api_url_to_html_url(url) == "https://github.com/octo/pulls/issues/3"


def test_convert_enterprise_server_url():
    url = "https://ghe.example.com/api/v3/repos/team/app/pulls/7"
    assert convert_api_url_to_html_url(url) == "https://ghe.example.com/team/app/pull/7"


@pytest.mark.parametrize("value", [None, "", "not a url", "http://[::1", "https://example.com/some/path"])
def test_convert_never_raises(value):
    result = convert_api_url_to_html_url(value)
    assert isinstance(result, str)


def test_format_timestamp_uses_display_timezone():
    assert format_timestamp("2025-03-01T12:00:00Z") == "2025-03-01 12:00:00 UTC"
    assert format_timestamp("2025-03-01T12:00:00Z", "America/Los_Angeles") == "2025-03-01 04:00:00 PST"


def test_format_timestamp_fallbacks():
    assert format_timestamp(None) == "Unknown"
    assert format_timestamp("yesterday") == "yesterday"
    assert format_timestamp("2025-03-01T12:00:00Z", "Mars/Olympus") == "2025-03-01T12:00:00Z"


def test_format_notification():
    text = format_notification(Notification.model_validate(make_notification("99", "Add retries")))

    assert "[99] Add retries" in text
    assert "Repository: octo/hello" in text
    assert "Type: PullRequest" in text
    assert "Reason: mention (You were specifically @mentioned in the content)" in text
    assert "Status: Unread" in text
    assert "Updated: 2025-03-01 12:00:00 UTC" in text
    assert "Last read: Never" in text
    assert "URL: https://github.com/octo/hello/pull/42" in text


def test_format_notification_from_raw_dict_with_unknown_reason():
    raw = make_notification(unread=False, reason="brand_new_reason", last_read_at="2025-03-02T08:30:00Z")
    raw["subject"]["url"] = None

    text = format_notification(raw)

    assert "Reason: brand_new_reason" in text
    assert "Status: Read" in text
    assert "Last read: 2025-03-02 08:30:00 UTC" in text
    # falls back to the repository page when the subject has no URL
    assert "URL: https://github.com/octo/hello" in text


def test_format_thread_subscription():
    text = format_subscription({
        "subscribed": True,
        "ignored": False,
        "reason": None,
        "created_at": "2025-01-05T10:00:00Z",
        "url": "https://api.github.com/notifications/threads/1/subscription",
        "thread_url": "https://api.github.com/notifications/threads/1",
    })

    assert "Subscribed: Yes" in text
    assert "Ignored: No" in text
    assert "Reason: None" in text
    assert "Created: 2025-01-05 10:00:00 UTC" in text
    assert "Thread: https://api.github.com/notifications/threads/1" in text


def test_format_repository_subscription():
    text = format_subscription({
        "subscribed": False,
        "ignored": True,
        "reason": "manual",
        "created_at": None,
        "repository_url": "https://api.github.com/repos/octo/hello",
    })

    assert "Ignored: Yes" in text
    assert "Reason: manual" in text
    assert "Created: Unknown" in text
    assert "Repository: https://github.com/octo/hello" in text


def test_format_error_with_exception():
    text = format_error("ctx", RuntimeError("boom"))
    assert "ctx" in text
    assert "boom" in text


def test_format_error_with_plain_value():
    assert format_error("ctx", "boom") == "ctx: boom"
    assert format_error("ctx", 42) == "ctx: 42"


def test_format_error_includes_http_status():
    assert format_error("Failed", ApiError(403, "API rate limit exceeded")) == "Failed: API rate limit exceeded (HTTP 403)"
