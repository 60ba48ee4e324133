from __future__ import annotations

from unittest.mock import Mock

import pytest

from pr_notifier.config import NotifierInput


@pytest.fixture
def config() -> NotifierInput:
    return NotifierInput(
        slack_web_hook_url="https://hooks.slack.com/services/T/B/X",
        channel="#reviews",
        access_token="fake_github_token",
        git_repo_query="service",
        git_user="acme",
    )


@pytest.fixture
def slack_session():
    """Session whose POST answers with Slack's ``ok`` body."""
    session = Mock()
    response = Mock()
    response.status_code = 200
    response.content = b"ok"
    session.post.return_value = response
    return session
