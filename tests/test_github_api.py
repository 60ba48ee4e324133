from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
import requests

from helpers import json_response
from pr_notifier.config import NotifierInput
from pr_notifier.errors import ClientConfigError, GitHubAPIError
from pr_notifier.github_api import (
    GitHubClient,
    build_client,
    enterprise_api_url,
    is_enterprise,
)


def make_input(base_url: str = "") -> NotifierInput:
    return NotifierInput(
        slack_web_hook_url="https://hooks.slack.com/services/T/B/X",
        channel="#reviews",
        access_token="fake_github_token",
        git_repo_query="service",
        git_user="acme",
        base_url=base_url,
    )


class TestEnterpriseDetection:
    def test_empty_is_public(self):
        assert is_enterprise("") is False

    def test_github_domain_is_public(self):
        assert is_enterprise("https://github.com/") is False
        assert is_enterprise("https://api.github.com") is False

    def test_custom_host_is_enterprise(self):
        assert is_enterprise("https://git.example.com/") is True


class TestEnterpriseApiUrl:
    def test_appends_api_suffix(self):
        assert enterprise_api_url("https://git.example.com/") == "https://git.example.com/api/v3/"

    def test_appends_without_trailing_slash(self):
        assert enterprise_api_url("https://git.example.com") == "https://git.example.com/api/v3/"

    def test_keeps_existing_api_path(self):
        assert enterprise_api_url("https://git.example.com/api/v3") == "https://git.example.com/api/v3"

    def test_keeps_sub_path(self):
        assert enterprise_api_url("https://example.com/git/") == "https://example.com/git/api/v3/"

    def test_rejects_unparseable(self):
        with pytest.raises(ClientConfigError):
            enterprise_api_url("not a url")

    def test_rejects_bad_port(self):
        with pytest.raises(ClientConfigError):
            enterprise_api_url("https://git.example.com:notaport/")


class TestBuildClient:
    def test_public_client(self):
        client = build_client(make_input(), session=Mock())
        assert client.base_url == "https://api.github.com"

    def test_enterprise_client_uses_derived_url(self):
        client = build_client(make_input("https://git.example.com/"), session=Mock())
        assert client.base_url == "https://git.example.com/api/v3"
        assert client.upload_url == client.base_url

    def test_enterprise_bad_url_is_config_error(self):
        with pytest.raises(ClientConfigError):
            build_client(make_input("git.example.com"), session=Mock())

    def test_token_sent_as_header(self):
        session = Mock()
        session.headers = {}
        build_client(make_input(), session=session)
        assert session.headers["Authorization"] == "token fake_github_token"

    def test_missing_token(self):
        with pytest.raises(ClientConfigError):
            GitHubClient("")


class TestRequests:
    def test_search_repositories_single_page(self):
        session = Mock()
        session.request.return_value = json_response({"items": [{"name": "svc"}]})
        client = GitHubClient("tok", session=session)

        items = client.search_repositories("q user:acme archived:false", per_page=50)

        assert items == [{"name": "svc"}]
        method, url = session.request.call_args.args
        assert method == "GET"
        assert url == "https://api.github.com/search/repositories"
        assert session.request.call_args.kwargs["params"] == {
            "q": "q user:acme archived:false", "per_page": 50, "page": 1,
        }

    def test_list_pull_requests_on_enterprise(self):
        session = Mock()
        session.request.return_value = json_response([{"title": "t"}])
        client = GitHubClient("tok", base_url="https://git.example.com/api/v3/", session=session)

        assert client.list_pull_requests("acme", "svc", state="open", per_page=20) == [{"title": "t"}]
        assert session.request.call_args.args[1] == "https://git.example.com/api/v3/repos/acme/svc/pulls"
        assert session.request.call_args.kwargs["params"] == {"state": "open", "per_page": 20, "page": 1}

    def test_http_error_raises(self):
        session = Mock()
        session.request.return_value = json_response({"message": "Not Found"}, status_code=404)
        client = GitHubClient("tok", session=session)
        with pytest.raises(GitHubAPIError, match="404"):
            client.list_pull_requests("acme", "gone", state="open", per_page=20)

    def test_transport_error_without_retry(self):
        session = Mock()
        session.request.side_effect = requests.exceptions.ConnectionError("boom")
        client = GitHubClient("tok", session=session)
        with pytest.raises(GitHubAPIError):
            client.search_repositories("q", per_page=50)
        assert session.request.call_count == 1

    @patch("pr_notifier.github_api.time.sleep")
    def test_transport_error_retried_when_enabled(self, mock_sleep):
        session = Mock()
        session.request.side_effect = [
            requests.exceptions.ConnectionError("boom"),
            json_response({"items": []}),
        ]
        client = GitHubClient("tok", session=session, retries=2)
        assert client.search_repositories("q", per_page=50) == []
        assert session.request.call_count == 2
        mock_sleep.assert_called_once_with(2.0)

    def test_unexpected_pull_payload(self):
        session = Mock()
        session.request.return_value = json_response({"message": "weird"})
        client = GitHubClient("tok", session=session)
        with pytest.raises(GitHubAPIError):
            client.list_pull_requests("acme", "svc", state="open", per_page=20)


class TestSessionLifetime:
    @patch("pr_notifier.github_api.requests.Session")
    def test_owned_session_closed(self, mock_session_cls):
        with GitHubClient("tok"):
            pass
        mock_session_cls.return_value.close.assert_called_once()

    def test_borrowed_session_left_open(self):
        session = Mock()
        GitHubClient("tok", session=session).close()
        session.close.assert_not_called()
