"""GitHub REST API client for public GitHub and GitHub Enterprise."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional
from urllib.parse import urlparse, urlunparse

import requests

from .config import (
    ENTERPRISE_API_SUFFIX,
    GITHUB_API_URL,
    GITHUB_PUBLIC_DOMAIN,
    GITHUB_TIMEOUT_SECONDS,
    NotifierInput,
)
from .errors import ClientConfigError, GitHubAPIError

logger = logging.getLogger(__name__)

BACKOFF_MULTIPLIER = 1.5


class GitHubClient:
    """Handles all communication with the GitHub REST API."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        upload_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        retries: int = 0,
        timeout: float = GITHUB_TIMEOUT_SECONDS,
    ):
        if not token:
            raise ClientConfigError("No GitHub access token provided.")
        self.base_url = base_url.rstrip("/")
        self.upload_url = (upload_url or base_url).rstrip("/")
        self.retries = max(0, retries)
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{endpoint}" if endpoint.startswith("/") else endpoint
        backoff = 2.0

        for attempt in range(self.retries + 1):
            try:
                response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            except requests.exceptions.RequestException as e:
                if attempt < self.retries:
                    logger.warning("Request failed (%s). Retrying in %.1f seconds.", e, backoff)
                    time.sleep(backoff)
                    backoff *= BACKOFF_MULTIPLIER
                    continue
                raise GitHubAPIError(f"Request to {url} failed: {e}") from e

            if response.status_code >= 400:
                raise GitHubAPIError(
                    f"GitHub API error {response.status_code} for {url}: {response.text[:500]}"
                )
            return response

        raise GitHubAPIError("Max retries exceeded")

    def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        response = self._request("GET", endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON from {endpoint}: {e}") from e

    def search_repositories(self, query: str, per_page: int) -> list[dict]:
        """Return the first page of repositories matching ``query``."""
        payload = self.get("/search/repositories", params={"q": query, "per_page": per_page, "page": 1})
        if not isinstance(payload, dict):
            raise GitHubAPIError(f"Unexpected search payload type {type(payload).__name__}")
        return payload.get("items") or []

    def list_pull_requests(self, owner: str, repo: str, state: str, per_page: int) -> list[dict]:
        """Return the first page of pull requests for ``owner/repo``."""
        items = self.get(
            f"/repos/{owner}/{repo}/pulls",
            params={"state": state, "per_page": per_page, "page": 1},
        )
        if not isinstance(items, list):
            raise GitHubAPIError(f"Expected list of pull requests for {owner}/{repo}")
        return items


def is_enterprise(base_url: str) -> bool:
    return bool(base_url) and GITHUB_PUBLIC_DOMAIN not in base_url


def enterprise_api_url(base_url: str) -> str:
    """Derive the REST base for a GitHub Enterprise host.

    ``https://git.example.com/`` becomes ``https://git.example.com/api/v3/``;
    a URL whose path already mentions ``api`` is returned as given.
    """
    try:
        parsed = urlparse(base_url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise ClientConfigError(f"Can not parse base url {base_url!r}: {e}") from e
    if not parsed.scheme or not parsed.netloc:
        raise ClientConfigError(f"Can not parse base url {base_url!r}: scheme and host are required")

    if "api" in parsed.path:
        return base_url
    path = parsed.path.rstrip("/") + ENTERPRISE_API_SUFFIX
    return urlunparse(parsed._replace(path=path))


def build_client(
    config: NotifierInput,
    session: Optional[requests.Session] = None,
    retries: int = 0,
) -> GitHubClient:
    if not is_enterprise(config.base_url):
        return GitHubClient(config.access_token, session=session, retries=retries)

    api_url = enterprise_api_url(config.base_url)
    logger.info("Using GitHub Enterprise API at %s", api_url)
    return GitHubClient(
        config.access_token,
        base_url=api_url,
        upload_url=api_url,
        session=session,
        retries=retries,
    )
