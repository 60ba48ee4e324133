from __future__ import annotations

import logging

from .config import PULLS_PER_PAGE, REPO_SEARCH_PER_PAGE, NotifierInput
from .errors import GitHubAPIError, RepositorySearchError
from .github_api import GitHubClient
from .models import PullRequest, Repository

logger = logging.getLogger(__name__)


def build_search_query(config: NotifierInput) -> str:
    return f"{config.git_repo_query} user:{config.git_user} archived:false"


def search_repositories(client: GitHubClient, config: NotifierInput) -> list[Repository]:
    query = build_search_query(config)
    logger.info("Searching repositories with query: %s", query)
    try:
        items = client.search_repositories(query, per_page=REPO_SEARCH_PER_PAGE)
    except GitHubAPIError as e:
        raise RepositorySearchError(f"Couldn't fetch repo from git: {e}") from e

    repositories = [Repository.from_api(item) for item in items]
    logger.info("Found %d repositories", len(repositories))
    if not repositories:
        raise RepositorySearchError(f"Couldn't fetch repo from git: no repositories match {query!r}")
    return repositories


def fetch_open_pull_requests(client: GitHubClient, config: NotifierInput) -> list[PullRequest]:
    """Collect open pull requests across every matched repository.

    A repository whose listing fails, or returns a malformed pull request,
    contributes nothing; the others are still collected in search order.
    """
    pull_requests: list[PullRequest] = []
    for repository in search_repositories(client, config):
        try:
            items = client.list_pull_requests(
                config.git_user, repository.name, state="open", per_page=PULLS_PER_PAGE
            )
            repository_pulls = [PullRequest.from_api(item) for item in items]
        except (GitHubAPIError, ValueError, AttributeError) as e:
            logger.debug("Skipping %s: %s", repository.name, e)
            continue
        pull_requests.extend(repository_pulls)

    logger.info("Collected %d open pull requests", len(pull_requests))
    return pull_requests
