from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import requests

from .config import NotifierInput
from .fetcher import fetch_open_pull_requests
from .github_api import GitHubClient, build_client
from .message import build_message
from .slack import send_slack_notification

logger = logging.getLogger(__name__)


def run(
    config: NotifierInput,
    *,
    client: Optional[GitHubClient] = None,
    session: Optional[requests.Session] = None,
    now: Optional[datetime] = None,
    dry_run: bool = False,
    retries: int = 0,
) -> str:
    """Build client, fetch, format and notify. Returns the message text.

    Fatal conditions surface as NotifierError subclasses; the caller decides
    how to terminate.
    """
    if client is None:
        with build_client(config, retries=retries) as owned_client:
            pull_requests = fetch_open_pull_requests(owned_client, config)
    else:
        pull_requests = fetch_open_pull_requests(client, config)
    text = build_message(pull_requests, now=now)

    if dry_run:
        logger.info("Dry run, not posting to %s", config.channel)
        return text

    send_slack_notification(config.slack_web_hook_url, config.channel, text, session=session)
    return text
