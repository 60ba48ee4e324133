from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Optional

import requests

from .config import SLACK_OK_BODY, SLACK_TIMEOUT_SECONDS
from .errors import SlackNotificationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlackRequestBody:
    channel: str
    text: str
    icon_emoji: str = ""

    def to_json(self) -> str:
        return json.dumps(asdict(self))


def send_slack_notification(
    webhook_url: str,
    channel: str,
    text: str,
    session: Optional[requests.Session] = None,
    timeout: float = SLACK_TIMEOUT_SECONDS,
) -> None:
    """POST ``text`` to a Slack incoming webhook.

    Slack answers a delivered message with the literal body ``ok``; anything
    else (including a transport or read error) raises SlackNotificationError.
    """
    body = SlackRequestBody(channel=channel, text=text)
    if session is None:
        with requests.Session() as http:
            _post(http, webhook_url, body, timeout)
    else:
        _post(session, webhook_url, body, timeout)
    logger.info("Posted notification to %s", channel)


def _post(http: requests.Session, webhook_url: str, body: SlackRequestBody, timeout: float) -> None:
    try:
        response = http.post(
            webhook_url,
            data=body.to_json().encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        raise SlackNotificationError(f"Couldn't post to slack: {e}") from e

    try:
        try:
            content = response.content.decode("utf-8")
        except (requests.exceptions.RequestException, UnicodeDecodeError) as e:
            raise SlackNotificationError(f"Couldn't read slack response: {e}") from e
        if content != SLACK_OK_BODY:
            raise SlackNotificationError(
                f"Non-ok response returned from Slack ({response.status_code}): {content[:200]!r}"
            )
    finally:
        response.close()
