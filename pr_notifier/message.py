"""Slack message text for the open pull request summary."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from .models import PullRequest

HEADER_BANNER = ">*Current pull requests statistics *\n"
SINGLE_PULL_REQUEST = "There is just one open pull request waiting for review \n"
NO_PULL_REQUESTS = "Hurray! There are no open pull requests. Good job team! :happyseal: :happyseal:"


def build_message_header(n: int) -> str:
    header = HEADER_BANNER
    if n > 1:
        header += f"There are {n} open pull requests waiting for review :angrier_seal: :red_circle: \n"
    elif n == 1:
        header += SINGLE_PULL_REQUEST
    return header


def hours_open(pr: PullRequest, now: Optional[datetime] = None) -> float:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (now - pr.created_at).total_seconds() / 3600


def build_pull_request_line(pr: PullRequest, now: Optional[datetime] = None) -> str:
    return (
        f"* <{pr.html_url}|{pr.title}> in {pr.head_repo_name} "
        f"for *{hours_open(pr, now):.1f} hours*"
        f" | opened by <{pr.author_url}|{pr.author_login}>\n"
    )


def build_no_pull_request_message() -> str:
    return build_message_header(0) + NO_PULL_REQUESTS


def build_message(pull_requests: Sequence[PullRequest], now: Optional[datetime] = None) -> str:
    if not pull_requests:
        return build_no_pull_request_message()
    # One clock reading so every line is aged against the same moment.
    now = now or datetime.now(timezone.utc)
    parts = [build_message_header(len(pull_requests))]
    parts.extend(build_pull_request_line(pr, now) for pr in pull_requests)
    return "".join(parts)
