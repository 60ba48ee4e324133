"""Configuration constants and the run input for the notifier."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import InputError

# GitHub endpoints
GITHUB_API_URL = "https://api.github.com"
GITHUB_PUBLIC_DOMAIN = "github.com"
ENTERPRISE_API_SUFFIX = "/api/v3/"
GITHUB_TIMEOUT_SECONDS = 30

# Single page only, no further pagination
REPO_SEARCH_PER_PAGE = 50
PULLS_PER_PAGE = 20

# Slack webhook
SLACK_TIMEOUT_SECONDS = 10
SLACK_OK_BODY = "ok"

REQUIRED_FIELDS = ("slack_web_hook_url", "channel", "access_token", "git_repo_query")


@dataclass(frozen=True)
class NotifierInput:
    slack_web_hook_url: str
    channel: str
    access_token: str
    git_repo_query: str
    git_user: str = ""
    base_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NotifierInput":
        if not isinstance(data, dict):
            raise InputError(f"Input must be a JSON object, got {type(data).__name__}")

        values: dict[str, str] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InputError(f"Input field '{f.name}' must be a string")
            values[f.name] = value

        missing = [name for name in REQUIRED_FIELDS if not values.get(name)]
        if missing:
            raise InputError(f"Missing required input fields: {', '.join(missing)}")
        return cls(**values)

    @classmethod
    def from_json(cls, raw: str) -> "NotifierInput":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InputError(f"Input is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def __repr__(self) -> str:
        # Keep the token out of logs and tracebacks.
        return (
            f"NotifierInput(channel={self.channel!r}, git_repo_query={self.git_repo_query!r}, "
            f"git_user={self.git_user!r}, base_url={self.base_url!r})"
        )


def load_input(raw: str | None = None, path: str | Path | None = None) -> NotifierInput:
    """Read the JSON input from a string, a file, or stdin (``raw == "-"`` or nothing given)."""
    if path is not None:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise InputError(f"Cannot read input file {path}: {e}") from e
    elif raw is None or raw == "-":
        raw = sys.stdin.read()
    return NotifierInput.from_json(raw)
