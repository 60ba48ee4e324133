from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


def parse_timestamp(value: str | None) -> datetime:
    """Parse a GitHub ISO-8601 timestamp (``2024-01-01T10:00:00Z``) as aware UTC."""
    if not value:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Repository:
    name: str
    full_name: str = ""
    html_url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            name=data.get("name") or "",
            full_name=data.get("full_name") or "",
            html_url=data.get("html_url") or "",
        )


@dataclass(frozen=True)
class PullRequest:
    title: str
    html_url: str
    created_at: datetime
    head_repo_name: str
    author_login: str
    author_url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PullRequest":
        head_repo = (data.get("head") or {}).get("repo") or {}
        user = data.get("user") or {}
        return cls(
            title=data.get("title") or "",
            html_url=data.get("html_url") or "",
            created_at=parse_timestamp(data.get("created_at")),
            head_repo_name=head_repo.get("name") or "",
            author_login=user.get("login") or "",
            author_url=user.get("html_url") or "",
        )
