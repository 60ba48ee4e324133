from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def pull_payload(title: str, number: int, repo: str = "svc", login: str = "alice",
                 created_at: str = "2024-05-01T09:30:00Z") -> dict:
    return {
        "title": title,
        "html_url": f"https://github.com/acme/{repo}/pull/{number}",
        "created_at": created_at,
        "head": {"repo": {"name": repo}},
        "user": {"login": login, "html_url": f"https://github.com/{login}"},
    }


def json_response(payload, status_code: int = 200) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = str(payload)
    return response
