"""Serverless entry point: the event is the JSON input record."""

from __future__ import annotations

import logging
from typing import Any

from .config import NotifierInput
from .errors import NotifierError
from .pipeline import run

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    try:
        config = NotifierInput.from_dict(event)
        text = run(config)
    except NotifierError as e:
        logger.error("%s", e)
        raise
    return {"status": "ok", "length": len(text)}
