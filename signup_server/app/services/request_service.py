"""
Request inspection helpers.

Handlers log the raw body of every request they receive.  Nothing is
parsed or validated and no other request data (client address,
headers) is recorded.
"""

from __future__ import annotations

import logging

from fastapi import Request

logger = logging.getLogger(__name__)


class RequestService:
    """Service class for logging incoming requests."""

    @classmethod
    async def log_body(cls, request: Request, route: str) -> str:
        """Log the request body for ``route`` and return it as text.

        The body is decoded as UTF‑8 with undecodable bytes replaced,
        so arbitrary payloads never raise.  An empty body is logged as
        an empty string.
        """
        raw = await request.body()
        text = raw.decode("utf-8", errors="replace")
        logger.info("%s body: %r", route, text)
        return text
