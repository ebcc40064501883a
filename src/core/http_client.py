"""
Process-wide httpx client shared by news providers, the translator and quotes.

Created lazily on first use and closed from the application lifespan.
"""

from typing import Optional

import httpx
import structlog

from ..config import get_settings

logger = structlog.get_logger(__name__)

_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    global _client
    if _client is None or _client.is_closed:
        settings = get_settings()
        _client = httpx.AsyncClient(timeout=settings.http_timeout_seconds, follow_redirects=True)
        logger.info("http_client_created", timeout=settings.http_timeout_seconds)
    return _client


async def close_http_client() -> None:
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.info("http_client_closed")
    _client = None
