from datetime import datetime, timezone
from typing import Any, Dict

import structlog
from fastapi import APIRouter, Depends

from ...dependencies import get_translation_cache
from ....news.services.cache import TTLCache
from ....config import get_settings

logger = structlog.get_logger(__name__)
settings = get_settings()

router = APIRouter()


@router.get("/health")
async def health_check(
    translation_cache: TTLCache = Depends(get_translation_cache)
) -> Dict[str, Any]:
    logger.debug("health_check", translation_cache_entries=len(translation_cache))
    return {
        "status": "healthy",
        "service": "Stock News API",
        "version": "0.1.0",
        "environment": "development" if settings.debug else "production",
        "translation_cache_entries": len(translation_cache),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
