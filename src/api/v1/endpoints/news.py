from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_news_service
from src.exceptions import ValidationError
from src.news.schemas.responses import TranslatedNewsItemResponse
from src.news.services.news_service import NewsService
from src.utils.validation_utils import validate_symbol

logger = structlog.get_logger(__name__)

router = APIRouter()

NEWS_FETCH_ERROR = "無法取得新聞資訊"


@router.get(
    "/news",
    response_model=List[TranslatedNewsItemResponse],
    response_model_exclude_none=True,
)
async def get_news(
    symbol: Optional[str] = Query(None, description="Ticker symbol, e.g. NVDA"),
    page: Optional[str] = Query("1", description="Page number (5 items per page)"),
    source: Optional[str] = Query("all", description="all, finnhub or newsapi"),
    news_service: NewsService = Depends(get_news_service),
):
    """Get translated news for a ticker symbol"""
    try:
        symbol = validate_symbol(symbol)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})

    try:
        items = await news_service.get_translated_news(symbol, page or "1", source or "all")
    except Exception as e:
        logger.error("news_request_failed", symbol=symbol, error=str(e), exc_info=e)
        return JSONResponse(status_code=500, content={"error": NEWS_FETCH_ERROR})

    return [TranslatedNewsItemResponse.from_item(item) for item in items]
