from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_quote_service
from src.quote.schemas.responses import QuoteResponse
from src.quote.services.quote_service import QuoteService

logger = structlog.get_logger(__name__)

router = APIRouter()

QUOTE_FETCH_ERROR = "無法取得股價"


@router.get("/quote", response_model=List[QuoteResponse])
async def get_quotes(
    symbol: Optional[str] = Query(None, description="Comma-separated symbols, up to 6 characters each"),
    quote_service: QuoteService = Depends(get_quote_service),
):
    """Get latest quotes; unknown symbols are left out of the result"""
    try:
        quotes = await quote_service.get_quotes(symbol)
    except Exception as e:
        logger.error("quote_request_failed", symbol=symbol, error=str(e), exc_info=e)
        return JSONResponse(status_code=500, content={"error": QUOTE_FETCH_ERROR})

    return [QuoteResponse.from_quote(q) for q in quotes]
