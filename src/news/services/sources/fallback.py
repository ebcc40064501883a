from datetime import datetime
from typing import Callable, List

import structlog

from ....utils.time_utils import to_iso8601, utc_now
from ...models.news_item import NewsItem

logger = structlog.get_logger(__name__)

FALLBACK_SOURCE = "Yahoo Finance"
FALLBACK_QUOTE_URL = "https://finance.yahoo.com/quote/{symbol}"


class FallbackNewsGenerator:
    """Builds the single placeholder item shown when no provider has news."""

    def __init__(self, now: Callable[[], datetime] = utc_now):
        self._now = now

    def generate(self, symbol: str) -> List[NewsItem]:
        try:
            return [
                NewsItem(
                    title=f"{symbol} 股票最新動向",
                    description=f"了解 {symbol} 股票的最新市場動向和分析",
                    url=FALLBACK_QUOTE_URL.format(symbol=symbol),
                    source=FALLBACK_SOURCE,
                    published_at=to_iso8601(self._now()),
                )
            ]
        except Exception as e:
            logger.error("fallback_news_failed", symbol=symbol, error=str(e))
            return []
