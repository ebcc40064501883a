"""
Finnhub company-news adapter (primary source)

Returns every article in a trailing 7-day window; Finnhub has no paging, so
the caller slices pages in-process.
"""

from datetime import date
from typing import Any, Callable, List, Optional

import httpx

from ....exceptions import ProviderError
from ....utils.time_utils import date_window, epoch_to_iso8601, to_iso8601, utc_now
from ...models.news_item import NewsItem
from ..cache import TTLCache
from .base import NewsSourceAdapter


class FinnhubNewsSource(NewsSourceAdapter):
    key = "finnhub"
    paginated = False

    WINDOW_DAYS = 7

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: Optional[str],
        base_url: str = "https://finnhub.io/api/v1",
        response_cache: Optional[TTLCache] = None,
        today: Callable[[], date] = date.today,
    ):
        super().__init__("Finnhub", base_url, client, response_cache)
        self.token = token or ""
        self._today = today

    async def fetch_news(self, symbol: str, page: int = 1) -> List[NewsItem]:
        if not self.token:
            self.logger.info("finnhub_token_missing", symbol=symbol)
            return []

        start, end = date_window(self._today(), self.WINDOW_DAYS)
        params = {"symbol": symbol, "from": start, "to": end, "token": self.token}

        try:
            articles = await self.get_json("/company-news", params=params)
        except ProviderError as e:
            self.logger.warning("finnhub_fetch_failed", symbol=symbol, error=str(e))
            return []

        if not isinstance(articles, list):
            self.logger.warning("finnhub_unexpected_payload", symbol=symbol, payload_type=type(articles).__name__)
            return []

        items = []
        for article in articles:
            item = self._to_news_item(article)
            if item and self.is_usable(item):
                items.append(item)

        self.logger.info("finnhub_fetch_completed", symbol=symbol, window_start=start, window_end=end, count=len(items))
        return items

    def _to_news_item(self, article: Any) -> Optional[NewsItem]:
        if not isinstance(article, dict):
            return None
        try:
            return NewsItem(
                title=article.get("headline") or "",
                description=article.get("summary") or "",
                url=article.get("url") or "",
                source=article.get("source") or self.name,
                published_at=epoch_to_iso8601(article.get("datetime")) or to_iso8601(utc_now()),
                image=article.get("image") or None,
            )
        except (TypeError, ValueError, OverflowError, OSError) as e:
            self.logger.debug("finnhub_record_skipped", error=str(e))
            return None
