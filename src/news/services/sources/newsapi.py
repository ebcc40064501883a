"""
NewsAPI `everything` search adapter (secondary source)

Searches the symbol in titles and descriptions, newest first, using NewsAPI's
own paging. Any failure returns the fallback placeholder item instead of an
empty list.
"""

from typing import Any, List, Optional

import httpx

from ....exceptions import ProviderError
from ...models.news_item import NewsItem
from ..cache import TTLCache
from .base import NewsSourceAdapter
from .fallback import FallbackNewsGenerator


class NewsApiSource(NewsSourceAdapter):
    key = "newsapi"
    paginated = True

    PAGE_SIZE = 5

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str],
        fallback: FallbackNewsGenerator,
        base_url: str = "https://newsapi.org/v2",
        response_cache: Optional[TTLCache] = None,
    ):
        super().__init__("NewsAPI", base_url, client, response_cache)
        self.api_key = api_key or ""
        self.fallback = fallback

    async def fetch_news(self, symbol: str, page: int = 1) -> List[NewsItem]:
        if not self.api_key:
            self.logger.info("newsapi_key_missing", symbol=symbol)
            return self.fallback.generate(symbol)

        params = {
            "q": symbol,
            "sortBy": "publishedAt",
            "language": "en",
            "pageSize": self.PAGE_SIZE,
            "page": page,
            "searchIn": "title,description",
        }

        try:
            data = await self.get_json("/everything", params=params, headers={"Authorization": self.api_key})
        except ProviderError as e:
            self.logger.warning("newsapi_fetch_failed", symbol=symbol, page=page, error=str(e))
            return self.fallback.generate(symbol)

        if not isinstance(data, dict):
            self.logger.warning("newsapi_unexpected_payload", symbol=symbol, payload_type=type(data).__name__)
            return self.fallback.generate(symbol)

        items = []
        for article in data.get("articles") or []:
            item = self._to_news_item(article)
            if item and self.is_usable(item):
                items.append(item)

        self.logger.info("newsapi_fetch_completed", symbol=symbol, page=page, count=len(items))
        return items

    def _to_news_item(self, article: Any) -> Optional[NewsItem]:
        if not isinstance(article, dict):
            return None

        source = article.get("source")
        source_name = source.get("name") if isinstance(source, dict) else None

        return NewsItem(
            title=article.get("title") or "",
            description=article.get("description") or "",
            url=article.get("url") or "",
            source=source_name or "Unknown",
            published_at=article.get("publishedAt") or "",
            image=article.get("urlToImage") or None,
        )
