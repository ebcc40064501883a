"""
News aggregation: provider selection, pagination and translation fan-out.
"""

import asyncio
from typing import Dict, List, Optional, Sequence

import structlog

from ...utils.validation_utils import coerce_page
from ..models.news_item import NewsItem, TranslatedNewsItem
from .sources.base import NewsSourceAdapter
from .translator import Translator

logger = structlog.get_logger(__name__)

PAGE_SIZE = 5
ALL_SOURCES = "all"


class NewsService:
    """
    Orchestrates news sources for a symbol.

    Sources are tried in order. `source="all"` walks the whole chain and
    stops at the first source that returns items; naming a configured source
    restricts the chain to that source alone; any other value goes straight
    to the last source in the chain.
    """

    def __init__(self, sources: Sequence[NewsSourceAdapter], translator: Translator):
        if not sources:
            raise ValueError("NewsService requires at least one source")
        self.sources = list(sources)
        self.translator = translator
        self._by_key: Dict[str, NewsSourceAdapter] = {s.key: s for s in self.sources}

    def resolve_sources(self, source: Optional[str]) -> List[NewsSourceAdapter]:
        requested = (source or "").strip().lower() or ALL_SOURCES
        if requested == ALL_SOURCES:
            return list(self.sources)
        if requested in self._by_key:
            return [self._by_key[requested]]
        return [self.sources[-1]]

    async def fetch_news(self, symbol: str, page=1, source: Optional[str] = None) -> List[NewsItem]:
        if not symbol:
            return []

        page_num = coerce_page(page)
        chain = self.resolve_sources(source)

        for adapter in chain:
            items = await adapter.fetch_news(symbol, page_num)
            if not items:
                continue

            # A non-empty window ends the chain even when the requested page is past its end.
            if not adapter.paginated:
                start = (page_num - 1) * PAGE_SIZE
                items = items[start:start + PAGE_SIZE]

            logger.info("news_fetch_completed", symbol=symbol, page=page_num, source=adapter.key, count=len(items))
            return items

        logger.info("news_fetch_empty", symbol=symbol, page=page_num, requested_source=source)
        return []

    async def translate_items(self, items: Sequence[NewsItem]) -> List[TranslatedNewsItem]:
        # gather returns results in argument order regardless of completion order
        return list(await asyncio.gather(*(self._translate_item(item) for item in items)))

    async def _translate_item(self, item: NewsItem) -> TranslatedNewsItem:
        title_zh, description_zh = await asyncio.gather(
            self.translator.translate(item.title or ""),
            self.translator.translate(item.description or ""),
        )
        return TranslatedNewsItem.from_item(item, title_zh=title_zh, description_zh=description_zh)

    async def get_translated_news(self, symbol: str, page=1, source: Optional[str] = None) -> List[TranslatedNewsItem]:
        items = await self.fetch_news(symbol, page, source)
        return await self.translate_items(items)
