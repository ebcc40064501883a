from functools import lru_cache
from typing import Optional

from ..config import get_settings
from ..core.http_client import get_http_client
from ..news.services.cache import TTLCache
from ..news.services.news_service import NewsService
from ..news.services.sources.fallback import FallbackNewsGenerator
from ..news.services.sources.finnhub import FinnhubNewsSource
from ..news.services.sources.newsapi import NewsApiSource
from ..news.services.translator import Translator
from ..quote.services.quote_service import QuoteService


@lru_cache()
def get_translation_cache() -> TTLCache:
    settings = get_settings()
    return TTLCache(settings.translation_ttl_seconds, name="translation")


@lru_cache()
def get_response_cache() -> Optional[TTLCache]:
    settings = get_settings()
    if settings.upstream_cache_seconds <= 0:
        return None
    return TTLCache(settings.upstream_cache_seconds, name="upstream")


@lru_cache()
def get_quote_cache() -> Optional[TTLCache]:
    settings = get_settings()
    if settings.quote_cache_seconds <= 0:
        return None
    return TTLCache(settings.quote_cache_seconds, name="quote")


@lru_cache()
def get_news_service() -> NewsService:
    settings = get_settings()
    client = get_http_client()
    response_cache = get_response_cache()

    sources = [
        FinnhubNewsSource(
            client,
            token=settings.finnhub_api_key,
            base_url=settings.finnhub_base_url,
            response_cache=response_cache,
        ),
        NewsApiSource(
            client,
            api_key=settings.news_api_key,
            fallback=FallbackNewsGenerator(),
            base_url=settings.news_api_base_url,
            response_cache=response_cache,
        ),
    ]
    translator = Translator(
        client,
        cache=get_translation_cache(),
        api_url=settings.translation_api_url,
        min_match=settings.translation_min_match,
    )
    return NewsService(sources, translator)


@lru_cache()
def get_quote_service() -> QuoteService:
    settings = get_settings()
    return QuoteService(
        get_http_client(),
        api_url=settings.quote_api_url,
        response_cache=get_quote_cache(),
    )


def reset_services() -> None:
    """Drop services bound to the shared HTTP client; caches survive."""
    get_news_service.cache_clear()
    get_quote_service.cache_clear()
