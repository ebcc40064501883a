"""
Base class for news source adapters
Clean, simple interface that all sources must implement
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
import structlog

from ....exceptions import ProviderError
from ...models.news_item import NewsItem
from ..cache import TTLCache


class NewsSourceAdapter(ABC):
    """Base adapter for news sources"""

    key: str = ""
    # Non-paginated sources return their whole window and are sliced by the caller.
    paginated: bool = False

    def __init__(
        self,
        name: str,
        base_url: str,
        client: httpx.AsyncClient,
        response_cache: Optional[TTLCache] = None,
    ):
        self.name = name
        self.base_url = base_url
        self.client = client
        self.response_cache = response_cache
        self.logger = structlog.get_logger(self.__class__.__name__)

    @abstractmethod
    async def fetch_news(self, symbol: str, page: int = 1) -> List[NewsItem]:
        """Fetch news for a symbol and return standardized items. Never raises."""
        pass

    async def get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET a JSON payload, raising ProviderError on transport, status or decode failures."""
        url = f"{self.base_url}{path}"
        cache_key = str(httpx.URL(url, params=params or {}))

        if self.response_cache is not None:
            cached = self.response_cache.get(cache_key)
            if cached is not None:
                self.logger.debug("provider_response_cache_hit", source=self.name, path=path)
                return cached

        try:
            response = await self.client.get(url, params=params, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"{self.name} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"{self.name} request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise ProviderError(f"{self.name} returned malformed JSON") from e

        if self.response_cache is not None:
            self.response_cache.put(cache_key, data)
        return data

    @staticmethod
    def is_usable(item: NewsItem) -> bool:
        return bool(item.title) and bool(item.url)
