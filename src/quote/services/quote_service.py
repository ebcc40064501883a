"""
Stock quotes from the Yahoo Finance chart API.

One chart request per symbol, issued concurrently. Change and change percent
are derived from the previous close; symbols without chart data are dropped.
"""

import asyncio
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

import httpx
import structlog

from ...exceptions import ProviderError
from ...news.services.cache import TTLCache
from ...utils.validation_utils import parse_quote_symbols

logger = structlog.get_logger(__name__)

DEFAULT_QUOTE_SYMBOLS = ("NVDA", "AMD", "TSLA", "INTC")


@dataclass
class Quote:
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    previous_close: float


def round_half_up(value: float, digits: int = 2) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


class QuoteService:
    USER_AGENT = "Mozilla/5.0 (compatible; StockApp/1.0)"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_url: str = "https://query1.finance.yahoo.com/v8/finance/chart",
        response_cache: Optional[TTLCache] = None,
        default_symbols: Sequence[str] = DEFAULT_QUOTE_SYMBOLS,
    ):
        self.client = client
        self.api_url = api_url
        self.response_cache = response_cache
        self.default_symbols = tuple(default_symbols)

    async def get_quotes(self, symbols_param: Optional[str] = None) -> List[Quote]:
        symbols = parse_quote_symbols(symbols_param, self.default_symbols)
        results = await asyncio.gather(*(self._safe_fetch_quote(s) for s in symbols))
        quotes = [q for q in results if q is not None]
        logger.info("quotes_fetched", requested=len(symbols), returned=len(quotes))
        return quotes

    async def _safe_fetch_quote(self, symbol: str) -> Optional[Quote]:
        try:
            return await self.fetch_quote(symbol)
        except ProviderError as e:
            logger.warning("quote_fetch_failed", symbol=symbol, error=str(e))
            return None
        except Exception as e:
            # One malformed chart must not take down the other symbols
            logger.warning("quote_build_failed", symbol=symbol, error=str(e), error_type=e.__class__.__name__)
            return None

    async def fetch_quote(self, symbol: str) -> Optional[Quote]:
        data = await self._get_chart(symbol)

        block = data.get("chart") if isinstance(data, dict) else None
        results = block.get("result") if isinstance(block, dict) else None
        chart = results[0] if isinstance(results, list) and results else None
        if not isinstance(chart, dict):
            return None

        return self._build_quote(symbol, chart)

    async def _get_chart(self, symbol: str) -> Any:
        url = f"{self.api_url}/{symbol}"
        params = {"interval": "1d", "range": "1d"}
        cache_key = str(httpx.URL(url, params=params))

        if self.response_cache is not None:
            cached = self.response_cache.get(cache_key)
            if cached is not None:
                return cached

        try:
            response = await self.client.get(url, params=params, headers={"User-Agent": self.USER_AGENT})
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(f"Quote API returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Quote API request failed: {e.__class__.__name__}") from e
        except ValueError as e:
            raise ProviderError("Quote API returned malformed JSON") from e

        if self.response_cache is not None:
            self.response_cache.put(cache_key, data)
        return data

    def _build_quote(self, symbol: str, chart: dict) -> Optional[Quote]:
        meta = chart.get("meta")
        meta = meta if isinstance(meta, dict) else {}
        indicators = chart.get("indicators")
        quotes = indicators.get("quote") if isinstance(indicators, dict) else None
        series = quotes[0] if isinstance(quotes, list) and quotes and isinstance(quotes[0], dict) else {}
        closes = series.get("close")
        last_close = closes[-1] if isinstance(closes, list) and closes else None

        previous_close = _first_number(meta.get("previousClose"), last_close)
        price = _first_number(meta.get("regularMarketPrice"), last_close, previous_close)
        if price is None or previous_close is None:
            logger.info("quote_missing_prices", symbol=symbol)
            return None

        change = price - previous_close
        change_percent = (change / previous_close) * 100 if previous_close else 0
        if not all(math.isfinite(v) for v in (price, previous_close, change, change_percent)):
            logger.info("quote_non_finite", symbol=symbol)
            return None

        short_name = meta.get("shortName")
        return Quote(
            symbol=symbol,
            name=short_name if isinstance(short_name, str) and short_name else symbol,
            price=round_half_up(price),
            change=round_half_up(change),
            change_percent=round_half_up(change_percent),
            previous_close=previous_close,
        )


def _first_number(*values: Any) -> Optional[float]:
    for value in values:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    return None
