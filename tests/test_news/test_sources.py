import pytest
import httpx

from src.news.services.cache import TTLCache
from src.news.services.sources.fallback import FallbackNewsGenerator
from src.news.services.sources.finnhub import FinnhubNewsSource
from src.news.services.sources.newsapi import NewsApiSource

FINNHUB_URL = "https://finnhub.test/api/v1"
NEWSAPI_URL = "https://newsapi.test/v2"


def finnhub_article(**overrides):
    article = {
        "headline": "Nvidia unveils new chip",
        "summary": "The company announced...",
        "url": "https://news.example.com/nvda-chip",
        "source": "Reuters",
        "datetime": 1714000000,
        "image": "https://img.example.com/nvda.jpg",
    }
    article.update(overrides)
    return article


def newsapi_article(**overrides):
    article = {
        "source": {"id": None, "name": "The Verge"},
        "title": "AMD stock climbs",
        "description": "Shares rose after earnings.",
        "url": "https://news.example.com/amd",
        "urlToImage": "https://img.example.com/amd.jpg",
        "publishedAt": "2024-05-09T14:30:00Z",
    }
    article.update(overrides)
    return article


class TestFinnhubNewsSource:
    @pytest.mark.asyncio
    async def test_missing_token_returns_empty_without_request(self, http_stub, fixed_today):
        client, handler = http_stub(json=[finnhub_article()])
        source = FinnhubNewsSource(client, token=None, base_url=FINNHUB_URL, today=fixed_today)

        assert await source.fetch_news("NVDA") == []
        assert handler.call_count == 0

    @pytest.mark.asyncio
    async def test_requests_trailing_seven_day_window(self, http_stub, fixed_today):
        client, handler = http_stub(json=[])
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        await source.fetch_news("NVDA")

        request = handler.requests[0]
        assert request.url.path == "/api/v1/company-news"
        assert request.url.params["symbol"] == "NVDA"
        assert request.url.params["from"] == "2024-05-03"
        assert request.url.params["to"] == "2024-05-10"
        assert request.url.params["token"] == "secret"

    @pytest.mark.asyncio
    async def test_maps_articles_to_news_items(self, http_stub, fixed_today):
        client, _ = http_stub(json=[finnhub_article()])
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        items = await source.fetch_news("NVDA")

        assert len(items) == 1
        item = items[0]
        assert item.title == "Nvidia unveils new chip"
        assert item.description == "The company announced..."
        assert item.url == "https://news.example.com/nvda-chip"
        assert item.source == "Reuters"
        assert item.published_at == "2024-04-24T23:06:40.000Z"
        assert item.image == "https://img.example.com/nvda.jpg"

    @pytest.mark.asyncio
    async def test_defaults_for_sparse_articles(self, http_stub, fixed_today):
        client, _ = http_stub(json=[finnhub_article(summary=None, source="", image="", datetime=None)])
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        item = (await source.fetch_news("NVDA"))[0]

        assert item.description == ""
        assert item.source == "Finnhub"
        assert item.image is None
        assert item.published_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_drops_articles_without_title_or_url(self, http_stub, fixed_today):
        articles = [
            finnhub_article(headline=""),
            finnhub_article(url=None),
            "not-a-record",
            finnhub_article(headline="Keeps this one"),
        ]
        client, _ = http_stub(json=articles)
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        items = await source.fetch_news("NVDA")

        assert [i.title for i in items] == ["Keeps this one"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code,payload", [
        (500, {"error": "boom"}),
        (401, {"error": "Invalid API key"}),
        (200, {"error": "You don't have access to this resource."}),
    ])
    async def test_failures_return_empty(self, http_stub, fixed_today, status_code, payload):
        client, _ = http_stub(status_code=status_code, json=payload)
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        assert await source.fetch_news("NVDA") == []

    @pytest.mark.asyncio
    async def test_transport_error_returns_empty(self, http_stub, fixed_today):
        client, _ = http_stub(exc=httpx.ReadTimeout("timed out"))
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, today=fixed_today)

        assert await source.fetch_news("NVDA") == []

    @pytest.mark.asyncio
    async def test_successful_payload_reused_from_response_cache(self, http_stub, fixed_today, fake_clock):
        client, handler = http_stub(json=[finnhub_article()])
        cache = TTLCache(ttl_seconds=3600, clock=fake_clock)
        source = FinnhubNewsSource(client, token="secret", base_url=FINNHUB_URL, response_cache=cache, today=fixed_today)

        first = await source.fetch_news("NVDA")
        second = await source.fetch_news("NVDA")

        assert first == second
        assert handler.call_count == 1


class TestNewsApiSource:
    @pytest.fixture
    def fallback(self, fixed_now):
        return FallbackNewsGenerator(now=fixed_now)

    @pytest.mark.asyncio
    async def test_missing_key_returns_fallback_without_request(self, http_stub, fallback):
        client, handler = http_stub(json={"articles": [newsapi_article()]})
        source = NewsApiSource(client, api_key=None, fallback=fallback, base_url=NEWSAPI_URL)

        items = await source.fetch_news("AMD")

        assert len(items) == 1
        assert items[0].source == "Yahoo Finance"
        assert handler.call_count == 0

    @pytest.mark.asyncio
    async def test_requests_native_page_with_header_auth(self, http_stub, fallback):
        client, handler = http_stub(json={"status": "ok", "articles": []})
        source = NewsApiSource(client, api_key="news-key", fallback=fallback, base_url=NEWSAPI_URL)

        await source.fetch_news("AMD", page=3)

        request = handler.requests[0]
        assert request.url.path == "/v2/everything"
        assert request.headers["Authorization"] == "news-key"
        assert request.url.params["q"] == "AMD"
        assert request.url.params["page"] == "3"
        assert request.url.params["pageSize"] == "5"
        assert request.url.params["sortBy"] == "publishedAt"
        assert request.url.params["searchIn"] == "title,description"
        assert request.url.params["language"] == "en"

    @pytest.mark.asyncio
    async def test_maps_articles_to_news_items(self, http_stub, fallback):
        articles = [newsapi_article(), newsapi_article(title="Second", source=None, description=None, urlToImage=None)]
        client, _ = http_stub(json={"status": "ok", "articles": articles})
        source = NewsApiSource(client, api_key="news-key", fallback=fallback, base_url=NEWSAPI_URL)

        items = await source.fetch_news("AMD")

        assert [i.title for i in items] == ["AMD stock climbs", "Second"]
        assert items[0].source == "The Verge"
        assert items[0].published_at == "2024-05-09T14:30:00Z"
        assert items[0].image == "https://img.example.com/amd.jpg"
        assert items[1].source == "Unknown"

    @pytest.mark.asyncio
    async def test_drops_articles_without_title_or_url(self, http_stub, fallback):
        articles = [
            newsapi_article(title=None),
            newsapi_article(title="", url="https://news.example.com/empty-title"),
            newsapi_article(title="No link", url=""),
            newsapi_article(title="Null link", url=None),
            "not-an-article",
            newsapi_article(title="Kept", url="https://news.example.com/kept"),
        ]
        client, _ = http_stub(json={"status": "ok", "articles": articles})
        source = NewsApiSource(client, api_key="news-key", fallback=fallback, base_url=NEWSAPI_URL)

        items = await source.fetch_news("AMD")

        assert [i.title for i in items] == ["Kept"]
        assert items[0].url == "https://news.example.com/kept"
        assert items[1].description == ""
        assert items[1].image is None

    @pytest.mark.asyncio
    async def test_successful_empty_page_returns_empty(self, http_stub, fallback):
        client, _ = http_stub(json={"status": "ok", "totalResults": 0, "articles": []})
        source = NewsApiSource(client, api_key="news-key", fallback=fallback, base_url=NEWSAPI_URL)

        assert await source.fetch_news("AMD", page=9) == []

    @pytest.mark.asyncio
    async def test_http_error_returns_single_fallback_item(self, http_stub, fallback):
        client, _ = http_stub(status_code=401, json={"status": "error", "code": "apiKeyInvalid"})
        source = NewsApiSource(client, api_key="bad-key", fallback=fallback, base_url=NEWSAPI_URL)

        items = await source.fetch_news("AMD")

        assert len(items) == 1
        assert "AMD" in items[0].title
        assert items[0].url == "https://finance.yahoo.com/quote/AMD"

    @pytest.mark.asyncio
    async def test_transport_error_returns_single_fallback_item(self, http_stub, fallback):
        client, _ = http_stub(exc=httpx.ConnectError("dns failure"))
        source = NewsApiSource(client, api_key="news-key", fallback=fallback, base_url=NEWSAPI_URL)

        items = await source.fetch_news("TSLA")

        assert len(items) == 1
        assert items[0].url == "https://finance.yahoo.com/quote/TSLA"


class TestFallbackNewsGenerator:
    def test_generates_single_templated_item(self, fixed_now):
        items = FallbackNewsGenerator(now=fixed_now).generate("INTC")

        assert len(items) == 1
        item = items[0]
        assert item.title == "INTC 股票最新動向"
        assert item.description == "了解 INTC 股票的最新市場動向和分析"
        assert item.url == "https://finance.yahoo.com/quote/INTC"
        assert item.source == "Yahoo Finance"
        assert item.published_at == "2024-01-02T03:04:05.000Z"
        assert item.image is None

    def test_internal_error_yields_empty_list(self):
        def broken_clock():
            raise RuntimeError("clock unavailable")

        assert FallbackNewsGenerator(now=broken_clock).generate("INTC") == []
