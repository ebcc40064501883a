import pytest
from datetime import date, datetime, timezone
from unittest.mock import MagicMock, AsyncMock
import httpx

from src.news.models.news_item import NewsItem
from src.news.services.cache import TTLCache


class FakeClock:
    """Controllable clock returning seconds since epoch."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code=200, json=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.json)

    @property
    def call_count(self) -> int:
        return len(self.requests)


def build_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def http_stub():
    """Returns (client, handler); pass `handler=` for custom routing."""
    def _stub(status_code=200, json=None, exc=None, handler=None):
        handler = handler or RecordingHandler(status_code=status_code, json=json, exc=exc)
        return build_client(handler), handler
    return _stub


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def translation_cache(fake_clock):
    return TTLCache(ttl_seconds=60, clock=fake_clock, name="translation")


@pytest.fixture
def fixed_today():
    return lambda: date(2024, 5, 10)


@pytest.fixture
def fixed_now():
    return lambda: datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def make_news_items():
    def _make(count: int, prefix: str = "Headline"):
        return [
            NewsItem(
                title=f"{prefix} {i}",
                description=f"Summary {i}",
                url=f"https://news.example.com/{prefix.lower()}/{i}",
                source="Example Wire",
                published_at="2024-05-10T12:00:00.000Z",
            )
            for i in range(1, count + 1)
        ]
    return _make


@pytest.fixture
def make_source():
    def _make(key: str, paginated: bool, items):
        source = MagicMock()
        source.key = key
        source.paginated = paginated
        source.fetch_news = AsyncMock(return_value=items)
        return source
    return _make


@pytest.fixture
def echo_translator():
    translator = MagicMock()
    translator.translate = AsyncMock(side_effect=lambda text: f"zh:{text}" if text else "")
    return translator


@pytest.fixture
async def async_client():
    from httpx import AsyncClient, ASGITransport
    from src.main import app

    # Use ASGITransport for direct app interaction
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
