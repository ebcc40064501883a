from dataclasses import dataclass
from typing import Optional


@dataclass
class NewsItem:
    """Standardized news item produced by every source"""
    title: str
    description: str
    url: str
    source: str
    published_at: str  # ISO 8601
    image: Optional[str] = None


@dataclass
class TranslatedNewsItem(NewsItem):
    """News item enriched with Traditional Chinese title and description"""
    title_zh: str = ""
    description_zh: str = ""

    @classmethod
    def from_item(cls, item: NewsItem, title_zh: str, description_zh: str) -> "TranslatedNewsItem":
        return cls(
            title=item.title,
            description=item.description,
            url=item.url,
            source=item.source,
            published_at=item.published_at,
            image=item.image,
            title_zh=title_zh,
            description_zh=description_zh,
        )
