"""News API response schemas"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.news_item import TranslatedNewsItem


class TranslatedNewsItemResponse(BaseModel):
    """News item as returned to the UI, with camelCase keys"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str = ""
    url: str
    source: str
    published_at: str = Field(serialization_alias="publishedAt")
    image: Optional[str] = None
    title_zh: str = Field(serialization_alias="titleZh")
    description_zh: str = Field(serialization_alias="descriptionZh")

    @classmethod
    def from_item(cls, item: TranslatedNewsItem) -> "TranslatedNewsItemResponse":
        return cls(
            title=item.title,
            description=item.description,
            url=item.url,
            source=item.source,
            published_at=item.published_at,
            image=item.image,
            title_zh=item.title_zh,
            description_zh=item.description_zh,
        )


class ErrorResponse(BaseModel):
    error: str
