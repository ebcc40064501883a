"""Quote API response schemas"""

from pydantic import BaseModel, ConfigDict, Field

from ..services.quote_service import Quote


class QuoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float = Field(serialization_alias="changePercent")
    previous_close: float = Field(serialization_alias="previousClose")

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=quote.price,
            change=quote.change,
            change_percent=quote.change_percent,
            previous_close=quote.previous_close,
        )
