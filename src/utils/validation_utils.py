import math
from typing import Any, List, Optional, Sequence

from ..exceptions import ValidationError

MAX_QUOTE_SYMBOL_LENGTH = 6


def validate_symbol(symbol: Optional[str]) -> str:
    normalized = (symbol or "").strip().upper()
    if not normalized:
        raise ValidationError("請提供股票代號")
    return normalized


def coerce_page(page: Any) -> int:
    """Coerce a page parameter to the nearest positive int; anything unusable becomes 1."""
    try:
        value = float(page)
    except (TypeError, ValueError):
        return 1

    if not math.isfinite(value) or value <= 0:
        return 1
    return max(1, math.floor(value + 0.5))


def parse_quote_symbols(param: Optional[str], default: Sequence[str]) -> List[str]:
    if not param or not param.strip():
        return list(default)

    symbols = [s.strip() for s in param.upper().strip().split(",")]
    symbols = [s for s in symbols if s and len(s) <= MAX_QUOTE_SYMBOL_LENGTH]
    return symbols or list(default)
