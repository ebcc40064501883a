"""Finance keyword dictionary used to normalize English jargon in translated text."""

import re
from typing import Pattern, Tuple

# Order matters: later entries run on text already rewritten by earlier ones.
KEYWORD_TRANSLATIONS: Tuple[Tuple[str, str], ...] = (
    ("stock", "股票"),
    ("share", "股份"),
    ("market", "市場"),
    ("trading", "交易"),
    ("price", "價格"),
    ("rally", "上漲"),
    ("surge", "飆升"),
    ("plunge", "暴跌"),
    ("decline", "下跌"),
    ("gain", "漲幅"),
    ("loss", "虧損"),
    ("investor", "投資者"),
    ("wall street", "華爾街"),
    ("earnings", "收益"),
    ("profit", "利潤"),
    ("revenue", "收入"),
    ("forecast", "預測"),
    ("outlook", "展望"),
    ("upgrade", "升級"),
    ("downgrade", "降級"),
    ("ipo", "首次公開募股"),
    ("merger", "合併"),
    ("acquisition", "收購"),
    ("bankruptcy", "破產"),
    ("inflation", "通脹"),
    ("interest rate", "利率"),
    ("federal reserve", "美聯儲"),
    ("bull market", "牛市"),
    ("bear market", "熊市"),
    ("volatility", "波動性"),
    ("dividend", "股息"),
    ("split", "分拆"),
    ("sector", "行業"),
    ("tech", "科技"),
    ("financial", "金融"),
    ("healthcare", "醫療"),
    ("energy", "能源"),
    ("consumer", "消費"),
    ("industrial", "工業"),
    ("bull", "牛"),
    ("bear", "熊"),
    ("breakout", "突破"),
    ("support", "支撐"),
    ("resistance", "阻力"),
    ("momentum", "動力"),
    ("sentiment", "情緒"),
)

# ASCII word boundaries: a CJK character next to an English term is a boundary.
_KEYWORD_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b{re.escape(english)}\b", re.IGNORECASE | re.ASCII), chinese)
    for english, chinese in KEYWORD_TRANSLATIONS
)


def apply_keyword_translations(text: str) -> str:
    for pattern, chinese in _KEYWORD_PATTERNS:
        text = pattern.sub(chinese, text)
    return text
