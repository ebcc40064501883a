"""
English → Traditional Chinese translation for news titles and descriptions.

Uses the MyMemory translation API, a TTL cache keyed by the trimmed source
text, and the finance keyword dictionary as a final normalization pass.
`Translator.translate` never raises: any upstream problem degrades to the
keyword pass over the original text.
"""

from typing import Any, Optional

import httpx
import structlog

from ...exceptions import TranslationError
from .cache import TTLCache
from .keywords import apply_keyword_translations

logger = structlog.get_logger(__name__)


class Translator:
    LANGUAGE_PAIR = "en|zh-TW"

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: TTLCache,
        api_url: str,
        min_match: float = 0.0,
    ):
        self.client = client
        self.cache = cache
        self.api_url = api_url
        self.min_match = min_match

    async def translate(self, text: str) -> str:
        if not text:
            return ""

        key = text.strip()
        if not key:
            return text

        cached = self.cache.get(key)
        if cached is not None:
            return cached

        working = text
        try:
            working = await self._remote_translate(key)
        except TranslationError as e:
            logger.warning("translation_remote_failed", error=str(e), text_length=len(key))

        translated = apply_keyword_translations(working)

        try:
            self.cache.put(key, translated)
        except Exception as e:
            logger.warning("translation_cache_write_failed", error=str(e))

        return translated

    async def _remote_translate(self, text: str) -> str:
        try:
            response = await self.client.get(
                self.api_url,
                params={"q": text, "langpair": self.LANGUAGE_PAIR},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise TranslationError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TranslationError(f"Request failed: {e}") from e
        except ValueError as e:
            raise TranslationError("Malformed JSON response") from e

        translated = self._extract_translation(data)
        if translated is None:
            raise TranslationError("No usable translation in response")
        return translated

    def _extract_translation(self, data: Any) -> Optional[str]:
        if not isinstance(data, dict) or data.get("responseStatus") != 200:
            return None

        response_data = data.get("responseData")
        if not isinstance(response_data, dict):
            return None

        translated = response_data.get("translatedText")
        if not isinstance(translated, str) or not translated:
            return None

        if self.min_match > 0:
            try:
                match = float(response_data.get("match") or 0)
            except (TypeError, ValueError):
                match = 0.0
            if match < self.min_match:
                logger.info("translation_low_confidence", match=match, threshold=self.min_match)
                return None

        return translated
