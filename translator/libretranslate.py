"""
LibreTranslate Provider

Primary remote backend. Talks to a LibreTranslate instance over its JSON API.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict

import aiohttp

from .base import AUTO, ProviderError, RemoteProvider, TranslationRequest, TranslationResult, coerce_score


class LibreTranslateProvider(RemoteProvider):
    """LibreTranslate JSON API provider.

    LibreTranslate does not score its translations, so results carry a fixed
    confidence. The sibling ``/detect`` and ``/languages`` endpoints of the
    configured ``/translate`` URL back ``detect`` and ``is_healthy``.
    """

    name = "LibreTranslate"
    CONFIDENCE = 0.9

    def __init__(
        self,
        *,
        api_url: str,
        api_key: str | None = None,
        timeout: float = 5.0,
        proxy: str | None = None,
    ) -> None:
        super().__init__(timeout=timeout, proxy=proxy)
        self.api_url = api_url
        self.api_key = api_key

    def _sibling_url(self, endpoint: str) -> str:
        base = self.api_url.rstrip("/")
        if base.endswith("/translate"):
            base = base[: -len("/translate")]
        return f"{base}/{endpoint}"

    def _payload(self, **fields: Any) -> Dict[str, Any]:
        if self.api_key:
            fields["api_key"] = self.api_key
        return fields

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        payload = self._payload(
            q=request.text,
            source=request.source_lang or AUTO,
            target=request.target_lang,
            format="text",
        )
        data = await self._request_json("POST", self.api_url, json=payload)
        if not isinstance(data, dict):
            raise ProviderError(self.name, "malformed response: expected an object")
        if data.get("error"):
            raise ProviderError(self.name, str(data["error"]))

        translated = data.get("translatedText")
        if not isinstance(translated, str):
            raise ProviderError(self.name, "malformed response: missing translatedText")

        from_language = None
        detected = data.get("detectedLanguage")
        if request.source_lang == AUTO and isinstance(detected, dict):
            from_language = detected.get("language") or None
        return self._result(request, translated, self.CONFIDENCE, from_language=from_language)

    async def detect(self, text: str) -> str:
        data = await self._request_json("POST", self._sibling_url("detect"), json=self._payload(q=text))
        if not isinstance(data, list) or not data:
            raise ProviderError(self.name, "malformed detect response")
        candidates = [item for item in data if isinstance(item, dict)]
        if not candidates:
            raise ProviderError(self.name, "malformed detect response")
        best = max(candidates, key=lambda item: coerce_score(item.get("confidence"), 0.0))
        language = best.get("language")
        if not language:
            raise ProviderError(self.name, "detect response carries no language")
        return language

    async def is_healthy(self) -> bool:
        try:
            session = await self._get_session()
            async with session.get(self._sibling_url("languages"), proxy=self.proxy) as resp:
                return resp.status == 200
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            self.logger.debug(f"Health check failed: {exc}")
            return False
