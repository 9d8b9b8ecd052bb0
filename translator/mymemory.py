"""
MyMemory Provider

Secondary remote backend using the public MyMemory translation memory API.
"""
from __future__ import annotations

from typing import Any, Dict

from utils.lang import detect_language_local

from .base import AUTO, ProviderError, RemoteProvider, TranslationRequest, TranslationResult, coerce_score


class MyMemoryProvider(RemoteProvider):
    """MyMemory GET API provider.

    The API reports failures inside a 200 response through ``responseStatus``,
    so the payload status is checked as well as the HTTP one. ``match`` is the
    backend's own similarity score and is used as the confidence.
    """

    name = "MyMemory"
    DEFAULT_CONFIDENCE = 0.5

    def __init__(
        self,
        *,
        api_url: str,
        email: str | None = None,
        timeout: float = 5.0,
        proxy: str | None = None,
    ) -> None:
        super().__init__(timeout=timeout, proxy=proxy)
        self.api_url = api_url
        self.email = email

    def _langpair(self, request: TranslationRequest) -> str:
        source = "autodetect" if request.source_lang in ("", AUTO) else request.source_lang
        return f"{source}|{request.target_lang}"

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        params: Dict[str, Any] = {"q": request.text, "langpair": self._langpair(request)}
        if self.email:
            params["de"] = self.email
        data = await self._request_json("GET", self.api_url, params=params)
        if not isinstance(data, dict):
            raise ProviderError(self.name, "malformed response: expected an object")

        status = str(data.get("responseStatus", ""))
        if status != "200":
            raise ProviderError(self.name, str(data.get("responseDetails") or f"status {status}"))

        response = data.get("responseData")
        translated = response.get("translatedText") if isinstance(response, dict) else None
        if not isinstance(translated, str):
            raise ProviderError(self.name, "malformed response: missing translatedText")
        return self._result(request, translated, self._confidence(response.get("match")))

    def _confidence(self, match: Any) -> float:
        return coerce_score(match, self.DEFAULT_CONFIDENCE)

    async def detect(self, text: str) -> str:
        # no detection endpoint
        return detect_language_local(text)
