from __future__ import annotations

import asyncio
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

import aiohttp

from utils.lang import detect_language_local


AUTO = "auto"


def coerce_score(value: Any, default: float) -> float:
    """Turn a backend-supplied score into a finite float, or return ``default``."""
    try:
        score = float(value)
    except (TypeError, ValueError):
        return default
    return score if math.isfinite(score) else default


class ProviderError(RuntimeError):
    """Raised by a provider when its backend could not produce a translation."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


@dataclass(slots=True, frozen=True)
class TranslationRequest:
    text: str
    source_lang: str
    target_lang: str


@dataclass(slots=True, frozen=True)
class TranslationResult:
    original_text: str
    translated_text: str
    from_language: str
    to_language: str
    confidence: float
    provider: str
    cached: bool = False

    def as_cached(self) -> "TranslationResult":
        return replace(self, cached=True)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BaseProvider(ABC):
    name: str = "base"

    def __init__(self, *, timeout: float = 5.0, proxy: str | None = None) -> None:
        if timeout <= 0:
            raise ValueError("Provider timeout must be positive")
        self.timeout = timeout
        self.proxy = proxy
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """Translate one request with exactly one backend call, raising on failure."""

    async def detect(self, text: str) -> str:
        return detect_language_local(text)

    async def is_healthy(self) -> bool:
        return True

    async def close(self) -> None:
        return None

    def _result(self, request: TranslationRequest, translated: str, confidence: float, *, from_language: str | None = None) -> TranslationResult:
        return TranslationResult(
            original_text=request.text,
            translated_text=translated,
            from_language=from_language or request.source_lang,
            to_language=request.target_lang,
            confidence=max(0.0, min(1.0, coerce_score(confidence, 0.0))),
            provider=self.name,
        )


class RemoteProvider(BaseProvider):
    """Provider backed by a single HTTP endpoint.

    The aiohttp session is created lazily and carries the request timeout, so a
    slow backend surfaces as ``asyncio.TimeoutError`` which ``_request_json``
    turns into a ``ProviderError`` like any other transport failure.
    """

    def __init__(self, *, timeout: float = 5.0, proxy: str | None = None) -> None:
        super().__init__(timeout=timeout, proxy=proxy)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        session = await self._get_session()
        try:
            async with session.request(method, url, proxy=self.proxy, **kwargs) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text(errors="replace")
                    raise ProviderError(self.name, f"HTTP {resp.status} - {body[:200]}")
                try:
                    return await resp.json(content_type=None)
                except ValueError as exc:
                    raise ProviderError(self.name, f"malformed response: {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise ProviderError(self.name, f"timed out after {self.timeout}s") from exc
        except aiohttp.ClientError as exc:
            raise ProviderError(self.name, f"connection error: {exc}") from exc
