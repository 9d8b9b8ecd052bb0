from __future__ import annotations

import asyncio
from typing import Dict, List, Sequence, Tuple

from loguru import logger

from config import TranslatorSettings
from utils.batching import chunk_by_size
from utils.cache import BoundedRecencyCache, make_cache_key
from utils.lang import detect_language_local

from .base import AUTO, BaseProvider, TranslationRequest, TranslationResult
from .languages import SUPPORTED_LANGUAGES, Language, get_language_by_code, is_language_supported


class TranslationOrchestrator:
    """Translate text through an ordered chain of providers.

    Providers are tried one at a time in the order given; the first one that
    returns wins and its result is cached. ``translate`` and
    ``translate_batch`` never raise: degraded output is reported through
    ``confidence`` and ``provider`` instead.
    """

    def __init__(
        self,
        providers: Sequence[BaseProvider],
        settings: TranslatorSettings | None = None,
        *,
        cache: BoundedRecencyCache[str, TranslationResult] | None = None,
    ) -> None:
        self.settings = settings or TranslatorSettings()
        if self.settings.batch_concurrency < 1:
            raise ValueError("batch_concurrency must be at least 1")
        self.providers = list(providers)
        self.cache = cache if cache is not None else BoundedRecencyCache(self.settings.cache_capacity)

    async def __aenter__(self) -> "TranslationOrchestrator":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def translate(self, text: str, source_lang: str = AUTO, target_lang: str = "en") -> TranslationResult:
        if not text or not text.strip():
            return self._empty_result(source_lang, target_lang)
        if source_lang == target_lang:
            return self._identity_result(text, source_lang)

        key = make_cache_key(text, source_lang, target_lang)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key[:60]!r}")
            return cached.as_cached()

        request = TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang)
        failures: List[Tuple[str, Exception]] = []
        for provider in await self._active_providers():
            try:
                result = await provider.translate(request)
            except Exception as exc:  # noqa: BLE001
                logger.warning(f"Provider {provider.name} failed: {exc}")
                failures.append((provider.name, exc))
                continue
            self.cache.set(key, result)
            return result

        logger.error(
            "All translation providers failed: "
            + "; ".join(f"{name}: {exc}" for name, exc in failures)
        )
        return TranslationResult(
            original_text=text,
            translated_text=text,
            from_language=source_lang,
            to_language=target_lang,
            confidence=0.0,
            provider="failed",
        )

    async def translate_batch(
        self,
        texts: Sequence[str],
        source_lang: str = AUTO,
        target_lang: str = "en",
    ) -> List[TranslationResult]:
        results: List[TranslationResult | None] = [None] * len(texts)
        queue = list(enumerate(texts))

        for chunk in chunk_by_size(queue, max_items=self.settings.batch_concurrency):
            outcomes = await asyncio.gather(
                *(self.translate(text, source_lang, target_lang) for _, text in chunk),
                return_exceptions=True,
            )
            for (index, text), outcome in zip(chunk, outcomes):
                if isinstance(outcome, BaseException):
                    if not isinstance(outcome, Exception):
                        raise outcome
                    logger.warning(f"Batch item {index} failed, returning it untranslated: {outcome}")
                    outcome = self._identity_result(text, source_lang)
                results[index] = outcome

        return [result for result in results if result is not None]

    async def _active_providers(self) -> List[BaseProvider]:
        if not self.settings.health_check:
            return self.providers
        healthy: List[BaseProvider] = []
        for provider in self.providers:
            try:
                ok = await provider.is_healthy()
            except Exception as exc:  # noqa: BLE001
                logger.debug(f"Health check for {provider.name} raised: {exc}")
                ok = False
            if ok:
                healthy.append(provider)
            else:
                logger.info(f"Skipping unhealthy provider {provider.name}")
        return healthy

    def detect_language_local(self, text: str) -> str:
        return detect_language_local(text)

    def get_language_by_code(self, code: str) -> Language | None:
        return get_language_by_code(code)

    def get_supported_languages(self) -> List[Language]:
        return list(SUPPORTED_LANGUAGES)

    def is_language_supported(self, code: str) -> bool:
        return is_language_supported(code)

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, float]:
        return self.cache.stats()

    async def close(self) -> None:
        for provider in self.providers:
            try:
                await provider.close()
            except Exception as exc:  # noqa: BLE001
                logger.debug(f"Closing {provider.name} failed: {exc}")

    @staticmethod
    def _empty_result(source_lang: str, target_lang: str) -> TranslationResult:
        return TranslationResult(
            original_text="",
            translated_text="",
            from_language=source_lang,
            to_language=target_lang,
            confidence=1.0,
            provider="none",
        )

    @staticmethod
    def _identity_result(text: str, lang: str) -> TranslationResult:
        return TranslationResult(
            original_text=text,
            translated_text=text,
            from_language=lang,
            to_language=lang,
            confidence=1.0,
            provider="identity",
        )
