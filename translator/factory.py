"""
Provider Factory

Builds providers and the default fallback chain from settings.
Supports: LibreTranslate, MyMemory, Offline Dictionary
"""
from __future__ import annotations

from typing import List, Optional

from config import SETTINGS, AppSettings
from .base import BaseProvider
from .libretranslate import LibreTranslateProvider
from .mymemory import MyMemoryProvider
from .offline import OfflineDictionaryProvider
from .orchestrator import TranslationOrchestrator


# Available providers, best quality first
AVAILABLE_PROVIDERS = {
    "libretranslate": "LibreTranslate",
    "mymemory": "MyMemory",
    "offline": "Offline Dictionary",
}


def get_available_providers() -> dict[str, str]:
    """Get available providers with display names."""
    return AVAILABLE_PROVIDERS.copy()


def build_provider(provider_name: str, settings: Optional[AppSettings] = None) -> BaseProvider:
    """Build a provider instance.

    Args:
        provider_name: Name of the provider (libretranslate, mymemory, offline)
        settings: Application settings (falls back to the module defaults)

    Returns:
        BaseProvider instance

    Raises:
        ValueError: If the provider is not supported
    """
    settings = settings or SETTINGS
    name = provider_name.lower()
    timeout = settings.translator.request_timeout
    proxy = settings.translator.proxy_url

    if name == "libretranslate":
        return LibreTranslateProvider(
            api_url=settings.endpoints.libretranslate_url,
            api_key=settings.endpoints.libretranslate_api_key,
            timeout=timeout,
            proxy=proxy,
        )

    if name == "mymemory":
        return MyMemoryProvider(
            api_url=settings.endpoints.mymemory_url,
            email=settings.endpoints.mymemory_email,
            timeout=timeout,
            proxy=proxy,
        )

    if name == "offline":
        return OfflineDictionaryProvider()

    raise ValueError(f"Unsupported translation provider: {provider_name}")


def build_provider_chain(settings: Optional[AppSettings] = None) -> List[BaseProvider]:
    settings = settings or SETTINGS
    return [build_provider(name, settings) for name in settings.translator.provider_order]


def build_orchestrator(settings: Optional[AppSettings] = None) -> TranslationOrchestrator:
    settings = settings or SETTINGS
    return TranslationOrchestrator(build_provider_chain(settings), settings.translator)
