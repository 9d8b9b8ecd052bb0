"""
Polyglot Relay Translation Providers

Supported providers, in default fallback order:
- LibreTranslate (primary remote backend)
- MyMemory (secondary remote backend)
- Offline Dictionary (network-free last resort, never fails)
"""
from .base import AUTO, BaseProvider, ProviderError, RemoteProvider, TranslationRequest, TranslationResult
from .languages import Language, SUPPORTED_LANGUAGES, get_language_by_code, is_language_supported
from .libretranslate import LibreTranslateProvider
from .mymemory import MyMemoryProvider
from .offline import OfflineDictionaryProvider
from .orchestrator import TranslationOrchestrator
from .factory import (
    AVAILABLE_PROVIDERS,
    build_orchestrator,
    build_provider,
    build_provider_chain,
    get_available_providers,
)

__all__ = [
    "AUTO",
    "BaseProvider",
    "ProviderError",
    "RemoteProvider",
    "TranslationRequest",
    "TranslationResult",
    "Language",
    "SUPPORTED_LANGUAGES",
    "get_language_by_code",
    "is_language_supported",
    "LibreTranslateProvider",
    "MyMemoryProvider",
    "OfflineDictionaryProvider",
    "TranslationOrchestrator",
    "AVAILABLE_PROVIDERS",
    "build_orchestrator",
    "build_provider",
    "build_provider_chain",
    "get_available_providers",
]
