from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple
import os


DEFAULT_PROVIDER_ORDER = ("libretranslate", "mymemory", "offline")


@dataclass(slots=True)
class TranslatorSettings:
    cache_capacity: int = 1000
    request_timeout: float = 5.0
    batch_concurrency: int = 5
    health_check: bool = False
    provider_order: Tuple[str, ...] = DEFAULT_PROVIDER_ORDER
    proxy_url: str | None = None


@dataclass(slots=True)
class ProviderEndpoints:
    libretranslate_url: str = field(default_factory=lambda: os.getenv("LIBRETRANSLATE_URL", "https://libretranslate.de/translate"))
    libretranslate_api_key: str | None = field(default_factory=lambda: os.getenv("LIBRETRANSLATE_API_KEY"))
    mymemory_url: str = field(default_factory=lambda: os.getenv("MYMEMORY_URL", "https://api.mymemory.translated.net/get"))
    mymemory_email: str | None = field(default_factory=lambda: os.getenv("MYMEMORY_EMAIL"))


@dataclass(slots=True)
class AppSettings:
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    endpoints: ProviderEndpoints = field(default_factory=ProviderEndpoints)
    default_source_lang: str = field(default_factory=lambda: os.getenv("POLYGLOT_SOURCE", "auto"))
    default_target_lang: str = field(default_factory=lambda: os.getenv("POLYGLOT_TARGET", "en"))


SETTINGS = AppSettings()
