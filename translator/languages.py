from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple


@dataclass(slots=True, frozen=True)
class Language:
    code: str
    name: str
    native_name: str
    flag: str
    dir: Literal["ltr", "rtl"] = "ltr"


SUPPORTED_LANGUAGES: Tuple[Language, ...] = (
    Language("en", "English", "English", "🇺🇸"),
    Language("es", "Spanish", "Español", "🇪🇸"),
    Language("fr", "French", "Français", "🇫🇷"),
    Language("de", "German", "Deutsch", "🇩🇪"),
    Language("it", "Italian", "Italiano", "🇮🇹"),
    Language("pt", "Portuguese", "Português", "🇵🇹"),
    Language("ru", "Russian", "Русский", "🇷🇺"),
    Language("ja", "Japanese", "日本語", "🇯🇵"),
    Language("ko", "Korean", "한국어", "🇰🇷"),
    Language("zh", "Chinese", "中文", "🇨🇳"),
    Language("ar", "Arabic", "العربية", "🇸🇦", dir="rtl"),
    Language("hi", "Hindi", "हिन्दी", "🇮🇳"),
)

_BY_CODE = {language.code: language for language in SUPPORTED_LANGUAGES}


def get_language_by_code(code: str) -> Optional[Language]:
    return _BY_CODE.get(code)


def is_language_supported(code: str) -> bool:
    return code in _BY_CODE
