from __future__ import annotations

import re

from langdetect import DetectorFactory, LangDetectException, detect

DetectorFactory.seed = 0

DEFAULT_LANGUAGE = "en"

# Checked in order; the first range present in the text decides.
SCRIPT_RANGES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("zh", re.compile("[\u4e00-\u9fff]")),
    ("ja", re.compile("[\u3040-\u309f\u30a0-\u30ff]")),
    ("ko", re.compile("[\uac00-\ud7af]")),
    ("ar", re.compile("[\u0600-\u06ff]")),
    ("ru", re.compile("[\u0400-\u04ff]")),
)


def detect_language_local(text: str) -> str:
    for code, pattern in SCRIPT_RANGES:
        if pattern.search(text):
            return code
    return DEFAULT_LANGUAGE


def detect_language(text: str, *, max_chars: int = 2500) -> str | None:
    sample = text.strip()[:max_chars]
    if not sample:
        return None
    try:
        detected = detect(sample)
    except LangDetectException:
        return None
    # langdetect reports Chinese as zh-cn / zh-tw
    return detected.split("-")[0]
