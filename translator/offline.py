"""
Offline Dictionary Provider

Network-free last resort. Always returns a result so the provider chain
terminates in a success even when every remote backend is down.
"""
from __future__ import annotations

import asyncio
from typing import Dict

from utils.lang import detect_language, detect_language_local

from .base import BaseProvider, TranslationRequest, TranslationResult


PHRASES: Dict[str, Dict[str, str]] = {
    "hello": {"es": "hola", "fr": "bonjour", "de": "hallo", "ja": "こんにちは"},
    "thank you": {"es": "gracias", "fr": "merci", "de": "danke", "ja": "ありがとう"},
    "yes": {"es": "sí", "fr": "oui", "de": "ja", "ja": "はい"},
    "no": {"es": "no", "fr": "non", "de": "nein", "ja": "いいえ"},
    "goodbye": {"es": "adiós", "fr": "au revoir", "de": "auf wiedersehen", "ja": "さようなら"},
    "please": {"es": "por favor", "fr": "s'il vous plaît", "de": "bitte", "ja": "お願いします"},
}


class OfflineDictionaryProvider(BaseProvider):
    name = "Offline Dictionary"
    HIT_CONFIDENCE = 1.0
    MISS_CONFIDENCE = 0.1

    def __init__(self, *, phrases: Dict[str, Dict[str, str]] | None = None) -> None:
        super().__init__()
        self.phrases = phrases if phrases is not None else PHRASES

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        match = self.phrases.get(request.text.strip().casefold(), {}).get(request.target_lang)
        if match is not None:
            return self._result(request, match, self.HIT_CONFIDENCE)
        placeholder = f"[{request.target_lang}: {request.text}]"
        return self._result(request, placeholder, self.MISS_CONFIDENCE)

    async def detect(self, text: str) -> str:
        # langdetect is CPU-bound
        detected = await asyncio.to_thread(detect_language, text)
        return detected or detect_language_local(text)
