from .cache import BoundedRecencyCache, make_cache_key
from .batching import chunk_by_size
from .lang import detect_language, detect_language_local
from .logging_config import configure_logging

__all__ = [
    "BoundedRecencyCache",
    "make_cache_key",
    "chunk_by_size",
    "detect_language",
    "detect_language_local",
    "configure_logging",
]
