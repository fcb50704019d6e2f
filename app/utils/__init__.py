"""Shared utilities for the translation service.

Pure helpers used by the translation pipeline: token checks, language code
validation and cache key derivation. None of them perform I/O.
"""

from app.utils.auth import authenticate, require_token
from app.utils.cache_keys import derive_cache_key
from app.utils.languages import normalize_language_tag

__all__ = [
    'authenticate',
    'require_token',
    'derive_cache_key',
    'normalize_language_tag',
]
