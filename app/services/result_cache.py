"""Cache-aside wrapper around Redis for translation results.

Redis failures and keys or values Redis cannot encode never escape this
module: lookups report UNAVAILABLE and writes report False, so a cache
problem only costs an extra provider call.
"""

import enum
import json
import logging
from dataclasses import dataclass, replace
from typing import Optional

import redis

from app.errors import StoreUnavailable
from app.models.translation import TranslationResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 24 * 14  # 2 weeks


class LookupStatus(enum.Enum):
    FOUND = 'found'
    NOT_FOUND = 'not_found'
    UNAVAILABLE = 'unavailable'


@dataclass(frozen=True)
class CacheLookup:
    status: LookupStatus
    result: Optional[TranslationResult] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class ResultCache:
    """Read-through/write-back access to cached TranslationResults."""

    def __init__(self, client, ttl: int = DEFAULT_TTL_SECONDS):
        self.client = client
        self.ttl = ttl

    def _get(self, key: str):
        try:
            return self.client.get(key)
        except (redis.exceptions.RedisError, UnicodeError) as e:
            raise StoreUnavailable(f"Cache lookup failed: {e}") from e

    def lookup(self, key: str) -> CacheLookup:
        """Return the cached result for key, flagged as a cache hit."""
        try:
            raw = self._get(key)
        except StoreUnavailable as e:
            logger.warning(e.message)
            return CacheLookup(LookupStatus.UNAVAILABLE)

        if raw is None:
            return CacheLookup(LookupStatus.NOT_FOUND)

        try:
            result = TranslationResult.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            # Undecodable entry: treat as a miss so it gets overwritten
            logger.warning(f"Discarding unreadable cache entry: {e}")
            return CacheLookup(LookupStatus.NOT_FOUND)

        return CacheLookup(LookupStatus.FOUND, result.as_cache_hit())

    def store(self, key: str, result: TranslationResult) -> bool:
        """Blind overwrite of key with result. Returns False if the write failed."""
        payload = json.dumps(replace(result, cache_hit=False).to_dict(), ensure_ascii=False)
        try:
            self.client.set(key, payload, ex=self.ttl)
            return True
        except (redis.exceptions.RedisError, UnicodeError) as e:
            logger.warning(f"Failed to cache translation: {e}")
            return False

    def ping(self) -> bool:
        """Liveness probe for the health endpoint."""
        try:
            return bool(self.client.ping())
        except redis.exceptions.RedisError as e:
            logger.warning(f"Redis health check failed: {e}")
            return False
