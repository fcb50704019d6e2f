"""Environment-driven configuration, read once at startup."""
import os

from app.services.result_cache import DEFAULT_TTL_SECONDS


def load_config() -> dict:
    """Read service settings from the environment."""
    return {
        'REDIS_URL': os.getenv('REDIS_URL', ''),
        'REDIS_ADDRESS': os.getenv('REDIS_ADDRESS', 'localhost:6379'),
        'REDIS_PASSWORD': os.getenv('REDIS_PASSWORD', ''),
        'REDIS_DB': int(os.getenv('REDIS_DB', 0)),
        # Any non-empty value turns TLS off
        'USE_REDIS_UNSECURE': os.getenv('USE_REDIS_UNSECURE', '').strip(),
        'REDIS_TIMEOUT': float(os.getenv('REDIS_TIMEOUT', 2.0)),
        'CACHE_TTL_SECONDS': int(os.getenv('CACHE_TTL_SECONDS', DEFAULT_TTL_SECONDS)),
        'GOOGLE_TRANSLATE_API_KEY': os.getenv('GOOGLE_TRANSLATE_API_KEY', ''),
        'TRANSLATE_TIMEOUT': float(os.getenv('TRANSLATE_TIMEOUT', 10.0)),
        'AUTH_TOKEN': os.getenv('AUTH_TOKEN', ''),
    }
