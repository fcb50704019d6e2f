"""Redis client for the translation result cache."""

import ssl
import redis
import logging

logger = logging.getLogger(__name__)


def _split_address(address: str) -> tuple[str, int]:
    """Split 'host:port' into its parts; port defaults to 6379."""
    host, _, port = address.rpartition(':')
    if not host:
        return address, 6379
    return host, int(port)


def create_redis_client(config) -> redis.Redis:
    """Build a Redis client from app config.

    REDIS_URL wins when set. Otherwise REDIS_ADDRESS/PASSWORD/DB are used,
    over TLS unless USE_REDIS_UNSECURE is non-empty.
    """
    timeout = config['REDIS_TIMEOUT']
    redis_url = config.get('REDIS_URL')

    if redis_url:
        return redis.from_url(
            redis_url,
            decode_responses=True,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
        )

    host, port = _split_address(config['REDIS_ADDRESS'])
    options = {
        'host': host,
        'port': port,
        'password': config['REDIS_PASSWORD'] or None,
        'db': config['REDIS_DB'],
        'decode_responses': True,
        'socket_timeout': timeout,
        'socket_connect_timeout': timeout,
    }

    if config['USE_REDIS_UNSECURE']:
        logger.info(f"Using plain TCP connection to Redis at {host}:{port}")
    else:
        options['ssl'] = True
        options['ssl_cert_reqs'] = 'required'
        options['ssl_min_version'] = ssl.TLSVersion.TLSv1_2

    return redis.Redis(**options)


def check_connection(client) -> bool:
    """Ping Redis once and log the outcome. Never raises."""
    try:
        client.ping()
        logger.info("Redis connected successfully")
        return True
    except redis.exceptions.RedisError as e:
        # Not fatal: translations fall back to the provider until Redis is back
        logger.error(f"Redis connection failed: {e}")
        return False
