"""Redis client set up from the environment."""

from __future__ import annotations

import logging
import os

import redis

logger = logging.getLogger(__name__)


class CacheConnectionError(ConnectionError):
    """Raised when the Redis server cannot be reached."""


def redis_address(host: str, port: str | int) -> str:
    return f"{host}:{port}"


def connect_redis(host: str | None = None, port: str | int | None = None) -> redis.Redis:
    """Connect to Redis database 0; host and port default to REDIS_URL and REDIS_PORT."""
    host = os.environ.get("REDIS_URL", "") if host is None else host
    port = os.environ.get("REDIS_PORT", "") if port is None else port
    try:
        client = redis.Redis(host=host or "localhost", port=int(port), db=0)
        client.ping()
    except (TypeError, ValueError):
        raise CacheConnectionError(
            f"Failed to connect to Redis: invalid address {redis_address(host, port)}"
        ) from None
    except redis.RedisError as exc:
        raise CacheConnectionError(f"Failed to connect to Redis: {exc}") from exc
    logger.info("Connected to Redis successfully")
    return client