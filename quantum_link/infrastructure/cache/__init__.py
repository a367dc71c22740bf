"""
Cache Layer - Redis caching implementations.

Contains async Redis client factory and the cached repository decorator.
"""

from quantum_link.infrastructure.cache.redis_client import (
    close_redis_client,
    create_redis_client,
)
from quantum_link.infrastructure.cache.cached_message_repository import (
    CachedMessageRepository,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "CachedMessageRepository",
]
