"""
Cached Message Repository - Decorator pattern for Redis caching.

Architecture:
    CachedMessageRepository (decorator)
        ↓ wraps
    PrismaMessageRepository (concrete implementation)
        ↓ implements
    MessageRepository (abstract interface)

Every open chat window re-reads its whole room every few seconds, so room
history is the hot read. The cache keeps the full history (never a
truncated tail) as one JSON string per room version:

- "room:{room_id}:ver"          → INCR'd after every append
- "room:{room_id}:msgs:{ver}"   → JSON list of messages, TTL REDIS_CACHE_TTL

A reader that raced an append stores its snapshot under the old version,
which nobody reads again once the counter has moved. If the bump itself
fails, the current snapshot is deleted instead. If that fails too, the old
snapshot can still be served until its TTL runs out, so REDIS_CACHE_TTL
bounds how stale a read can be. Cache failures never fail the operation:
they are logged and the store is used directly.
"""

import json
import logging
from datetime import datetime
from redis.asyncio import Redis
from quantum_link.config.settings import Config
from quantum_link.domain.entities.message import Message
from quantum_link.domain.ports.repositories.message_repository import MessageRepository
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.message_id import MessageId
from quantum_link.domain.value_objects.room_id import RoomId

logger = logging.getLogger(__name__)


class CachedMessageRepository(MessageRepository):
    """
    Decorator: adds Redis caching to MessageRepository.

    Implements the same interface, so callers don't know caching exists.
    """

    def __init__(
        self, repo: MessageRepository, redis: Redis, ttl: int = Config.REDIS_CACHE_TTL
    ):
        """
        Args:
            repo: Underlying MessageRepository implementation (e.g., PrismaMessageRepository)
            redis: Async Redis client (decode_responses=True)
            ttl: Seconds a cached snapshot lives
        """
        self._repo = repo
        self._redis = redis
        self._ttl = ttl

    @staticmethod
    def _version_key(room_id: RoomId) -> str:
        return f"room:{room_id.value}:ver"

    @staticmethod
    def _snapshot_key(room_id: RoomId, version: str) -> str:
        return f"room:{room_id.value}:msgs:{version}"

    @staticmethod
    def _serialize_messages(messages: list[Message]) -> str:
        return json.dumps(
            [
                {
                    "id": m.id.value,
                    "room_id": m.room_id.value,
                    "sender_id": m.sender_id.value,
                    "content": m.content,
                    "created_at": m.created_at.isoformat(),
                }
                for m in messages
            ]
        )

    @staticmethod
    def _deserialize_messages(json_str: str) -> list[Message]:
        return [
            Message(
                id=MessageId(d["id"]),
                room_id=RoomId(d["room_id"]),
                sender_id=IdentityId(d["sender_id"]),
                content=d["content"],
                created_at=datetime.fromisoformat(d["created_at"]),
            )
            for d in json.loads(json_str)
        ]

    async def append(self, message: Message) -> Message:
        """Write to the store first, then move the room version forward."""
        stored = await self._repo.append(message)
        try:
            await self._redis.incr(self._version_key(message.room_id))
        except Exception as e:
            logger.warning(f"[Cache] Version bump failed for {message.room_id.value}: {e}")
            await self._drop_current_snapshot(message.room_id)
        return stored

    async def _drop_current_snapshot(self, room_id: RoomId) -> None:
        try:
            version = await self._redis.get(self._version_key(room_id)) or "0"
            await self._redis.delete(self._snapshot_key(room_id, version))
        except Exception as e:
            logger.warning(
                f"[Cache] Could not drop snapshot for {room_id.value}; "
                f"it stays readable for up to {self._ttl}s: {e}"
            )

    async def get_by_room(self, room_id: RoomId) -> list[Message]:
        version = None
        try:
            version = await self._redis.get(self._version_key(room_id)) or "0"
            cached = await self._redis.get(self._snapshot_key(room_id, version))
            if cached is not None:
                logger.debug(f"[Cache] HIT {room_id.value} v{version}")
                return self._deserialize_messages(cached)
        except Exception as e:
            logger.warning(f"[Cache] Read error for {room_id.value}: {e}")
            version = None

        logger.debug(f"[Cache] MISS {room_id.value}")
        messages = await self._repo.get_by_room(room_id)

        if version is not None:
            try:
                await self._redis.setex(
                    self._snapshot_key(room_id, version),
                    self._ttl,
                    self._serialize_messages(messages),
                )
            except Exception as e:
                logger.warning(f"[Cache] Write error for {room_id.value}: {e}")

        return messages
