import asyncio

import pytest

from quantum_link.domain.entities.message import Message
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.infrastructure.cache.cached_message_repository import CachedMessageRepository
from quantum_link.domain.services.rooms import room_id_for
from tests.conftest import InMemoryMessageRepository

ALICE, BOB = IdentityId("alice"), IdentityId("bob")
ROOM = room_id_for(ALICE, BOB)


class FakeRedis:
    """The handful of redis.asyncio calls the cache uses."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.down = False
        self.incr_down = False

    def _check(self):
        if self.down:
            raise ConnectionError("redis unavailable")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self._check()
        self.data[key] = value
        self.ttls[key] = ttl

    async def delete(self, key):
        self._check()
        self.data.pop(key, None)
        self.ttls.pop(key, None)

    async def incr(self, key):
        self._check()
        if self.incr_down:
            raise ConnectionError("INCR rejected")
        value = int(self.data.get(key, "0")) + 1
        self.data[key] = str(value)
        return value


class CountingRepository(InMemoryMessageRepository):
    def __init__(self):
        super().__init__()
        self.reads = 0

    async def get_by_room(self, room_id):
        self.reads += 1
        return await super().get_by_room(room_id)


@pytest.fixture()
def store():
    return CountingRepository()


@pytest.fixture()
def redis():
    return FakeRedis()


@pytest.fixture()
def cached(store, redis):
    return CachedMessageRepository(store, redis, ttl=60)


def test_second_read_is_served_from_cache(cached, store, redis):
    async def scenario():
        await cached.append(Message.create(ROOM, ALICE, "hi"))
        first = await cached.get_by_room(ROOM)
        second = await cached.get_by_room(ROOM)
        return first, second

    first, second = asyncio.run(scenario())

    assert store.reads == 1
    assert [m.content for m in second] == ["hi"]
    assert second == first
    assert set(redis.ttls.values()) == {60}


def test_append_makes_old_snapshot_unreachable(cached, store):
    async def scenario():
        await cached.append(Message.create(ROOM, ALICE, "one"))
        await cached.get_by_room(ROOM)
        await cached.append(Message.create(ROOM, BOB, "two"))
        return await cached.get_by_room(ROOM)

    messages = asyncio.run(scenario())

    assert [m.content for m in messages] == ["one", "two"]
    assert store.reads == 2


def test_redis_outage_falls_back_to_store(cached, store, redis):
    redis.down = True

    async def scenario():
        stored = await cached.append(Message.create(ROOM, ALICE, "still works"))
        return stored, await cached.get_by_room(ROOM)

    stored, messages = asyncio.run(scenario())

    assert stored.content == "still works"
    assert [m.content for m in messages] == ["still works"]
    assert redis.data == {}


def test_rooms_are_cached_independently(cached):
    carol = IdentityId("carol")
    other_room = room_id_for(ALICE, carol)

    async def scenario():
        await cached.append(Message.create(ROOM, ALICE, "to bob"))
        await cached.append(Message.create(other_room, carol, "to alice"))
        return await cached.get_by_room(ROOM), await cached.get_by_room(other_room)

    bob_room, carol_room = asyncio.run(scenario())

    assert [m.content for m in bob_room] == ["to bob"]
    assert [m.content for m in carol_room] == ["to alice"]


def test_failed_version_bump_drops_the_current_snapshot(cached, store, redis):
    async def scenario():
        await cached.append(Message.create(ROOM, ALICE, "one"))
        await cached.get_by_room(ROOM)
        redis.incr_down = True
        await cached.append(Message.create(ROOM, BOB, "two"))
        return await cached.get_by_room(ROOM)

    messages = asyncio.run(scenario())

    assert [m.content for m in messages] == ["one", "two"]
    assert store.reads == 2
    assert redis.data[CachedMessageRepository._version_key(ROOM)] == "1"


def test_snapshot_stays_bounded_by_ttl_when_redis_rejects_every_write(store, redis):
    cached = CachedMessageRepository(store, redis, ttl=5)

    async def scenario():
        await cached.append(Message.create(ROOM, ALICE, "one"))
        await cached.get_by_room(ROOM)
        redis.down = True
        stored = await cached.append(Message.create(ROOM, BOB, "two"))
        return stored

    stored = asyncio.run(scenario())

    assert stored.content == "two"
    assert set(redis.ttls.values()) == {5}
