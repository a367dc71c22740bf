import asyncio
import random

import pytest

from quantum_link.application.commands.identity import (
    RegisterIdentityCommand,
    RegisterIdentityHandler,
)
from quantum_link.application.services.handle_allocator import HandleAllocator
from quantum_link.domain.value_objects.identity_id import IdentityId
from tests.conftest import InMemoryIdentityRepository


@pytest.fixture()
def repo():
    return InMemoryIdentityRepository()


def test_allocate_retries_until_a_candidate_is_free(repo):
    identity = repo.add(None, email="alice@example.com")
    repo.forced_conflicts = 4
    allocator = HandleAllocator(repo, max_attempts=5, rng=random.Random(7))

    handle = asyncio.run(allocator.allocate(identity.id, identity.handle_seed))

    assert handle is not None and handle.startswith("alice-")
    assert len(repo.set_handle_calls) == 5
    assert repo.identities[identity.id.value].handle == handle


def test_allocate_gives_up_and_leaves_handle_unset(repo):
    identity = repo.add(None, email="alice@example.com")
    repo.forced_conflicts = 5
    allocator = HandleAllocator(repo, max_attempts=5, rng=random.Random(7))

    handle = asyncio.run(allocator.allocate(identity.id, identity.handle_seed))

    assert handle is None
    assert len(repo.set_handle_calls) == 5
    assert repo.identities[identity.id.value].handle is None


def test_allocate_never_reuses_a_taken_handle(repo):
    lookahead_rng = random.Random(11)
    first = HandleAllocator(repo, rng=lookahead_rng).generate("bob")
    repo.add(first, email="other@example.com")
    identity = repo.add(None, email="bob@example.com")

    allocator = HandleAllocator(repo, max_attempts=5, rng=random.Random(11))
    handle = asyncio.run(allocator.allocate(identity.id, "bob"))

    assert handle != first
    handles = [i.handle for i in repo.identities.values() if i.handle]
    assert len(handles) == len(set(handles))


def test_max_attempts_must_be_positive(repo):
    with pytest.raises(ValueError):
        HandleAllocator(repo, max_attempts=0)


def test_backfill_returns_existing_handle_without_writing(repo):
    identity = repo.add("alice-1234", email="alice@example.com")
    allocator = HandleAllocator(repo)

    assert asyncio.run(allocator.backfill(identity.id)) == "alice-1234"
    assert repo.set_handle_calls == []


def test_backfill_allocates_for_identity_without_handle(repo):
    identity = repo.add(None, name="Orion")
    allocator = HandleAllocator(repo, rng=random.Random(3))

    handle = asyncio.run(allocator.backfill(identity.id))

    assert handle.startswith("orion-")


def test_backfill_for_unknown_identity_is_none(repo):
    allocator = HandleAllocator(repo)
    assert asyncio.run(allocator.backfill(IdentityId("ghost"))) is None


def test_backfill_absorbs_store_failures(repo):
    identity = repo.add(None, email="alice@example.com")

    async def broken(_identity_id):
        raise RuntimeError("database unavailable")

    repo.get_by_id = broken
    allocator = HandleAllocator(repo)

    assert asyncio.run(allocator.backfill(identity.id)) is None


def test_register_allocates_handle(repo):
    handler = RegisterIdentityHandler(repo, HandleAllocator(repo, rng=random.Random(5)))

    identity = asyncio.run(
        handler.execute(RegisterIdentityCommand(email="Dana@example.com", name="Dana"))
    )

    assert identity.handle.startswith("dana-")
    assert repo.identities[identity.id.value].handle == identity.handle


def test_register_succeeds_when_allocation_is_exhausted(repo):
    repo.forced_conflicts = 5
    handler = RegisterIdentityHandler(repo, HandleAllocator(repo, max_attempts=5))

    identity = asyncio.run(handler.execute(RegisterIdentityCommand(email="eve@example.com")))

    assert identity.handle is None
    assert identity.id.value in repo.identities


def test_allocate_treats_store_errors_as_failed_attempts(repo):
    identity = repo.add(None, email="alice@example.com")
    original_set_handle = repo.set_handle
    calls = []

    async def flaky(identity_id, handle):
        calls.append(handle)
        if len(calls) == 1:
            raise RuntimeError("connection reset by store")
        return await original_set_handle(identity_id, handle)

    repo.set_handle = flaky
    allocator = HandleAllocator(repo, max_attempts=5, rng=random.Random(7))

    handle = asyncio.run(allocator.allocate(identity.id, identity.handle_seed))

    assert len(calls) == 2
    assert handle == calls[1]
    assert repo.identities[identity.id.value].handle == handle


def test_register_survives_store_failure_during_allocation(repo):
    calls = []

    async def broken(identity_id, handle):
        calls.append(handle)
        raise RuntimeError("connection reset by store")

    repo.set_handle = broken
    handler = RegisterIdentityHandler(repo, HandleAllocator(repo, max_attempts=5))

    identity = asyncio.run(handler.execute(RegisterIdentityCommand(email="a@x.io")))

    assert identity.handle is None
    assert identity.id.value in repo.identities
    assert len(calls) == 5
