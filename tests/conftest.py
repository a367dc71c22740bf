import time
from dataclasses import replace
from typing import Optional

import jwt
import pytest
from dishka import Provider, Scope, make_async_container, provide
from fastapi.testclient import TestClient

from quantum_link.config.settings import Config
from quantum_link.domain.entities.connection_request import ConnectionRequest, RequestStatus
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.entities.message import Message
from quantum_link.domain.exceptions import ConflictError, EntityNotFoundError
from quantum_link.domain.ports.repositories import (
    ConnectionRequestRepository,
    IdentityRepository,
    MessageRepository,
)
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId
from quantum_link.domain.value_objects.room_id import RoomId
from quantum_link.fastapi_app import create_fastapi_app
from quantum_link.setup.ioc.handlers import HandlerProvider


# ==================== IN-MEMORY REPOSITORIES ====================


class InMemoryIdentityRepository(IdentityRepository):
    """Enforces the unique handle/email columns like the database does."""

    def __init__(self):
        self.identities: dict[str, Identity] = {}
        # Next N set_handle calls fail as if another identity held the handle
        self.forced_conflicts = 0
        self.set_handle_calls: list[str] = []

    def add(
        self,
        handle: Optional[str],
        email: Optional[str] = None,
        name: Optional[str] = None,
        identity_id: Optional[str] = None,
    ) -> Identity:
        identity = Identity.create(email=email, name=name, identity_id=identity_id)
        identity.handle = handle
        self.identities[identity.id.value] = identity
        return replace(identity)

    async def get_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        stored = self.identities.get(identity_id.value)
        return replace(stored) if stored else None

    async def get_by_handle(self, handle: str) -> Optional[Identity]:
        for identity in self.identities.values():
            if identity.handle is not None and identity.handle == handle:
                return replace(identity)
        return None

    async def save(self, identity: Identity) -> None:
        for other in self.identities.values():
            if other.id == identity.id or (identity.email and other.email == identity.email):
                raise ConflictError("Identity already exists")
        self.identities[identity.id.value] = replace(identity)

    async def set_handle(self, identity_id: IdentityId, handle: str) -> Identity:
        self.set_handle_calls.append(handle)
        if self.forced_conflicts > 0:
            self.forced_conflicts -= 1
            raise ConflictError("Handle already taken")
        stored = self.identities.get(identity_id.value)
        if stored is None:
            raise EntityNotFoundError("Identity not found")
        for other in self.identities.values():
            if other.id != identity_id and other.handle == handle:
                raise ConflictError("Handle already taken")
        stored.handle = handle
        return replace(stored)


class InMemoryConnectionRequestRepository(ConnectionRequestRepository):
    def __init__(self, identities: InMemoryIdentityRepository):
        self._identities = identities
        # dict keeps insertion order, i.e. creation order
        self.requests: dict[str, ConnectionRequest] = {}

    def _profile(self, identity_id: IdentityId) -> Optional[Identity]:
        stored = self._identities.identities.get(identity_id.value)
        return replace(stored) if stored else None

    async def get_by_id(self, request_id: RequestId) -> Optional[ConnectionRequest]:
        stored = self.requests.get(request_id.value)
        return replace(stored, categories=list(stored.categories)) if stored else None

    async def save(self, request: ConnectionRequest) -> None:
        existing = self.requests.get(request.id.value)
        if existing is not None:
            existing.status = request.status
            return
        self.requests[request.id.value] = replace(
            request, categories=list(request.categories), sender=None, recipient=None
        )

    async def list_outgoing(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        return [
            replace(r, recipient=self._profile(r.to_id))
            for r in reversed(list(self.requests.values()))
            if r.from_id == identity_id
        ]

    async def list_incoming(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        return [
            replace(r, sender=self._profile(r.from_id))
            for r in reversed(list(self.requests.values()))
            if r.to_id == identity_id
        ]

    async def has_accepted_between(self, a: IdentityId, b: IdentityId) -> bool:
        return any(
            r.status == RequestStatus.ACCEPTED and r.connects(a, b)
            for r in self.requests.values()
        )


class InMemoryMessageRepository(MessageRepository):
    def __init__(self):
        self.messages: list[Message] = []

    async def append(self, message: Message) -> Message:
        self.messages.append(message)
        return message

    async def get_by_room(self, room_id: RoomId) -> list[Message]:
        return [m for m in self.messages if m.room_id == room_id]


class InMemoryStore:
    def __init__(self):
        self.identities = InMemoryIdentityRepository()
        self.requests = InMemoryConnectionRequestRepository(self.identities)
        self.messages = InMemoryMessageRepository()


class InMemoryProvider(Provider):
    """Serves the same repository instances to every request."""

    def __init__(self, store: InMemoryStore):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_identity_repository(self) -> IdentityRepository:
        return self._store.identities

    @provide(scope=Scope.APP)
    def get_connection_request_repository(self) -> ConnectionRequestRepository:
        return self._store.requests

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return self._store.messages


# ==================== TOKENS ====================


def session_token(identity_id: str, handle: Optional[str] = None, ttl: int = 300) -> str:
    now = int(time.time())
    payload = {
        "sub": identity_id,
        "iat": now,
        "exp": now + ttl,
        "iss": Config.SESSION_ISSUER,
        "aud": Config.SESSION_AUDIENCE,
    }
    if handle:
        payload["handle"] = handle
    return jwt.encode(payload, Config.SESSION_SECRET, algorithm="HS256")


def bearer(identity: Identity, with_handle: bool = True) -> dict[str, str]:
    token = session_token(identity.id.value, identity.handle if with_handle else None)
    return {"Authorization": f"Bearer {token}"}


# ==================== FIXTURES ====================


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def app(store):
    """Create a FastAPI app backed by the in-memory store for each test."""
    container = make_async_container(InMemoryProvider(store), HandlerProvider())
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def alice(store):
    return store.identities.add("alice-1234", email="alice@example.com", name="Alice")


@pytest.fixture()
def bob(store):
    return store.identities.add("bob-5678", email="bob@example.com", name="Bob")


@pytest.fixture()
def carol(store):
    return store.identities.add("carol-9012", email="carol@example.com", name="Carol")
