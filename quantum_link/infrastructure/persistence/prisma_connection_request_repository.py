"""
Prisma Connection Request Repository Implementation.

Prisma ConnectionRequest Model (from schema.prisma):
    model ConnectionRequest {
        id           String        @id @default(uuid())
        from_user_id String
        to_user_id   String
        categories   String        // comma-joined
        note         String?
        status       RequestStatus @default(PENDING)
        created_at   DateTime      @default(now())
    }

Mapping:
- categories: list[str] <-> comma-joined string
- status: RequestStatus <-> Prisma enum (same member names)
- from_user / to_user relations -> sender / recipient public profiles
"""

from typing import Optional
from prisma import Prisma
from prisma.models import ConnectionRequest as PrismaConnectionRequest
from prisma.models import User as PrismaUser
from quantum_link.domain.entities.connection_request import (
    ConnectionRequest,
    RequestStatus,
    join_categories,
    split_categories,
)
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.ports.repositories import ConnectionRequestRepository
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId


class PrismaConnectionRequestRepository(ConnectionRequestRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    @staticmethod
    def _to_identity(record: Optional[PrismaUser]) -> Optional[Identity]:
        if record is None:
            return None
        return Identity(
            id=IdentityId(record.id),
            email=record.email,
            name=record.name,
            image=record.image,
            handle=record.handle,
            created_at=record.created_at,
        )

    def _to_entity(self, record: PrismaConnectionRequest) -> ConnectionRequest:
        """Map Prisma record to domain entity."""
        return ConnectionRequest(
            id=RequestId(record.id),
            from_id=IdentityId(record.from_user_id),
            to_id=IdentityId(record.to_user_id),
            categories=split_categories(record.categories),
            status=RequestStatus(record.status),
            created_at=record.created_at,
            note=record.note,
            sender=self._to_identity(record.from_user),
            recipient=self._to_identity(record.to_user),
        )

    async def get_by_id(self, request_id: RequestId) -> Optional[ConnectionRequest]:
        record = await self._prisma.connectionrequest.find_unique(
            where={"id": request_id.value}
        )
        return self._to_entity(record) if record else None

    async def save(self, request: ConnectionRequest) -> None:
        """Create the request, or persist a decision on an existing one."""
        await self._prisma.connectionrequest.upsert(
            where={"id": request.id.value},
            data={
                "create": {
                    "id": request.id.value,
                    "from_user_id": request.from_id.value,
                    "to_user_id": request.to_id.value,
                    "categories": join_categories(request.categories),
                    "note": request.note,
                    "status": request.status.value,
                    "created_at": request.created_at,
                },
                "update": {
                    "status": request.status.value,
                },
            },
        )

    async def list_outgoing(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        records = await self._prisma.connectionrequest.find_many(
            where={"from_user_id": identity_id.value},
            order={"created_at": "desc"},
            include={"to_user": True},
        )
        return [self._to_entity(record) for record in records]

    async def list_incoming(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        records = await self._prisma.connectionrequest.find_many(
            where={"to_user_id": identity_id.value},
            order={"created_at": "desc"},
            include={"from_user": True},
        )
        return [self._to_entity(record) for record in records]

    async def has_accepted_between(self, a: IdentityId, b: IdentityId) -> bool:
        record = await self._prisma.connectionrequest.find_first(
            where={
                "status": RequestStatus.ACCEPTED.value,
                "OR": [
                    {"from_user_id": a.value, "to_user_id": b.value},
                    {"from_user_id": b.value, "to_user_id": a.value},
                ],
            }
        )
        return record is not None
