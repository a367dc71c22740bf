"""
Prisma Identity Repository Implementation.

Prisma User Model (from schema.prisma):
    model User {
        id         String   @id @default(uuid())
        email      String?  @unique
        name       String?
        image      String?
        handle     String?  @unique
        created_at DateTime @default(now())
    }

The unique index on handle is what makes allocation and rename safe under
contention: the second writer of a value gets UniqueViolationError, which
is surfaced as ConflictError.
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.errors import RecordNotFoundError, UniqueViolationError
from prisma.models import User as PrismaUser
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.exceptions import ConflictError, EntityNotFoundError
from quantum_link.domain.ports.repositories import IdentityRepository
from quantum_link.domain.value_objects.identity_id import IdentityId

logger = logging.getLogger(__name__)


class PrismaIdentityRepository(IdentityRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> Identity:
        """Map Prisma record to domain entity."""
        return Identity(
            id=IdentityId(record.id),
            email=record.email,
            name=record.name,
            image=record.image,
            handle=record.handle,
            created_at=record.created_at,
        )

    async def get_by_id(self, identity_id: IdentityId) -> Optional[Identity]:
        record = await self._prisma.user.find_unique(where={"id": identity_id.value})
        return self._to_entity(record) if record else None

    async def get_by_handle(self, handle: str) -> Optional[Identity]:
        record = await self._prisma.user.find_unique(where={"handle": handle})
        return self._to_entity(record) if record else None

    async def save(self, identity: Identity) -> None:
        try:
            await self._prisma.user.create(
                data={
                    "id": identity.id.value,
                    "email": identity.email,
                    "name": identity.name,
                    "image": identity.image,
                    "handle": identity.handle,
                    "created_at": identity.created_at,
                }
            )
        except UniqueViolationError as e:
            raise ConflictError("Identity already exists") from e

    async def set_handle(self, identity_id: IdentityId, handle: str) -> Identity:
        try:
            record = await self._prisma.user.update(
                where={"id": identity_id.value},
                data={"handle": handle},
            )
        except UniqueViolationError as e:
            logger.debug(f"[Identity] Handle {handle} already taken")
            raise ConflictError(f"Handle {handle} is already taken") from e
        except RecordNotFoundError as e:
            raise EntityNotFoundError(f"Identity {identity_id.value} not found") from e

        if record is None:
            raise EntityNotFoundError(f"Identity {identity_id.value} not found")
        return self._to_entity(record)
