"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id         String   @id @default(uuid())
        seq        Int      @default(autoincrement())
        room_id    String
        sender_id  String
        content    String
        created_at DateTime @default(now())
    }

Messages are append-only: there is no update path, so concurrent writers
cannot lose each other's rows. History is ordered by created_at with seq
(insertion order) as the tiebreaker.
"""

from prisma import Prisma
from prisma.models import Message as PrismaMessage
from quantum_link.domain.entities.message import Message
from quantum_link.domain.ports.repositories.message_repository import MessageRepository
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.message_id import MessageId
from quantum_link.domain.value_objects.room_id import RoomId


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        return Message(
            id=MessageId(record.id),
            room_id=RoomId(record.room_id),
            sender_id=IdentityId(record.sender_id),
            content=record.content,
            created_at=record.created_at,
        )

    async def append(self, message: Message) -> Message:
        """
        Insert a message and return the stored row.

        Args:
            message: Message entity to persist

        Returns:
            Message entity as read back from the database
        """
        record = await self._prisma.message.create(
            data={
                "id": message.id.value,
                "room_id": message.room_id.value,
                "sender_id": message.sender_id.value,
                "content": message.content,
                "created_at": message.created_at,
            }
        )
        return self._to_entity(record)

    async def get_by_room(self, room_id: RoomId) -> list[Message]:
        """
        Get every message of a room, oldest first.

        Note:
            No take/skip: clients always receive the full history.
        """
        records = await self._prisma.message.find_many(
            where={"room_id": room_id.value},
            order=[{"created_at": "asc"}, {"seq": "asc"}],
        )
        return [self._to_entity(record) for record in records]
