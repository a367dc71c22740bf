"""
Message Repository Port - Interface for message persistence.
Implementation: quantum_link/infrastructure/persistence/prisma_message_repository.py
"""

from abc import ABC, abstractmethod

from quantum_link.domain.entities.message import Message
from quantum_link.domain.value_objects.room_id import RoomId


class MessageRepository(ABC):
    @abstractmethod
    async def append(self, message: Message) -> Message:
        """Persist a new message and return the stored record."""
        ...

    @abstractmethod
    async def get_by_room(self, room_id: RoomId) -> list[Message]:
        """Full room history, oldest first, ties in insertion order."""
        ...
