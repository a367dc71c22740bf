"""
Message Entity - An immutable line of text posted to a pairwise room.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.message_id import MessageId
from quantum_link.domain.value_objects.room_id import RoomId


@dataclass(frozen=True)
class Message:
    id: MessageId
    room_id: RoomId
    sender_id: IdentityId
    content: str
    created_at: datetime

    def __post_init__(self):
        if not self.content.strip():
            raise ValueError("Message content cannot be empty")

    @classmethod
    def create(cls, room_id: RoomId, sender_id: IdentityId, content: str) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        return cls(
            id=MessageId(str(uuid4())),
            room_id=room_id,
            sender_id=sender_id,
            content=content.strip(),
            created_at=datetime.now(timezone.utc),
        )
