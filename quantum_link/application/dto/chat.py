"""Chat DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel

from quantum_link.application.dto.identity import PublicProfileDTO
from quantum_link.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    room_id: str
    sender_id: str
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id.value,
            room_id=message.room_id.value,
            sender_id=message.sender_id.value,
            content=message.content,
            created_at=message.created_at,
        )


class RoomHistoryDTO(BaseModel):
    room_id: str
    peer: PublicProfileDTO
    messages: list[MessageDTO]
