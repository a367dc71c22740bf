"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId
from quantum_link.domain.value_objects.message_id import MessageId
from quantum_link.domain.value_objects.room_id import RoomId, ROOM_SEPARATOR

__all__ = [
    "IdentityId",
    "RequestId",
    "MessageId",
    "RoomId",
    "ROOM_SEPARATOR",
]
