"""Chat-related queries."""

from quantum_link.application.queries.chat.get_room_history import (
    GetRoomHistoryQuery,
    GetRoomHistoryHandler,
    GetRoomHistoryResult,
)

__all__ = [
    "GetRoomHistoryQuery",
    "GetRoomHistoryHandler",
    "GetRoomHistoryResult",
]
