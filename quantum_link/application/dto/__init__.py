"""
DTOs - Data Transfer Objects

- identity.py    → PublicProfileDTO, HandleDTO
- connection.py  → ConnectionRequestDTO, OutgoingRequestDTO, IncomingRequestDTO
- chat.py        → MessageDTO, RoomHistoryDTO

DTOs are for API input/output (and for the sync client that reads them
back); entities are for business logic.
"""

from quantum_link.application.dto.identity import HandleDTO, PublicProfileDTO
from quantum_link.application.dto.connection import (
    ConnectionRequestDTO,
    IncomingRequestDTO,
    OutgoingRequestDTO,
)
from quantum_link.application.dto.chat import MessageDTO, RoomHistoryDTO

__all__ = [
    "HandleDTO",
    "PublicProfileDTO",
    "ConnectionRequestDTO",
    "IncomingRequestDTO",
    "OutgoingRequestDTO",
    "MessageDTO",
    "RoomHistoryDTO",
]
