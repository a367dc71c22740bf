"""Connection request DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from quantum_link.application.dto.identity import PublicProfileDTO
from quantum_link.domain.entities.connection_request import ConnectionRequest


class ConnectionRequestDTO(BaseModel):
    id: str
    from_id: str
    to_id: str
    status: str
    categories: list[str]
    note: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, request: ConnectionRequest) -> ConnectionRequestDTO:
        return cls(
            id=request.id.value,
            from_id=request.from_id.value,
            to_id=request.to_id.value,
            status=request.status.value,
            categories=list(request.categories),
            note=request.note,
            created_at=request.created_at,
        )


class OutgoingRequestDTO(BaseModel):
    """A request the viewer sent, with the recipient's profile."""

    id: str
    status: str
    categories: list[str]
    note: Optional[str] = None
    created_at: datetime
    to_user: Optional[PublicProfileDTO] = None

    @classmethod
    def from_entity(cls, request: ConnectionRequest) -> OutgoingRequestDTO:
        return cls(
            id=request.id.value,
            status=request.status.value,
            categories=list(request.categories),
            note=request.note,
            created_at=request.created_at,
            to_user=(
                PublicProfileDTO.from_entity(request.recipient)
                if request.recipient
                else None
            ),
        )


class IncomingRequestDTO(BaseModel):
    """A request addressed to the viewer, with the sender's profile."""

    id: str
    status: str
    categories: list[str]
    note: Optional[str] = None
    created_at: datetime
    from_user: Optional[PublicProfileDTO] = None

    @classmethod
    def from_entity(cls, request: ConnectionRequest) -> IncomingRequestDTO:
        return cls(
            id=request.id.value,
            status=request.status.value,
            categories=list(request.categories),
            note=request.note,
            created_at=request.created_at,
            from_user=(
                PublicProfileDTO.from_entity(request.sender) if request.sender else None
            ),
        )
