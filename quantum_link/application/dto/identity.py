"""Identity DTOs for API request/response."""

from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from quantum_link.domain.entities.identity import Identity


class PublicProfileDTO(BaseModel):
    """What other identities may see about someone."""

    id: str
    handle: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, identity: Identity, with_created_at: bool = False) -> PublicProfileDTO:
        return cls(
            id=identity.id.value,
            handle=identity.handle,
            name=identity.name,
            email=identity.email,
            image=identity.image,
            created_at=identity.created_at if with_created_at else None,
        )


class HandleDTO(BaseModel):
    id: str
    handle: Optional[str] = None
