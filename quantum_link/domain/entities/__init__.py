"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.entities.connection_request import (
    ConnectionRequest,
    DecisionAction,
    RequestStatus,
)
from quantum_link.domain.entities.message import Message

__all__ = [
    "Identity",
    "ConnectionRequest",
    "DecisionAction",
    "RequestStatus",
    "Message",
]
