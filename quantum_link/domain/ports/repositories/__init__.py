"""
REPOSITORY PORTS - Data persistence interfaces

Infrastructure layer provides implementations (Prisma, Redis cache).
"""

from quantum_link.domain.ports.repositories.identity_repository import IdentityRepository
from quantum_link.domain.ports.repositories.connection_request_repository import (
    ConnectionRequestRepository,
)
from quantum_link.domain.ports.repositories.message_repository import MessageRepository

__all__ = [
    "IdentityRepository",
    "ConnectionRequestRepository",
    "MessageRepository",
]
