"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from quantum_link.infrastructure.persistence.prisma_identity_repository import (
    PrismaIdentityRepository,
)
from quantum_link.infrastructure.persistence.prisma_connection_request_repository import (
    PrismaConnectionRequestRepository,
)
from quantum_link.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

__all__ = [
    "PrismaIdentityRepository",
    "PrismaConnectionRequestRepository",
    "PrismaMessageRepository",
]
