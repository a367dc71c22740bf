"""
Connection Request Repository Port.
Implementation: quantum_link/infrastructure/persistence/prisma_connection_request_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from quantum_link.domain.entities.connection_request import ConnectionRequest
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId


class ConnectionRequestRepository(ABC):
    @abstractmethod
    async def get_by_id(self, request_id: RequestId) -> Optional[ConnectionRequest]: ...

    @abstractmethod
    async def save(self, request: ConnectionRequest) -> None:
        """Create the request or persist its new status."""
        ...

    @abstractmethod
    async def list_outgoing(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        """Requests sent by identity_id, newest first, recipient populated."""
        ...

    @abstractmethod
    async def list_incoming(self, identity_id: IdentityId) -> list[ConnectionRequest]:
        """Requests addressed to identity_id, newest first, sender populated."""
        ...

    @abstractmethod
    async def has_accepted_between(self, a: IdentityId, b: IdentityId) -> bool:
        """True iff an ACCEPTED request links a and b in either direction."""
        ...
