"""
Identity Repository Port - Interface for identity persistence.
Implementation: quantum_link/infrastructure/persistence/prisma_identity_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.value_objects.identity_id import IdentityId


class IdentityRepository(ABC):
    @abstractmethod
    async def get_by_id(self, identity_id: IdentityId) -> Optional[Identity]: ...

    @abstractmethod
    async def get_by_handle(self, handle: str) -> Optional[Identity]:
        """Exact, case-sensitive lookup."""
        ...

    @abstractmethod
    async def save(self, identity: Identity) -> None:
        """Create the identity. Raises ConflictError on a unique violation."""
        ...

    @abstractmethod
    async def set_handle(self, identity_id: IdentityId, handle: str) -> Identity:
        """
        Single atomic update of the handle column.

        Raises:
            ConflictError: another identity already holds the handle
            EntityNotFoundError: the identity does not exist
        """
        ...
