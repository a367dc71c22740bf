"""
Messaging gate - the single authorization check for send and history.

Resolve the peer by exact handle, refuse the acting identity itself, then
require an ACCEPTED connection request between the two in either direction.
"""

from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    SelfTargetError,
)
from quantum_link.domain.ports.repositories import (
    ConnectionRequestRepository,
    IdentityRepository,
)
from quantum_link.domain.value_objects.identity_id import IdentityId


class MessagingGate:
    def __init__(
        self,
        identity_repository: IdentityRepository,
        request_repository: ConnectionRequestRepository,
    ):
        self._identity_repository = identity_repository
        self._request_repository = request_repository

    async def authorize(self, actor_id: IdentityId, peer_handle: str) -> Identity:
        peer = await self._identity_repository.get_by_handle(peer_handle)
        if not peer:
            raise EntityNotFoundError("Peer not found")

        if peer.id == actor_id:
            raise SelfTargetError("Cannot chat with yourself")

        if not await self._request_repository.has_accepted_between(actor_id, peer.id):
            raise AccessDeniedError("No accepted connection between these users")

        return peer
