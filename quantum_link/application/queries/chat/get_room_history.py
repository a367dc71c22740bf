"""
GetRoomHistory Query - full conversation between the requester and a peer.

This is what the chat window polls. There is no pagination and no limit:
every message of the room comes back, oldest first.
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Query, QueryHandler
from quantum_link.application.services.messaging_gate import MessagingGate
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.entities.message import Message
from quantum_link.domain.exceptions import DomainValidationError
from quantum_link.domain.ports.repositories import MessageRepository
from quantum_link.domain.services.rooms import room_id_for
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.room_id import RoomId


@dataclass
class GetRoomHistoryResult:
    """Result containing the room key, the peer profile and the messages."""

    room_id: RoomId
    peer: Identity
    messages: list[Message]


@dataclass(frozen=True)
class GetRoomHistoryQuery(Query[GetRoomHistoryResult]):
    requester_id: IdentityId
    peer_handle: str


class GetRoomHistoryHandler(QueryHandler[GetRoomHistoryResult]):
    def __init__(self, gate: MessagingGate, message_repository: MessageRepository):
        self._gate = gate
        self._message_repository = message_repository

    async def execute(self, query: GetRoomHistoryQuery) -> GetRoomHistoryResult:
        """
        Raises:
            DomainValidationError: peer handle missing
            EntityNotFoundError: peer handle does not resolve
            SelfTargetError: peer is the requester
            AccessDeniedError: no accepted connection with the peer
        """
        if not query.peer_handle:
            raise DomainValidationError("Missing peerHandle")

        peer = await self._gate.authorize(query.requester_id, query.peer_handle)

        room_id = room_id_for(query.requester_id, peer.id)
        messages = await self._message_repository.get_by_room(room_id)

        return GetRoomHistoryResult(room_id=room_id, peer=peer, messages=messages)
