"""
Send Message Command.

Content is checked before the peer is resolved; then the messaging gate
(NOT_FOUND / SELF_TARGET / FORBIDDEN) and finally an append to the room
derived from the two identity ids.
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Command, CommandHandler
from quantum_link.application.services.messaging_gate import MessagingGate
from quantum_link.domain.entities.message import Message
from quantum_link.domain.exceptions import DomainValidationError
from quantum_link.domain.ports.repositories import MessageRepository
from quantum_link.domain.services.rooms import room_id_for
from quantum_link.domain.value_objects.identity_id import IdentityId


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    sender_id: IdentityId
    to_handle: str
    content: str


class SendMessageHandler(CommandHandler[Message]):
    def __init__(self, gate: MessagingGate, message_repository: MessageRepository):
        self._gate = gate
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> Message:
        if not command.to_handle:
            raise DomainValidationError("Missing toHandle")

        if not command.content or not command.content.strip():
            raise DomainValidationError("Message content is required")

        peer = await self._gate.authorize(command.sender_id, command.to_handle)

        message = Message.create(
            room_id=room_id_for(command.sender_id, peer.id),
            sender_id=command.sender_id,
            content=command.content,
        )
        return await self._message_repository.append(message)
