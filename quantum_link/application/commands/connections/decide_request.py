"""
Decide Connection Request Command - recipient accepts or rejects.

Authorization is only "are you the recipient": an unknown request and a
request addressed to someone else both read as NOT_FOUND. A request that
was already decided is decided again (last decision wins).
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Command, CommandHandler
from quantum_link.domain.entities.connection_request import (
    ConnectionRequest,
    DecisionAction,
)
from quantum_link.domain.exceptions import DomainValidationError, EntityNotFoundError
from quantum_link.domain.ports.repositories import ConnectionRequestRepository
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId


@dataclass(frozen=True)
class DecideConnectionRequestCommand(Command[ConnectionRequest]):
    identity_id: IdentityId
    request_id: str
    action: str


class DecideConnectionRequestHandler(CommandHandler[ConnectionRequest]):
    def __init__(self, request_repository: ConnectionRequestRepository):
        self._request_repository = request_repository

    async def execute(self, command: DecideConnectionRequestCommand) -> ConnectionRequest:
        if not command.request_id:
            raise DomainValidationError("Missing requestId")

        try:
            action = DecisionAction(command.action)
        except ValueError as e:
            raise DomainValidationError("Invalid action") from e

        request = await self._request_repository.get_by_id(RequestId(command.request_id))
        if not request or not request.is_recipient(command.identity_id):
            raise EntityNotFoundError("Request not found")

        request.decide(action)
        await self._request_repository.save(request)
        return request
