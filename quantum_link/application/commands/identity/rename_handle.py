"""
Rename Handle Command - the owner picks their own quantum ID.

One validated write, no regeneration: a taken handle is a CONFLICT.
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Command, CommandHandler
from quantum_link.config.settings import Config
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.exceptions import ConflictError, DomainValidationError
from quantum_link.domain.ports.repositories import IdentityRepository
from quantum_link.domain.services.handles import validate_handle
from quantum_link.domain.value_objects.identity_id import IdentityId

HANDLE_TAKEN_MESSAGE = "That quantum ID is already taken. Please choose a different one."


@dataclass(frozen=True)
class RenameHandleCommand(Command[Identity]):
    identity_id: IdentityId
    raw_handle: str


class RenameHandleHandler(CommandHandler[Identity]):
    def __init__(self, identity_repository: IdentityRepository):
        self._identity_repository = identity_repository

    async def execute(self, command: RenameHandleCommand) -> Identity:
        validation = validate_handle(
            command.raw_handle,
            min_length=Config.HANDLE_MIN_LENGTH,
            min_digits=Config.HANDLE_MIN_DIGITS,
        )
        if not validation.ok:
            raise DomainValidationError(validation.message)

        try:
            return await self._identity_repository.set_handle(
                command.identity_id, validation.value
            )
        except ConflictError as e:
            raise ConflictError(HANDLE_TAKEN_MESSAGE) from e
