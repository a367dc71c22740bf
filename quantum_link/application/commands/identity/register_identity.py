"""
Register Identity Command.

Runs on first sign-in, once the identity provider has vouched for the
profile: store the identity, then allocate its quantum ID. A handle
collision streak never fails registration; the identity is returned
without a handle and gets backfilled on a later session.
"""

from dataclasses import dataclass
from typing import Optional

from quantum_link.application.common.interfaces import Command, CommandHandler
from quantum_link.application.services.handle_allocator import HandleAllocator
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.ports.repositories import IdentityRepository


@dataclass(frozen=True)
class RegisterIdentityCommand(Command[Identity]):
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    identity_id: Optional[str] = None


class RegisterIdentityHandler(CommandHandler[Identity]):
    def __init__(
        self,
        identity_repository: IdentityRepository,
        handle_allocator: HandleAllocator,
    ):
        self._identity_repository = identity_repository
        self._handle_allocator = handle_allocator

    async def execute(self, command: RegisterIdentityCommand) -> Identity:
        identity = Identity.create(
            email=command.email,
            name=command.name,
            image=command.image,
            identity_id=command.identity_id,
        )
        await self._identity_repository.save(identity)

        identity.handle = await self._handle_allocator.allocate(
            identity.id, identity.handle_seed
        )
        return identity
