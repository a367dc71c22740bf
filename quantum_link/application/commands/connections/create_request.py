"""
Create Connection Request Command.

Checks, in order:
1. to_handle present, 1..MAX_CATEGORIES categories         -> VALIDATION
2. to_handle resolves to an identity                        -> NOT_FOUND
3. target is not the sender                                 -> SELF_TARGET

Categories are trimmed and blanks dropped before storage; the note is
kept only when non-empty after trimming. Requests are not deduplicated
per pair, even after a rejection.
"""

from dataclasses import dataclass, field
from typing import Optional

from quantum_link.application.common.interfaces import Command, CommandHandler
from quantum_link.config.settings import Config
from quantum_link.domain.entities.connection_request import (
    CATEGORY_DELIMITER,
    ConnectionRequest,
)
from quantum_link.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    SelfTargetError,
)
from quantum_link.domain.ports.repositories import (
    ConnectionRequestRepository,
    IdentityRepository,
)
from quantum_link.domain.value_objects.identity_id import IdentityId


@dataclass(frozen=True)
class CreateConnectionRequestCommand(Command[ConnectionRequest]):
    from_id: IdentityId
    to_handle: str
    categories: list[str] = field(default_factory=list)
    note: Optional[str] = None


def clean_categories(categories: list[str], max_categories: int) -> list[str]:
    if not categories:
        raise DomainValidationError("Select at least one category")
    if len(categories) > max_categories:
        raise DomainValidationError(
            f"You can select at most {max_categories} categories"
        )

    cleaned = [c.strip() for c in categories if c and c.strip()]
    if not cleaned:
        raise DomainValidationError("Select at least one category")
    if any(CATEGORY_DELIMITER in c for c in cleaned):
        raise DomainValidationError(
            f"Categories cannot contain '{CATEGORY_DELIMITER}'"
        )
    return cleaned


class CreateConnectionRequestHandler(CommandHandler[ConnectionRequest]):
    def __init__(
        self,
        identity_repository: IdentityRepository,
        request_repository: ConnectionRequestRepository,
    ):
        self._identity_repository = identity_repository
        self._request_repository = request_repository

    async def execute(self, command: CreateConnectionRequestCommand) -> ConnectionRequest:
        if not command.to_handle:
            raise DomainValidationError("Missing toHandle")

        categories = clean_categories(command.categories, Config.MAX_CATEGORIES)

        target = await self._identity_repository.get_by_handle(command.to_handle)
        if not target:
            raise EntityNotFoundError("Target user not found")

        if target.id == command.from_id:
            raise SelfTargetError("You cannot send a request to yourself")

        note = command.note.strip() if command.note else ""
        request = ConnectionRequest.create(
            from_id=command.from_id,
            to_id=target.id,
            categories=categories,
            note=note or None,
        )
        await self._request_repository.save(request)
        return request
