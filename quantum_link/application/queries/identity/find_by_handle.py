"""
FindIdentityByHandle Query - directory lookup behind the search box.

The query boundary is the only place a handle is normalized: surrounding
whitespace and one leading "@" are stripped. The match itself is exact.
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Query, QueryHandler
from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.exceptions import DomainValidationError, EntityNotFoundError
from quantum_link.domain.ports.repositories import IdentityRepository
from quantum_link.domain.services.handles import normalize_handle_query


@dataclass(frozen=True)
class FindIdentityByHandleQuery(Query[Identity]):
    handle: str


class FindIdentityByHandleHandler(QueryHandler[Identity]):
    def __init__(self, identity_repository: IdentityRepository):
        self._identity_repository = identity_repository

    async def execute(self, query: FindIdentityByHandleQuery) -> Identity:
        if not query.handle:
            raise DomainValidationError("Missing handle")

        identity = await self._identity_repository.get_by_handle(
            normalize_handle_query(query.handle)
        )
        if not identity:
            raise EntityNotFoundError("User not found")
        return identity
