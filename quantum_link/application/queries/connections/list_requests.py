"""
List Outgoing / Incoming Requests Queries.

Newest first, each request carrying the counterpart's public profile
(recipient for outgoing, sender for incoming).
"""

from dataclasses import dataclass

from quantum_link.application.common.interfaces import Query, QueryHandler
from quantum_link.domain.entities.connection_request import ConnectionRequest
from quantum_link.domain.ports.repositories import ConnectionRequestRepository
from quantum_link.domain.value_objects.identity_id import IdentityId


@dataclass(frozen=True)
class ListOutgoingRequestsQuery(Query[list[ConnectionRequest]]):
    identity_id: IdentityId


@dataclass(frozen=True)
class ListIncomingRequestsQuery(Query[list[ConnectionRequest]]):
    identity_id: IdentityId


class ListOutgoingRequestsHandler(QueryHandler[list[ConnectionRequest]]):
    def __init__(self, request_repository: ConnectionRequestRepository):
        self._request_repository = request_repository

    async def execute(self, query: ListOutgoingRequestsQuery) -> list[ConnectionRequest]:
        return await self._request_repository.list_outgoing(query.identity_id)


class ListIncomingRequestsHandler(QueryHandler[list[ConnectionRequest]]):
    def __init__(self, request_repository: ConnectionRequestRepository):
        self._request_repository = request_repository

    async def execute(self, query: ListIncomingRequestsQuery) -> list[ConnectionRequest]:
        return await self._request_repository.list_incoming(query.identity_id)
