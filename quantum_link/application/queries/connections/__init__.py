"""Connection request queries."""

from .list_requests import (
    ListIncomingRequestsHandler,
    ListIncomingRequestsQuery,
    ListOutgoingRequestsHandler,
    ListOutgoingRequestsQuery,
)

__all__ = [
    "ListOutgoingRequestsQuery",
    "ListOutgoingRequestsHandler",
    "ListIncomingRequestsQuery",
    "ListIncomingRequestsHandler",
]
