"""
ConnectionRequest Entity - A directed proposal to connect two identities.

State machine: PENDING -> ACCEPTED | REJECTED. Only the recipient decides.
Re-deciding a terminal request overwrites its status (last decision wins).
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from quantum_link.domain.entities.identity import Identity
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.request_id import RequestId

CATEGORY_DELIMITER = ","


class RequestStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class DecisionAction(str, Enum):
    ACCEPT = "ACCEPT"
    REJECT = "REJECT"

    @property
    def resulting_status(self) -> RequestStatus:
        if self is DecisionAction.ACCEPT:
            return RequestStatus.ACCEPTED
        return RequestStatus.REJECTED


def join_categories(categories: list[str]) -> str:
    return CATEGORY_DELIMITER.join(categories)


def split_categories(raw: Optional[str]) -> list[str]:
    return [c for c in (raw or "").split(CATEGORY_DELIMITER) if c]


@dataclass
class ConnectionRequest:
    id: RequestId
    from_id: IdentityId
    to_id: IdentityId
    categories: list[str]
    status: RequestStatus
    created_at: datetime
    note: Optional[str] = None
    # Populated by listing queries (public profile of each side)
    sender: Optional[Identity] = None
    recipient: Optional[Identity] = None

    def __post_init__(self):
        if self.from_id == self.to_id:
            raise ValueError("A connection request cannot target its sender")

    @classmethod
    def create(
        cls,
        from_id: IdentityId,
        to_id: IdentityId,
        categories: list[str],
        note: Optional[str] = None,
    ) -> ConnectionRequest:
        """Factory for a new PENDING request with generated ID and timestamp."""
        return cls(
            id=RequestId(str(uuid4())),
            from_id=from_id,
            to_id=to_id,
            categories=list(categories),
            status=RequestStatus.PENDING,
            created_at=datetime.now(timezone.utc),
            note=note,
        )

    def is_recipient(self, identity_id: IdentityId) -> bool:
        return self.to_id == identity_id

    def decide(self, action: DecisionAction) -> None:
        # No terminal-state guard: deciding again overwrites the previous decision.
        self.status = action.resulting_status

    def connects(self, a: IdentityId, b: IdentityId) -> bool:
        return {self.from_id, self.to_id} == {a, b}
