"""
Identity Entity - A signed-in person, addressed publicly by a quantum ID (handle).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from quantum_link.domain.value_objects.identity_id import IdentityId


@dataclass
class Identity:
    id: IdentityId
    email: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None
    # None only between creation and handle allocation (or after exhausted retries)
    handle: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: Optional[str] = None,
        name: Optional[str] = None,
        image: Optional[str] = None,
        identity_id: Optional[str] = None,
    ) -> Identity:
        """Factory for a freshly signed-in identity; the handle is allocated afterwards."""
        return cls(
            id=IdentityId(identity_id or str(uuid4())),
            email=email,
            name=name,
            image=image,
            handle=None,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def handle_seed(self) -> Optional[str]:
        """Value the handle generator derives its base token from."""
        return self.email or self.name
