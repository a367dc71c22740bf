"""
Handle Allocator - assigns system-generated quantum IDs.

Two entry points:
- allocate(): right after an identity is created. Collisions on the unique
  handle column are retried with a fresh random suffix, at most
  max_attempts times; a store failure counts as a failed attempt. If no
  attempt succeeds the identity is left without a handle and the caller
  carries on.
- backfill(): for an identity observed without a handle in an active
  session. Same bounded retry; any failure is absorbed and reported as None.

User-chosen renames never go through here (see RenameHandleHandler):
they fail with CONFLICT instead of being regenerated.
"""

import logging
import random
from typing import Optional

from quantum_link.config.settings import Config
from quantum_link.domain.exceptions import ConflictError
from quantum_link.domain.ports.repositories import IdentityRepository
from quantum_link.domain.services.handles import generate_candidate
from quantum_link.domain.value_objects.identity_id import IdentityId

logger = logging.getLogger(__name__)


class HandleAllocator:
    def __init__(
        self,
        identity_repository: IdentityRepository,
        max_attempts: int = Config.HANDLE_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
        fallback_base: str = Config.HANDLE_FALLBACK_BASE,
        separator: str = Config.HANDLE_SEPARATOR,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._identity_repository = identity_repository
        self._max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._fallback_base = fallback_base
        self._separator = separator

    def generate(self, seed: Optional[str]) -> str:
        return generate_candidate(
            seed,
            rng=self._rng,
            fallback=self._fallback_base,
            separator=self._separator,
        )

    async def allocate(
        self, identity_id: IdentityId, seed: Optional[str]
    ) -> Optional[str]:
        """
        Persist a generated handle for identity_id.

        Returns:
            The stored handle, or None when every attempt failed.
        """
        attempt = 0
        while attempt < self._max_attempts:
            attempt += 1
            candidate = self.generate(seed)
            try:
                updated = await self._identity_repository.set_handle(
                    identity_id, candidate
                )
            except ConflictError:
                logger.warning(
                    f"[HandleAllocator] Candidate {candidate} taken "
                    f"(attempt {attempt}/{self._max_attempts})"
                )
                continue
            except Exception as e:
                logger.warning(
                    f"[HandleAllocator] Storing {candidate} failed "
                    f"(attempt {attempt}/{self._max_attempts}): {e}"
                )
                continue
            logger.info(
                f"[HandleAllocator] Assigned {updated.handle} to {identity_id.value}"
            )
            return updated.handle

        logger.warning(
            f"[HandleAllocator] Gave up after {self._max_attempts} attempts; "
            f"{identity_id.value} stays without a handle"
        )
        return None

    async def backfill(self, identity_id: IdentityId) -> Optional[str]:
        """Best-effort: return the identity's handle, allocating one if missing."""
        try:
            identity = await self._identity_repository.get_by_id(identity_id)
            if identity is None:
                return None
            if identity.handle:
                return identity.handle
            return await self.allocate(identity.id, identity.handle_seed)
        except Exception as e:
            logger.warning(f"[HandleAllocator] Backfill failed for {identity_id.value}: {e}")
            return None
