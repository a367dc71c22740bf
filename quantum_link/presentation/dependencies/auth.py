"""
Session Dependency for FastAPI.

- The identity provider sign-in happens elsewhere; what reaches this API is
  a session token (HS256 JWT) whose `sub` is the identity id and whose
  `handle` claim may be missing for identities created before allocation
  succeeded.
- Every route derives the acting identity from the token only. There is no
  process-wide session state.
- A session without a handle triggers the best-effort handle backfill; the
  request goes on whether or not it succeeds.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quantum_link.application.services.handle_allocator import HandleAllocator
from quantum_link.config.settings import Config
from quantum_link.domain.exceptions import UnauthenticatedError
from quantum_link.domain.value_objects.identity_id import IdentityId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionIdentity:
    id: IdentityId
    handle: Optional[str] = None


security = HTTPBearer(auto_error=False)


def issue_session_token(
    identity_id: str,
    handle: Optional[str] = None,
    ttl_seconds: int = Config.SESSION_TTL_SECONDS,
) -> str:
    """Mint a session token for an identity (used after sign-in and by the CLI)."""
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": identity_id,
        "iat": now,
        "exp": now + timedelta(seconds=ttl_seconds),
        "iss": Config.SESSION_ISSUER,
        "aud": Config.SESSION_AUDIENCE,
    }
    if handle:
        payload["handle"] = handle
    return jwt.encode(payload, Config.SESSION_SECRET, algorithm="HS256")


def decode_session_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(
            token,
            Config.SESSION_SECRET,
            algorithms=["HS256"],
            audience=Config.SESSION_AUDIENCE,
            issuer=Config.SESSION_ISSUER,
            options={"require": ["exp", "iat", "aud", "iss"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise UnauthenticatedError("Session has expired") from e
    except jwt.InvalidTokenError as e:
        raise UnauthenticatedError("Invalid session") from e


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> SessionIdentity:
    """
    Extract the acting identity from the bearer session token.

    Raises:
        UnauthenticatedError if the token is missing, invalid, expired or has no id
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Unauthorized")

    claims = decode_session_token(credentials.credentials)

    try:
        identity_id = IdentityId(claims.get("sub") or "")
    except ValueError as e:
        raise UnauthenticatedError("User id missing in session") from e

    handle = claims.get("handle")
    if not handle:
        allocator = await request.state.dishka_container.get(HandleAllocator)
        handle = await allocator.backfill(identity_id)

    return SessionIdentity(id=identity_id, handle=handle)
