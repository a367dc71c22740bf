"""
Identity API Router - quantum ID lookup and rename.

Thin layer: builds the Command/Query, delegates to the handler, shapes
the DTO. Domain errors are mapped to responses by presentation.errors.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from quantum_link.application.commands.identity import (
    RenameHandleCommand,
    RenameHandleHandler,
)
from quantum_link.application.dto.identity import HandleDTO, PublicProfileDTO
from quantum_link.application.queries.identity import (
    FindIdentityByHandleHandler,
    FindIdentityByHandleQuery,
)
from quantum_link.presentation.dependencies.auth import (
    SessionIdentity,
    get_current_identity,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SearchRequest(BaseModel):
    handle: str = ""


class SearchResponse(BaseModel):
    user: PublicProfileDTO


class UpdateHandleRequest(BaseModel):
    handle: str = ""


class UpdateHandleResponse(BaseModel):
    user: HandleDTO


# ==================== ROUTER ====================

router = APIRouter(tags=["identity"])


# ==================== ENDPOINTS ====================


@router.post(
    "/friends/search",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def search_by_handle(
    body: SearchRequest,
    handler: FromDishka[FindIdentityByHandleHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    """Find an identity by quantum ID ("@" prefix accepted)."""
    identity = await handler.execute(FindIdentityByHandleQuery(handle=body.handle))
    return SearchResponse(user=PublicProfileDTO.from_entity(identity, with_created_at=True))


@router.patch(
    "/user/handle",
    response_model=UpdateHandleResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def update_handle(
    body: UpdateHandleRequest,
    handler: FromDishka[RenameHandleHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    """
    Rename the caller's quantum ID.

    Request: {"handle": "orion1234"}
    Response: {"user": {"id": "...", "handle": "orion1234"}}
    """
    identity = await handler.execute(
        RenameHandleCommand(identity_id=current.id, raw_handle=body.handle)
    )
    logger.info(f"[Identity] {identity.id.value} renamed to {identity.handle}")
    return UpdateHandleResponse(user=HandleDTO(id=identity.id.value, handle=identity.handle))
