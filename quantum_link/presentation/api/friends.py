"""
Friends API Router - connection request lifecycle.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← DTO ←
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from quantum_link.application.commands.connections import (
    CreateConnectionRequestCommand,
    CreateConnectionRequestHandler,
    DecideConnectionRequestCommand,
    DecideConnectionRequestHandler,
)
from quantum_link.application.dto.connection import (
    ConnectionRequestDTO,
    IncomingRequestDTO,
    OutgoingRequestDTO,
)
from quantum_link.application.queries.connections import (
    ListIncomingRequestsHandler,
    ListIncomingRequestsQuery,
    ListOutgoingRequestsHandler,
    ListOutgoingRequestsQuery,
)
from quantum_link.presentation.dependencies.auth import (
    SessionIdentity,
    get_current_identity,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateRequestBody(BaseModel):
    """
    Request body for sending a connection request.

    {
        "to_handle": "bob-5678",
        "categories": ["Co-Founder"],
        "note": "Met at the demo day"
    }
    """

    to_handle: str = ""
    categories: list[str] = Field(default_factory=list)
    note: Optional[str] = None


class DecideRequestBody(BaseModel):
    request_id: str = ""
    action: str = ""


class RequestResponse(BaseModel):
    request: ConnectionRequestDTO


class OutgoingListResponse(BaseModel):
    requests: list[OutgoingRequestDTO]


class IncomingListResponse(BaseModel):
    requests: list[IncomingRequestDTO]


# ==================== ROUTER ====================

router = APIRouter(prefix="/friends", tags=["friends"])


# ==================== ENDPOINTS ====================


@router.post(
    "/request",
    response_model=RequestResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def create_request(
    body: CreateRequestBody,
    handler: FromDishka[CreateConnectionRequestHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    """Send a connection request to a quantum ID."""
    request = await handler.execute(
        CreateConnectionRequestCommand(
            from_id=current.id,
            to_handle=body.to_handle,
            categories=body.categories,
            note=body.note,
        )
    )
    logger.info(f"[Friends] {current.id.value} -> {request.to_id.value} ({request.id.value})")
    return RequestResponse(request=ConnectionRequestDTO.from_entity(request))


@router.get(
    "/outgoing",
    response_model=OutgoingListResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_outgoing(
    handler: FromDishka[ListOutgoingRequestsHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    requests = await handler.execute(ListOutgoingRequestsQuery(identity_id=current.id))
    return OutgoingListResponse(
        requests=[OutgoingRequestDTO.from_entity(r) for r in requests]
    )


@router.get(
    "/incoming",
    response_model=IncomingListResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_incoming(
    handler: FromDishka[ListIncomingRequestsHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    requests = await handler.execute(ListIncomingRequestsQuery(identity_id=current.id))
    return IncomingListResponse(
        requests=[IncomingRequestDTO.from_entity(r) for r in requests]
    )


@router.post(
    "/decide",
    response_model=RequestResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def decide_request(
    body: DecideRequestBody,
    handler: FromDishka[DecideConnectionRequestHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    """
    Accept or reject an incoming request.

    Request: {"request_id": "uuid", "action": "ACCEPT" | "REJECT"}
    """
    request = await handler.execute(
        DecideConnectionRequestCommand(
            identity_id=current.id,
            request_id=body.request_id,
            action=body.action,
        )
    )
    logger.info(f"[Friends] {request.id.value} is now {request.status.value}")
    return RequestResponse(request=ConnectionRequestDTO.from_entity(request))
