"""
Chat API Router - pairwise messaging between accepted connections.

Clients poll GET /chat/history for the open conversation; there is no
push channel.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from quantum_link.application.commands.chat import SendMessageCommand, SendMessageHandler
from quantum_link.application.dto.chat import MessageDTO, RoomHistoryDTO
from quantum_link.application.dto.identity import PublicProfileDTO
from quantum_link.application.queries.chat import GetRoomHistoryHandler, GetRoomHistoryQuery
from quantum_link.presentation.dependencies.auth import (
    SessionIdentity,
    get_current_identity,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageBody(BaseModel):
    to_handle: str = ""
    content: str = ""


class SendMessageResponse(BaseModel):
    message: MessageDTO


# ==================== ROUTER ====================

router = APIRouter(prefix="/chat", tags=["chat"])


# ==================== ENDPOINTS ====================


@router.post(
    "/send",
    response_model=SendMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def send_message(
    body: SendMessageBody,
    handler: FromDishka[SendMessageHandler],
    current: SessionIdentity = Depends(get_current_identity),
):
    message = await handler.execute(
        SendMessageCommand(
            sender_id=current.id,
            to_handle=body.to_handle,
            content=body.content,
        )
    )
    return SendMessageResponse(message=MessageDTO.from_entity(message))


@router.get(
    "/history",
    response_model=RoomHistoryDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_history(
    handler: FromDishka[GetRoomHistoryHandler],
    current: SessionIdentity = Depends(get_current_identity),
    peer_handle: str = "",
):
    """
    Full conversation with a peer.

    Response:
    {
        "room_id": "<id>:<id>",
        "peer": {"id": "...", "handle": "...", ...},
        "messages": [{"id": "...", "sender_id": "...", "content": "...", ...}, ...]
    }
    """
    result = await handler.execute(
        GetRoomHistoryQuery(requester_id=current.id, peer_handle=peer_handle)
    )
    return RoomHistoryDTO(
        room_id=result.room_id.value,
        peer=PublicProfileDTO.from_entity(result.peer),
        messages=[MessageDTO.from_entity(m) for m in result.messages],
    )
