"""
Quantum Link API client (httpx).

One AsyncClient per QuantumLinkClient, bearer-authenticated with a
session token. Error bodies ({"error", "kind"}) come back as ApiError;
transport failures are reported as kind "internal".
"""

import logging
from typing import Any, Optional

import httpx

from quantum_link.application.dto import (
    ConnectionRequestDTO,
    HandleDTO,
    IncomingRequestDTO,
    MessageDTO,
    OutgoingRequestDTO,
    PublicProfileDTO,
    RoomHistoryDTO,
)
from quantum_link.config.settings import Config
from quantum_link.domain.exceptions import ErrorKind

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Failed API call, carrying the server's error kind and message."""

    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return f"[{self.kind.value}] {self.message}"
        return f"[{self.kind.value} {self.status_code}] {self.message}"


def _error_from_response(response: httpx.Response) -> ApiError:
    message = response.text or response.reason_phrase
    kind = ErrorKind.INTERNAL
    try:
        body = response.json()
        message = body.get("error", message)
        kind = ErrorKind(body.get("kind", ErrorKind.INTERNAL.value))
    except (ValueError, AttributeError):
        pass
    return ApiError(kind, message, status_code=response.status_code)


class QuantumLinkClient:
    """
    Async client for every Quantum Link HTTP operation.

    Usage:
        async with QuantumLinkClient(token) as client:
            me = await client.search("alice-1234")
    """

    def __init__(
        self,
        token: str,
        base_url: str = Config.API_BASE_URL,
        timeout: float = Config.API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
        )

    async def __aenter__(self) -> "QuantumLinkClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        try:
            response = await self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(ErrorKind.INTERNAL, f"Request to {path} failed: {e}") from e

        if response.status_code >= 400:
            raise _error_from_response(response)
        return response.json()

    # ==================== IDENTITY ====================

    async def search(self, handle: str) -> PublicProfileDTO:
        data = await self._request("POST", "/friends/search", json={"handle": handle})
        return PublicProfileDTO.model_validate(data["user"])

    async def rename_handle(self, handle: str) -> HandleDTO:
        data = await self._request("PATCH", "/user/handle", json={"handle": handle})
        return HandleDTO.model_validate(data["user"])

    # ==================== CONNECTION REQUESTS ====================

    async def send_request(
        self, to_handle: str, categories: list[str], note: Optional[str] = None
    ) -> ConnectionRequestDTO:
        payload: dict[str, Any] = {"to_handle": to_handle, "categories": categories}
        if note is not None:
            payload["note"] = note
        data = await self._request("POST", "/friends/request", json=payload)
        return ConnectionRequestDTO.model_validate(data["request"])

    async def list_outgoing(self) -> list[OutgoingRequestDTO]:
        data = await self._request("GET", "/friends/outgoing")
        return [OutgoingRequestDTO.model_validate(r) for r in data["requests"]]

    async def list_incoming(self) -> list[IncomingRequestDTO]:
        data = await self._request("GET", "/friends/incoming")
        return [IncomingRequestDTO.model_validate(r) for r in data["requests"]]

    async def decide(self, request_id: str, action: str) -> ConnectionRequestDTO:
        data = await self._request(
            "POST",
            "/friends/decide",
            json={"request_id": request_id, "action": action},
        )
        return ConnectionRequestDTO.model_validate(data["request"])

    # ==================== CHAT ====================

    async def send_message(self, to_handle: str, content: str) -> MessageDTO:
        data = await self._request(
            "POST", "/chat/send", json={"to_handle": to_handle, "content": content}
        )
        return MessageDTO.model_validate(data["message"])

    async def history(self, peer_handle: str) -> RoomHistoryDTO:
        data = await self._request(
            "GET", "/chat/history", params={"peer_handle": peer_handle}
        )
        return RoomHistoryDTO.model_validate(data)
