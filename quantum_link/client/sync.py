"""
Sync Layer - keeps a viewer's local state close to the server by polling.

There is no push channel. Two loops run per signed-in viewer:

- request lists: every REQUESTS_POLL_INTERVAL seconds while signed in,
  replacing the outgoing and incoming lists wholesale
- conversation: every CONVERSATION_POLL_INTERVAL seconds while a peer is
  open, replacing the message list wholesale

Each loop fetches once immediately when started. A failed tick is
skipped (logged at DEBUG) and the next tick tries again; loops stop when
their view closes, so none outlives the session that started it.
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional

from quantum_link.application.dto import (
    IncomingRequestDTO,
    MessageDTO,
    OutgoingRequestDTO,
    PublicProfileDTO,
)
from quantum_link.client.api_client import ApiError, QuantumLinkClient
from quantum_link.config.settings import Config
from quantum_link.domain.entities.connection_request import DecisionAction
from quantum_link.domain.exceptions import ErrorKind

logger = logging.getLogger(__name__)

# Offered by clients as quick picks; the server accepts any label.
SUGGESTED_CATEGORIES = [
    "Co-Founder",
    "Brother",
    "C.E.O",
    "Founder",
    "Millionaire",
    "Billionaire",
]


class Poller:
    """
    Restartable, cancelable periodic fetch.

    fetch() is awaited immediately and then every `interval` seconds; each
    successful result goes to apply(). A failure in either skips the tick.

    Usage:
        async with Poller(3.0, fetch, apply):
            ...  # loop runs only inside the block
    """

    def __init__(
        self,
        interval: float,
        fetch: Callable[[], Awaitable[Any]],
        apply: Callable[[Any], None],
        name: str = "poller",
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._fetch = fetch
        self._apply = apply
        self.name = name
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the loop; a running loop is cancelled and replaced."""
        if self._task is not None:
            self._task.cancel()
        self._task = asyncio.create_task(self._run(), name=self.name)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def refresh_now(self) -> bool:
        """Run one tick outside the schedule. Returns False if it was skipped."""
        return await self._tick()

    async def _tick(self) -> bool:
        try:
            result = await self._fetch()
        except Exception as e:
            logger.debug(f"[{self.name}] Tick skipped: {e}")
            return False
        try:
            self._apply(result)
        except Exception as e:
            logger.warning(f"[{self.name}] Applying result failed: {e}")
            return False
        return True

    async def _run(self) -> None:
        while True:
            await self._tick()
            await asyncio.sleep(self.interval)

    async def __aenter__(self) -> "Poller":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()


@dataclass
class ViewState:
    """What the viewer currently sees."""

    outgoing: list[OutgoingRequestDTO] = field(default_factory=list)
    incoming: list[IncomingRequestDTO] = field(default_factory=list)
    active_peer: Optional[str] = None
    peer: Optional[PublicProfileDTO] = None
    room_id: Optional[str] = None
    messages: list[MessageDTO] = field(default_factory=list)

    def clear_conversation(self) -> None:
        self.active_peer = None
        self.peer = None
        self.room_id = None
        self.messages = []


class SyncSession:
    """
    A signed-in viewer: owns both pollers and the user actions that
    patch local state between ticks.
    """

    def __init__(
        self,
        client: QuantumLinkClient,
        requests_interval: float = Config.REQUESTS_POLL_INTERVAL,
        conversation_interval: float = Config.CONVERSATION_POLL_INTERVAL,
        on_change: Optional[Callable[[ViewState], None]] = None,
    ):
        self._client = client
        self._conversation_interval = conversation_interval
        self._on_change = on_change
        self.state = ViewState()
        self._requests_poller = Poller(
            requests_interval,
            self._fetch_requests,
            self._apply_requests,
            name="requests-poller",
        )
        self._conversation_poller: Optional[Poller] = None

    @property
    def signed_in(self) -> bool:
        return self._requests_poller.running

    @property
    def conversation_open(self) -> bool:
        return self._conversation_poller is not None and self._conversation_poller.running

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    # ==================== REQUEST LISTS ====================

    async def _fetch_requests(
        self,
    ) -> tuple[list[OutgoingRequestDTO], list[IncomingRequestDTO]]:
        outgoing, incoming = await asyncio.gather(
            self._client.list_outgoing(), self._client.list_incoming()
        )
        return outgoing, incoming

    def _apply_requests(
        self, lists: tuple[list[OutgoingRequestDTO], list[IncomingRequestDTO]]
    ) -> None:
        self.state.outgoing, self.state.incoming = lists
        self._changed()

    # ==================== SESSION ====================

    async def sign_in(self) -> None:
        self._requests_poller.start()

    async def sign_out(self) -> None:
        await self.close_conversation()
        await self._requests_poller.stop()
        self.state = ViewState()
        self._changed()

    # ==================== CONVERSATION ====================

    async def open_conversation(self, peer_handle: str) -> None:
        """Show the conversation with peer_handle, replacing any open one."""
        await self._stop_conversation_poller()
        self.state.clear_conversation()
        self.state.active_peer = peer_handle

        async def fetch():
            return await self._client.history(peer_handle)

        def apply(history) -> None:
            # A late result for a peer that is no longer open is dropped
            if self.state.active_peer != peer_handle:
                return
            self.state.peer = history.peer
            self.state.room_id = history.room_id
            self.state.messages = list(history.messages)
            self._changed()

        self._conversation_poller = Poller(
            self._conversation_interval,
            fetch,
            apply,
            name=f"conversation-poller:{peer_handle}",
        )
        self._conversation_poller.start()
        self._changed()

    async def close_conversation(self) -> None:
        await self._stop_conversation_poller()
        self.state.clear_conversation()

    async def _stop_conversation_poller(self) -> None:
        if self._conversation_poller is not None:
            await self._conversation_poller.stop()
            self._conversation_poller = None

    # ==================== USER ACTIONS ====================

    async def send_request(
        self, to_handle: str, categories: list[str], note: Optional[str] = None
    ):
        """Send a request, then refresh the outgoing list right away."""
        request = await self._client.send_request(to_handle, categories, note)
        self.state.outgoing = await self._client.list_outgoing()
        self._changed()
        return request

    async def decide(self, request_id: str, action: str):
        """
        Decide an incoming request and patch its local status.

        On ACCEPT the conversation with the sender is opened.
        """
        decided = await self._client.decide(request_id, action)

        sender_handle = None
        for item in self.state.incoming:
            if item.id == decided.id:
                item.status = decided.status
                if item.from_user is not None:
                    sender_handle = item.from_user.handle
        self._changed()

        if decided.status == DecisionAction.ACCEPT.resulting_status.value and sender_handle:
            await self.open_conversation(sender_handle)
        return decided

    async def send_message(self, content: str) -> MessageDTO:
        peer_handle = self.state.active_peer
        if peer_handle is None:
            raise ApiError(ErrorKind.VALIDATION, "No conversation is open")
        message = await self._client.send_message(peer_handle, content)
        # The viewer may have switched peers while the send was in flight
        if self.state.active_peer == peer_handle:
            self.state.messages.append(message)
            self._changed()
        return message
