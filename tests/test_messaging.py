import asyncio

import pytest

from quantum_link.application.commands.chat import SendMessageCommand, SendMessageHandler
from quantum_link.application.queries.chat import GetRoomHistoryHandler, GetRoomHistoryQuery
from quantum_link.application.services.messaging_gate import MessagingGate
from quantum_link.domain.entities.connection_request import ConnectionRequest, RequestStatus
from quantum_link.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    SelfTargetError,
)
from quantum_link.domain.services.rooms import room_id_for


def connect(store, a, b, status=RequestStatus.ACCEPTED):
    request = ConnectionRequest.create(from_id=a.id, to_id=b.id, categories=["Founder"])
    request.status = status
    asyncio.run(store.requests.save(request))
    return request


def send(store, sender, to_handle, content):
    gate = MessagingGate(store.identities, store.requests)
    handler = SendMessageHandler(gate, store.messages)
    return asyncio.run(
        handler.execute(SendMessageCommand(sender_id=sender.id, to_handle=to_handle, content=content))
    )


def history(store, requester, peer_handle):
    gate = MessagingGate(store.identities, store.requests)
    handler = GetRoomHistoryHandler(gate, store.messages)
    return asyncio.run(
        handler.execute(GetRoomHistoryQuery(requester_id=requester.id, peer_handle=peer_handle))
    )


class TestSendMessage:
    def test_send_after_accept(self, store, alice, bob):
        connect(store, alice, bob)

        message = send(store, alice, "bob-5678", "  hi  ")

        assert message.content == "hi"
        assert message.sender_id == alice.id
        assert message.room_id == room_id_for(alice.id, bob.id)

    def test_accepted_in_either_direction(self, store, alice, bob):
        connect(store, bob, alice)
        assert send(store, alice, "bob-5678", "hello").content == "hello"

    @pytest.mark.parametrize("status", [RequestStatus.PENDING, RequestStatus.REJECTED])
    def test_not_accepted_is_forbidden(self, store, alice, bob, status):
        connect(store, alice, bob, status)
        with pytest.raises(AccessDeniedError):
            send(store, alice, "bob-5678", "hi")
        assert store.messages.messages == []

    def test_no_relation_is_forbidden(self, store, alice, bob):
        with pytest.raises(AccessDeniedError):
            send(store, alice, "bob-5678", "hi")

    def test_self_target(self, store, alice):
        with pytest.raises(SelfTargetError):
            send(store, alice, "alice-1234", "hi")

    def test_unknown_peer(self, store, alice):
        with pytest.raises(EntityNotFoundError, match="Peer not found"):
            send(store, alice, "ghost-0000", "hi")

    def test_missing_handle(self, store, alice):
        with pytest.raises(DomainValidationError, match="Missing toHandle"):
            send(store, alice, "", "hi")

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_content_checked_before_peer(self, store, alice, content):
        with pytest.raises(DomainValidationError, match="Message content is required"):
            send(store, alice, "ghost-0000", content)

    def test_other_rooms_are_unaffected(self, store, alice, bob, carol):
        connect(store, alice, bob)
        connect(store, alice, carol)
        send(store, alice, "bob-5678", "to bob")

        assert history(store, alice, "carol-9012").messages == []


class TestRoomHistory:
    def test_both_sides_see_the_same_room_in_order(self, store, alice, bob):
        connect(store, alice, bob)
        send(store, alice, "bob-5678", "one")
        send(store, bob, "alice-1234", "two")
        send(store, alice, "bob-5678", "three")

        mine = history(store, alice, "bob-5678")
        theirs = history(store, bob, "alice-1234")

        assert mine.room_id == theirs.room_id
        assert [m.content for m in mine.messages] == ["one", "two", "three"]
        assert [m.id for m in mine.messages] == [m.id for m in theirs.messages]
        assert mine.peer.handle == "bob-5678"

    def test_history_requires_accepted_connection(self, store, alice, bob):
        connect(store, alice, bob, RequestStatus.PENDING)
        with pytest.raises(AccessDeniedError):
            history(store, alice, "bob-5678")

    def test_missing_peer_handle(self, store, alice):
        with pytest.raises(DomainValidationError, match="Missing peerHandle"):
            history(store, alice, "")

    def test_empty_room(self, store, alice, bob):
        connect(store, alice, bob)
        result = history(store, alice, "bob-5678")
        assert result.messages == []
        assert result.room_id == room_id_for(alice.id, bob.id)
