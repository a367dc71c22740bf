"""
Handler Provider - application services and command/query handlers.

Every factory asks for ABSTRACT repositories only, so the same provider
is combined with the Prisma storage provider in production and with
in-memory repositories in tests.

Flow:
  Container → provides → IdentityRepository → to → HandleAllocator → to → RegisterIdentityHandler
"""

from dishka import Provider, Scope, provide

from quantum_link.application.commands.chat import SendMessageHandler
from quantum_link.application.commands.connections import (
    CreateConnectionRequestHandler,
    DecideConnectionRequestHandler,
)
from quantum_link.application.commands.identity import (
    RegisterIdentityHandler,
    RenameHandleHandler,
)
from quantum_link.application.queries.chat import GetRoomHistoryHandler
from quantum_link.application.queries.connections import (
    ListIncomingRequestsHandler,
    ListOutgoingRequestsHandler,
)
from quantum_link.application.queries.identity import FindIdentityByHandleHandler
from quantum_link.application.services import HandleAllocator, MessagingGate
from quantum_link.config.settings import Config
from quantum_link.domain.ports.repositories import (
    ConnectionRequestRepository,
    IdentityRepository,
    MessageRepository,
)


class HandlerProvider(Provider):
    """Registers services and handlers against the repository interfaces."""

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_handle_allocator(self, identity_repository: IdentityRepository) -> HandleAllocator:
        return HandleAllocator(
            identity_repository,
            max_attempts=Config.HANDLE_MAX_ATTEMPTS,
        )

    @provide(scope=Scope.REQUEST)
    def get_messaging_gate(
        self,
        identity_repository: IdentityRepository,
        request_repository: ConnectionRequestRepository,
    ) -> MessagingGate:
        return MessagingGate(identity_repository, request_repository)

    # ==================== IDENTITY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_identity_handler(
        self,
        identity_repository: IdentityRepository,
        handle_allocator: HandleAllocator,
    ) -> RegisterIdentityHandler:
        return RegisterIdentityHandler(identity_repository, handle_allocator)

    @provide(scope=Scope.REQUEST)
    def get_rename_handle_handler(
        self, identity_repository: IdentityRepository
    ) -> RenameHandleHandler:
        return RenameHandleHandler(identity_repository)

    @provide(scope=Scope.REQUEST)
    def get_find_identity_handler(
        self, identity_repository: IdentityRepository
    ) -> FindIdentityByHandleHandler:
        return FindIdentityByHandleHandler(identity_repository)

    # ==================== CONNECTION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_request_handler(
        self,
        identity_repository: IdentityRepository,
        request_repository: ConnectionRequestRepository,
    ) -> CreateConnectionRequestHandler:
        return CreateConnectionRequestHandler(identity_repository, request_repository)

    @provide(scope=Scope.REQUEST)
    def get_decide_request_handler(
        self, request_repository: ConnectionRequestRepository
    ) -> DecideConnectionRequestHandler:
        return DecideConnectionRequestHandler(request_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_outgoing_handler(
        self, request_repository: ConnectionRequestRepository
    ) -> ListOutgoingRequestsHandler:
        return ListOutgoingRequestsHandler(request_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_incoming_handler(
        self, request_repository: ConnectionRequestRepository
    ) -> ListIncomingRequestsHandler:
        return ListIncomingRequestsHandler(request_repository)

    # ==================== CHAT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self, gate: MessagingGate, message_repository: MessageRepository
    ) -> SendMessageHandler:
        return SendMessageHandler(gate, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_room_history_handler(
        self, gate: MessagingGate, message_repository: MessageRepository
    ) -> GetRoomHistoryHandler:
        return GetRoomHistoryHandler(gate, message_repository)
