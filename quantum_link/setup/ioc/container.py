"""
Dishka DI Container Setup.

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- @decorate: Wraps a dependency another provider already registers
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- make_async_container: Creates the container

Importing this module imports the generated Prisma client, so run
`prisma generate` first. Tests build their own container from
HandlerProvider and in-memory repositories instead.
"""

import logging
from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, decorate, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from quantum_link.config.settings import Config
from quantum_link.domain.ports.repositories import (
    ConnectionRequestRepository,
    IdentityRepository,
    MessageRepository,
)
from quantum_link.infrastructure.cache.cached_message_repository import CachedMessageRepository
from quantum_link.infrastructure.cache.redis_client import close_redis_client, create_redis_client
from quantum_link.infrastructure.persistence import (
    PrismaConnectionRequestRepository,
    PrismaIdentityRepository,
    PrismaMessageRepository,
)
from quantum_link.setup.ioc.handlers import HandlerProvider

logger = logging.getLogger(__name__)


class PrismaProvider(Provider):
    """Storage provider: interface → Prisma implementation."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, prisma: Prisma) -> IdentityRepository:
        return PrismaIdentityRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_connection_request_repository(self, prisma: Prisma) -> ConnectionRequestRepository:
        return PrismaConnectionRequestRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)


class HistoryCacheProvider(Provider):
    """Wraps the message repository in the versioned Redis room-history cache."""

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client(Config.REDIS_URL)
        yield client
        await close_redis_client(client)

    @decorate
    def cache_message_repository(
        self, repository: MessageRepository, redis: Redis
    ) -> MessageRepository:
        return CachedMessageRepository(repository, redis, ttl=Config.REDIS_CACHE_TTL)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application; the FastAPI lifespan closes it.
    """
    providers = [PrismaProvider(), HandlerProvider()]
    if Config.USE_HISTORY_CACHE:
        providers.append(HistoryCacheProvider())
    return make_async_container(*providers)
