"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- identity: POST /friends/search, PATCH /user/handle
- friends: POST /friends/request, GET /friends/outgoing, GET /friends/incoming, POST /friends/decide
- chat: POST /chat/send, GET /chat/history
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from quantum_link import __version__
from quantum_link.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from quantum_link.config.settings import Config
from quantum_link.presentation.api import chat_router, friends_router, identity_router
from quantum_link.presentation.errors import register_exception_handlers

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER, NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to serve requests from. Defaults to the
            Prisma-backed production container.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    if container is None:
        # Imported here: the production container pulls in the generated Prisma client
        from quantum_link.setup.ioc.container import create_container

        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Quantum Link API",
        description="Quantum ID directory, connection requests and pairwise messaging",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(identity_router)  # POST /friends/search, PATCH /user/handle
    app.include_router(friends_router)  # /friends/request|outgoing|incoming|decide
    app.include_router(chat_router)  # /chat/send, /chat/history

    return app
