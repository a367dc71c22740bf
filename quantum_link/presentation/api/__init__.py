"""
API Routers - FastAPI endpoint definitions.
"""

from quantum_link.presentation.api.identity import router as identity_router
from quantum_link.presentation.api.friends import router as friends_router
from quantum_link.presentation.api.chat import router as chat_router

__all__ = [
    "identity_router",
    "friends_router",
    "chat_router",
]
