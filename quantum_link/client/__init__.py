"""
Client package - HTTP client and polling Sync Layer.

Everything here talks to the API over HTTP; nothing imports the server
side beyond the shared DTOs.
"""

from quantum_link.client.api_client import ApiError, QuantumLinkClient
from quantum_link.client.sync import (
    SUGGESTED_CATEGORIES,
    Poller,
    SyncSession,
    ViewState,
)

__all__ = [
    "ApiError",
    "QuantumLinkClient",
    "Poller",
    "SyncSession",
    "ViewState",
    "SUGGESTED_CATEGORIES",
]
