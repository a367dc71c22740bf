"""Application services shared by several handlers."""

from quantum_link.application.services.handle_allocator import HandleAllocator
from quantum_link.application.services.messaging_gate import MessagingGate

__all__ = [
    "HandleAllocator",
    "MessagingGate",
]
