"""
DOMAIN SERVICES - Pure rules with no I/O.
"""

from quantum_link.domain.services.handles import (
    HandleValidation,
    generate_candidate,
    normalize_handle_query,
    validate_handle,
)
from quantum_link.domain.services.rooms import room_id_for

__all__ = [
    "HandleValidation",
    "generate_candidate",
    "normalize_handle_query",
    "validate_handle",
    "room_id_for",
]
