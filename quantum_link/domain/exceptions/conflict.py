"""
ConflictError - Raised when a unique value is already taken.
Maps to: HTTP 409 Conflict
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class ConflictError(QuantumLinkError):
    kind = ErrorKind.CONFLICT

    def __init__(self, message: str = "Value already taken"):
        super().__init__(message)
