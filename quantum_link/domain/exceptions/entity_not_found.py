"""
EntityNotFoundError - Raised when a handle or request does not resolve.
Maps to: HTTP 404 Not Found
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class EntityNotFoundError(QuantumLinkError):
    """Exception raised when a requested entity is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
