"""
UnauthenticatedError - Raised when no usable session identity is present.
Maps to: HTTP 401 Unauthorized
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class UnauthenticatedError(QuantumLinkError):
    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
