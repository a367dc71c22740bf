"""
AccessDeniedError - Raised when no accepted connection authorizes messaging.
Maps to: HTTP 403 Forbidden
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class AccessDeniedError(QuantumLinkError):
    """Raised when user lacks permission to access a resource"""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
