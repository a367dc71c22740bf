"""
DomainValidationError - Raised when input violates a business rule.
Maps to: HTTP 400 Bad Request
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class DomainValidationError(QuantumLinkError):
    """Exception raised for domain validation errors."""

    kind = ErrorKind.VALIDATION
