"""
SelfTargetError - Raised when an operation targets the acting identity.
Maps to: HTTP 400 Bad Request
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError


class SelfTargetError(QuantumLinkError):
    kind = ErrorKind.SELF_TARGET
