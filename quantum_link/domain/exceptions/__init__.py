"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
the presentation layer, which maps each kind to an HTTP status code.
"""

from quantum_link.domain.exceptions.base import ErrorKind, QuantumLinkError
from quantum_link.domain.exceptions.unauthenticated import UnauthenticatedError
from quantum_link.domain.exceptions.validation_error import DomainValidationError
from quantum_link.domain.exceptions.entity_not_found import EntityNotFoundError
from quantum_link.domain.exceptions.self_target import SelfTargetError
from quantum_link.domain.exceptions.access_denied import AccessDeniedError
from quantum_link.domain.exceptions.conflict import ConflictError

__all__ = [
    "ErrorKind",
    "QuantumLinkError",
    "UnauthenticatedError",
    "DomainValidationError",
    "EntityNotFoundError",
    "SelfTargetError",
    "AccessDeniedError",
    "ConflictError",
]
