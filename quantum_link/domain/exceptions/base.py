"""
Root of the domain error hierarchy.

Every expected failure carries a kind from a small fixed set plus a
human-readable message; nothing else is exposed to callers.
"""

from enum import Enum


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SELF_TARGET = "self_target"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class QuantumLinkError(Exception):
    """Base class for expected domain failures."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
