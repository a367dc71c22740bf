"""Connection request commands."""

from .create_request import CreateConnectionRequestCommand, CreateConnectionRequestHandler
from .decide_request import DecideConnectionRequestCommand, DecideConnectionRequestHandler

__all__ = [
    "CreateConnectionRequestCommand",
    "CreateConnectionRequestHandler",
    "DecideConnectionRequestCommand",
    "DecideConnectionRequestHandler",
]
