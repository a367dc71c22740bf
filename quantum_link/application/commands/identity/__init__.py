"""Identity commands."""

from .register_identity import RegisterIdentityCommand, RegisterIdentityHandler
from .rename_handle import RenameHandleCommand, RenameHandleHandler

__all__ = [
    "RegisterIdentityCommand",
    "RegisterIdentityHandler",
    "RenameHandleCommand",
    "RenameHandleHandler",
]
