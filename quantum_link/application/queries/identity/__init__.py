"""Identity queries."""

from .find_by_handle import FindIdentityByHandleQuery, FindIdentityByHandleHandler

__all__ = [
    "FindIdentityByHandleQuery",
    "FindIdentityByHandleHandler",
]
