"""
RequestId Value Object - identity of a ConnectionRequest.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Request ID cannot be empty")

    def __str__(self) -> str:
        return self.value
