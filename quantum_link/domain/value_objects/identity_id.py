"""
IdentityId Value Object - opaque id issued by the identity provider.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("IdentityId cannot be empty")
        # Room ids are built by joining two identity ids with ":"
        if ":" in self.value:
            raise ValueError(f"Invalid identity id: {self.value}")

    def __str__(self) -> str:
        return self.value
