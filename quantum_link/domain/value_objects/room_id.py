"""
RoomId Value Object - derived key of a pairwise conversation.

Never stored as an entity: it is "<smaller id>:<larger id>" so both
participants address the same room whoever writes first.
"""

from dataclasses import dataclass

ROOM_SEPARATOR = ":"


@dataclass(frozen=True)
class RoomId:
    value: str

    def __post_init__(self):
        parts = self.value.split(ROOM_SEPARATOR) if self.value else []
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid room id: {self.value}")

    @property
    def participants(self) -> tuple[str, str]:
        first, second = self.value.split(ROOM_SEPARATOR)
        return first, second

    def __str__(self) -> str:
        return self.value
