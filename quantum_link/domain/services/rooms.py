"""
Room addressing: room(a, b) == room(b, a) for every pair of identity ids.
"""

from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.room_id import ROOM_SEPARATOR, RoomId


def room_id_for(a: IdentityId, b: IdentityId) -> RoomId:
    return RoomId(ROOM_SEPARATOR.join(sorted([a.value, b.value])))
