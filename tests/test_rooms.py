import pytest

from quantum_link.domain.services.rooms import room_id_for
from quantum_link.domain.value_objects.identity_id import IdentityId
from quantum_link.domain.value_objects.room_id import RoomId


def test_room_is_symmetric():
    a, b = IdentityId("u-alice"), IdentityId("u-bob")
    assert room_id_for(a, b) == room_id_for(b, a)


def test_room_joins_sorted_ids():
    room = room_id_for(IdentityId("zeta"), IdentityId("alpha"))
    assert room.value == "alpha:zeta"
    assert room.participants == ("alpha", "zeta")


def test_distinct_pairs_get_distinct_rooms():
    a, b, c = IdentityId("a1"), IdentityId("b2"), IdentityId("c3")
    assert len({room_id_for(a, b), room_id_for(a, c), room_id_for(b, c)}) == 3


@pytest.mark.parametrize("value", ["", "solo", "a:", ":b", "a:b:c"])
def test_malformed_room_ids_are_rejected(value):
    with pytest.raises(ValueError):
        RoomId(value)


def test_identity_ids_cannot_contain_the_separator():
    with pytest.raises(ValueError):
        IdentityId("a:b")
