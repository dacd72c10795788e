import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linobase.geometry import Quaternion, Vector3

finite = st.floats(allow_nan=False)


def test_default_quaternion_is_all_zero_bytes():
    assert Quaternion().serialize() == bytes(32)


def test_default_vector_is_all_zero_bytes():
    assert Vector3().serialize() == bytes(24)


def test_vector_fields_are_little_endian_float64_in_order():
    data = Vector3(1.0, 2.0, 3.0).serialize()
    assert struct.unpack("<3d", data) == (1.0, 2.0, 3.0)


def test_quaternion_unit_w_wire_bytes():
    data = Quaternion(w=1.0).serialize()
    assert data[:24] == bytes(24)
    assert data[24:] == b"\x00\x00\x00\x00\x00\x00\xf0\x3f"


@given(finite, finite, finite, finite)
def test_quaternion_round_trip(x, y, z, w):
    q = Quaternion(x, y, z, w)
    assert Quaternion.decode(q.serialize()) == q


@given(finite, finite, finite)
def test_vector_round_trip(x, y, z):
    v = Vector3(x, y, z)
    assert Vector3.decode(v.serialize()) == v


def test_decode_ignores_trailing_bytes():
    v = Vector3(-0.5, 4.0, 8.25)
    assert Vector3.decode(v.serialize() + b"\xaa\xbb") == v


def test_decode_from_bytearray_and_memoryview():
    q = Quaternion(0.25, 0.5, 0.75, 1.0)
    raw = q.serialize()
    assert Quaternion.decode(bytearray(raw)) == q
    assert Quaternion.decode(memoryview(raw)) == q


def test_truncated_quaternion_raises():
    with pytest.raises(ValueError):
        Quaternion.decode(bytes(31))


def test_truncated_vector_raises():
    with pytest.raises(ValueError):
        Vector3.decode(bytes(23))


def test_type_names():
    assert Quaternion().msg_type == "geometry_msgs/Quaternion"
    assert Vector3().msg_type == "geometry_msgs/Vector3"
    assert Vector3.md5 == "4a842b65f413084dc2b10fb484ea7f17"