"""Geometry messages: orientation quaternions and three-component vectors."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from linobase.message import Buffer, Message

_QUATERNION = struct.Struct("<4d")
_VECTOR3 = struct.Struct("<3d")


@dataclass
class Quaternion(Message):
    """An orientation as four float64 components."""

    msg_type: ClassVar[str] = "geometry_msgs/Quaternion"
    md5: ClassVar[str] = "a779879fadf0160734f906b8c19c7004"

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def serialize(self) -> bytes:
        """Return the four components as little-endian float64 values."""
        return _QUATERNION.pack(self.x, self.y, self.z, self.w)

    @classmethod
    def decode(cls, data: Buffer) -> "Quaternion":
        """Read a quaternion from the first 32 bytes of ``data``."""
        x, y, z, w = cls._unpack(_QUATERNION, data, 0)
        return cls(x, y, z, w)


@dataclass
class Vector3(Message):
    """A vector in free space as three float64 components."""

    msg_type: ClassVar[str] = "geometry_msgs/Vector3"
    md5: ClassVar[str] = "4a842b65f413084dc2b10fb484ea7f17"

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def serialize(self) -> bytes:
        """Return the three components as little-endian float64 values."""
        return _VECTOR3.pack(self.x, self.y, self.z)

    @classmethod
    def decode(cls, data: Buffer) -> "Vector3":
        """Read a vector from the first 24 bytes of ``data``."""
        x, y, z = cls._unpack(_VECTOR3, data, 0)
        return cls(x, y, z)