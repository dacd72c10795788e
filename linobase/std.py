"""Standard messages: RGBA colours and unsigned 64-bit integers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from linobase.message import Buffer, Message

_COLOR = struct.Struct("<4f")
_UINT64 = struct.Struct("<Q")
_UINT64_MODULUS = 2**64


@dataclass
class ColorRGBA(Message):
    """A colour with red, green, blue and alpha as float32 components."""

    msg_type: ClassVar[str] = "std_msgs/ColorRGBA"
    md5: ClassVar[str] = "a29a96539573343b1310c73607334b00"

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def serialize(self) -> bytes:
        """Return the four components as little-endian float32 values.

        Raises ``OverflowError`` for a component outside the float32 range.
        """
        return _COLOR.pack(self.r, self.g, self.b, self.a)

    @classmethod
    def decode(cls, data: Buffer) -> "ColorRGBA":
        """Read a colour from the first 16 bytes of ``data``."""
        r, g, b, a = cls._unpack(_COLOR, data, 0)
        return cls(r, g, b, a)


@dataclass
class UInt64(Message):
    """A single unsigned 64-bit integer."""

    msg_type: ClassVar[str] = "std_msgs/UInt64"
    md5: ClassVar[str] = "1b2a79973e8bf53d7b53acb71299cb57"

    data: int = 0

    def serialize(self) -> bytes:
        """Return the value, wrapped to 64 bits, as 8 little-endian bytes."""
        return _UINT64.pack(self.data % _UINT64_MODULUS)

    @classmethod
    def decode(cls, data: Buffer) -> "UInt64":
        """Read the value from the first 8 bytes of ``data``."""
        (value,) = cls._unpack(_UINT64, data, 0)
        return cls(value)