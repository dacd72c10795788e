"""Base message type and float64 helpers for targets without native doubles."""

from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from typing import ClassVar, Union

Buffer = Union[bytes, bytearray, memoryview]

_U32 = struct.Struct("<I")
_F32 = struct.Struct("<f")

_AVR_FLOAT64_SIZE = 8
_EXPONENT_SHIFT = 1023 - 127


class Message(ABC):
    """A message with a little-endian wire form.

    Subclasses set ``msg_type`` and ``md5`` and implement ``serialize`` and
    ``decode``.
    """

    msg_type: ClassVar[str] = ""
    md5: ClassVar[str] = ""

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the wire form of this message."""

    @classmethod
    @abstractmethod
    def decode(cls, data: Buffer) -> "Message":
        """Build a message from its wire form; trailing bytes are ignored."""

    @staticmethod
    def _pack_string(text: str) -> bytes:
        raw = text.encode("utf-8")
        return _U32.pack(len(raw)) + raw

    @staticmethod
    def _unpack_string(data: Buffer, offset: int) -> tuple[str, int]:
        """Read a length-prefixed string; return it and the offset after it."""
        try:
            (length,) = _U32.unpack_from(data, offset)
        except struct.error as exc:
            raise ValueError(f"truncated string length at offset {offset}") from exc
        start = offset + _U32.size
        end = start + length
        if end > len(data):
            raise ValueError(
                f"string of {length} bytes at offset {offset} runs past the end of the data"
            )
        return bytes(data[start:end]).decode("utf-8"), end

    @staticmethod
    def _unpack(layout: struct.Struct, data: Buffer, offset: int) -> tuple:
        try:
            return layout.unpack_from(data, offset)
        except struct.error as exc:
            raise ValueError(
                f"need {layout.size} bytes at offset {offset}, have {max(len(data) - offset, 0)}"
            ) from exc


def _float32_bits(value: float) -> int:
    try:
        packed = _F32.pack(value)
    except OverflowError:
        packed = _F32.pack(math.copysign(math.inf, value))
    return int.from_bytes(packed, "little")


def serialize_avr_float64(value: float) -> bytes:
    """Widen a 32-bit float to the 8 bytes of a little-endian float64.

    The value is first reduced to single precision; the exponent is rebased
    from 127 to 1023 unless it is zero, and the sign follows ``value < 0``.
    """
    bits = _float32_bits(value)
    exponent = (bits >> 23) & 0xFF
    if exponent != 0:
        exponent += _EXPONENT_SHIFT
    out = bytearray(_AVR_FLOAT64_SIZE)
    out[3] = (bits << 5) & 0xFF
    out[4] = (bits >> 3) & 0xFF
    out[5] = (bits >> 11) & 0xFF
    out[6] = ((exponent << 4) & 0xF0) | ((bits >> 19) & 0x0F)
    out[7] = (exponent >> 4) & 0x7F
    if value < 0:
        out[7] |= 0x80
    return bytes(out)


def deserialize_avr_float64(data: Buffer) -> float:
    """Narrow the first 8 bytes of a little-endian float64 to a 32-bit float.

    The mantissa is truncated, not rounded, as the firmware does.
    """
    if len(data) < _AVR_FLOAT64_SIZE:
        raise ValueError(f"need {_AVR_FLOAT64_SIZE} bytes, have {len(data)}")
    b3, b4, b5, b6, b7 = (int(b) for b in bytes(data[3:8]))
    bits = (b3 >> 5) & 0x07
    bits |= b4 << 3
    bits |= b5 << 11
    bits |= (b6 & 0x0F) << 19
    exponent = ((b6 & 0xF0) >> 4) | ((b7 & 0x7F) << 4)
    if exponent != 0:
        bits |= ((exponent - _EXPONENT_SHIFT) << 23) & 0xFFFFFFFF
    bits |= (b7 & 0x80) << 24
    bits &= 0xFFFFFFFF
    (result,) = _F32.unpack(bits.to_bytes(4, "little"))
    return result