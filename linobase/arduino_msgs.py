"""Messages specific to the base controller firmware."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from linobase.message import Buffer, Message

_DIFF_VEL = struct.Struct("<2f")


@dataclass
class CmdDiffVel(Message):
    """Target speeds for the left and right wheels as float32 values."""

    msg_type: ClassVar[str] = "ros_arduino_msgs/CmdDiffVel"
    md5: ClassVar[str] = "3a927990ab5d5c3d628e2d52b8533e52"

    left: float = 0.0
    right: float = 0.0

    def serialize(self) -> bytes:
        """Return left then right as little-endian float32 values.

        Raises ``OverflowError`` for a speed outside the float32 range.
        """
        return _DIFF_VEL.pack(self.left, self.right)

    @classmethod
    def decode(cls, data: Buffer) -> "CmdDiffVel":
        """Read the two speeds from the first 8 bytes of ``data``."""
        left, right = cls._unpack(_DIFF_VEL, data, 0)
        return cls(left, right)