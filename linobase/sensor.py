"""Sensor messages: joystick feedback, satellite fix status and camera info replies."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from linobase.message import Buffer, Message

_JOY_FEEDBACK = struct.Struct("<BBf")
_NAV_SAT_STATUS = struct.Struct("<bH")
_U8 = struct.Struct("<B")


@dataclass
class JoyFeedback(Message):
    """A feedback output on a joystick: an LED, rumble motor or buzzer."""

    msg_type: ClassVar[str] = "sensor_msgs/JoyFeedback"
    md5: ClassVar[str] = "f4dcd73460360d98f36e55ee7f2e46f1"

    TYPE_LED: ClassVar[int] = 0
    TYPE_RUMBLE: ClassVar[int] = 1
    TYPE_BUZZER: ClassVar[int] = 2

    type: int = 0
    id: int = 0
    intensity: float = 0.0

    def serialize(self) -> bytes:
        """Return type and id bytes followed by the float32 intensity.

        Raises ``OverflowError`` for an intensity outside the float32 range.
        """
        return _JOY_FEEDBACK.pack(self.type & 0xFF, self.id & 0xFF, self.intensity)

    @classmethod
    def decode(cls, data: Buffer) -> "JoyFeedback":
        """Read the feedback from the first 6 bytes of ``data``."""
        kind, ident, intensity = cls._unpack(_JOY_FEEDBACK, data, 0)
        return cls(kind, ident, intensity)


@dataclass
class NavSatStatus(Message):
    """The fix status of a satellite receiver and the services it uses."""

    msg_type: ClassVar[str] = "sensor_msgs/NavSatStatus"
    md5: ClassVar[str] = "331cdbddfa4bc96ffc3b9ad98900a54c"

    STATUS_NO_FIX: ClassVar[int] = -1
    STATUS_FIX: ClassVar[int] = 0
    STATUS_SBAS_FIX: ClassVar[int] = 1
    STATUS_GBAS_FIX: ClassVar[int] = 2
    SERVICE_GPS: ClassVar[int] = 1
    SERVICE_GLONASS: ClassVar[int] = 2
    SERVICE_COMPASS: ClassVar[int] = 4
    SERVICE_GALILEO: ClassVar[int] = 8

    status: int = 0
    service: int = 0

    def serialize(self) -> bytes:
        """Return the signed status byte and the 16-bit service mask.

        Both are wrapped to their widths.
        """
        status = (self.status + 128) % 256 - 128
        return _NAV_SAT_STATUS.pack(status, self.service & 0xFFFF)

    @classmethod
    def decode(cls, data: Buffer) -> "NavSatStatus":
        """Read the status from the first 3 bytes of ``data``."""
        status, service = cls._unpack(_NAV_SAT_STATUS, data, 0)
        return cls(status, service)


@dataclass
class SetCameraInfoResponse(Message):
    """The reply to a request to store camera calibration."""

    msg_type: ClassVar[str] = "sensor_msgs/SetCameraInfo"
    md5: ClassVar[str] = "2ec6f3eff0161f4257b808b12bc830c2"

    success: bool = False
    status_message: str = ""

    def serialize(self) -> bytes:
        """Return the success byte followed by the length-prefixed message."""
        return _U8.pack(1 if self.success else 0) + self._pack_string(self.status_message)

    @classmethod
    def decode(cls, data: Buffer) -> "SetCameraInfoResponse":
        """Read the reply from the start of ``data``; any non-zero byte is success."""
        (flag,) = cls._unpack(_U8, data, 0)
        text, _ = cls._unpack_string(data, _U8.size)
        return cls(flag != 0, text)