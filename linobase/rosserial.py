"""Messages of the serial link protocol: logging, topic set-up and type queries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union

from linobase.message import Buffer, Message

REQUEST_MESSAGE_INFO = "rosserial_msgs/RequestMessageInfo"

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_I32 = struct.Struct("<i")


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


class LogLevel(IntEnum):
    """Severity of a log message."""

    ROSDEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


def _as_level(raw: int) -> Union[LogLevel, int]:
    try:
        return LogLevel(raw)
    except ValueError:
        return raw


@dataclass
class Log(Message):
    """A log line sent from the device, with its severity."""

    msg_type: ClassVar[str] = "rosserial_msgs/Log"
    md5: ClassVar[str] = "11abd731c25933261cd6183bd12d6295"

    level: int = LogLevel.ROSDEBUG
    msg: str = ""

    def serialize(self) -> bytes:
        """Return the level byte followed by the length-prefixed text."""
        return _U8.pack(int(self.level) & 0xFF) + self._pack_string(self.msg)

    @classmethod
    def decode(cls, data: Buffer) -> "Log":
        """Read a log message from the start of ``data``.

        A level that names no ``LogLevel`` is kept as a plain integer.
        """
        (level,) = cls._unpack(_U8, data, 0)
        text, _ = cls._unpack_string(data, _U8.size)
        return cls(_as_level(level), text)


@dataclass
class RequestMessageInfoRequest(Message):
    """A query for the checksum and definition of a message type."""

    msg_type: ClassVar[str] = REQUEST_MESSAGE_INFO
    md5: ClassVar[str] = "dc67331de85cf97091b7d45e5c64ab75"

    type: str = ""

    def serialize(self) -> bytes:
        """Return the length-prefixed type name."""
        return self._pack_string(self.type)

    @classmethod
    def decode(cls, data: Buffer) -> "RequestMessageInfoRequest":
        """Read the type name from the start of ``data``."""
        name, _ = cls._unpack_string(data, 0)
        return cls(name)


@dataclass
class RequestMessageInfoResponse(Message):
    """The answer to a message type query.

    ``md5sum`` holds the checksum carried on the wire; ``md5`` is the
    checksum of this response type itself.
    """

    msg_type: ClassVar[str] = REQUEST_MESSAGE_INFO
    md5: ClassVar[str] = "fe452186a069bed40f09b8628fe5eac8"

    md5sum: str = ""
    definition: str = ""

    def serialize(self) -> bytes:
        """Return the checksum and the definition, each length-prefixed."""
        return self._pack_string(self.md5sum) + self._pack_string(self.definition)

    @classmethod
    def decode(cls, data: Buffer) -> "RequestMessageInfoResponse":
        """Read the checksum and definition from the start of ``data``."""
        md5sum, offset = cls._unpack_string(data, 0)
        definition, _ = cls._unpack_string(data, offset)
        return cls(md5sum, definition)


@dataclass
class TopicInfo(Message):
    """Description of a topic or endpoint exchanged when the link is set up."""

    msg_type: ClassVar[str] = "rosserial_msgs/TopicInfo"
    md5: ClassVar[str] = "0ad51f88fc44892f8c10684077646005"

    ID_PUBLISHER: ClassVar[int] = 0
    ID_SUBSCRIBER: ClassVar[int] = 1
    ID_SERVICE_SERVER: ClassVar[int] = 2
    ID_SERVICE_CLIENT: ClassVar[int] = 4
    ID_PARAMETER_REQUEST: ClassVar[int] = 6
    ID_LOG: ClassVar[int] = 7
    ID_TIME: ClassVar[int] = 10
    ID_TX_STOP: ClassVar[int] = 11

    topic_id: int = 0
    topic_name: str = ""
    message_type: str = ""
    md5sum: str = ""
    buffer_size: int = 0

    def serialize(self) -> bytes:
        """Return the id, three length-prefixed strings and the buffer size.

        The id is wrapped to 16 bits and the buffer size to signed 32 bits.
        """
        return b"".join(
            (
                _U16.pack(self.topic_id & 0xFFFF),
                self._pack_string(self.topic_name),
                self._pack_string(self.message_type),
                self._pack_string(self.md5sum),
                _I32.pack(_wrap_int32(self.buffer_size)),
            )
        )

    @classmethod
    def decode(cls, data: Buffer) -> "TopicInfo":
        """Read a topic description from the start of ``data``."""
        (topic_id,) = cls._unpack(_U16, data, 0)
        offset = _U16.size
        topic_name, offset = cls._unpack_string(data, offset)
        message_type, offset = cls._unpack_string(data, offset)
        md5sum, offset = cls._unpack_string(data, offset)
        (buffer_size,) = cls._unpack(_I32, data, offset)
        return cls(topic_id, topic_name, message_type, md5sum, buffer_size)