"""Control loops, encoder decoding, time types and message codecs for a robot base."""

__version__ = "0.1.0"

__all__ = [
    "arduino_msgs",
    "encoder",
    "geometry",
    "message",
    "motor",
    "pid",
    "quadrature",
    "rosserial",
    "rostime",
    "sensor",
    "std",
]