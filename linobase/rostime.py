"""Time stamps and signed durations in seconds and nanoseconds."""

from __future__ import annotations

import math
from dataclasses import dataclass

NSEC_PER_SEC = 1_000_000_000


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _wrap_uint32(value: int) -> int:
    return value % 2**32


def normalize_sec_nsec_signed(sec: int, nsec: int) -> tuple[int, int]:
    """Carry nanoseconds into seconds until ``0 <= nsec <= 10**9``.

    A value of exactly one second of nanoseconds is left as it is.
    """
    if nsec > NSEC_PER_SEC:
        carry = (nsec - 1) // NSEC_PER_SEC
        nsec -= carry * NSEC_PER_SEC
        sec += carry
    elif nsec < 0:
        borrow = -(nsec // NSEC_PER_SEC)
        nsec += borrow * NSEC_PER_SEC
        sec -= borrow
    return _wrap_int32(sec), _wrap_int32(nsec)


@dataclass
class Duration:
    """A signed span of time held as 32-bit seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0

    def __iadd__(self, other: "Duration") -> "Duration":
        self.sec, self.nsec = normalize_sec_nsec_signed(
            _wrap_int32(self.sec + other.sec), _wrap_int32(self.nsec + other.nsec)
        )
        return self

    def __isub__(self, other: "Duration") -> "Duration":
        self.sec, self.nsec = normalize_sec_nsec_signed(
            _wrap_int32(self.sec - other.sec), _wrap_int32(self.nsec - other.nsec)
        )
        return self

    def __imul__(self, scale: float) -> "Duration":
        # Each field is scaled and truncated on its own; fractions of a
        # second do not spill into the nanoseconds.
        self.sec, self.nsec = normalize_sec_nsec_signed(
            _wrap_int32(int(self.sec * scale)), _wrap_int32(int(self.nsec * scale))
        )
        return self


@dataclass
class Time:
    """An unsigned time stamp held as 32-bit seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        carry, self.nsec = divmod(self.nsec, NSEC_PER_SEC)
        self.sec = _wrap_uint32(self.sec + carry)

    def to_sec(self) -> float:
        """Return the time stamp in seconds."""
        return float(self.sec) + 1e-9 * float(self.nsec)

    @classmethod
    def from_sec(cls, t: float) -> "Time":
        """Build a time stamp from seconds, rounding to the nearest nanosecond."""
        if not math.isfinite(t) or t < 0 or t >= 2**32:
            raise ValueError(f"time {t!r} is out of range for an unsigned 32-bit stamp")
        sec = math.floor(t)
        nsec = math.floor((t - sec) * 1e9 + 0.5)
        return cls(sec, nsec)

    def to_nsec(self) -> int:
        """Return the time stamp in nanoseconds, truncated to 32 bits."""
        return _wrap_uint32(self.sec * NSEC_PER_SEC + self.nsec)