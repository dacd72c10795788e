"""Decoding of quadrature encoder signals into a signed position."""

from __future__ import annotations

from dataclasses import dataclass

# Position change indexed by (new pin2, new pin1, old pin2, old pin1) as bits 3..0.
# Moves of two assume only pin1 edges were missed.
_DELTAS = (0, 1, -1, 2, -1, 0, -2, 1, 1, -2, 0, -1, 2, -1, 1, 0)


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def decode_transition(state: int, pin1: bool, pin2: bool) -> tuple[int, int]:
    """Return the next state and the position change for new pin readings.

    ``state`` holds the previous pin1 level in bit 0 and pin2 in bit 1.
    """
    index = state & 3
    if pin1:
        index |= 4
    if pin2:
        index |= 8
    return index >> 2, _DELTAS[index]


@dataclass
class QuadratureState:
    """The last pin levels and the accumulated 32-bit signed position."""

    state: int = 0
    position: int = 0

    def update(self, pin1: bool, pin2: bool) -> int:
        """Apply new pin readings and return the updated position."""
        self.state, delta = decode_transition(self.state, pin1, pin2)
        self.position = _wrap_int32(self.position + delta)
        return self.position