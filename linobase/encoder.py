"""Quadrature encoders read by polling or from pin-change interrupts."""

from __future__ import annotations

import threading
import time
from typing import Callable, Iterable, Optional, Protocol

from linobase.quadrature import QuadratureState

PinReader = Callable[[int], bool]

_SETTLE_SECONDS = 0.002


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


class _Updatable(Protocol):
    def update(self) -> int: ...


class _EncoderState:
    """The pins of one encoder, its decoder and the lock that guards them."""

    def __init__(self, pin1: int, pin2: int, read_pin: PinReader) -> None:
        self.pin1 = pin1
        self.pin2 = pin2
        self.read_pin = read_pin
        self.lock = threading.RLock()
        self.decoder = QuadratureState(
            state=(1 if read_pin(pin1) else 0) | (2 if read_pin(pin2) else 0)
        )

    def update(self) -> int:
        with self.lock:
            return self.decoder.update(
                bool(self.read_pin(self.pin1)), bool(self.read_pin(self.pin2))
            )


class InterruptTable:
    """The interrupt-capable pins of a board and what each interrupt updates.

    ``interrupt_pins`` lists the pin of interrupt 0, interrupt 1 and so on.
    """

    def __init__(self, interrupt_pins: Iterable[int]) -> None:
        self._numbers: dict[int, int] = {}
        for number, pin in enumerate(interrupt_pins):
            if pin in self._numbers:
                raise ValueError(f"pin {pin} is listed for more than one interrupt")
            self._numbers[pin] = number
        self._args: dict[int, _Updatable] = {}

    def attach(self, pin: int, state: _Updatable) -> bool:
        """Route the interrupt of ``pin`` to ``state``.

        Returns False, attaching nothing, when ``pin`` has no interrupt.
        """
        number = self._numbers.get(pin)
        if number is None:
            return False
        self._args[number] = state
        return True

    def fire(self, pin: int) -> int:
        """Run the handler for a level change on ``pin`` and return the new position."""
        number = self._numbers.get(pin)
        if number is None:
            raise KeyError(f"pin {pin} has no interrupt")
        try:
            state = self._args[number]
        except KeyError:
            raise KeyError(f"nothing is attached to the interrupt of pin {pin}") from None
        return state.update()


class Encoder:
    """A quadrature encoder on two pins.

    Each pin whose interrupt can be attached in ``interrupts`` updates the
    position when fired; unless both are attached, ``read`` polls the pins.
    The initial pin levels are read after ``settle_time`` seconds.
    """

    def __init__(
        self,
        pin1: int,
        pin2: int,
        read_pin: PinReader,
        interrupts: Optional[InterruptTable] = None,
        *,
        settle_time: float = _SETTLE_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        sleep(settle_time)
        self._state = _EncoderState(pin1, pin2, read_pin)
        self.interrupts_in_use = 0
        if interrupts is not None:
            self.interrupts_in_use = int(interrupts.attach(pin1, self._state))
            self.interrupts_in_use += int(interrupts.attach(pin2, self._state))

    @property
    def pins(self) -> tuple[int, int]:
        """The two pins of the encoder."""
        return self._state.pin1, self._state.pin2

    def update(self) -> int:
        """Sample both pins, apply the change and return the position."""
        return self._state.update()

    def read(self) -> int:
        """Return the position, sampling the pins first unless both are on interrupts."""
        with self._state.lock:
            if self.interrupts_in_use < 2:
                self._state.update()
            return self._state.decoder.position

    def write(self, position: int) -> None:
        """Set the position to ``position``, wrapped to 32 bits."""
        with self._state.lock:
            self._state.decoder.position = _wrap_int32(position)