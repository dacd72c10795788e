# linobase

Building blocks for a small differential-drive robot base, in plain Python with no
runtime dependencies.

## What is in it

- `linobase.pid` – `PID(min_val, max_val, kp, ki, kd)`, a discrete PID controller.
  `compute(setpoint, measured_value)` advances one step and returns the output clamped to
  `[min_val, max_val]`; the integral is reset when both the setpoint and the error are
  zero. `update_constants(kp, ki, kd)` replaces the gains and keeps the accumulated state.
- `linobase.motor` – `Motor`, driven through an L298 (when a `pwm_pin` is given) or a
  BTS7960 (when it is not), as told by `Motor.driver` (a `MotorDriver`). The motor writes
  to a `PinOutput` you implement (`set_output`, `digital_write`, `analog_write`).
  `spin(pwm)` drives it, the sign picking the direction; `update_speed(encoder_ticks)`
  recomputes and returns `rpm` from the ticks since the previous call, using a
  millisecond clock (monotonic by default, or any `clock` callable). It raises
  `ZeroDivisionError` if no time has passed, and `counts_per_rev` must not be zero.
- `linobase.quadrature` – `decode_transition(state, pin1, pin2)` returns the next state
  and the position change for new pin levels; `QuadratureState.update(pin1, pin2)` keeps
  a 32-bit signed position.
- `linobase.encoder` – `Encoder(pin1, pin2, read_pin, interrupts=None)` reads the pins
  through the `read_pin` callable you give it. An `InterruptTable` lists which pin each
  interrupt belongs to; `attach` routes a pin's interrupt to an encoder and `fire(pin)`
  runs its handler. `Encoder.read()` polls the pins unless both are attached to
  interrupts; `Encoder.write(position)` sets the position; `Encoder.update()` samples
  both pins once.
- `linobase.rostime` – `Time` (unsigned seconds and nanoseconds, with `to_sec`,
  `from_sec` and `to_nsec`) and `Duration` (signed, with `+=`, `-=` and `*=`), plus
  `normalize_sec_nsec_signed(sec, nsec)`.
- `linobase.message` – the `Message` base class with `serialize()` and the class method
  `decode(data)`, each type carrying `msg_type` and `md5`. `serialize_avr_float64` and
  `deserialize_avr_float64` carry a 32-bit float in the 8 bytes of a float64 field.
- Message types:
  - `linobase.geometry`: `Quaternion`, `Vector3`
  - `linobase.std`: `ColorRGBA`, `UInt64`
  - `linobase.arduino_msgs`: `CmdDiffVel`
  - `linobase.rosserial`: `Log` with `LogLevel`, `TopicInfo`,
    `RequestMessageInfoRequest`, `RequestMessageInfoResponse`
  - `linobase.sensor`: `JoyFeedback`, `NavSatStatus`, `SetCameraInfoResponse`

  `decode` raises `ValueError` when the data is too short.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A PID loop whose output stays within the limits:

```python
from linobase.pid import PID

pid = PID(-255, 255, 0.6, 0.3, 0.5)
pwm = pid.compute(120.0, 100.0)
assert -255 <= pwm <= 255
```

Messages round-trip through their little-endian wire form:

```python
from linobase.geometry import Vector3

data = Vector3(1.0, 2.0, 3.0).serialize()
assert Vector3.decode(data) == Vector3(1.0, 2.0, 3.0)
```

An encoder polled from a table of pin levels:

```python
from linobase.encoder import Encoder

levels = {2: False, 3: False}
enc = Encoder(2, 3, levels.__getitem__, settle_time=0)
levels[2] = True
assert enc.read() == -1
```

The same encoder driven by interrupts instead:

```python
from linobase.encoder import Encoder, InterruptTable

levels = {2: False, 3: False}
table = InterruptTable([2, 3])
enc = Encoder(2, 3, levels.__getitem__, table, settle_time=0)
levels[2] = True
table.fire(2)
assert enc.read() == -1
```

## What it does not do

The package has no command and does not talk to hardware or a serial port by itself:
pins are reached only through the `PinOutput` and `read_pin` objects you pass in, and
messages are turned into and out of bytes but not framed, sent or received. There is no
node, publisher or subscriber layer.