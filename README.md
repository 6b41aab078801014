# motobridge

Controller-side logic for bridging an industrial robot controller to a
robotics middleware, written as plain Python with no third-party
dependencies.

## What it provides

- `motobridge.quaternion`: convert ZYX Euler angles given in 0.0001-degree
  units to a `Quaternion` and back (`euler_to_quaternion`,
  `quaternion_to_euler`, `clamp`). Angles coming back are truncated
  toward zero.
- `motobridge.conversion`: turn an `MpCoord` (micrometres and
  0.0001-degree angles) into a `Pose` or `Transform` made of a `Vector3`
  in metres and a `Quaternion` (`coord_to_pose`, `coord_to_transform`).
- `motobridge.calibration`: parse the content of a robot calibration
  data file (`RBCALIB.DAT`) into `CalibrationData` records keyed by
  zero-based file number (`parse_calibration`), and look them up through
  a `CalibrationStore` (`CalibrationStore.from_text`,
  `CalibrationStore.get`, which raises `KeyError` for a missing file).
  Malformed content raises `CalibrationParseError`.
- `motobridge.io_rules`: per-platform I/O address ranges (`Platform`,
  `IoLimits.for_platform`), address and value validation
  (`is_valid_read_address`, `is_valid_write_address`,
  `is_valid_write_value`, with `IoAccessSize` selecting bit, group or
  register access) and result codes with readable messages
  (`IoResultCode`, `result_message`).
- `motobridge.io_service`: `IoService` reads and writes single bits,
  eight-bit groups and M registers through an `IoBackend` you supply,
  returning an `IoResponse` with `success`, `result_code`, `message` and
  `value`. A backend signals a controller error by raising `OSError`.
- `motobridge.reset_error`: `reset_error` clears errors and alarms on a
  `Controller` you supply and reports a `ServiceResult` holding a
  `MotionReadiness` code and a message. It only acts in remote mode,
  refuses major alarms and polls until an alarm reset takes effect or
  the timeout passes.
- `motobridge.select_tool`: `select_motion_tool` sets the motion tool of
  one control group in a list of tools, returning a
  `SelectToolResponse` with a `SelectionResult`.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Orientation and pose conversion:

```python
from motobridge.conversion import MpCoord, coord_to_transform
from motobridge.quaternion import euler_to_quaternion, quaternion_to_euler

q = euler_to_quaternion(0, 0, 900000)      # 90 degrees about Z
rx, ry, rz = quaternion_to_euler(q)         # back to 0.0001-degree units

t = coord_to_transform(MpCoord(x=1000, y=0, z=500000, rx=0, ry=0, rz=900000))
print(t.translation, t.rotation)
```

Address validation for a controller family:

```python
from motobridge.io_rules import IoAccessSize, IoLimits, Platform, is_valid_read_address

limits = IoLimits.for_platform(Platform.YRC1000)
is_valid_read_address(10010, IoAccessSize.BIT, limits)   # True
```

I/O access through a backend:

```python
from motobridge.io_rules import Platform
from motobridge.io_service import IoService


class MemoryBackend:
    def __init__(self):
        self.signals = {}

    def read(self, addresses):
        return [self.signals.get(a, 0) for a in addresses]

    def write(self, values):
        self.signals.update(values)


service = IoService(MemoryBackend(), Platform.YRC1000)
service.write_group(1001, 0b101)            # bits 10010..10017
print(service.read_group(1001).value)       # 5
print(service.read_single(10011).value)     # 0
```

## What it does not do

The package holds the decision logic only. It does not talk to a
controller or to any middleware by itself: there is no network
transport, no publishing of joint states or coordinate frames, and no
starting, stopping or feeding of trajectory motion. Controller access
is left to the `Controller` and `IoBackend` objects you pass in, and
calibration data is parsed from text you have already read. There is no
command-line program.