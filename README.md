# alpha

A small library for 3D geometry (vectors, lines, orientations) with a
minimal logger. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Vectors

`alpha.vector.Vector` is an immutable (frozen dataclass) 3D vector with
arithmetic operators.

```python
from alpha.vector import EPSILON, Vector, float_close

a = Vector(1, 0, 0)
b = Vector(0, 1, 0)

a + b              # Vector(x=1, y=1, z=0)
a - b              # Vector(x=1, y=-1, z=0)
2 * a              # Vector(x=2, y=0, z=0)
a * 2              # Vector(x=2, y=0, z=0)
a.dot(b)           # 0
a.cross(b)         # Vector(x=0, y=0, z=1)
Vector(2, 3, 6).length_squared()   # 49
Vector(2, 3, 6).length()           # 7.0

a.rotate_z(90).is_close(b)                      # True
Vector(1, 1, 1).normalised().length()           # approximately 1.0
Vector(1, 1, 1).is_parallel(Vector(2, 2, 2))    # True
```

- `rotate_x`, `rotate_y` and `rotate_z` take angles in degrees and return a
  new vector.
- `is_close` and `float_close` compare against the fixed tolerance
  `EPSILON` (0.0001); `==` compares components exactly.
- `is_parallel` is true when the dot product is within `EPSILON` of the
  product of the lengths, so it only holds for vectors pointing the same way.
- `normalised()` raises `ZeroDivisionError` for the zero vector.

## Lines

`alpha.line.Line` is an immutable pair of a base point and an extension
vector.

```python
from alpha.line import Line
from alpha.vector import Vector

line = Line(Vector(1, 1, 1), Vector(2, 2, 2))
line.finish()      # Vector(x=3, y=3, z=3)
line.is_close(Line(Vector(1, 1, 1), Vector(2, 2, 2.00001)))   # True
```

## Orientations

`alpha.orientation.Orientation` holds a yaw and a pitch in degrees.

```python
from alpha.orientation import Orientation

Orientation(yaw=45, pitch=45).unit_vector()
# approximately Vector(x=0.5, y=0.7071, z=0.5)
```

## Logging

`alpha.logger` writes timestamped, prefixed messages, either in colour to
the terminal or in plain text to a file.

```python
from alpha import logger
from alpha.logger import Logger, Mode

logger.init(Mode.TERMINAL)
logger.log("starting")
logger.warning("low on fuel")
logger.error("engine failure")
logger.success("landed")

with Logger(Mode.FILE, log_dir="logs") as file_logger:
    file_logger.log("written to a file")
    print(file_logger.path)
```

- In file mode the directory (by default `../logs`) is created if needed and
  a file named after the current time (`YYYY-MM-DD_HH:MM:SS.txt`) is opened
  for appending. Writing after `close()` raises `ValueError`.
- In terminal mode lines go to standard output, or to the `stream` passed
  to `Logger`, wrapped in ANSI colour codes.
- Without colour, a line looks like `[LOG] (12:34:56): starting`;
  `Logger.format(colour, prefix, text)` returns the line for a message.
- The module-level `init` only takes effect on its first call; before it is
  called, the module-level functions write to the terminal.

## What this package does not do

It is a library only: it has no command to run, and it does not open a
window or draw anything. Rendering on top of these types is left to the
caller.