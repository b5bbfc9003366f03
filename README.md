# countryguess

Building blocks for a "find the country on the globe" puzzle: vector and
matrix maths for turning a globe and a camera, button and mouse state with
callbacks, and a handful of utilities. It needs nothing beyond the standard
library.

## Modules

- `countryguess.vectors` – immutable `Vector2`, `Vector3` and `Vector4` with
  arithmetic, `length`, `normalize`, `dot`, `angle`, `reflect`, and (for
  `Vector3`) `cross` and `rotate`; plus `to_radians`, `to_degrees`,
  `to_float_color` and `to_byte_color`.
- `countryguess.matrices` – an immutable row-major `Matrix` with
  `transpose`, `minor`, `cofactor`, `determinant`, `adjoint` and `inverse`
  (a singular matrix inverts to the identity), and the square types
  `Matrix2`, `Matrix3` and `Matrix4`. `Matrix3` builds 2D translation,
  rotation and scaling; `Matrix4` builds 3D translation, rotation (Z·Y·X),
  scaling, `perspective`, `orthographic` and `look_at` matrices.
- `countryguess.mathutil` – `line_x`, `line_y`, `normalize`, `minmax`,
  `to_quaternion` and `to_euler`.
- `countryguess.keys` – `Key`, `Keyboard` and `Mouse`, which track button
  state and run `on_press`, `on_down` and `on_release` callbacks.
- `countryguess.rng` – random booleans, bytes, colours, ints, floats,
  letters, strings and vectors.
- `countryguess.encryptor` – `Encryptor`, a repeating-key XOR scrambler with
  five keys of distinct lengths; `decrypt` undoes `encrypt`.
- `countryguess.timing` – `get_interval`, `wait` (busy), `sleep`, `Date` and
  `Timer`.
- `countryguess.files` – `get_extension`, `get_files`, `read_string`,
  `write_string`, `append_string` and `BinaryFile`, whose `seek(-1)` means
  the end of the file.
- `countryguess.network` – `Socket`, an IPv4 TCP socket that listens,
  accepts, connects, sends and receives.
- `countryguess.web` – `download_website(url, buffer_size=65536)`.

Angles are in degrees throughout.

## Examples

```python
from countryguess.vectors import Vector3
from countryguess.matrices import Matrix4

m = Matrix4.rotation(Vector3(0.0, 90.0, 0.0))
print(m.determinant())   # about 1.0
print(m.inverse())
```

```python
from countryguess.keys import Keyboard, Mouse

keyboard = Keyboard()
keyboard.r.on_press = lambda: print("restart")
keyboard.update_value(ord("R"), True)   # prints "restart"

mouse = Mouse()
mouse.update_position((400, 300))
print(mouse.normalized_position((800, 600)))   # (0.00, 0.00)
```

```python
from countryguess.encryptor import Encryptor

enc = Encryptor()
secret_bytes = enc.encrypt(b"hello")
assert enc.decrypt(secret_bytes) == b"hello"
```

## What this package does not do

It holds no country outlines, no game rules or scoring, and draws no maps,
windows or 3D scenes. `Keyboard` and `Mouse` do not read a real device:
input events have to be passed in through `update_value`,
`update_position` and `update_scroll`.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.