# nekosurface

Plain-Python building blocks for a small real-time 3D renderer: vector and
matrix math, Vulkan-style projection matrices, axis-aligned bounds, a
Gauss–Seidel solver, whole-file reading and writing, and the pause/step and
frame-rate bookkeeping of a main loop. There are no third-party dependencies.

## Modules

- `nekosurface.vector`: `Vec2`, `Vec3`, `Vec4` (mutable dataclasses with
  indexing, iteration, `+`, `-`, scalar `*`, `dot`, `magnitude`, in-place
  `normalize`, `is_valid`), `VecN` (any length; adding, subtracting or dotting
  vectors of different lengths raises `ValueError`) and the integer pair
  `IVec2`. `Vec3` adds `splat`, `cross`, `length_sqr`, `zero` and `ortho`, which
  returns two unit vectors completing an orthonormal basis. `Vec4` adds the
  in-place component-wise `scale_by` and `divide_by`. Normalizing a zero-length
  vector leaves it unchanged.
- `nekosurface.matrix`: `Mat2`, `Mat3`, `Mat4`, `MatMN` and `MatN`.
  - `Mat3`/`Mat4` offer `zero()`, `identity()`, `transpose`, `determinant`,
    `minor`, `cofactor`, `inverse` (raises `ValueError` for a singular matrix),
    `trace` (the sum of the *squared* diagonal entries), and `*` with a row
    vector, a matrix of the same size or a scalar.
  - `Mat4` builds `orient`, `look_at`, `perspective_opengl`,
    `perspective_vulkan`, `ortho_opengl`, `ortho_vulkan` and `scaling`
    matrices; `scale` post-multiplies in place and `to_list` flattens in
    row-major order.
  - `MatMN` multiplies with `VecN`, `MatMN` or a scalar and raises
    `ValueError` on mismatched sizes. `MatN.from_matmn` accepts only square
    input. `MatN * MatN` gives the element-wise product `a[i][j] * b[j][i]`,
    not the matrix product.
- `nekosurface.bounds`: `Bounds`, an axis-aligned box that starts empty
  (mins at 1e6, maxs at -1e6). `expand` accepts a `Vec3`, another `Bounds` or an
  iterable of points; `does_intersect`, `width_x`, `width_y`, `width_z`, `clear`.
- `nekosurface.lcp`: `lcp_gauss_seidel(a, b)` runs as many Gauss–Seidel sweeps
  as there are unknowns and skips updates that are not finite (for example on
  a zero diagonal); `degrees` and `radians` convert angles.
- `nekosurface.fileio`: `application_directory()` (the working directory at the
  first call, fixed afterwards), `relative_path_to_full_path`,
  `get_file_data` (returns `bytes`, raises `OSError` if the file cannot be
  read) and `save_file_data`.
- `nekosurface.frameloop`: `SimulationClock`, `FpsCounter`, and the `Key` and
  `KeyAction` enums.
  - The clock starts paused. T (on release) toggles pause and Y (on press or
    repeat) requests a single step while paused. R (on release) makes
    `handle_key` return `True` to ask for a scene reset. Escape (on press)
    sets `should_close`.
  - `next_step(dt_us)` caps frames at 33 ms and returns a `FrameStep`. While
    paused that step is 0 s, or 16.667 ms when a single step was requested.
    The step is split into 2 substeps.
  - `record_update` keeps the average and maximum update time.
  - `FpsCounter.tick` recomputes the rate about every 0.3 s, starting at 30.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from nekosurface.vector import Vec3
from nekosurface.matrix import Mat4

view = Mat4.look_at(Vec3(0, -5, 2), Vec3(0, 0, 0), Vec3(0, 0, 1))
proj = Mat4.perspective_vulkan(45.0, 9 / 16, 0.1, 1000.0)
clip = proj * view
uniform_data = clip.transpose().to_list()   # 16 floats
```

```python
from nekosurface.bounds import Bounds
from nekosurface.vector import Vec3

box = Bounds()
box.expand([Vec3(-1, -1, 0), Vec3(2, 3, 4)])
print(box.width_x(), box.width_y(), box.width_z())   # 3.0 4.0 4.0
```

```python
from nekosurface.frameloop import FpsCounter, Key, KeyAction, SimulationClock

clock = SimulationClock()
clock.handle_key(Key.T, KeyAction.RELEASE)   # unpause
step = clock.next_step(50000.0)              # capped to 33 ms
if step.run_physics:
    for _ in range(step.substeps):
        ...                                  # advance by step.substep_seconds

fps = FpsCounter()
print(fps.tick(1 / 60))
```

## What it does not do

This package has no window, input handling or GPU code, so nothing is drawn.
It has no rotation type, no model or texture loading, no camera controller
and no physics bodies or collision detection. Key events and frame durations
must come from the caller's own event loop and timer.