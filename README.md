# fixengine

Building blocks for a small game engine that works in integer fixed-point
arithmetic, as consoles without a floating-point unit do. Values follow
32-bit two's complement rules. Most use 20.12 fixed point, so `4096`
stands for `1.0`, and a full turn of an angle is `4096` units.

## What is inside

- `fixengine.fixed` holds the scalar fixed-point helpers:
  - multiplication and division in 16.16 and 20.12 (`fix16_mul`, `fix16_div`,
    `fix12_mul`, `fix12_smul`, `fix12_div`); the divisions raise
    `ZeroDivisionError` for a zero divisor;
  - linear interpolation (`fix12_lerp`, and the low-precision, saturating
    `gte_lerp`);
  - table-driven `fix12_arcsin` and `fix12_arccos`, which raise `ValueError`
    outside the table's range;
  - `fxpt_atan2`, a 16-bit four-quadrant arctangent that returns 1/65536ths
    of a turn;
  - `vec_mag`, the integer length of a 2D vector;
  - `short_angle_dist`, the signed shortest distance between two angles.
- `fixengine.vectors` has a frozen `Vector` dataclass (`vx`, `vy`, `vz`). It
  comes with the dot products `dot_product_xyz`, `dot_product_xz`,
  `dot_product_xz_ex`, `dot_product_xz_ex2`, `dot_product_xy_ex2`,
  `dot_product_2d` and `dot_product_2d_raw`, and with `cross_product` and
  `svector_lerp`. It also has the distance helpers `distance_xz`,
  `distance_xz_sq` and `distance_xyz`.
- `fixengine.quaternion` has the `Quaternion` and `Matrix` types.
  `Matrix.identity()` gives the identity matrix, and `Matrix.compose(other)`
  multiplies the rotations and transforms the translation. The module also
  has `quaternion_mul`, `normalize_quaternion`, `quaternion_to_matrix` and
  `quaternion_slerp`. The last blends component by component and takes the
  shorter way round.
- `fixengine.arena` provides `Arena`, a first-fit block allocator over a
  simulated address range. Each block has a size header and footer.
  - `malloc` returns a block address, or raises `MemoryError` when no block fits.
  - `free` marks a block free but does not merge it with its neighbours.
  - `release` empties the arena. Allocating after that raises `RuntimeError`.
  - `header` reads the raw word stored at an address.
- `fixengine.lstack` provides `LinearStack`, a bump allocator. It has `alloc`,
  which raises `MemoryError` when full, and `free_all` and `free_bytes`. With
  `save_position` and `restore_position` it can keep one saved position and
  return to it.
- `fixengine.clip` holds the screen-space off-screen tests:
  - the `ClipFlag` outcodes and the `ClipRect` rectangle;
  - `test_clip`, `test_clip_fixed`, `tri_clip`, `quad_clip` and `tri_clip_rect`.

  `quad_clip` also checks the diagonals, so a quad that spans the whole
  screen is not reported as off-screen.
- `fixengine.skeleton` holds the bone hierarchy: `Bone`, `Skeleton` and the
  `NO_BONE` link marker. `Skeleton.walk()` yields `(bone, parent)` pairs
  depth first. `Skeleton.to_world(base, anim)` computes the local-to-world
  matrix of every bone for one animation frame. In that frame the root
  position comes first, followed by one quaternion per bone.
- `fixengine.animation` blends two such frames with `interpolate_position`
  and `interpolate_frames`.

## What it does not do

The package does arithmetic and bookkeeping only. It does not draw anything.
It does not transform vertices to the screen, and it builds no display lists.
It reads no model or animation files, and it does not run a game loop. The
allocators hand out addresses in a simulated range; they do not manage real
memory.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## A short example

```python
from fixengine.fixed import fix12_mul, fix12_lerp
from fixengine.quaternion import Quaternion, quaternion_slerp, quaternion_to_matrix

half = fix12_mul(4096, 2048)          # 1.0 * 0.5 -> 2048
mid = fix12_lerp(0, 4096, 2048)       # halfway between 0 and 1 -> 2048

a = Quaternion(0, 0, 0, 4096)
b = Quaternion(0, 2896, 0, 2896)
q = quaternion_slerp(a, b, 2048)
rotation = quaternion_to_matrix(q)
```

```python
from fixengine.lstack import LinearStack

stack = LinearStack(0x1000, 1024)
first = stack.alloc(10)
stack.save_position()
stack.alloc(100)
stack.restore_position()
print(stack.free_bytes())             # 1016
```