"""Integer vectors and the fixed-point vector operations used by the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fixengine.fixed import _i16, _i32, fix12_mul, gte_lerp

__all__ = [
    "Vector",
    "dot_product_xyz",
    "dot_product_xz",
    "dot_product_xz_ex",
    "dot_product_xz_ex2",
    "dot_product_xy_ex2",
    "dot_product_2d",
    "dot_product_2d_raw",
    "cross_product",
    "svector_lerp",
    "distance_xz",
    "distance_xz_sq",
    "distance_xyz",
]


@dataclass(frozen=True)
class Vector:
    """A three-component integer vector (20.12 or plain integer units)."""

    vx: int = 0
    vy: int = 0
    vz: int = 0


def dot_product_xyz(a: Vector, b: Vector) -> int:
    """20.12 dot product of two 16-bit vectors, truncated to 16 bits."""
    total = _i32(
        _i16(a.vx) * _i16(b.vx) + _i16(a.vy) * _i16(b.vy) + _i16(a.vz) * _i16(b.vz)
    )
    return _i16(total >> 12)


def dot_product_xz(a: Vector, b: Vector) -> int:
    """20.12 dot product on the XZ plane, truncated to 16 bits."""
    total = _i32(_i32(a.vx) * _i16(b.vx) + _i32(a.vz) * _i16(b.vz))
    return _i16(total >> 12)


def dot_product_xz_ex(a: Vector, b: Vector) -> int:
    """Unscaled 32-bit dot product on the XZ plane."""
    return _i32(_i32(a.vx) * _i16(b.vx) + _i32(a.vz) * _i16(b.vz))


def dot_product_xz_ex2(a: Vector, b: Vector) -> int:
    """XZ dot product with each term scaled back by ``fix12_mul``."""
    return _i32(fix12_mul(a.vx, _i16(b.vx)) + fix12_mul(a.vz, _i16(b.vz)))


def dot_product_xy_ex2(a: Vector, b: Vector) -> int:
    """XY dot product with each term scaled back by ``fix12_mul``."""
    return _i32(fix12_mul(a.vx, _i16(b.vx)) + fix12_mul(a.vy, _i16(b.vy)))


def dot_product_2d(ax: int, ay: int, bx: int, by: int) -> int:
    """Sum ``ax*ay + bx*by`` in 20.12, truncated to 16 bits."""
    return _i16(dot_product_2d_raw(ax, ay, bx, by) >> 12)


def dot_product_2d_raw(ax: int, ay: int, bx: int, by: int) -> int:
    """Unscaled 32-bit sum ``ax*ay + bx*by`` of 16-bit inputs."""
    return _i32(_i16(ax) * _i16(ay) + _i16(bx) * _i16(by))


def cross_product(v0: Vector, v1: Vector) -> Vector:
    """20.12 cross product of two 16-bit vectors, with 32-bit components."""
    x0, y0, z0 = _i16(v0.vx), _i16(v0.vy), _i16(v0.vz)
    x1, y1, z1 = _i16(v1.vx), _i16(v1.vy), _i16(v1.vz)
    return Vector(
        _i32(y0 * z1 - z0 * y1) >> 12,
        _i32(z0 * x1 - x0 * z1) >> 12,
        _i32(x0 * y1 - y0 * x1) >> 12,
    )


def svector_lerp(a: Vector, b: Vector, t: int) -> Vector:
    """Fast, low-accuracy component-wise interpolation by a 4.12 factor."""
    return Vector(
        _i16(gte_lerp(a.vx, _i16(b.vx), t)),
        _i16(gte_lerp(a.vy, _i16(b.vy), t)),
        _i16(gte_lerp(a.vz, _i16(b.vz), t)),
    )


def _isqrt32(value: int) -> int:
    if value < 0:
        raise ValueError("squared length overflows 32 bits")
    return math.isqrt(value)


def distance_xz(v: Vector) -> int:
    """Integer length of ``v`` projected on the XZ plane."""
    return _isqrt32(distance_xz_sq(v))


def distance_xz_sq(v: Vector) -> int:
    """Squared length of ``v`` on the XZ plane, in 32 bits."""
    return _i32(_i16(v.vx) * _i16(v.vx) + _i16(v.vz) * _i16(v.vz))


def distance_xyz(v: Vector) -> int:
    """Integer length of the 16-bit vector ``v``."""
    squares = (_i32(c * c) for c in (_i16(v.vx), _i16(v.vy), _i16(v.vz)))
    return _isqrt32(_i32(sum(squares)))