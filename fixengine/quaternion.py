"""Fixed-point (20.12) quaternions and rotation matrices."""

from __future__ import annotations

from dataclasses import dataclass

from fixengine.fixed import _i16, _i32, fix12_smul, gte_lerp

__all__ = [
    "Quaternion",
    "Matrix",
    "normalize_quaternion",
    "quaternion_mul",
    "quaternion_to_matrix",
    "quaternion_slerp",
]

_ONE = 4096
_TWO_SHIFTED = 33554432  # 2.0 in 20.12, times another 4096


def _sat16(value: int) -> int:
    return max(-0x8000, min(0x7FFF, value))


@dataclass(frozen=True)
class Quaternion:
    """A quaternion with 16-bit 20.12 components; ``vw`` is the scalar part."""

    vx: int = 0
    vy: int = 0
    vz: int = 0
    vw: int = _ONE


Row = tuple[int, int, int]


@dataclass(frozen=True)
class Matrix:
    """A 3x3 20.12 rotation matrix with an integer translation."""

    m: tuple[Row, Row, Row]
    t: Row = (0, 0, 0)

    @staticmethod
    def identity() -> Matrix:
        return Matrix(((_ONE, 0, 0), (0, _ONE, 0), (0, 0, _ONE)))

    def compose(self, other: Matrix) -> Matrix:
        """Return ``self * other``: rotation product and transformed translation."""
        columns = list(zip(*other.m))
        m = tuple(
            tuple(_sat16(_i32(sum(a * b for a, b in zip(row, col))) >> 12) for col in columns)
            for row in self.m
        )
        t = tuple(
            _i32((_i32(sum(a * b for a, b in zip(row, other.t))) >> 12) + base)
            for row, base in zip(self.m, self.t)
        )
        return Matrix(m, t)


def _scale_factor(q: Quaternion) -> int:
    squares = _i32(q.vx * q.vx + q.vy * q.vy + q.vz * q.vz + q.vw * q.vw)
    norm = squares >> 12
    return _TWO_SHIFTED // norm if norm > 1 else _TWO_SHIFTED


def normalize_quaternion(q: Quaternion) -> Quaternion:
    """Scale ``q`` by twice its inverse squared norm, as the engine does."""
    s = _scale_factor(q)
    return Quaternion(
        _i16(fix12_smul(q.vx, s)),
        _i16(fix12_smul(q.vy, s)),
        _i16(fix12_smul(q.vz, s)),
        _i16(fix12_smul(q.vw, s)),
    )


def quaternion_mul(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product ``a * b`` in 20.12."""
    x = a.vx * b.vw + a.vy * b.vz - a.vz * b.vy + a.vw * b.vx
    y = -a.vx * b.vz + a.vy * b.vw + a.vz * b.vx + a.vw * b.vy
    z = a.vx * b.vy - a.vy * b.vx + a.vz * b.vw + a.vw * b.vz
    w = -a.vx * b.vx - a.vy * b.vy - a.vz * b.vz + a.vw * b.vw
    return Quaternion(*(_i16(_i32(c) >> 12) for c in (x, y, z, w)))


def quaternion_to_matrix(q: Quaternion) -> Matrix:
    """Rotation matrix of ``q``; the translation is zero."""
    s = _scale_factor(q)
    xs, ys, zs = (fix12_smul(c, s) for c in (q.vx, q.vy, q.vz))
    wx, wy, wz = (fix12_smul(q.vw, c) for c in (xs, ys, zs))
    xx, xy, xz = (fix12_smul(q.vx, c) for c in (xs, ys, zs))
    yy, yz = fix12_smul(q.vy, ys), fix12_smul(q.vy, zs)
    zz = fix12_smul(q.vz, zs)
    rows = (
        (_ONE - (yy + zz), xy + wz, xz - wy),
        (xy - wz, _ONE - (xx + zz), yz + wx),
        (xz + wy, yz - wx, _ONE - (xx + yy)),
    )
    return Matrix(tuple(tuple(_i16(v) for v in row) for row in rows))


def quaternion_slerp(a: Quaternion, b: Quaternion, t: int) -> Quaternion:
    """Component-wise interpolation from ``a`` toward ``b`` by a 4.12 factor.

    ``b`` is negated first when it lies in the opposite hemisphere from ``a``.
    """
    dot = _i32(a.vx * b.vx + a.vy * b.vy + a.vz * b.vz + a.vw * b.vw)
    target = (b.vx, b.vy, b.vz, b.vw)
    if dot < 0:
        target = tuple(-c for c in target)
    source = (a.vx, a.vy, a.vz, a.vw)
    return Quaternion(*(_i16(gte_lerp(s, d, t)) for s, d in zip(source, target)))