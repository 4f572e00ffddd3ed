"""Blending between two animation frames.

A frame holds the root position first, followed by one rotation quaternion
per bone. Positions are blended linearly in 20.12; rotations are blended
component-wise, taking the shorter way round.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, Union

from fixengine.fixed import _i16, fix12_lerp
from fixengine.quaternion import Quaternion, quaternion_slerp
from fixengine.vectors import Vector

__all__ = ["interpolate_position", "interpolate_frames"]


class _Position(Protocol):
    vx: int
    vy: int
    vz: int


FrameEntry = Union[_Position, Quaternion]


def interpolate_position(a: _Position, b: _Position, factor: int) -> Vector:
    """Blend two positions by a 4.12 ``factor``; components wrap to 16 bits."""
    t = _i16(factor)
    return Vector(
        _i16(fix12_lerp(a.vx, b.vx, t)),
        _i16(fix12_lerp(a.vy, b.vy, t)),
        _i16(fix12_lerp(a.vz, b.vz, t)),
    )


def interpolate_frames(
    frame_a: Sequence[FrameEntry], frame_b: Sequence[FrameEntry], factor: int
) -> list[FrameEntry]:
    """Blend two frames of the same length by a 4.12 ``factor``.

    The first entry is the root position; every later entry is a bone
    rotation. Raises ValueError when the frames are empty or differ in
    length, and TypeError when a rotation entry is not a quaternion.
    """
    if len(frame_a) != len(frame_b):
        raise ValueError(
            f"frames differ in length ({len(frame_a)} and {len(frame_b)})"
        )
    if not frame_a:
        raise ValueError("frames hold no root position")

    result: list[FrameEntry] = [interpolate_position(frame_a[0], frame_b[0], factor)]
    for index, (qa, qb) in enumerate(zip(frame_a[1:], frame_b[1:]), start=1):
        if not isinstance(qa, Quaternion) or not isinstance(qb, Quaternion):
            raise TypeError(f"frame entry {index} is not a quaternion")
        result.append(quaternion_slerp(qa, qb, factor))
    return result