"""Off-screen detection for screen-space polygons (outcode tests)."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from fixengine.fixed import _i16

__all__ = [
    "ClipFlag",
    "ClipRect",
    "test_clip",
    "test_clip_fixed",
    "tri_clip",
    "quad_clip",
    "tri_clip_rect",
]

Point = Sequence[int]


class ClipFlag(enum.IntFlag):
    """Sides of the clip area that a point lies beyond."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    TOP = 4
    BOTTOM = 8


@dataclass(frozen=True)
class ClipRect:
    """A clip rectangle with its top-left corner and size."""

    x: int
    y: int
    w: int
    h: int


def _outcode(x: int, y: int, left: int, top: int, right: int, bottom: int) -> ClipFlag:
    flags = ClipFlag.NONE
    if x < left:
        flags |= ClipFlag.LEFT
    if x >= right:
        flags |= ClipFlag.RIGHT
    if y < top:
        flags |= ClipFlag.TOP
    if y >= bottom:
        flags |= ClipFlag.BOTTOM
    return flags


def test_clip(rect: ClipRect, x: int, y: int) -> ClipFlag:
    """Sides of ``rect`` that the point (x, y) lies outside of."""
    return _outcode(x, y, rect.x, rect.y, rect.x + (rect.w - 1), rect.y + (rect.h - 1))


def test_clip_fixed(x: int, y: int, screen_w: int, screen_h: int) -> ClipFlag:
    """Sides of a screen of the given size at the origin that (x, y) lies outside of."""
    return _outcode(_i16(x), _i16(y), 0, 0, screen_w - 1, screen_h - 1)


def _all_pairs_outside(codes: Sequence[ClipFlag], pairs) -> bool:
    return all(codes[a] & codes[b] for a, b in pairs)


_TRI_EDGES = ((0, 1), (1, 2), (2, 0))
# Quad edges plus both diagonals, so a quad spanning the screen is kept.
_QUAD_EDGES = ((0, 1), (1, 2), (2, 3), (3, 0), (0, 2), (1, 3))


def tri_clip(v0: Point, v1: Point, v2: Point, screen_w: int, screen_h: int) -> bool:
    """True if the triangle lies wholly off a screen of the given size."""
    codes = [test_clip_fixed(v[0], v[1], screen_w, screen_h) for v in (v0, v1, v2)]
    return _all_pairs_outside(codes, _TRI_EDGES)


def quad_clip(
    v0: Point, v1: Point, v2: Point, v3: Point, screen_w: int, screen_h: int
) -> bool:
    """True if the quad lies wholly off a screen of the given size."""
    codes = [test_clip_fixed(v[0], v[1], screen_w, screen_h) for v in (v0, v1, v2, v3)]
    return _all_pairs_outside(codes, _QUAD_EDGES)


def tri_clip_rect(rect: ClipRect, v0: Point, v1: Point, v2: Point) -> bool:
    """True if the triangle lies wholly outside ``rect``."""
    codes = [test_clip(rect, v[0], v[1]) for v in (v0, v1, v2)]
    return _all_pairs_outside(codes, list(combinations(range(3), 2)))