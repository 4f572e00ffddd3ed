import pytest
from hypothesis import given
from hypothesis import strategies as st

from fixengine.animation import interpolate_frames, interpolate_position
from fixengine.fixed import fix12_lerp
from fixengine.quaternion import Quaternion, quaternion_slerp
from fixengine.vectors import Vector

coord = st.integers(min_value=-2000, max_value=2000)
qcomp = st.integers(min_value=-4096, max_value=4096)


def _frame(position, *rotations):
    return [position, *rotations]


def test_position_factor_zero_returns_start():
    a = Vector(10, -20, 30)
    b = Vector(500, 600, -700)
    assert interpolate_position(a, b, 0) == a


def test_position_factor_one_returns_end():
    a = Vector(10, -20, 30)
    b = Vector(500, 600, -700)
    assert interpolate_position(a, b, 4096) == b


def test_position_half_way():
    a = Vector(0, 0, 0)
    b = Vector(100, 200, -300)
    assert interpolate_position(a, b, 2048) == Vector(50, 100, -150)


def test_position_matches_componentwise_lerp():
    a = Vector(7, 13, -21)
    b = Vector(1234, -987, 55)
    result = interpolate_position(a, b, 1000)
    assert result.vx == fix12_lerp(7, 1234, 1000)
    assert result.vy == fix12_lerp(13, -987, 1000)
    assert result.vz == fix12_lerp(-21, 55, 1000)


@given(coord, coord, coord, coord, coord, coord, st.integers(0, 4096))
def test_position_stays_between_endpoints(ax, ay, az, bx, by, bz, t):
    result = interpolate_position(Vector(ax, ay, az), Vector(bx, by, bz), t)
    for lo_hi, value in zip(((ax, bx), (ay, by), (az, bz)), (result.vx, result.vy, result.vz)):
        assert min(lo_hi) <= value <= max(lo_hi)


def test_frames_factor_zero_returns_first_frame():
    a = _frame(Vector(1, 2, 3), Quaternion(0, 0, 0, 4096), Quaternion(100, 200, 300, 3000))
    b = _frame(Vector(9, 8, 7), Quaternion(500, 0, 0, 3500), Quaternion(150, 250, 350, 2900))
    assert interpolate_frames(a, b, 0) == a


def test_frames_factor_one_returns_second_frame():
    a = _frame(Vector(1, 2, 3), Quaternion(0, 0, 0, 4096), Quaternion(100, 200, 300, 3000))
    b = _frame(Vector(9, 8, 7), Quaternion(500, 0, 0, 3500), Quaternion(150, 250, 350, 2900))
    assert interpolate_frames(a, b, 4096) == b


def test_frames_take_shorter_path_for_opposite_rotation():
    a = _frame(Vector(), Quaternion(0, 0, 0, 4096))
    b = _frame(Vector(), Quaternion(0, 0, 0, -4096))
    result = interpolate_frames(a, b, 4096)
    assert result[1] == Quaternion(0, 0, 0, 4096)


def test_frames_rotations_match_slerp():
    qa = Quaternion(300, -200, 100, 3900)
    qb = Quaternion(-100, 400, 50, 3800)
    result = interpolate_frames([Vector(), qa], [Vector(), qb], 1500)
    assert result[1] == quaternion_slerp(qa, qb, 1500)
    assert result[0] == interpolate_position(Vector(), Vector(), 1500)


@given(st.lists(st.tuples(qcomp, qcomp, qcomp, qcomp), min_size=0, max_size=6), st.integers(0, 4096))
def test_frames_keep_length(rotations, t):
    frame = [Vector(1, 2, 3)] + [Quaternion(*r) for r in rotations]
    assert len(interpolate_frames(frame, frame, t)) == len(frame)


def test_frames_of_different_length_raise():
    a = _frame(Vector(), Quaternion())
    b = _frame(Vector(), Quaternion(), Quaternion())
    with pytest.raises(ValueError):
        interpolate_frames(a, b, 2048)


def test_empty_frames_raise():
    with pytest.raises(ValueError):
        interpolate_frames([], [], 2048)


def test_non_quaternion_rotation_raises():
    a = _frame(Vector(), Vector(1, 2, 3))
    b = _frame(Vector(), Quaternion())
    with pytest.raises(TypeError):
        interpolate_frames(a, b, 2048)