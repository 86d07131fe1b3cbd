# File: tests/test_girders.py
"""
Test the joint equilibrium sweep and girder shear pass (girders.py).

Key cases:
- Left-aligned cross-floor column mapping
- "adjacent" vs "cumulative" accumulation
- Left-to-right sweep with absolute values
- Rightmost span uses the last joint's column moment
"""

import numpy as np
import pytest

from portal_method.girders import (
    column_exists,
    column_above,
    joint_column_moments,
    girder_moments,
    girder_shears,
    story_girders,
)


# Column moments for a 3-story frame, spans [1, 2, 2], h = 3, loads 10 each
COLUMN_MOMENTS = [
    np.array([7.5, 7.5]),
    np.array([7.5, 15.0, 7.5]),
    np.array([11.25, 22.5, 11.25]),
]
SPANS = [1, 2, 2]


def test_column_above_left_aligned():
    """
    Column c on story i sits under column c of story i-1 only if that story
    has at least c+1 columns.
    """
    spans = [1, 3]  # top story: 2 columns, ground story: 4 columns
    assert column_above(spans, 1, 0) == 0
    assert column_above(spans, 1, 1) == 0
    assert column_above(spans, 1, 2) is None
    assert column_above(spans, 1, 3) is None


def test_top_story_has_nothing_above():
    assert column_above([2, 2], 0, 0) is None
    assert column_above([2, 2], 0, 2) is None


def test_column_exists_bounds():
    assert column_exists([2], 0, 2)
    assert not column_exists([2], 0, 3)
    assert not column_exists([2], -1, 0)
    assert not column_exists([2], 1, 0)


def test_joint_moments_top_story_are_own_columns():
    joints = joint_column_moments(COLUMN_MOMENTS, SPANS, 0)
    np.testing.assert_allclose(joints, [7.5, 7.5])


def test_joint_moments_adjacent():
    """Story 1 joints add story 0's moments only where the column exists above."""
    joints = joint_column_moments(COLUMN_MOMENTS, SPANS, 1, "adjacent")
    np.testing.assert_allclose(joints, [15.0, 22.5, 7.5])

    joints = joint_column_moments(COLUMN_MOMENTS, SPANS, 2, "adjacent")
    np.testing.assert_allclose(joints, [18.75, 37.5, 18.75])


def test_joint_moments_cumulative():
    """Legacy variant: every story above contributes wherever the column exists."""
    joints = joint_column_moments(COLUMN_MOMENTS, SPANS, 2, "cumulative")
    np.testing.assert_allclose(joints, [26.25, 45.0, 18.75])


def test_missing_column_above_contributes_zero():
    """A new exterior column introduced at this floor inherits nothing."""
    moments = [np.array([8.0, 8.0]), np.array([5.0, 10.0, 10.0, 5.0])]
    joints = joint_column_moments(moments, [1, 3], 1)
    np.testing.assert_allclose(joints, [13.0, 18.0, 10.0, 5.0])


def test_unknown_accumulation_mode():
    with pytest.raises(ValueError):
        joint_column_moments(COLUMN_MOMENTS, SPANS, 1, "everything")


def test_joint_moments_do_not_mutate_input():
    before = [m.copy() for m in COLUMN_MOMENTS]
    joint_column_moments(COLUMN_MOMENTS, SPANS, 2, "cumulative")
    for a, b in zip(before, COLUMN_MOMENTS):
        np.testing.assert_array_equal(a, b)


def test_girder_moment_sweep():
    """
    M_g[0] = J[0], M_g[s] = |J[s] - M_g[s-1]|
    J = [13, 18, 10, 5] -> [13, 5, 5]
    """
    moments = girder_moments(np.array([13.0, 18.0, 10.0, 5.0]))
    np.testing.assert_allclose(moments, [13.0, 5.0, 5.0])


def test_girder_moment_sweep_takes_magnitude():
    """Joint moment smaller than the incoming girder moment still gives a positive value."""
    moments = girder_moments(np.array([10.0, 4.0, 1.0]))
    np.testing.assert_allclose(moments, [10.0, 6.0])


def test_girder_shears_rightmost_uses_last_joint():
    joints = np.array([13.0, 18.0, 10.0, 5.0])
    moments = girder_moments(joints)
    shears = girder_shears(moments, joints, [4.0, 5.0, 6.0])
    np.testing.assert_allclose(shears, [18.0 / 4.0, 10.0 / 5.0, 10.0 / 6.0])


def test_story_order_does_not_matter():
    """
    Stories only read the (finished) column moments of the stories above, so
    evaluating them in any order gives identical results.
    """
    lengths = [[4.0], [4.0, 4.0], [4.0, 4.0]]
    forward = [story_girders(COLUMN_MOMENTS, SPANS, lengths[i], i) for i in range(3)]
    backward = [story_girders(COLUMN_MOMENTS, SPANS, lengths[i], i) for i in reversed(range(3))]
    backward.reverse()
    for (m1, v1), (m2, v2) in zip(forward, backward):
        np.testing.assert_array_equal(m1, m2)
        np.testing.assert_array_equal(v1, v2)
