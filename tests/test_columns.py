# File: tests/test_columns.py
"""
Test the column shear & moment pass (columns.py).
"""

import numpy as np

from portal_method.columns import (
    cumulative_loads,
    effective_column_units,
    column_shears,
    column_moments,
)


def test_cumulative_loads_top_down():
    """Story shear = all lateral load from the top story down to this one."""
    loads = cumulative_loads([10.0, 10.0, 5.0])
    np.testing.assert_allclose(loads, [10.0, 20.0, 25.0])


def test_cumulative_loads_monotonic():
    """With non-negative loads, story shear never decreases going down."""
    loads = cumulative_loads([3.0, 0.0, 7.5, 1.0])
    assert np.all(np.diff(loads) >= 0)


def test_effective_units():
    """
    Exterior columns count 1, interior columns count 2.

    2 columns (single bay): 2
    3 columns: 1 + 2 + 1 = 4
    6 columns: 1 + 2*4 + 1 = 10
    """
    assert effective_column_units(2) == 2
    assert effective_column_units(3) == 4
    assert effective_column_units(6) == 10


def test_single_bay_shear_split_evenly():
    """Single bay: both columns are exterior and share the load equally."""
    shears = column_shears(12.0, 2)
    np.testing.assert_allclose(shears, [6.0, 6.0])


def test_interior_columns_carry_double():
    """
    For any story with >= 3 columns, every interior column carries exactly
    twice the exterior shear, regardless of how many interior columns there are.
    """
    for n in range(3, 8):
        shears = column_shears(100.0, n)
        exterior = shears[0]
        assert np.isclose(shears[-1], exterior)
        np.testing.assert_allclose(shears[1:-1], 2.0 * exterior)
        # Column shears carry the full story shear
        assert np.isclose(shears.sum(), 100.0)


def test_column_moment_half_height():
    """Inflection point at mid-height: M = V * h / 2."""
    moments = column_moments(np.array([2.5, 5.0, 2.5]), 3.0)
    np.testing.assert_allclose(moments, [3.75, 7.5, 3.75])


def test_zero_load_gives_zero_shear():
    shears = column_shears(0.0, 4)
    np.testing.assert_allclose(shears, 0.0)
    assert np.all(np.isfinite(shears))
