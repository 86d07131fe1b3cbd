# column shear and moment pass
"""
COLUMNS: PORTAL METHOD SHEAR DISTRIBUTION
=========================================

ENGINEERING CONTEXT:
--------------------
Under lateral load, every story of a rigid frame acts as a row of "portals".
The Portal Method makes two assumptions:

1. Story shear (all lateral load at and above the story) is shared by the
   story's columns, with INTERIOR columns taking twice the share of EXTERIOR
   columns (an interior column belongs to two portals, an exterior to one).

2. Each column has a point of inflection at mid-height, so its end moment is
   shear x h/2.

For a story with n columns:

    effective units = 2 (exterior) + 2 x (n - 2) (interior) = n + (n - 2)
    V_ext = cumulative load / effective units
    V_int = 2 x V_ext
    M_col = V x h / 2
"""

import numpy as np


def cumulative_loads(lateral_loads) -> np.ndarray:
    """
    Story shear for every story: sum of lateral loads from the top down to
    and including that story.

    >>> cumulative_loads([10, 10, 5])
    array([10., 20., 25.])
    """
    return np.cumsum(np.asarray(lateral_loads, dtype=float))


def effective_column_units(num_columns: int) -> int:
    """
    Exterior columns count 1, interior columns count 2.

    A single bay (2 columns) has no interior columns, giving 2.
    """
    interior = max(num_columns - 2, 0)
    return num_columns + interior


def column_shears(story_load: float, num_columns: int) -> np.ndarray:
    """Shear carried by each column of one story, left to right."""
    v_ext = story_load / effective_column_units(num_columns)
    shears = np.full(num_columns, 2.0 * v_ext)
    shears[0] = v_ext
    shears[-1] = v_ext
    return shears


def column_moments(shears: np.ndarray, height: float) -> np.ndarray:
    # inflection point at mid-height
    return shears * height * 0.5
