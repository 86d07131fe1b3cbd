# girder moment sweep and girder shear pass
"""
GIRDERS: JOINT EQUILIBRIUM SWEEP
================================

At every beam-column joint the moments must balance. On story i, the joint
at column c receives:

- the column segment AT this story:     column_moment[i][c]
- the column segment ABOVE this floor:  column_moment[i-1][c] (if it exists)

Their sum is the joint column moment. Sweeping left to right:

    M_g[0] = J[0]
    M_g[s] = |J[s] - M_g[s-1]|        (s >= 1)

and each girder's shear follows from its end moments over the span:

    V_g[s] = (M_g[s] + M_right) / L[s]
    M_right = M_g[s+1]        for every span but the last
    M_right = J[last column]  for the rightmost span

CROSS-FLOOR COLUMN MAPPING:
---------------------------
Stories may have different bay counts. Columns are matched LEFT-ALIGNED:
column c on story i sits under column c of story i-1 only if story i-1 has
at least c+1 columns. Otherwise there is nothing above and the inherited
moment is 0.
"""

from typing import List, Optional, Sequence

import numpy as np

from .config import CONFIG


def column_exists(spans_per_story: Sequence[int], story: int, column: int) -> bool:
    """True if column index `column` exists on `story` (left-aligned numbering)."""
    return 0 <= story < len(spans_per_story) and column < spans_per_story[story] + 1


def column_above(spans_per_story: Sequence[int], story: int, column: int) -> Optional[int]:
    """
    Story index of the column segment directly above (story, column), or None.

    The topmost story (0) has nothing above it.
    """
    above = story - 1
    if above >= 0 and column_exists(spans_per_story, above, column):
        return above
    return None


def joint_column_moments(
    column_moments: Sequence[np.ndarray],
    spans_per_story: Sequence[int],
    story: int,
    accumulation: str = CONFIG.default_accumulation,
) -> np.ndarray:
    """
    Sum of column moments meeting at each joint of `story`.

    Parameters:
    -----------
    column_moments : sequence of np.ndarray
        Column moments for stories 0..story (at least), top to bottom
    spans_per_story : sequence of int
        Bay count per story
    story : int
        Story whose joints are evaluated
    accumulation : str
        "adjacent"   - only the story directly above contributes (default)
        "cumulative" - every story above contributes wherever the column
                       index exists on it (legacy behavior)

    Returns:
    --------
    np.ndarray
        One value per column of `story`, left to right
    """
    if accumulation not in CONFIG.accumulation_modes:
        raise ValueError(
            f"Unknown accumulation mode {accumulation!r}. "
            f"Use one of: {', '.join(CONFIG.accumulation_modes)}"
        )

    joints = np.array(column_moments[story], dtype=float)

    for c in range(len(joints)):
        if accumulation == "adjacent":
            above = column_above(spans_per_story, story, c)
            contributing = [] if above is None else [above]
        else:
            contributing = [j for j in range(story) if column_exists(spans_per_story, j, c)]
        for upper in contributing:
            joints[c] += column_moments[upper][c]

    return joints


def girder_moments(joint_moments: np.ndarray) -> np.ndarray:
    """Left-to-right joint equilibrium sweep. Returns one moment per span."""
    n_spans = len(joint_moments) - 1
    moments = np.zeros(n_spans, dtype=float)
    moments[0] = joint_moments[0]
    for s in range(1, n_spans):
        moments[s] = abs(joint_moments[s] - moments[s - 1])
    return moments


def girder_shears(
    girder_moments: np.ndarray,
    joint_moments: np.ndarray,
    span_lengths: Sequence[float],
) -> np.ndarray:
    """Girder shear from end moments: V = (M_left + M_right) / L."""
    n_spans = len(girder_moments)
    shears = np.zeros(n_spans, dtype=float)
    for s in range(n_spans):
        if s < n_spans - 1:
            right = girder_moments[s + 1]
        else:
            right = joint_moments[n_spans]
        shears[s] = (girder_moments[s] + right) / span_lengths[s]
    return shears


def story_girders(
    column_moments: List[np.ndarray],
    spans_per_story: Sequence[int],
    span_lengths: Sequence[float],
    story: int,
    accumulation: str = CONFIG.default_accumulation,
):
    """Girder moments and shears for one story. Returns (moments, shears)."""
    joints = joint_column_moments(column_moments, spans_per_story, story, accumulation)
    moments = girder_moments(joints)
    return moments, girder_shears(moments, joints, span_lengths)
