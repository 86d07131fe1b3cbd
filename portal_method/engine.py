# Portal Method engine: Structure -> ResultGrid
"""
ENGINE: PORTAL METHOD ANALYSIS
==============================

A single forward pass, no backtracking:

    validate
      -> for each story, top to bottom:
           column shear & moment
           girder moment sweep (needs column moments of the story above)
           girder shear
      -> assemble ResultGrid

The engine is pure: it never mutates its input, holds no state between
calls and never logs. Arithmetic runs at full float precision; rounding is a
separate step in report.round_results().
"""

from typing import Any, Dict

from .columns import column_moments, column_shears, cumulative_loads
from .config import CONFIG
from .girders import story_girders
from .model import ResultGrid, Structure
from .validate import validate_structure


def analyze(structure: Structure, accumulation: str = CONFIG.default_accumulation) -> ResultGrid:
    """
    Run the Portal Method on a frame.

    Parameters:
    -----------
    structure : Structure
        Frame description (top-to-bottom story indexing)
    accumulation : str
        Joint accumulation rule, "adjacent" (default) or "cumulative"

    Returns:
    --------
    ResultGrid
        Column shear/moment and girder moment/shear for every story

    Raises:
    -------
    ValidationError
        If the structure is invalid. Nothing is computed in that case.
    ValueError
        If `accumulation` is not a known mode.
    """
    validate_structure(structure)
    if accumulation not in CONFIG.accumulation_modes:
        raise ValueError(
            f"Unknown accumulation mode {accumulation!r}. "
            f"Use one of: {', '.join(CONFIG.accumulation_modes)}"
        )

    loads = cumulative_loads(structure.lateral_loads)

    col_shear, col_moment, gir_moment, gir_shear = [], [], [], []
    for i in range(structure.story_count):
        shears = column_shears(loads[i], structure.num_columns(i))
        col_shear.append(shears)
        col_moment.append(column_moments(shears, structure.story_heights[i]))

        moments, g_shears = story_girders(
            col_moment,
            structure.spans_per_story,
            structure.span_lengths[i],
            i,
            accumulation,
        )
        gir_moment.append(moments)
        gir_shear.append(g_shears)

    return ResultGrid(
        column_shear=_freeze(col_shear),
        column_moment=_freeze(col_moment),
        girder_moment=_freeze(gir_moment),
        girder_shear=_freeze(gir_shear),
    )


def analyze_dict(data: Dict[str, Any], accumulation: str = CONFIG.default_accumulation) -> ResultGrid:
    """Analyze a structure given in the camelCase interchange format."""
    return analyze(Structure.from_dict(data), accumulation)


def _freeze(rows):
    return tuple(tuple(float(v) for v in row) for row in rows)
