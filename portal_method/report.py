# rounding, tables and exports over a finished ResultGrid
"""
REPORT: PRESENTATION HELPERS
============================

Everything here works on a ResultGrid that analyze() already produced.
Nothing is fed back into the recurrence, so rounding here can never change
a later result.
"""

import json
from decimal import Decimal, ROUND_HALF_UP

import numpy as np
import pandas as pd

from .columns import cumulative_loads, effective_column_units
from .config import CONFIG
from .model import ResultGrid, Structure, floor_label


def round_half_up(value: float, precision: int = CONFIG.display_precision) -> float:
    """
    Round to `precision` decimals with exact ties going away from zero.

    Matches the fixed-decimal display of the input form (0.125 -> 0.13),
    unlike round(), which sends ties to the even digit (0.125 -> 0.12).
    The float is converted exactly, so 1.005 (stored as 1.00499...) -> 1.0.
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_results(grid: ResultGrid, precision: int = CONFIG.display_precision) -> ResultGrid:
    """Return a new ResultGrid with every value rounded half-up to `precision` decimals."""
    def _round(rows):
        return tuple(tuple(round_half_up(v, precision) for v in row) for row in rows)

    return ResultGrid(
        column_shear=_round(grid.column_shear),
        column_moment=_round(grid.column_moment),
        girder_moment=_round(grid.girder_moment),
        girder_shear=_round(grid.girder_shear),
    )


def results_table(structure: Structure, grid: ResultGrid) -> pd.DataFrame:
    """
    One row per member.

    Columns: story, floor, member ("column" | "girder"), index, shear, moment,
    height (columns only), length (girders only).
    """
    rows = []
    for i in range(structure.story_count):
        floor = floor_label(i, structure.story_count)
        for c, (v, m) in enumerate(zip(grid.column_shear[i], grid.column_moment[i])):
            rows.append({
                "story": i,
                "floor": floor,
                "member": "column",
                "index": c,
                "shear": v,
                "moment": m,
                "height": structure.story_heights[i],
                "length": np.nan,
            })
        for s, (v, m) in enumerate(zip(grid.girder_shear[i], grid.girder_moment[i])):
            rows.append({
                "story": i,
                "floor": floor,
                "member": "girder",
                "index": s,
                "shear": v,
                "moment": m,
                "height": np.nan,
                "length": structure.span_lengths[i][s],
            })
    return pd.DataFrame(rows)


def story_summary(structure: Structure, grid: ResultGrid) -> pd.DataFrame:
    """
    Per-story quantities quoted by a step-by-step explanation:
    cumulative load, column count, effective units, exterior/interior shear.
    """
    loads = cumulative_loads(structure.lateral_loads)
    rows = []
    for i in range(structure.story_count):
        n = structure.num_columns(i)
        shears = grid.column_shear[i]
        rows.append({
            "story": i,
            "floor": floor_label(i, structure.story_count),
            "height": structure.story_heights[i],
            "lateral_load": structure.lateral_loads[i],
            "cumulative_load": float(loads[i]),
            "num_columns": n,
            "effective_units": effective_column_units(n),
            "exterior_shear": shears[0],
            "interior_shear": shears[1] if n > 2 else np.nan,
        })
    return pd.DataFrame(rows)


def results_to_csv(
    structure: Structure, grid: ResultGrid, precision: int = CONFIG.display_precision
) -> str:
    """Member table as CSV text, values rounded to `precision`."""
    df = results_table(structure, round_results(grid, precision))
    return df.to_csv(index=False)


def results_to_json(
    structure: Structure, grid: ResultGrid, precision: int = CONFIG.display_precision
) -> str:
    """Structure and rounded results as a JSON document."""
    model = {
        "version": "1.0",
        "method": "portal",
        "structure": structure.to_dict(),
        "results": round_results(grid, precision).to_dict(),
    }
    return json.dumps(model, indent=2)
