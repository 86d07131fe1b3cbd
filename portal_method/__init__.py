# portal_method - Approximate lateral-load analysis of rigid building frames
"""
PORTAL METHOD: Lateral Load Analysis of Multi-Story Frames
==========================================================

This package provides:
- A frame description (stories, bays, lateral loads)
- The Portal Method engine: column shear/moment, girder moment/shear
- Presentation helpers (rounding, pandas tables, CSV/JSON export)

ARCHITECTURE:
-------------
    model.py        Structure (input) and ResultGrid (output)
    validate.py     Structural validity and input-form limits
    columns.py      Column shear & moment pass
    girders.py      Joint equilibrium sweep, girder shear pass
    engine.py       analyze(): the full top-to-bottom pass
    report.py       Rounding, tables, exports
    config.py       Defaults and limits
"""

from .model import Structure, ResultGrid, default_structure, floor_label
from .validate import ValidationError, validate_structure, check_input_limits
from .engine import analyze, analyze_dict

__version__ = "0.1.0"

__all__ = [
    "Structure",
    "ResultGrid",
    "default_structure",
    "floor_label",
    "ValidationError",
    "validate_structure",
    "check_input_limits",
    "analyze",
    "analyze_dict",
]
