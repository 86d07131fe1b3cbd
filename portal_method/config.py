# portal_method/config.py
"""
Engine configuration and input-layer defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    """Global engine configuration."""

    # Presentation rounding (never applied inside the recurrence)
    display_precision: int = 2

    # Input-layer policy limits (stricter than structural validity)
    max_stories: int = 4
    max_spans_per_story: int = 5

    # Joint accumulation: "adjacent" = story directly above only,
    # "cumulative" = every story above (legacy variant)
    default_accumulation: str = "adjacent"
    accumulation_modes: Tuple[str, ...] = ("adjacent", "cumulative")

    # Rendering-only layout tag
    structure_types: Tuple[str, ...] = ("REGULAR", "IRREGULAR")

    # Default frame offered by the input layer
    default_story_count: int = 2
    default_story_height: float = 3.0
    default_spans: int = 2
    default_span_length: float = 4.0
    default_lateral_load: float = 10.0


# Global config instance
CONFIG = EngineConfig()
