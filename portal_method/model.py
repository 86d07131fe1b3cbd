# Structure (input) and ResultGrid (output) records

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .config import CONFIG


FLOOR_NAMES = ("Ground Floor", "First Floor", "Second Floor", "Third Floor")


@dataclass(frozen=True)
class Structure:
    """
    Multi-story, multi-bay rigid frame under lateral load.

    Every per-story sequence is indexed TOP-TO-BOTTOM:
    index 0 = topmost story, index story_count-1 = ground story.

    Parameters:
    -----------
    story_count : int
        Number of stories (>= 1)
    story_heights : tuple of float
        Story height for each story (m)
    spans_per_story : tuple of int
        Number of bays on each story (columns = bays + 1)
    span_lengths : tuple of tuple of float
        Bay lengths, left to right, for each story (m)
    lateral_loads : tuple of float
        Lateral load applied at each story's floor level (kN)
    structure_type : str
        "REGULAR" or "IRREGULAR". Rendering-only tag, the engine ignores it.
    """
    story_count: int
    story_heights: Tuple[float, ...]
    spans_per_story: Tuple[int, ...]
    span_lengths: Tuple[Tuple[float, ...], ...]
    lateral_loads: Tuple[float, ...]
    structure_type: str = "REGULAR"

    @classmethod
    def from_lists(
        cls,
        story_heights: Sequence[float],
        spans_per_story: Sequence[int],
        span_lengths: Sequence[Sequence[float]],
        lateral_loads: Sequence[float],
        story_count: Optional[int] = None,
        structure_type: str = "REGULAR",
    ) -> "Structure":
        """
        Build a Structure from plain lists; story_count defaults to len(story_heights).

        Values that are not lists are passed through unchanged so that
        validate_structure() can report them against the right field.
        """
        story_heights = _as_tuple(story_heights)
        if story_count is None and isinstance(story_heights, tuple):
            story_count = len(story_heights)
        span_lengths = _as_tuple(span_lengths)
        if isinstance(span_lengths, tuple):
            span_lengths = tuple(_as_tuple(row) for row in span_lengths)
        return cls(
            story_count=story_count,
            story_heights=story_heights,
            spans_per_story=_as_tuple(spans_per_story),
            span_lengths=span_lengths,
            lateral_loads=_as_tuple(lateral_loads),
            structure_type=structure_type,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Structure":
        """Build a Structure from the camelCase interchange format."""
        return cls.from_lists(
            story_heights=data["storyHeights"],
            spans_per_story=data["spansPerStory"],
            span_lengths=data["spanMeasurements"],
            lateral_loads=data["lateralLoads"],
            story_count=data.get("numStories"),
            structure_type=data.get("structureType", "REGULAR"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numStories": self.story_count,
            "storyHeights": list(self.story_heights),
            "structureType": self.structure_type,
            "spansPerStory": list(self.spans_per_story),
            "spanMeasurements": [list(row) for row in self.span_lengths],
            "lateralLoads": list(self.lateral_loads),
        }

    def num_columns(self, story: int) -> int:
        return self.spans_per_story[story] + 1


@dataclass(frozen=True)
class ResultGrid:
    """
    Portal Method results, index-aligned with the Structure.

    column_shear[i][c], column_moment[i][c] : c in 0..spans_per_story[i]
    girder_moment[i][s], girder_shear[i][s] : s in 0..spans_per_story[i]-1
    """
    column_shear: Tuple[Tuple[float, ...], ...]
    column_moment: Tuple[Tuple[float, ...], ...]
    girder_moment: Tuple[Tuple[float, ...], ...]
    girder_shear: Tuple[Tuple[float, ...], ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columnShear": [list(row) for row in self.column_shear],
            "columnMoment": [list(row) for row in self.column_moment],
            "girderShear": [list(row) for row in self.girder_shear],
            "girderMoment": [list(row) for row in self.girder_moment],
        }


def default_structure() -> Structure:
    """The frame the input form starts from (2 stories, 2 bays each)."""
    n = CONFIG.default_story_count
    return Structure.from_lists(
        story_heights=[CONFIG.default_story_height] * n,
        spans_per_story=[CONFIG.default_spans] * n,
        span_lengths=[[CONFIG.default_span_length] * CONFIG.default_spans for _ in range(n)],
        lateral_loads=[CONFIG.default_lateral_load] * n,
        structure_type="REGULAR",
    )


def floor_label(story: int, story_count: int) -> str:
    """
    Human name of a story given its top-to-bottom index.

    The ground story (last index) is "Ground Floor", the one above it
    "First Floor", and so on.
    """
    level = story_count - story - 1
    if 0 <= level < len(FLOOR_NAMES):
        return FLOOR_NAMES[level]
    return f"Floor {level}"


def _as_tuple(value):
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, dict)):
        return tuple(value)
    return value
