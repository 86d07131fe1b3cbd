# structural validity checks (run once, before any story is analyzed)
"""
VALIDATE: REJECT INVALID FRAMES UP FRONT
========================================

The Portal Method recurrence divides by the effective column count and by
each span length. Both are guaranteed positive only if the Structure is
well-formed, so every check lives here and nothing inside the recurrence
guards against bad input again.

Two levels of checking:
- validate_structure(): structural validity. analyze() always calls it.
- check_input_limits(): input-form policy (max stories / bays). Callers opt in.
"""

from collections.abc import Sequence
from numbers import Integral, Real
from typing import Optional

import numpy as np

from .config import CONFIG, EngineConfig
from .model import Structure


class ValidationError(ValueError):
    """Raised when a Structure is invalid. Carries the offending field and story index."""

    def __init__(self, field: str, message: str, story: Optional[int] = None):
        self.field = field
        self.story = story
        self.message = message
        where = f"{field}" if story is None else f"{field}[{story}]"
        super().__init__(f"{where}: {message}")

    def to_dict(self) -> dict:
        return {"field": self.field, "story": self.story, "message": self.message}


def _is_real(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and bool(np.isfinite(value))


def _is_count(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_sequence(value) -> bool:
    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes))


def validate_structure(structure: Structure) -> None:
    """
    Check a Structure for structural validity.

    Checks run in a fixed order and the FIRST violation raises, so the error
    always names one field and (where relevant) one story index.

    Raises:
    -------
    ValidationError
        If any field is invalid.
    """
    per_story = (
        ("storyHeights", structure.story_heights),
        ("spansPerStory", structure.spans_per_story),
        ("spanMeasurements", structure.span_lengths),
        ("lateralLoads", structure.lateral_loads),
    )
    for field, values in per_story:
        if not _is_sequence(values):
            raise ValidationError(field, f"expected one entry per story, got {values!r}")

    n = structure.story_count
    if not _is_count(n) or n < 1:
        raise ValidationError("numStories", f"must be an integer >= 1, got {n!r}")

    for field, values in per_story:
        if len(values) != n:
            raise ValidationError(field, f"expected {n} entries (one per story), got {len(values)}")

    for i, h in enumerate(structure.story_heights):
        if not _is_real(h) or h <= 0:
            raise ValidationError("storyHeights", f"story height must be > 0, got {h!r}", story=i)

    for i, spans in enumerate(structure.spans_per_story):
        if not _is_count(spans) or spans < 1:
            raise ValidationError("spansPerStory", f"must be an integer >= 1, got {spans!r}", story=i)

    for i, lengths in enumerate(structure.span_lengths):
        spans = structure.spans_per_story[i]
        if not _is_sequence(lengths):
            raise ValidationError(
                "spanMeasurements", f"expected a list of {spans} span lengths, got {lengths!r}", story=i
            )
        if len(lengths) != spans:
            raise ValidationError(
                "spanMeasurements",
                f"expected {spans} span lengths, got {len(lengths)}",
                story=i,
            )
        for s, length in enumerate(lengths):
            if not _is_real(length) or length <= 0:
                raise ValidationError(
                    "spanMeasurements", f"span {s} length must be > 0, got {length!r}", story=i
                )

    for i, load in enumerate(structure.lateral_loads):
        if not _is_real(load) or load < 0:
            raise ValidationError("lateralLoads", f"lateral load must be >= 0, got {load!r}", story=i)

    if structure.structure_type not in CONFIG.structure_types:
        raise ValidationError(
            "structureType",
            f"must be one of {', '.join(CONFIG.structure_types)}, got {structure.structure_type!r}",
        )


def check_input_limits(structure: Structure, limits: EngineConfig = CONFIG) -> None:
    """
    Enforce the input form's policy limits (max stories, max bays per story).

    The structure is validated first, so limits are only compared against
    well-formed values.
    """
    validate_structure(structure)
    if structure.story_count > limits.max_stories:
        raise ValidationError(
            "numStories", f"maximum {limits.max_stories} stories allowed, got {structure.story_count}"
        )
    for i, spans in enumerate(structure.spans_per_story):
        if spans > limits.max_spans_per_story:
            raise ValidationError(
                "spansPerStory",
                f"maximum {limits.max_spans_per_story} spans allowed per story, got {spans}",
                story=i,
            )
