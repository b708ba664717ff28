"""Tunable constants for the duplication engine."""

from dataclasses import dataclass

from ..scene.abstraction import DEFAULT_OVERLAP_MARGIN


@dataclass
class DuplicateConfig:
    """Configuration for a duplication batch."""
    # Gap policy
    default_gap: float = 40.0  # used for small elements and empty selections
    large_gap: float = 100.0  # used when the element is wider than the threshold
    large_width_threshold: float = 400.0

    # Collision propagation
    overlap_margin: float = DEFAULT_OVERLAP_MARGIN  # absorbs sub-pixel alignment noise

    # Container adaptation
    section_padding: float = 80.0
