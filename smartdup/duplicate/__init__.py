"""Directional duplication engine with collision propagation."""

from .config import DuplicateConfig
from .direction import Direction
from .gap import detected_gap, effective_gap
from .collisions import find_displaced, resolve_collisions, target_rect
from .containers import adapt_container
from .orchestrator import (
    DuplicationResult,
    Outcome,
    SmartDuplicator,
    smart_duplicate,
)

__all__ = [
    "DuplicateConfig",
    "Direction",
    "detected_gap",
    "effective_gap",
    "find_displaced",
    "resolve_collisions",
    "target_rect",
    "adapt_container",
    "DuplicationResult",
    "Outcome",
    "SmartDuplicator",
    "smart_duplicate",
]
