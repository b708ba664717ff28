"""
SmartDup - Directional Smart Duplicate for Layout Editors

Duplicates selected elements along a compass direction, pushing
colliding siblings out of the way and growing enclosing sections so the
duplicate never overlaps existing content.
"""

__version__ = "0.1.0"
__author__ = "SmartDup Team"

from .scene.abstraction import Element, ElementKind, Rect, Scene
from .duplicate import (
    Direction,
    DuplicateConfig,
    DuplicationResult,
    SmartDuplicator,
    smart_duplicate,
)

__all__ = [
    "Element",
    "ElementKind",
    "Rect",
    "Scene",
    "Direction",
    "DuplicateConfig",
    "DuplicationResult",
    "SmartDuplicator",
    "smart_duplicate",
]
