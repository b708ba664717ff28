"""Scene arena and scene file handling."""

from .abstraction import Element, ElementKind, Rect, Scene
from .scene_file import (
    SCENE_FILE_VERSION,
    dump_scene,
    load_scene,
    scene_from_dict,
    scene_to_dict,
    write_scene,
)

__all__ = [
    # Core abstractions
    "Element",
    "ElementKind",
    "Rect",
    "Scene",
    # Scene files
    "SCENE_FILE_VERSION",
    "dump_scene",
    "load_scene",
    "scene_from_dict",
    "scene_to_dict",
    "write_scene",
]
