"""
Container Adaptation

Sections are padded grouping containers that grow to keep their
children inside the padded area. Child coordinates are relative to the
section, so growing towards the left or top moves the section's origin
and the unlocked children are shifted back to stay put on the canvas.
"""

import logging
from typing import Optional

from ..scene.abstraction import Element, ElementKind, Scene
from .config import DuplicateConfig

logger = logging.getLogger(__name__)


def adapt_container(scene: Scene, element: Element,
                    config: Optional[DuplicateConfig] = None) -> bool:
    """
    Grow the element's parent section so the element fits its padding.

    No-op unless the parent is an unlocked section. The four edge checks
    are independent and each reads the geometry left by the previous one.

    Returns:
        True if the section was resized or moved
    """
    config = config or DuplicateConfig()
    section = scene.parent_of(element)
    if section is None or section.kind is not ElementKind.SECTION or section.locked:
        return False

    padding = config.section_padding
    changed = False

    if element.right > section.width - padding:
        scene.resize_element(section.id, element.right + padding, section.height)
        changed = True

    if element.bottom > section.height - padding:
        scene.resize_element(section.id, section.width, element.bottom + padding)
        changed = True

    if element.x < padding:
        shift = element.x - padding
        scene.resize_element(section.id, section.width - shift, section.height)
        scene.move_element(section.id, section.x + shift, section.y)
        for child in scene.children_of(section):
            if not child.locked:
                scene.move_element(child.id, child.x - shift, child.y)
        changed = True

    if element.y < padding:
        shift = element.y - padding
        scene.resize_element(section.id, section.width, section.height - shift)
        scene.move_element(section.id, section.x, section.y + shift)
        for child in scene.children_of(section):
            if not child.locked:
                scene.move_element(child.id, child.x, child.y - shift)
        changed = True

    if changed:
        logger.debug(
            "Section %s adapted to %s: x=%.1f y=%.1f w=%.1f h=%.1f",
            section.id, element.id, section.x, section.y, section.width, section.height,
        )
    return changed
