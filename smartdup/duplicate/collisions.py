"""
Collision Propagation

Makes room for a duplicate by pushing the siblings it would land on.
Pushed siblings can in turn land on other siblings, so displacement is
propagated breadth-first until no new overlaps are found:

1. Target rectangle - the original's rectangle moved by the shift
2. Propagation - every sibling overlapping a rectangle in the queue is
   collected once and its own shifted rectangle is queued
3. Commit - all collected siblings are moved by the same shift
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Set

from ..scene.abstraction import DEFAULT_OVERLAP_MARGIN, Element, Rect, Scene
from .config import DuplicateConfig
from .direction import Direction

logger = logging.getLogger(__name__)


def target_rect(original: Element, direction: Direction,
                shift_x: float, shift_y: float) -> Rect:
    """Rectangle the duplicate of `original` will occupy."""
    dx, dy = direction.offset(shift_x, shift_y)
    return original.rect.translated(dx, dy)


def find_displaced(scene: Scene, original: Element, direction: Direction,
                   shift_x: float, shift_y: float,
                   excluded: Optional[Set[str]] = None,
                   margin: float = DEFAULT_OVERLAP_MARGIN) -> List[Element]:
    """
    Collect the siblings that must move to make room for the duplicate.

    Does not mutate the scene. Siblings in `excluded` and the original
    itself are never collected.

    Returns:
        Siblings in the order they were reached by the traversal
    """
    parent = scene.parent_of(original)
    if parent is None:
        return []

    dx, dy = direction.offset(shift_x, shift_y)
    processed: Set[str] = set(excluded or ())
    processed.add(original.id)
    siblings = scene.children_of(parent)

    queue: Deque[Rect] = deque([target_rect(original, direction, shift_x, shift_y)])
    displaced: List[Element] = []

    while queue:
        rect = queue.popleft()
        for sibling in siblings:
            if sibling.id in processed:
                continue
            if not rect.overlaps(sibling.rect, margin):
                continue

            # Mark immediately so chains and cycles visit each sibling once
            processed.add(sibling.id)
            displaced.append(sibling)
            queue.append(sibling.rect.translated(dx, dy))

    return displaced


def resolve_collisions(scene: Scene, original: Element, direction: Direction,
                       shift_x: float, shift_y: float,
                       excluded: Optional[Set[str]] = None,
                       config: Optional[DuplicateConfig] = None) -> List[Element]:
    """
    Push the siblings that would overlap the duplicate of `original`.

    Args:
        scene: Scene containing the original
        original: Element about to be duplicated
        direction: Direction of the duplicate
        shift_x: Horizontal distance between original and duplicate origins
        shift_y: Vertical distance between original and duplicate origins
        excluded: Ids that must not move (already placed in this batch)
        config: Engine configuration (overlap margin)

    Returns:
        The siblings that were moved
    """
    config = config or DuplicateConfig()
    displaced = find_displaced(
        scene, original, direction, shift_x, shift_y,
        excluded=excluded, margin=config.overlap_margin,
    )
    if not displaced:
        return []

    dx, dy = direction.offset(shift_x, shift_y)
    for sibling in displaced:
        scene.move_element(sibling.id, sibling.x + dx, sibling.y + dy)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Pushed %d sibling(s) of %s by (%.1f, %.1f): %s",
            len(displaced),
            original.id,
            dx,
            dy,
            ", ".join(s.id for s in displaced),
        )
    return displaced
