"""
Smart Duplicate

Duplicates a selection of elements along a compass direction, pushing
colliding siblings out of the way and growing enclosing sections.

Elements are processed one at a time, furthest along the direction
first, and each element's pushes, placement and section adaptation are
committed before the next element starts. Every original and every
duplicate created so far is excluded from later pushes, so a placed
duplicate is never pushed again by the same batch.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Set, Union

from ..errors import DuplicationError, ElementOperationFailed, EmptySelection
from ..notify import LoggingNotifier, Notifier
from ..scene.abstraction import Element, ElementKind, Scene
from .collisions import resolve_collisions
from .config import DuplicateConfig
from .containers import adapt_container
from .direction import Direction
from .gap import effective_gap

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """How spacing was handled for a batch."""
    PUSHED = "pushed"
    CONTAINER_MANAGED = "container_managed"


@dataclass
class DuplicationResult:
    """Result of a duplication batch."""
    direction: Direction
    created: List[Element] = field(default_factory=list)
    moved: List[str] = field(default_factory=list)  # ids of pushed siblings, in push order
    outcome: Optional[Outcome] = None
    gap: Optional[float] = None  # last effective gap
    errors: List[DuplicationError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return bool(self.created)

    @property
    def empty_selection(self) -> bool:
        return any(isinstance(e, EmptySelection) for e in self.errors)

    @property
    def failures(self) -> List[ElementOperationFailed]:
        return [e for e in self.errors if isinstance(e, ElementOperationFailed)]

    def summary(self) -> str:
        """One-line message describing the batch."""
        if self.empty_selection:
            return str(self.errors[0])
        if not self.created:
            return "Nothing was duplicated."
        if self.outcome is Outcome.CONTAINER_MANAGED:
            return "Duplicated. Spacing handled by auto layout."
        return f"Duplicated {self.direction.label} with {self.gap:g}px gap."


SelectionItem = Union[Element, str]


class SmartDuplicator:
    """
    Directional duplicate with collision propagation.

    Usage:
        duplicator = SmartDuplicator(scene)
        result = duplicator.duplicate(["card"], "right")
    """

    def __init__(self, scene: Scene, config: Optional[DuplicateConfig] = None,
                 notifier: Optional[Notifier] = None):
        self.scene = scene
        self.config = config or DuplicateConfig()
        self.notifier = notifier or LoggingNotifier()

    def duplicate(self, selection: Sequence[SelectionItem],
                  direction: Union[Direction, str],
                  gap: Optional[float] = None,
                  push_enabled: bool = True) -> DuplicationResult:
        """
        Duplicate every selected element in `direction`.

        Args:
            selection: Elements (or their ids) to duplicate
            direction: Compass direction of the duplicates
            gap: Explicit gap; None detects it per element
            push_enabled: Push overlapping siblings out of the way

        Returns:
            DuplicationResult with the created elements. Errors are
            recorded on the result, never raised.
        """
        direction = Direction.parse(direction)
        result = DuplicationResult(direction=direction)

        elements = self._resolve_selection(selection, result)
        if not elements:
            if not result.errors:
                error = EmptySelection()
                result.errors.append(error)
                self.notifier.notify(str(error))
            return result

        ordered = sorted(elements, key=lambda e: direction.sort_key(e.x, e.y))
        excluded: Set[str] = {e.id for e in elements}
        container_managed = False
        last_gap = self.config.default_gap

        logger.debug(
            "Duplicating %d element(s) %s: gap=%s push=%s",
            len(ordered), direction.value, "auto" if gap is None else gap, push_enabled,
        )

        for element in ordered:
            parent = self.scene.parent_of(element)
            if parent is None:
                logger.debug("Skipping %s: no parent", element.id)
                continue

            element_gap = effective_gap(element, gap, self.config)
            last_gap = element_gap

            try:
                if parent.kind is ElementKind.AUTO_LAYOUT:
                    clone = self._duplicate_into_layout(element, parent, direction)
                    container_managed = True
                else:
                    clone = self._duplicate_free(
                        element, parent, direction, element_gap,
                        push_enabled, excluded, result,
                    )
            except Exception as e:
                failure = ElementOperationFailed(element.id, e)
                result.errors.append(failure)
                logger.warning("Failed to duplicate %s: %s", element.id, e)
                self.notifier.notify(f"Failed to duplicate: {failure}", error=True)
                continue

            result.created.append(clone)

        if result.created:
            result.outcome = Outcome.CONTAINER_MANAGED if container_managed else Outcome.PUSHED
            result.gap = last_gap
            self.notifier.notify(result.summary())

        logger.info(
            "Duplicate %s: created=%d moved=%d failed=%d",
            direction.value, len(result.created), len(result.moved), len(result.failures),
        )
        return result

    def _resolve_selection(self, selection: Sequence[SelectionItem],
                           result: DuplicationResult) -> List[Element]:
        """Map ids to elements and drop repeats, keeping the first occurrence."""
        elements: List[Element] = []
        seen: Set[str] = set()
        for item in selection or ():
            element_id = item if isinstance(item, str) else item.id
            if element_id in seen:
                continue
            seen.add(element_id)
            if element_id not in self.scene:
                failure = ElementOperationFailed(element_id, message=f"Unknown element: {element_id}")
                result.errors.append(failure)
                self.notifier.notify(f"Failed to duplicate: {failure}", error=True)
                continue
            elements.append(self.scene.get_element(element_id))
        return elements

    def _attach(self, clone: Element, insert: Callable[[], None]):
        """Run `insert` for a fresh clone, dropping the clone if it fails."""
        try:
            insert()
        except Exception:
            self.scene.remove_subtree(clone.id)
            raise

    def _duplicate_into_layout(self, element: Element, parent: Element,
                               direction: Direction) -> Element:
        """Insert a clone next to the original; the layout decides geometry."""
        index = self.scene.index_of(element)
        if direction.is_forward:
            index += 1
        clone = self.scene.clone_element(element.id)
        self._attach(clone, lambda: self.scene.insert_child(parent.id, index, clone.id))
        logger.debug("Inserted %s into auto layout %s at %d", clone.id, parent.id, index)
        return clone

    def _duplicate_free(self, element: Element, parent: Element,
                        direction: Direction, gap: float, push_enabled: bool,
                        excluded: Set[str], result: DuplicationResult) -> Element:
        """Push siblings, place a clone at the offset and adapt the section."""
        shift_x = element.width + gap
        shift_y = element.height + gap

        if push_enabled:
            pushed = resolve_collisions(
                self.scene, element, direction, shift_x, shift_y,
                excluded=excluded, config=self.config,
            )
            result.moved.extend(s.id for s in pushed)

        clone = self.scene.clone_element(element.id)
        self._attach(clone, lambda: self.scene.append_child(parent.id, clone.id))

        dx, dy = direction.offset(shift_x, shift_y)
        self.scene.move_element(clone.id, element.x + dx, element.y + dy)
        excluded.add(clone.id)

        adapt_container(self.scene, clone, self.config)
        return clone


def smart_duplicate(scene: Scene, selection: Sequence[SelectionItem],
                    direction: Union[Direction, str], gap: Optional[float] = None,
                    push_enabled: bool = True,
                    config: Optional[DuplicateConfig] = None,
                    notifier: Optional[Notifier] = None) -> DuplicationResult:
    """Convenience wrapper around SmartDuplicator.duplicate."""
    duplicator = SmartDuplicator(scene, config=config, notifier=notifier)
    return duplicator.duplicate(selection, direction, gap=gap, push_enabled=push_enabled)
