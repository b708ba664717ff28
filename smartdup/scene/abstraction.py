"""
Scene Abstraction Layer

Provides an in-memory scene graph of positioned rectangular elements.
Elements live in an arena keyed by identity; parent and child links are
stored as identities rather than object references, so the tree can be
walked in both directions without reference cycles.

The duplication engine only needs a handful of capabilities from the
scene: reading geometry and links, moving and resizing elements, and
cloning an element into a parent's child list.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import SceneError

DEFAULT_OVERLAP_MARGIN = 0.5


class ElementKind(Enum):
    """Element type discriminator."""
    ELEMENT = "element"  # generic leaf element
    AUTO_LAYOUT = "auto_layout"  # children positioned by layout rules
    SECTION = "section"  # padded grouping container, auto-resizes
    FRAME = "frame"  # any other container

    @property
    def is_container(self) -> bool:
        return self is not ElementKind.ELEMENT


@dataclass
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def translated(self, dx: float, dy: float) -> "Rect":
        """Return a copy moved by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def overlaps(self, other: "Rect", margin: float = 0.0) -> bool:
        """Check whether two rectangles intersect.

        The margin shrinks `self` on every side before testing, so
        rectangles that merely touch (or overlap by less than the margin)
        are not reported. Comparisons are strict.
        """
        return (other.x < self.x + self.width - margin and
                other.x + other.width > self.x + margin and
                other.y < self.y + self.height - margin and
                other.y + other.height > self.y + margin)


@dataclass
class Element:
    """A positioned rectangular node in the scene tree."""
    id: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    kind: ElementKind = ElementKind.ELEMENT
    name: str = ""
    locked: bool = False

    # Links are identities; the owning Scene keeps them consistent
    parent: Optional[str] = None
    children: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Element {self.id} has negative size ({self.width} x {self.height})"
            )
        if isinstance(self.kind, str):
            self.kind = ElementKind(self.kind)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def __repr__(self) -> str:
        return (f"Element({self.id!r}, kind={self.kind.value}, "
                f"x={self.x:g}, y={self.y:g}, w={self.width:g}, h={self.height:g})")


@dataclass
class Scene:
    """
    Arena of elements forming one or more trees.

    Every element is registered under its id. Parents own the ordering of
    their children; each child's `parent` field points back to the owner.
    """

    name: str = ""
    elements: Dict[str, Element] = field(default_factory=dict)

    # --- Lookup ---

    def __contains__(self, element_id: str) -> bool:
        return element_id in self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def get_element(self, element_id: str) -> Element:
        """Get an element by id, raising SceneError if it is unknown."""
        try:
            return self.elements[element_id]
        except KeyError:
            raise SceneError(f"Unknown element: {element_id}") from None

    def parent_of(self, element: Element) -> Optional[Element]:
        if element.parent is None:
            return None
        return self.get_element(element.parent)

    def children_of(self, element: Element) -> List[Element]:
        return [self.elements[cid] for cid in element.children]

    def index_of(self, element: Element) -> int:
        """Position of an element within its parent's child list."""
        parent = self.parent_of(element)
        if parent is None:
            raise SceneError(f"Element {element.id} has no parent")
        return parent.children.index(element.id)

    def roots(self) -> List[Element]:
        return [e for e in self.elements.values() if e.parent is None]

    def ancestors(self, element: Element) -> Iterator[Element]:
        """Yield the parent chain of an element, nearest first."""
        current = self.parent_of(element)
        while current is not None:
            yield current
            current = self.parent_of(current)

    def walk(self, element: Element) -> Iterator[Element]:
        """Yield an element and all its descendants, depth first."""
        yield element
        for child in self.children_of(element):
            yield from self.walk(child)

    # --- Tree Mutation ---

    def add_element(self, element: Element, parent_id: Optional[str] = None,
                    index: Optional[int] = None) -> Element:
        """Register a new element, optionally attaching it to a parent."""
        if element.id in self.elements:
            raise SceneError(f"Duplicate element id: {element.id}")
        element.parent = None
        self.elements[element.id] = element
        if parent_id is not None:
            if index is None:
                self.append_child(parent_id, element.id)
            else:
                self.insert_child(parent_id, index, element.id)
        return element

    def insert_child(self, parent_id: str, index: int, child_id: str):
        """Insert a child at `index`, detaching it from any previous parent."""
        parent = self.get_element(parent_id)
        child = self.get_element(child_id)

        if child is parent or any(a is child for a in self.ancestors(parent)):
            raise SceneError(f"Cannot insert {child_id} under its own descendant {parent_id}")

        # Index refers to the child list after the child has been detached
        size = len(parent.children) - (1 if child.parent == parent.id else 0)
        if index < 0 or index > size:
            raise SceneError(
                f"Index {index} out of range for {parent_id} ({size} children)"
            )

        self._detach(child)
        parent.children.insert(index, child.id)
        child.parent = parent.id

    def append_child(self, parent_id: str, child_id: str):
        """Append a child at the end of the parent's child list."""
        parent = self.get_element(parent_id)
        child = self.get_element(child_id)
        size = len(parent.children) - (1 if child.parent == parent.id else 0)
        self.insert_child(parent_id, size, child_id)

    def _detach(self, child: Element):
        if child.parent is None:
            return
        old_parent = self.get_element(child.parent)
        old_parent.children.remove(child.id)
        child.parent = None

    def clone_element(self, element_id: str) -> Element:
        """
        Clone an element and its subtree.

        The clone gets a fresh id, copies geometry, kind, name and the
        locked flag, and is left unparented. Descendants are cloned and
        attached to the clone in the same order.
        """
        source = self.get_element(element_id)
        clone = Element(
            id=self._allocate_id(source.id),
            x=source.x,
            y=source.y,
            width=source.width,
            height=source.height,
            kind=source.kind,
            name=source.name,
            locked=source.locked,
        )
        self.elements[clone.id] = clone

        for child_id in source.children:
            child_clone = self.clone_element(child_id)
            clone.children.append(child_clone.id)
            child_clone.parent = clone.id

        return clone

    def remove_subtree(self, element_id: str):
        """Detach an element and drop it and its descendants from the arena."""
        element = self.get_element(element_id)
        self._detach(element)
        for node in list(self.walk(element)):
            del self.elements[node.id]

    def _allocate_id(self, base: str) -> str:
        candidate = f"{base}-copy"
        n = 2
        while candidate in self.elements:
            candidate = f"{base}-copy-{n}"
            n += 1
        return candidate

    # --- Geometry Mutation ---

    def move_element(self, element_id: str, x: float, y: float):
        element = self.get_element(element_id)
        element.x = x
        element.y = y

    def resize_element(self, element_id: str, width: float, height: float):
        if width < 0 or height < 0:
            raise SceneError(f"Cannot resize {element_id} to {width} x {height}")
        element = self.get_element(element_id)
        element.width = width
        element.height = height

    # --- Inspection ---

    def overlapping_pairs(self, parent_id: str,
                          margin: float = DEFAULT_OVERLAP_MARGIN) -> List[Tuple[str, str]]:
        """Find all overlapping sibling pairs under a parent."""
        parent = self.get_element(parent_id)
        children = self.children_of(parent)
        pairs = []
        for i, a in enumerate(children):
            for b in children[i + 1:]:
                if a.rect.overlaps(b.rect, margin):
                    pairs.append((a.id, b.id))
        return pairs
