"""
Compass directions for duplication.

A direction is decomposed into an optional horizontal component
(left/right) and an optional vertical component (top/bottom). The offset
rule is shared by the target-rectangle computation, the displacement of
pushed siblings and the placement of the duplicate.
"""

from enum import Enum
from typing import Optional, Tuple


class Direction(Enum):
    """8-point compass direction."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction, "top-right", "top_right" or "TOP_RIGHT"."""
        if isinstance(value, Direction):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction {value!r} (expected one of: {choices})") from None

    @property
    def horizontal(self) -> Optional[str]:
        """'left', 'right' or None."""
        if "left" in self.value:
            return "left"
        if "right" in self.value:
            return "right"
        return None

    @property
    def vertical(self) -> Optional[str]:
        """'top', 'bottom' or None."""
        if "top" in self.value:
            return "top"
        if "bottom" in self.value:
            return "bottom"
        return None

    @property
    def is_forward(self) -> bool:
        """True when the duplicate goes after the original in child order."""
        return self.horizontal == "right" or self.vertical == "bottom"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Top Right'."""
        return " ".join(part.capitalize() for part in self.value.split("-"))

    def offset(self, shift_x: float, shift_y: float) -> Tuple[float, float]:
        """Signed (dx, dy) for a move of (shift_x, shift_y) in this direction."""
        dx = 0.0
        dy = 0.0
        if self.horizontal == "left":
            dx = -shift_x
        elif self.horizontal == "right":
            dx = shift_x
        if self.vertical == "top":
            dy = -shift_y
        elif self.vertical == "bottom":
            dy = shift_y
        return dx, dy

    def sort_key(self, x: float, y: float) -> Tuple[float, float]:
        """
        Key that orders elements so the one furthest along the direction
        comes first. The horizontal component is primary; diagonals break
        ties on x by the vertical component, so a bottom-right batch with
        equal x duplicates the lowest element first.
        """
        kx = 0.0
        ky = 0.0
        if self.horizontal == "right":
            kx = -x
        elif self.horizontal == "left":
            kx = x
        if self.vertical == "bottom":
            ky = -y
        elif self.vertical == "top":
            ky = y
        return kx, ky
