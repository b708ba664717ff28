"""Default spacing between an original and its duplicate."""

from typing import Optional, Sequence

from ..scene.abstraction import Element
from .config import DuplicateConfig


def detected_gap(elements: Sequence[Element],
                 config: Optional[DuplicateConfig] = None) -> float:
    """
    Pick a gap from the size of the first element.

    This is a coarse heuristic: wide elements (typically full frames) get
    a larger gap than small ones. It does not measure free space.
    """
    config = config or DuplicateConfig()
    if not elements:
        return config.default_gap
    if elements[0].width > config.large_width_threshold:
        return config.large_gap
    return config.default_gap


def effective_gap(element: Element, gap: Optional[float],
                  config: Optional[DuplicateConfig] = None) -> float:
    """An explicit gap (including 0) wins over the detected one."""
    if gap is not None:
        return gap
    return detected_gap([element], config)
