"""Tests for the gap policy."""

import pytest

from smartdup.duplicate.config import DuplicateConfig
from smartdup.duplicate.gap import detected_gap, effective_gap
from smartdup.scene.abstraction import Element


class TestDetectedGap:
    """Tests for detected_gap."""

    def test_empty_selection_uses_default(self):
        """Empty selection falls back to 40."""
        assert detected_gap([]) == 40

    @pytest.mark.parametrize("width", [0, 100, 399.9, 400])
    def test_small_elements(self, width):
        """Widths up to 400 get the default gap."""
        assert detected_gap([Element(id="a", width=width, height=10)]) == 40

    @pytest.mark.parametrize("width", [400.1, 500, 1920])
    def test_wide_elements(self, width):
        """Widths above 400 get the large gap."""
        assert detected_gap([Element(id="a", width=width, height=10)]) == 100

    def test_only_first_element_counts(self):
        """Later elements are ignored."""
        elements = [
            Element(id="small", width=100, height=10),
            Element(id="wide", width=1000, height=10),
        ]
        assert detected_gap(elements) == 40
        assert detected_gap(list(reversed(elements))) == 100

    def test_height_is_ignored(self):
        """A tall but narrow element still gets the default gap."""
        assert detected_gap([Element(id="a", width=50, height=5000)]) == 40

    def test_custom_config(self):
        """Thresholds and gaps come from the config."""
        config = DuplicateConfig(default_gap=8, large_gap=32, large_width_threshold=50)
        assert detected_gap([Element(id="a", width=60)], config) == 32
        assert detected_gap([Element(id="a", width=40)], config) == 8
        assert detected_gap([], config) == 8


class TestEffectiveGap:
    """Tests for explicit gap precedence."""

    def test_explicit_gap_wins(self):
        element = Element(id="a", width=1000, height=10)
        assert effective_gap(element, 12) == 12

    def test_zero_is_explicit(self):
        """A gap of 0 is not treated as missing."""
        element = Element(id="a", width=1000, height=10)
        assert effective_gap(element, 0) == 0

    def test_none_detects(self):
        assert effective_gap(Element(id="a", width=1000, height=10), None) == 100
        assert effective_gap(Element(id="a", width=10, height=10), None) == 40
