"""
Shared test fixtures for SmartDup tests.

Provides reusable scenes with free-form, auto-layout and section
containers for testing the duplication engine.
"""

import pytest

from smartdup.scene.abstraction import Element, ElementKind, Scene


def add(scene: Scene, parent_id, element_id, x=0.0, y=0.0, width=100.0, height=100.0,
        kind=ElementKind.ELEMENT, locked=False) -> Element:
    """Add an element to a scene under `parent_id`."""
    return scene.add_element(
        Element(id=element_id, x=x, y=y, width=width, height=height,
                kind=kind, locked=locked),
        parent_id=parent_id,
    )


@pytest.fixture
def page_scene() -> Scene:
    """A scene with a single empty free-form page."""
    scene = Scene(name="test_scene")
    scene.add_element(Element(id="page", width=5000.0, height=5000.0, kind=ElementKind.FRAME))
    return scene


@pytest.fixture
def single_scene(page_scene) -> Scene:
    """A page holding one 100x100 element A at the origin."""
    add(page_scene, "page", "A", x=0, y=0)
    return page_scene


@pytest.fixture
def pair_scene(page_scene) -> Scene:
    """A at x=0 and B at x=140, both 100 wide (gap 40 apart)."""
    add(page_scene, "page", "A", x=0, y=0)
    add(page_scene, "page", "B", x=140, y=0)
    return page_scene


@pytest.fixture
def chain_scene(page_scene) -> Scene:
    """A row of four elements A..D spaced 140 apart (40 gap between them)."""
    for i, eid in enumerate("ABCD"):
        add(page_scene, "page", eid, x=140.0 * i, y=0)
    return page_scene


@pytest.fixture
def layout_scene(page_scene) -> Scene:
    """An auto-layout row holding three children."""
    add(page_scene, "page", "row", x=0, y=0, width=400, height=120,
        kind=ElementKind.AUTO_LAYOUT)
    for i, eid in enumerate(["r1", "r2", "r3"]):
        add(page_scene, "row", eid, x=10.0 + 110.0 * i, y=10, width=100, height=100)
    return page_scene


@pytest.fixture
def section_scene(page_scene) -> Scene:
    """A 500x400 section at (1000, 1000) holding two children, one locked."""
    add(page_scene, "page", "sec", x=1000, y=1000, width=500, height=400,
        kind=ElementKind.SECTION)
    add(page_scene, "sec", "card", x=100, y=100, width=100, height=100)
    add(page_scene, "sec", "pin", x=300, y=100, width=50, height=50, locked=True)
    return page_scene


@pytest.fixture
def add_element():
    """Helper for adding elements inside a test: add_element(scene, parent, id, ...)."""
    return add
