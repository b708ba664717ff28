"""
SmartDup Scene File Handler

Reads and writes scenes as nested YAML trees so the duplication engine
can be driven from the command line.

File Format (YAML):
```yaml
version: 1
name: landing
elements:
  - id: page
    kind: frame
    width: 2000
    height: 2000
    children:
      - id: hero
        kind: section
        x: 0
        y: 0
        width: 800
        height: 600
        children:
          - id: card
            x: 80
            y: 80
            width: 200
            height: 120
            locked: false
```

`kind` defaults to `element`; geometry fields default to 0.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..errors import SceneFileError
from .abstraction import Element, ElementKind, Scene

logger = logging.getLogger(__name__)

# Scene file version for format compatibility
SCENE_FILE_VERSION = 1


def _element_from_dict(data: Dict[str, Any]) -> Element:
    if not isinstance(data, dict):
        raise SceneFileError(f"Element entry must be a mapping, got {type(data).__name__}")
    if "id" not in data:
        raise SceneFileError(f"Element entry without id: {data}")

    kind_value = data.get("kind", ElementKind.ELEMENT.value)
    try:
        kind = ElementKind(kind_value)
    except ValueError:
        raise SceneFileError(f"Unknown element kind {kind_value!r} for {data['id']}") from None

    try:
        return Element(
            id=str(data["id"]),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
            kind=kind,
            name=str(data.get("name", "")),
            locked=bool(data.get("locked", False)),
        )
    except (TypeError, ValueError) as e:
        raise SceneFileError(f"Invalid geometry for {data['id']}: {e}") from e


def _add_subtree(scene: Scene, data: Dict[str, Any], parent_id: Optional[str]):
    element = _element_from_dict(data)
    if element.id in scene:
        raise SceneFileError(f"Duplicate element id: {element.id}")
    scene.add_element(element, parent_id=parent_id)

    children = data.get("children") or []
    if not isinstance(children, list):
        raise SceneFileError(f"children of {element.id} must be a list")
    for child_data in children:
        _add_subtree(scene, child_data, element.id)


def scene_from_dict(data: Dict[str, Any]) -> Scene:
    """Build a Scene from parsed file data."""
    if not isinstance(data, dict):
        raise SceneFileError("Scene file must contain a mapping at the top level")

    version = data.get("version", SCENE_FILE_VERSION)
    if version != SCENE_FILE_VERSION:
        raise SceneFileError(f"Unsupported scene file version: {version}")

    scene = Scene(name=str(data.get("name", "")))
    elements = data.get("elements") or []
    if not isinstance(elements, list):
        raise SceneFileError("elements must be a list")
    for element_data in elements:
        _add_subtree(scene, element_data, None)
    return scene


def _element_to_dict(scene: Scene, element: Element) -> Dict[str, Any]:
    d: Dict[str, Any] = {"id": element.id}
    if element.kind is not ElementKind.ELEMENT:
        d["kind"] = element.kind.value
    if element.name:
        d["name"] = element.name
    d["x"] = round(element.x, 4)
    d["y"] = round(element.y, 4)
    d["width"] = round(element.width, 4)
    d["height"] = round(element.height, 4)
    if element.locked:
        d["locked"] = True
    if element.children:
        d["children"] = [_element_to_dict(scene, c) for c in scene.children_of(element)]
    return d


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    """Convert a Scene to plain data for serialization."""
    elements: List[Dict[str, Any]] = [_element_to_dict(scene, root) for root in scene.roots()]
    return {
        "version": SCENE_FILE_VERSION,
        "name": scene.name,
        "elements": elements,
    }


def load_scene(path: Path) -> Scene:
    """
    Parse a scene file.

    Raises:
        FileNotFoundError: if the file does not exist
        SceneFileError: if the file cannot be read or is not a valid scene
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise SceneFileError(f"Cannot read scene file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SceneFileError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        raise SceneFileError(f"Scene file is empty: {path}")

    scene = scene_from_dict(data)
    logger.debug("Loaded scene %r from %s (%d elements)", scene.name, path, len(scene))
    return scene


def dump_scene(scene: Scene) -> str:
    return yaml.dump(
        scene_to_dict(scene),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def write_scene(scene: Scene, path: Path):
    """Write a scene file."""
    path = Path(path)
    path.write_text(dump_scene(scene), encoding="utf-8")
    logger.info(f"Saved scene: {path} ({len(scene)} elements)")
