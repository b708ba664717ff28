"""
User settings for the duplicate command.

Settings are read from an optional YAML file:

```yaml
gap: 24
auto_detect: false
push_enabled: true
```

Missing keys fall back to the defaults; a missing file yields all
defaults. Settings are never written back.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .duplicate.config import DuplicateConfig
from .errors import SceneFileError

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


def _parse_bool(key: str, value: Any, default: bool) -> bool:
    """Read a flag; quoted words like "false" count, null means default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise SceneFileError(f"{key} must be true or false, got {value!r}")


@dataclass
class DuplicateSettings:
    """Last-used duplicate preferences supplied by the host."""
    gap: Optional[float] = None  # None = never set
    auto_detect: bool = True
    push_enabled: bool = True

    def resolved_gap(self) -> Optional[float]:
        """Gap to pass to the duplicator; None asks it to detect one."""
        if self.auto_detect:
            return None
        return self.gap if self.gap is not None else DuplicateConfig().default_gap

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DuplicateSettings":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))

        gap = data.get("gap")
        try:
            gap = float(gap) if gap is not None else None
        except (TypeError, ValueError):
            raise SceneFileError(f"gap must be a number, got {gap!r}") from None

        return cls(
            gap=gap,
            auto_detect=_parse_bool("auto_detect", data.get("auto_detect"), True),
            push_enabled=_parse_bool("push_enabled", data.get("push_enabled"), True),
        )


def load_settings(path: Optional[Path]) -> DuplicateSettings:
    """
    Load settings from a YAML file.

    Returns defaults when `path` is None or does not exist.
    """
    if path is None:
        return DuplicateSettings()

    path = Path(path)
    if not path.exists():
        logger.debug(f"Settings file not found: {path}")
        return DuplicateSettings()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SceneFileError(f"Cannot read settings file {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SceneFileError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        return DuplicateSettings()
    if not isinstance(data, dict):
        raise SceneFileError(f"Settings file must contain a mapping: {path}")

    settings = DuplicateSettings.from_dict(data)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
