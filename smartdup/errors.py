"""Exception types shared across SmartDup."""

from typing import Optional


class SmartDupError(Exception):
    """Base class for all SmartDup errors."""


class SceneError(SmartDupError):
    """Invalid operation on the scene arena (unknown id, cycle, bad index)."""


class SceneFileError(SmartDupError):
    """A scene or settings file could not be parsed."""


class DuplicationError(SmartDupError):
    """Base class for errors reported by a duplication batch."""


class EmptySelection(DuplicationError):
    """Nothing was selected, so the batch did nothing."""

    def __init__(self, message: str = "Please select at least one element to duplicate."):
        super().__init__(message)


class ElementOperationFailed(DuplicationError):
    """Cloning, inserting or resizing failed for a single element."""

    def __init__(self, element_id: str, cause: Optional[BaseException] = None,
                 message: Optional[str] = None):
        self.element_id = element_id
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else "unknown error"
        super().__init__(message)
