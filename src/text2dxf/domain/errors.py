"""Errors raised by the drawing document model and its persistence."""

from __future__ import annotations

from pathlib import Path


class DrawingError(Exception):
    """Base class for all drawing errors.

    Attributes:
        message: Human-readable error message.
        error_type: Machine-readable category, used by the transports.
    """

    error_type: str = "drawing"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class DuplicateLayerError(DrawingError):
    """Raised when adding a layer whose name is already taken."""

    error_type = "duplicate_layer"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Layer already exists: {name}")


class UnknownLayerError(DrawingError):
    """Raised when an operation references a layer that does not exist."""

    error_type = "unknown_layer"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown layer: {name}")


class InvalidLayerError(DrawingError):
    """Raised for an empty or malformed layer name or a colour outside the ACI range."""

    error_type = "invalid_layer"


class InvalidGeometryError(DrawingError):
    """Raised when an entity violates its geometric constraints."""

    error_type = "invalid_geometry"


class DrawingIOError(DrawingError):
    """Raised when a drawing cannot be written to disk.

    Attributes:
        path: The target path of the failed write.
    """

    error_type = "io_error"

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)
