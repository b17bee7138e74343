"""Build 2D architectural drawings command by command and save them as DXF.

Usage:
    from text2dxf import Line, Point2D, add_entity, create, save

    doc = create()
    add_entity(doc, Line(Point2D(0, 0), Point2D(3, 0)), "ARCH-WALL")
    path = save(doc, "room_3x5")
"""

from text2dxf.domain import (
    Arc,
    Circle,
    Document,
    DrawingError,
    DrawingIOError,
    DuplicateLayerError,
    InvalidGeometryError,
    InvalidLayerError,
    Layer,
    Line,
    Point2D,
    Polyline,
    STANDARD_LAYERS,
    TextLabel,
    UnknownLayerError,
    add_entity,
    add_layer,
    create,
    reset,
    set_active_layer,
)
from text2dxf.infrastructure import DxfEncoder, encode, save

__version__ = "1.0.0"

__all__ = [
    "Arc",
    "Circle",
    "Document",
    "DrawingError",
    "DrawingIOError",
    "DuplicateLayerError",
    "DxfEncoder",
    "InvalidGeometryError",
    "InvalidLayerError",
    "Layer",
    "Line",
    "Point2D",
    "Polyline",
    "STANDARD_LAYERS",
    "TextLabel",
    "UnknownLayerError",
    "__version__",
    "add_entity",
    "add_layer",
    "create",
    "encode",
    "reset",
    "save",
    "set_active_layer",
]
