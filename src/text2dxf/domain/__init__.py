"""Domain layer - the drawing document model."""

from .document import (
    Document,
    add_entity,
    add_layer,
    create,
    reset,
    set_active_layer,
)
from .errors import (
    DrawingError,
    DrawingIOError,
    DuplicateLayerError,
    InvalidGeometryError,
    InvalidLayerError,
    UnknownLayerError,
)
from .geometry import BoundingBox2D, drawing_bounds, entity_bounds, validate_entity
from .layers import (
    DEFAULT_ACTIVE_LAYER,
    LAYER_CURVE,
    LAYER_DOOR,
    LAYER_FURNITURE,
    LAYER_PARTITION,
    LAYER_TEXT,
    LAYER_WALL,
    LAYER_WINDOW,
    STANDARD_LAYERS,
    standard_layer_names,
)
from .value_objects import (
    Arc,
    Circle,
    Entity,
    Layer,
    Line,
    PlacedEntity,
    Point2D,
    Polyline,
    TextLabel,
)

__all__ = [
    "Arc",
    "BoundingBox2D",
    "Circle",
    "DEFAULT_ACTIVE_LAYER",
    "Document",
    "DrawingError",
    "DrawingIOError",
    "DuplicateLayerError",
    "Entity",
    "InvalidGeometryError",
    "InvalidLayerError",
    "LAYER_CURVE",
    "LAYER_DOOR",
    "LAYER_FURNITURE",
    "LAYER_PARTITION",
    "LAYER_TEXT",
    "LAYER_WALL",
    "LAYER_WINDOW",
    "Layer",
    "Line",
    "PlacedEntity",
    "Point2D",
    "Polyline",
    "STANDARD_LAYERS",
    "TextLabel",
    "UnknownLayerError",
    "add_entity",
    "add_layer",
    "create",
    "drawing_bounds",
    "entity_bounds",
    "reset",
    "set_active_layer",
    "standard_layer_names",
    "validate_entity",
]
