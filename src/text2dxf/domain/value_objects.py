"""Value objects for the drawing domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point2D:
    """2D point on the drawing plane.

    Drawings are flat: every point lies at z = 0. Negative coordinates are
    valid.
    """

    x: float
    y: float

    @classmethod
    def of(cls, xy: tuple[float, float] | Point2D) -> Point2D:
        """Coerce an ``(x, y)`` pair (or an existing point) to a Point2D."""
        if isinstance(xy, Point2D):
            return xy
        x, y = xy
        return cls(float(x), float(y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Layer:
    """A named, coloured drawing layer.

    Attributes:
        name: Unique, case-sensitive layer name.
        color: AutoCAD Color Index (ACI), 1-255.
    """

    name: str
    color: int


# --- Entity variants ---
#
# Entities are plain frozen records. Their geometric constraints (positive
# radius, non-empty vertex list, ...) are checked when an entity is added to
# a document, so an invalid entity can be built and then rejected with a
# structured error.


@dataclass(frozen=True)
class Line:
    """Straight segment between two points."""

    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class Polyline:
    """Connected sequence of straight segments.

    A closed polyline joins the last vertex back to the first; the closing
    vertex is never stored twice.
    """

    vertices: tuple[Point2D, ...]
    closed: bool = False


@dataclass(frozen=True)
class Arc:
    """Circular arc.

    Angles are in degrees, counter-clockwise from the positive x axis
    (0 is east, 90 is north). They are kept exactly as given, including
    negative values and values of 360 or more.
    """

    center: Point2D
    radius: float
    start_angle: float
    end_angle: float


@dataclass(frozen=True)
class Circle:
    """Full circle."""

    center: Point2D
    radius: float


@dataclass(frozen=True)
class TextLabel:
    """Single-line text anchored at its insertion point."""

    content: str
    position: Point2D
    height: float


Entity = Union[Line, Polyline, Arc, Circle, TextLabel]


@dataclass(frozen=True)
class PlacedEntity:
    """An entity stored in a document together with its resolved layer.

    Attributes:
        entity_id: Insertion index of the entity within its document.
        layer: Name of the layer the entity was drawn on.
        entity: The geometric entity itself.
    """

    entity_id: int
    layer: str
    entity: Entity

    @property
    def kind(self) -> str:
        """Lower-case variant name, e.g. ``"line"`` or ``"textlabel"``."""
        return type(self.entity).__name__.lower()
