"""Geometry guards and numeric helpers shared by the model and the encoder."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, assert_never

from .errors import InvalidGeometryError
from .value_objects import Arc, Circle, Entity, Line, Point2D, Polyline, TextLabel


@dataclass(frozen=True)
class BoundingBox2D:
    """Axis-aligned 2D bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float]]) -> BoundingBox2D | None:
        """Smallest box holding all points, or None when there are none."""
        xs: list[float] = []
        ys: list[float] = []
        for x, y in points:
            xs.append(x)
            ys.append(y)
        if not xs:
            return None
        return cls(min(xs), min(ys), max(xs), max(ys))

    def union(self, other: BoundingBox2D) -> BoundingBox2D:
        return BoundingBox2D(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


def _require_finite(value: float, what: str) -> None:
    if not math.isfinite(value):
        raise InvalidGeometryError(f"{what} must be a finite number, got {value!r}")


def _require_point(point: Point2D, what: str) -> None:
    _require_finite(point.x, f"{what} x")
    _require_finite(point.y, f"{what} y")


def _require_positive(value: float, what: str) -> None:
    _require_finite(value, what)
    if value <= 0:
        raise InvalidGeometryError(f"{what} must be greater than 0, got {value!r}")


def validate_entity(entity: Entity) -> None:
    """Check the geometric constraints of an entity.

    Args:
        entity: The entity to check.

    Raises:
        InvalidGeometryError: If a radius or text height is not strictly
            positive, a polyline has no vertices, or any number is NaN or
            infinite.
    """
    match entity:
        case Line(start=start, end=end):
            _require_point(start, "line start")
            _require_point(end, "line end")
        case Polyline(vertices=vertices):
            if len(vertices) < 1:
                raise InvalidGeometryError("polyline needs at least one vertex")
            for index, vertex in enumerate(vertices):
                _require_point(vertex, f"polyline vertex {index}")
        case Arc(center=center, radius=radius, start_angle=start, end_angle=end):
            _require_point(center, "arc center")
            _require_positive(radius, "arc radius")
            _require_finite(start, "arc start angle")
            _require_finite(end, "arc end angle")
        case Circle(center=center, radius=radius):
            _require_point(center, "circle center")
            _require_positive(radius, "circle radius")
        case TextLabel(position=position, height=height):
            _require_point(position, "text position")
            _require_positive(height, "text height")
        case _:
            assert_never(entity)


def _arc_extreme_points(arc: Arc) -> list[tuple[float, float]]:
    """Arc end points plus every axis crossing inside the CCW sweep."""
    cx, cy, r = arc.center.x, arc.center.y, arc.radius
    start = arc.start_angle % 360.0
    sweep = (arc.end_angle - arc.start_angle) % 360.0
    if sweep == 0.0:
        # Equal angles draw the full circle in CAD viewers.
        sweep = 360.0

    angles = [arc.start_angle, arc.end_angle]
    for cardinal in (0.0, 90.0, 180.0, 270.0):
        if (cardinal - start) % 360.0 <= sweep:
            angles.append(cardinal)

    return [
        (cx + r * math.cos(math.radians(a)), cy + r * math.sin(math.radians(a)))
        for a in angles
    ]


def entity_bounds(entity: Entity) -> BoundingBox2D | None:
    """Approximate extents of a single entity.

    Text extents only account for the insertion point and the cap height,
    since glyph widths depend on the viewer's font.
    """
    match entity:
        case Line(start=start, end=end):
            return BoundingBox2D.from_points([start.as_tuple(), end.as_tuple()])
        case Polyline(vertices=vertices):
            return BoundingBox2D.from_points(v.as_tuple() for v in vertices)
        case Arc():
            return BoundingBox2D.from_points(_arc_extreme_points(entity))
        case Circle(center=center, radius=radius):
            return BoundingBox2D(
                center.x - radius, center.y - radius, center.x + radius, center.y + radius
            )
        case TextLabel(position=position, height=height):
            return BoundingBox2D.from_points(
                [position.as_tuple(), (position.x, position.y + height)]
            )
        case _:
            assert_never(entity)


def drawing_bounds(entities: Iterable[Entity]) -> BoundingBox2D | None:
    """Union of the extents of all entities, or None for an empty drawing."""
    bounds: BoundingBox2D | None = None
    for entity in entities:
        box = entity_bounds(entity)
        if box is None:
            continue
        bounds = box if bounds is None else bounds.union(box)
    return bounds
