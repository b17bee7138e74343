"""Drawing session: the command layer over one document.

A DrawingSession owns a single :class:`~text2dxf.domain.Document` and
exposes the drawing commands (new project, line, polyline, arc, circle,
text, save). Every command runs under one lock, so a session can be shared
by concurrent transport handlers.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from text2dxf.domain import (
    LAYER_CURVE,
    LAYER_FURNITURE,
    LAYER_TEXT,
    LAYER_WALL,
    Arc,
    Circle,
    Document,
    DrawingError,
    Entity,
    InvalidGeometryError,
    Layer,
    Line,
    Point2D,
    Polyline,
    TextLabel,
    create,
)
from text2dxf.infrastructure import DEFAULT_FILENAME, DxfEncoder, save

logger = logging.getLogger(__name__)

PointLike = tuple[float, float] | Sequence[float] | Point2D

DEFAULT_TEXT_HEIGHT = 0.2


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful drawing command.

    Attributes:
        message: Human-readable confirmation.
        entity_id: Id of the entity the command added, if any.
        path: Absolute path written by a save command, if any.
    """

    message: str
    entity_id: int | None = None
    path: Path | None = None


def _point(value: PointLike) -> Point2D:
    if not isinstance(value, Point2D) and len(value) != 2:
        raise InvalidGeometryError(f"Point must have exactly 2 coordinates, got {len(value)}")
    return Point2D.of(value)


class DrawingSession:
    """Serializes drawing commands against one document.

    Attributes:
        output_dir: Directory that relative save targets resolve against
            (default: the current working directory).
    """

    def __init__(
        self,
        output_dir: Path | None = None,
        encoder: DxfEncoder | None = None,
    ) -> None:
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.encoder = encoder or DxfEncoder()
        self._document = create()
        self._lock = threading.Lock()

    @property
    def document(self) -> Document:
        """The session's document. Do not mutate it outside the session."""
        return self._document

    # --- commands ---

    def new_project(self) -> CommandResult:
        """Clear the drawing and restore the standard layers."""
        with self._lock:
            self._document.reset()
        return CommandResult("New project started. Canvas is empty.")

    def draw_line(
        self, start: PointLike, end: PointLike, layer: str | None = LAYER_WALL
    ) -> CommandResult:
        """Draw a straight line between two points."""
        entity = Line(_point(start), _point(end))
        return CommandResult("Line added.", entity_id=self._add(entity, layer))

    def draw_polyline(
        self,
        points: Sequence[PointLike],
        closed: bool = True,
        layer: str | None = LAYER_WALL,
    ) -> CommandResult:
        """Draw connected line segments, closed back to the start by default."""
        entity = Polyline(tuple(_point(p) for p in points), closed=closed)
        return CommandResult("Polyline added.", entity_id=self._add(entity, layer))

    def draw_arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
        layer: str | None = LAYER_CURVE,
    ) -> CommandResult:
        """Draw an arc; angles in degrees, 0 is east and 90 is north."""
        entity = Arc(_point(center), float(radius), float(start_angle), float(end_angle))
        return CommandResult("Arc added.", entity_id=self._add(entity, layer))

    def draw_circle(
        self, center: PointLike, radius: float, layer: str | None = LAYER_FURNITURE
    ) -> CommandResult:
        """Draw a full circle."""
        entity = Circle(_point(center), float(radius))
        return CommandResult("Circle added.", entity_id=self._add(entity, layer))

    def add_text(
        self,
        text: str,
        position: PointLike,
        height: float = DEFAULT_TEXT_HEIGHT,
        layer: str | None = LAYER_TEXT,
    ) -> CommandResult:
        """Place a single-line text label."""
        entity = TextLabel(text, _point(position), float(height))
        return CommandResult(f"Text '{text}' added.", entity_id=self._add(entity, layer))

    def save_file(self, filename: str | Path = DEFAULT_FILENAME) -> CommandResult:
        """Write the drawing to a .dxf file and report its absolute path."""
        with self._lock:
            path = save(self._document, filename, base_dir=self.output_dir, encoder=self.encoder)
        return CommandResult(f"File saved successfully at: {path}", path=path)

    def add_layer(self, name: str, color: int) -> CommandResult:
        """Add a custom layer after the existing ones."""
        with self._lock:
            self._document.add_layer(name, color)
        return CommandResult(f"Layer '{name}' added.")

    def set_layer(self, name: str) -> CommandResult:
        """Change the layer used by commands that do not name one."""
        with self._lock:
            self._document.set_active_layer(name)
        return CommandResult(f"Active layer set to '{name}'.")

    # --- queries ---

    def layers(self) -> list[Layer]:
        with self._lock:
            return list(self._document.layers)

    def active_layer(self) -> str:
        with self._lock:
            return self._document.active_layer

    def entity_count(self) -> int:
        with self._lock:
            return self._document.entity_count

    def encode(self) -> str:
        """Return the DXF text of the current drawing."""
        with self._lock:
            return self.encoder.encode(self._document)

    # --- helpers ---

    def _add(self, entity: Entity, layer: str | None) -> int:
        with self._lock:
            doc = self._document
            target = layer if layer is not None else doc.active_layer
            try:
                entity_id = doc.add_entity(entity, target)
            except DrawingError as e:
                logger.warning("Rejected %s: %s", type(entity).__name__, e)
                raise
            # Naming a layer also makes it the active one, as with the
            # change-layer step of the drawing commands.
            doc.set_active_layer(target)
            return entity_id
