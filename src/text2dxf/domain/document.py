"""The mutable drawing document.

A Document holds an insertion-ordered set of layers and an append-only
sequence of entities, each resolved to one of those layers when it was
added. Insertion order is the order of the LAYER table and of the
ENTITIES section in the encoded file.

The document provides no locking of its own; callers sharing one document
between threads must serialize access (see
:class:`text2dxf.application.session.DrawingSession`).
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ezdxf.lldxf.validator import is_valid_layer_name

from .errors import (
    DuplicateLayerError,
    InvalidLayerError,
    UnknownLayerError,
)
from .geometry import validate_entity
from .layers import (
    DEFAULT_ACTIVE_LAYER,
    MAX_LAYER_COLOR,
    MIN_LAYER_COLOR,
    STANDARD_LAYERS,
)
from .value_objects import Entity, Layer, PlacedEntity, Polyline

logger = logging.getLogger(__name__)


class Document:
    """In-memory 2D drawing: layers plus placed entities.

    Attributes:
        active_layer: Layer used by transports when a command names none.
            Entities never depend on it; each stores its own layer.
    """

    def __init__(self) -> None:
        self._layers: dict[str, Layer] = {}
        self._entities: list[PlacedEntity] = []
        self.active_layer: str = DEFAULT_ACTIVE_LAYER

    def __repr__(self) -> str:
        return (
            f"Document(layers={len(self._layers)}, entities={len(self._entities)}, "
            f"active_layer={self.active_layer!r})"
        )

    # --- read access ---

    @property
    def layers(self) -> tuple[Layer, ...]:
        """Layers in insertion order."""
        return tuple(self._layers.values())

    @property
    def layer_names(self) -> list[str]:
        return list(self._layers)

    @property
    def entities(self) -> tuple[PlacedEntity, ...]:
        """Placed entities in draw order."""
        return tuple(self._entities)

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    def has_layer(self, name: str) -> bool:
        return name in self._layers

    def get_layer(self, name: str) -> Layer:
        """Return the layer called ``name``.

        Raises:
            UnknownLayerError: If there is no such layer.
        """
        try:
            return self._layers[name]
        except KeyError:
            raise UnknownLayerError(name) from None

    # --- mutation ---

    def add_layer(self, name: str, color: int) -> Layer:
        """Add a new layer at the end of the layer table.

        Args:
            name: Unique, non-empty layer name (case-sensitive).
            color: ACI colour index, 1-255.

        Returns:
            The created layer.

        Raises:
            DuplicateLayerError: If a layer with this name already exists.
            InvalidLayerError: If the name is empty or not a valid DXF layer
                name, or the colour is out of range.
        """
        if not name or not name.strip():
            raise InvalidLayerError("Layer name must not be empty")
        if not is_valid_layer_name(name):
            raise InvalidLayerError(f"Invalid layer name: {name!r}")
        if name in self._layers:
            raise DuplicateLayerError(name)
        if isinstance(color, bool) or not isinstance(color, int):
            raise InvalidLayerError(f"Layer color must be an integer, got {color!r}")
        if not MIN_LAYER_COLOR <= color <= MAX_LAYER_COLOR:
            raise InvalidLayerError(
                f"Layer color must be between {MIN_LAYER_COLOR} and "
                f"{MAX_LAYER_COLOR}, got {color}"
            )

        layer = Layer(name=name, color=color)
        self._layers[name] = layer
        logger.debug("Added layer %s (color %d)", name, color)
        return layer

    def add_entity(self, entity: Entity, layer_name: str) -> int:
        """Append an entity on the given layer.

        The call is all-or-nothing: on any error the document is unchanged.

        Args:
            entity: The entity to add.
            layer_name: Name of an existing layer.

        Returns:
            The entity's id, i.e. its insertion index.

        Raises:
            UnknownLayerError: If ``layer_name`` is not a layer of this document.
            InvalidGeometryError: If the entity violates its constraints.
        """
        if layer_name not in self._layers:
            raise UnknownLayerError(layer_name)
        validate_entity(entity)

        if isinstance(entity, Polyline):
            entity = _normalize_polyline(entity)

        entity_id = len(self._entities)
        placed = PlacedEntity(entity_id=entity_id, layer=layer_name, entity=entity)
        self._entities.append(placed)
        logger.debug("Added %s #%d on layer %s", placed.kind, entity_id, layer_name)
        return entity_id

    def set_active_layer(self, name: str) -> None:
        """Make ``name`` the active layer.

        Raises:
            UnknownLayerError: If there is no such layer.
        """
        if name not in self._layers:
            raise UnknownLayerError(name)
        self.active_layer = name

    def reset(self) -> Document:
        """Discard all entities and layers and restore the standard layers."""
        fresh = create()
        # Swap every field at once so no caller sees a half-reset document.
        self._layers, self._entities, self.active_layer = (
            fresh._layers,
            fresh._entities,
            fresh.active_layer,
        )
        logger.info("Drawing reset to the standard layers")
        return self


def _normalize_polyline(polyline: Polyline) -> Polyline:
    """Store vertices as a tuple and drop a repeated closing vertex."""
    vertices = tuple(polyline.vertices)
    if polyline.closed and len(vertices) > 2 and vertices[-1] == vertices[0]:
        vertices = vertices[:-1]
    if vertices is polyline.vertices:
        return polyline
    return replace(polyline, vertices=vertices)


# --- functional API ---


def create() -> Document:
    """Create a document holding the seven standard layers and no entities."""
    doc = Document()
    for layer in STANDARD_LAYERS:
        doc.add_layer(layer.name, layer.color)
    return doc


def reset(doc: Document) -> Document:
    """Reset ``doc`` in place to a freshly created document and return it."""
    return doc.reset()


def add_layer(doc: Document, name: str, color: int) -> Layer:
    """Add a layer to ``doc``. See :meth:`Document.add_layer`."""
    return doc.add_layer(name, color)


def add_entity(doc: Document, entity: Entity, layer_name: str) -> int:
    """Add an entity to ``doc``. See :meth:`Document.add_entity`."""
    return doc.add_entity(entity, layer_name)


def set_active_layer(doc: Document, name: str) -> None:
    """Change the active layer of ``doc``. See :meth:`Document.set_active_layer`."""
    doc.set_active_layer(name)
