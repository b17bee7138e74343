"""Tests for the drawing document model."""

from __future__ import annotations

import pytest

from text2dxf.domain import (
    STANDARD_LAYERS,
    Arc,
    Circle,
    Document,
    DuplicateLayerError,
    InvalidGeometryError,
    InvalidLayerError,
    Line,
    Point2D,
    Polyline,
    TextLabel,
    UnknownLayerError,
    add_entity,
    add_layer,
    create,
    reset,
    set_active_layer,
    standard_layer_names,
)


class TestCreate:
    """Tests for create()."""

    def test_standard_layers_in_order(self, document: Document) -> None:
        """A new document holds exactly the seven standard layers, in order."""
        assert [(layer.name, layer.color) for layer in document.layers] == [
            ("ARCH-WALL", 7),
            ("ARCH-PARTITION", 8),
            ("ARCH-DOOR", 2),
            ("ARCH-WINDOW", 4),
            ("ARCH-FURNITURE", 1),
            ("ARCH-TEXT", 3),
            ("ARCH-CURVE", 6),
        ]

    def test_no_entities(self, document: Document) -> None:
        assert document.entity_count == 0
        assert document.entities == ()

    def test_default_active_layer(self, document: Document) -> None:
        assert document.active_layer == "ARCH-WALL"

    def test_documents_are_independent(self) -> None:
        """Changing one document leaves another untouched."""
        first = create()
        second = create()
        add_layer(first, "ARCH-STAIR", 5)
        assert not second.has_layer("ARCH-STAIR")

    def test_standard_layer_names(self) -> None:
        assert standard_layer_names() == [layer.name for layer in STANDARD_LAYERS]


class TestAddLayer:
    """Tests for add_layer()."""

    def test_appends_layer(self, document: Document) -> None:
        layer = add_layer(document, "ARCH-STAIR", 5)
        assert layer.name == "ARCH-STAIR"
        assert layer.color == 5
        assert document.layer_names[-1] == "ARCH-STAIR"
        assert len(document.layers) == 8

    def test_duplicate_name_rejected(self, document: Document) -> None:
        """Adding ARCH-WALL again fails and leaves the table unchanged."""
        with pytest.raises(DuplicateLayerError) as exc_info:
            add_layer(document, "ARCH-WALL", 5)
        assert exc_info.value.name == "ARCH-WALL"
        assert len(document.layers) == 7
        assert document.get_layer("ARCH-WALL").color == 7

    def test_names_are_case_sensitive(self, document: Document) -> None:
        add_layer(document, "arch-wall", 5)
        assert document.has_layer("arch-wall")
        assert document.has_layer("ARCH-WALL")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, document: Document, name: str) -> None:
        with pytest.raises(InvalidLayerError, match="must not be empty"):
            add_layer(document, name, 5)

    @pytest.mark.parametrize("name", ["A/B", "WALL:1", "DOOR?", "a<b>"])
    def test_name_with_forbidden_characters_rejected(self, document: Document, name: str) -> None:
        """Names that cannot be written to a DXF LAYER table are refused."""
        with pytest.raises(InvalidLayerError, match="Invalid layer name"):
            add_layer(document, name, 5)
        assert len(document.layers) == 7

    @pytest.mark.parametrize("color", [0, 256, -1])
    def test_color_out_of_range_rejected(self, document: Document, color: int) -> None:
        with pytest.raises(InvalidLayerError, match="between 1 and 255"):
            add_layer(document, "X", color)
        assert not document.has_layer("X")

    @pytest.mark.parametrize("color", [1, 255])
    def test_color_range_bounds_accepted(self, document: Document, color: int) -> None:
        assert add_layer(document, "X", color).color == color

    @pytest.mark.parametrize("color", [True, 2.5, "7"])
    def test_non_integer_color_rejected(self, document: Document, color) -> None:
        with pytest.raises(InvalidLayerError, match="integer"):
            add_layer(document, "X", color)


class TestAddEntity:
    """Tests for add_entity()."""

    def test_returns_insertion_index(self, document: Document) -> None:
        first = add_entity(document, Line(Point2D(0, 0), Point2D(3, 0)), "ARCH-WALL")
        second = add_entity(document, Circle(Point2D(1, 1), 0.5), "ARCH-FURNITURE")
        assert (first, second) == (0, 1)

    def test_preserves_order_and_layer(self, document: Document) -> None:
        """Entities keep their draw order and the layer they were drawn on."""
        line = Line(Point2D(0, 0), Point2D(3, 0))
        text = TextLabel("Room", Point2D(1, 1), 0.3)
        add_entity(document, line, "ARCH-WALL")
        add_entity(document, text, "ARCH-TEXT")

        placed = document.entities
        assert [p.entity for p in placed] == [line, text]
        assert [p.layer for p in placed] == ["ARCH-WALL", "ARCH-TEXT"]
        assert [p.entity_id for p in placed] == [0, 1]

    def test_custom_layer(self, document: Document) -> None:
        add_layer(document, "ARCH-STAIR", 5)
        add_entity(document, Line(Point2D(0, 0), Point2D(1, 0)), "ARCH-STAIR")
        assert document.entities[0].layer == "ARCH-STAIR"

    def test_unknown_layer_rejected(self, document: Document) -> None:
        """An unknown layer fails and the entity is not added."""
        with pytest.raises(UnknownLayerError) as exc_info:
            add_entity(document, Line(Point2D(0, 0), Point2D(1, 0)), "NOPE")
        assert exc_info.value.name == "NOPE"
        assert str(exc_info.value) == "Unknown layer: NOPE"
        assert document.entity_count == 0

    def test_unknown_layer_reported_before_geometry(self, document: Document) -> None:
        with pytest.raises(UnknownLayerError):
            add_entity(document, Circle(Point2D(0, 0), -1.0), "NOPE")

    def test_invalid_geometry_rejected(self, document: Document) -> None:
        with pytest.raises(InvalidGeometryError):
            add_entity(document, Arc(Point2D(0, 0), 0.0, 0.0, 90.0), "ARCH-CURVE")
        assert document.entity_count == 0

    def test_entity_does_not_follow_active_layer(self, document: Document) -> None:
        """The layer is fixed when the entity is added."""
        add_entity(document, Line(Point2D(0, 0), Point2D(1, 0)), "ARCH-WALL")
        set_active_layer(document, "ARCH-DOOR")
        assert document.entities[0].layer == "ARCH-WALL"

    def test_closed_polyline_drops_repeated_closing_vertex(self, document: Document) -> None:
        points = (Point2D(0, 0), Point2D(3, 0), Point2D(3, 5), Point2D(0, 5), Point2D(0, 0))
        add_entity(document, Polyline(points, closed=True), "ARCH-WALL")
        stored = document.entities[0].entity
        assert stored.vertices == points[:-1]
        assert stored.closed is True

    def test_open_polyline_keeps_repeated_vertex(self, document: Document) -> None:
        points = (Point2D(0, 0), Point2D(3, 0), Point2D(0, 0))
        add_entity(document, Polyline(points, closed=False), "ARCH-WALL")
        assert document.entities[0].entity.vertices == points

    def test_polyline_vertices_stored_as_tuple(self, document: Document) -> None:
        add_entity(document, Polyline([Point2D(0, 0), Point2D(1, 0)]), "ARCH-WALL")  # type: ignore[arg-type]
        assert isinstance(document.entities[0].entity.vertices, tuple)

    def test_single_vertex_polyline_accepted(self, document: Document) -> None:
        add_entity(document, Polyline((Point2D(2, 2),)), "ARCH-WALL")
        assert document.entity_count == 1


class TestActiveLayer:
    """Tests for set_active_layer()."""

    def test_sets_existing_layer(self, document: Document) -> None:
        set_active_layer(document, "ARCH-TEXT")
        assert document.active_layer == "ARCH-TEXT"

    def test_unknown_layer_rejected(self, document: Document) -> None:
        with pytest.raises(UnknownLayerError):
            set_active_layer(document, "NOPE")
        assert document.active_layer == "ARCH-WALL"


class TestReset:
    """Tests for reset()."""

    def test_reset_restores_fresh_state(self, document: Document) -> None:
        add_layer(document, "ARCH-STAIR", 5)
        add_entity(document, Circle(Point2D(0, 0), 1.0), "ARCH-STAIR")
        set_active_layer(document, "ARCH-STAIR")

        result = reset(document)

        assert result is document
        assert document.entity_count == 0
        assert document.layer_names == standard_layer_names()
        assert document.active_layer == "ARCH-WALL"

    def test_reset_restores_overwritten_layers(self, document: Document) -> None:
        """Custom layers are removed so they can be added again."""
        add_layer(document, "ARCH-STAIR", 5)
        reset(document)
        add_layer(document, "ARCH-STAIR", 9)
        assert document.get_layer("ARCH-STAIR").color == 9

    def test_entity_ids_restart(self, document: Document) -> None:
        add_entity(document, Circle(Point2D(0, 0), 1.0), "ARCH-WALL")
        reset(document)
        assert add_entity(document, Circle(Point2D(0, 0), 1.0), "ARCH-WALL") == 0
