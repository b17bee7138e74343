"""Deterministic DXF encoder for drawing documents.

Builds an ezdxf R2000 (AC1015) drawing from a
:class:`~text2dxf.domain.Document` and serializes it as ASCII DXF. Layers
are added to the LAYER table and entities to the modelspace in document
insertion order. The file metadata that ezdxf normally derives from the
clock and random GUIDs is fixed, and handles are assigned sequentially by
a fresh drawing, so encoding the same document twice yields identical
text.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from io import StringIO
from typing import TYPE_CHECKING, ClassVar, TextIO, assert_never

import ezdxf
from ezdxf import units

from text2dxf.domain.geometry import drawing_bounds
from text2dxf.domain.value_objects import (
    Arc,
    Circle,
    Line,
    PlacedEntity,
    Polyline,
    TextLabel,
)

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from text2dxf.domain.document import Document


logger = logging.getLogger(__name__)


DXF_VERSION = "R2000"
# Text encoding of R2000 files, matching the $DWGCODEPAGE (ANSI_1252) ezdxf writes
DXF_ENCODING = "cp1252"

# $INSUNITS value for metres; room sizes in the drawings are given in metres.
INSUNITS_METERS = units.M

# ezdxf.options is process-wide
_fixed_metadata_lock = threading.Lock()


@contextmanager
def _fixed_metadata() -> Iterator[None]:
    """Stamp drawings with constant dates, GUIDs and ezdxf markers."""
    with _fixed_metadata_lock:
        previous = ezdxf.options.write_fixed_meta_data_for_testing
        ezdxf.options.write_fixed_meta_data_for_testing = True
        try:
            yield
        finally:
            ezdxf.options.write_fixed_meta_data_for_testing = previous


def _single_line(text: str) -> str:
    """Keep a string value on one line so it cannot break the tag framing."""
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


class DxfEncoder:
    """Encodes drawing documents as DXF text.

    The encoder is stateless: it never mutates the document and holds no
    per-document state between calls.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
        encoding: Text encoding for files holding the encoded output.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    encoding: ClassVar[str] = DXF_ENCODING

    def __init__(self, insunits: int = INSUNITS_METERS, write_extents: bool = True) -> None:
        """Initialize the encoder.

        Args:
            insunits: Value of the $INSUNITS header variable.
            write_extents: Whether to write $EXTMIN/$EXTMAX computed from the
                entity geometry.
        """
        self.insunits = insunits
        self.write_extents = write_extents

    def encode(self, doc: Document) -> str:
        """Return the complete DXF text for ``doc``."""
        stream = StringIO()
        self.write(doc, stream)
        return stream.getvalue()

    def write(self, doc: Document, stream: TextIO) -> None:
        """Write the complete DXF text for ``doc`` to a text stream."""
        with _fixed_metadata():
            drawing = self._create_document(doc)
            drawing.write(stream)
        logger.debug(
            "Encoded %d layers and %d entities", len(doc.layers), doc.entity_count
        )

    def _create_document(self, doc: Document) -> Drawing:
        drawing = ezdxf.new(DXF_VERSION, units=self.insunits)
        self._setup_layers(drawing, doc)

        msp = drawing.modelspace()
        for placed in doc.entities:
            self._add_entity(msp, placed)

        if self.write_extents:
            self._set_extents(drawing, doc)
        return drawing

    def _setup_layers(self, drawing: Drawing, doc: Document) -> None:
        """Add the document's layers after the layers every DXF file holds."""
        for layer in doc.layers:
            # Table names are case-insensitive in DXF; "0" always exists.
            if layer.name in drawing.layers:
                logger.warning(
                    "Layer %s shares its DXF table entry with an existing layer",
                    layer.name,
                )
                drawing.layers.get(layer.name).dxf.color = layer.color
                continue
            drawing.layers.add(layer.name, color=layer.color)

    def _set_extents(self, drawing: Drawing, doc: Document) -> None:
        bounds = drawing_bounds(placed.entity for placed in doc.entities)
        if bounds is None:
            extmin = extmax = (0.0, 0.0, 0.0)
        else:
            extmin = (bounds.min_x, bounds.min_y, 0.0)
            extmax = (bounds.max_x, bounds.max_y, 0.0)
            logger.debug("Drawing extents %.3f x %.3f", bounds.width, bounds.height)
        # The modelspace layout overrides the header on write unless it is zero
        msp = drawing.modelspace()
        msp.dxf.extmin = extmin
        msp.dxf.extmax = extmax
        drawing.header["$EXTMIN"] = extmin
        drawing.header["$EXTMAX"] = extmax

    def _add_entity(self, msp: Modelspace, placed: PlacedEntity) -> None:
        attribs = {"layer": placed.layer}
        entity = placed.entity
        match entity:
            case Line(start=start, end=end):
                msp.add_line(
                    (start.x, start.y, 0.0), (end.x, end.y, 0.0), dxfattribs=attribs
                )
            case Polyline(vertices=vertices, closed=closed):
                msp.add_lwpolyline(
                    [v.as_tuple() for v in vertices],
                    format="xy",
                    close=closed,
                    dxfattribs=attribs,
                )
            case Arc(center=center, radius=radius, start_angle=start, end_angle=end):
                # Angles are written exactly as given, never wrapped into [0, 360).
                msp.add_arc(
                    (center.x, center.y, 0.0),
                    radius,
                    start,
                    end,
                    dxfattribs=attribs,
                )
            case Circle(center=center, radius=radius):
                msp.add_circle((center.x, center.y, 0.0), radius, dxfattribs=attribs)
            case TextLabel(content=content, position=position, height=height):
                msp.add_text(
                    _single_line(content),
                    height=height,
                    dxfattribs={**attribs, "insert": (position.x, position.y, 0.0)},
                )
            case _:
                assert_never(entity)
        logger.debug("Added %s #%d to modelspace", placed.kind, placed.entity_id)


_default_encoder = DxfEncoder()


def encode(doc: Document) -> str:
    """Encode ``doc`` as DXF text with the default encoder settings."""
    return _default_encoder.encode(doc)
