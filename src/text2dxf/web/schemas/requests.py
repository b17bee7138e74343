"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from text2dxf.application import DEFAULT_TEXT_HEIGHT
from text2dxf.domain.layers import (
    LAYER_CURVE,
    LAYER_FURNITURE,
    LAYER_TEXT,
    LAYER_WALL,
    MAX_LAYER_COLOR,
    MIN_LAYER_COLOR,
)
from text2dxf.infrastructure import DEFAULT_FILENAME

Point = tuple[float, float]


class DrawLineRequest(BaseModel):
    """Request for drawing a line between two points."""

    start: Point = Field(..., description="[x, y] coordinates")
    end: Point = Field(..., description="[x, y] coordinates")
    layer: str | None = Field(
        default=LAYER_WALL, description="Layer name (e.g., 'ARCH-WALL', 'ARCH-FURNITURE')"
    )


class DrawPolylineRequest(BaseModel):
    """Request for drawing connected lines. Best for room boundaries."""

    points: list[Point] = Field(
        ...,
        min_length=1,
        description="List of [x, y] coordinates. e.g., [[0,0], [5,0], [5,5], [0,5]]",
    )
    closed: bool = Field(
        default=True, description="If true, connects the last point back to the first"
    )
    layer: str | None = Field(default=LAYER_WALL, description="Layer name")


class DrawArcRequest(BaseModel):
    """Request for drawing an arc (curved walls, door swings)."""

    center: Point = Field(..., description="[x, y] center point of the arc")
    radius: float = Field(..., gt=0, description="Distance from center to edge")
    start_angle: float = Field(
        ..., description="Starting angle in degrees (0 is East, 90 is North)"
    )
    end_angle: float = Field(..., description="Ending angle in degrees")
    layer: str | None = Field(default=LAYER_CURVE, description="Layer name")


class DrawCircleRequest(BaseModel):
    """Request for drawing a full circle (columns, round tables)."""

    center: Point = Field(..., description="[x, y] center point")
    radius: float = Field(..., gt=0, description="Circle radius")
    layer: str | None = Field(default=LAYER_FURNITURE, description="Layer name")


class AddTextRequest(BaseModel):
    """Request for placing a text label (room names, area labels)."""

    text: str = Field(..., description="The string to display")
    position: Point = Field(..., description="[x, y] location")
    height: float = Field(default=DEFAULT_TEXT_HEIGHT, gt=0, description="Text size")
    layer: str | None = Field(default=LAYER_TEXT, description="Layer name")


class SaveFileRequest(BaseModel):
    """Request for saving the drawing to a DXF file."""

    filename: str = Field(default=DEFAULT_FILENAME, min_length=1, description="Output filename")


class AddLayerRequest(BaseModel):
    """Request for adding a custom layer."""

    name: str = Field(..., min_length=1, description="Unique layer name")
    color: int = Field(
        ..., ge=MIN_LAYER_COLOR, le=MAX_LAYER_COLOR, description="ACI colour index"
    )


class SetLayerRequest(BaseModel):
    """Request for changing the active layer."""

    name: str = Field(..., min_length=1, description="Existing layer name")
