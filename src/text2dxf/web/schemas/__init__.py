"""Pydantic schemas for the REST API."""

from text2dxf.web.schemas.requests import (
    AddLayerRequest,
    AddTextRequest,
    DrawArcRequest,
    DrawCircleRequest,
    DrawLineRequest,
    DrawPolylineRequest,
    SaveFileRequest,
    SetLayerRequest,
)
from text2dxf.web.schemas.responses import (
    CommandResponse,
    ErrorResponse,
    LayerSchema,
    LayersResponse,
)

__all__ = [
    "AddLayerRequest",
    "AddTextRequest",
    "CommandResponse",
    "DrawArcRequest",
    "DrawCircleRequest",
    "DrawLineRequest",
    "DrawPolylineRequest",
    "ErrorResponse",
    "LayerSchema",
    "LayersResponse",
    "SaveFileRequest",
    "SetLayerRequest",
]
