"""Drawing command endpoints.

Each endpoint maps to one drawing command of the shared DrawingSession.
Domain errors are turned into JSON error responses by the handlers in
:mod:`text2dxf.web.exceptions`.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from text2dxf.web.dependencies import SessionDep
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

router = APIRouter(prefix="/drawing", tags=["drawing"])

DXF_MEDIA_TYPE = "application/dxf"

UNKNOWN_LAYER = {404: {"model": ErrorResponse, "description": "Unknown layer"}}


@router.post("/new", response_model=CommandResponse)
async def new_project(session: SessionDep) -> CommandResponse:
    """Clear the current session and start a blank drawing.

    Call this at the beginning of a new request.
    """
    return CommandResponse.from_result(session.new_project())


@router.post("/line", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def draw_line(request: DrawLineRequest, session: SessionDep) -> CommandResponse:
    """Draw a simple line between two points."""
    result = session.draw_line(request.start, request.end, layer=request.layer)
    return CommandResponse.from_result(result)


@router.post("/polyline", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def draw_polyline(request: DrawPolylineRequest, session: SessionDep) -> CommandResponse:
    """Draw a sequence of connected lines."""
    result = session.draw_polyline(request.points, closed=request.closed, layer=request.layer)
    return CommandResponse.from_result(result)


@router.post("/arc", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def draw_arc(request: DrawArcRequest, session: SessionDep) -> CommandResponse:
    """Draw an arc."""
    result = session.draw_arc(
        request.center,
        request.radius,
        request.start_angle,
        request.end_angle,
        layer=request.layer,
    )
    return CommandResponse.from_result(result)


@router.post("/circle", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def draw_circle(request: DrawCircleRequest, session: SessionDep) -> CommandResponse:
    """Draw a full circle."""
    result = session.draw_circle(request.center, request.radius, layer=request.layer)
    return CommandResponse.from_result(result)


@router.post("/text", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def add_text(request: AddTextRequest, session: SessionDep) -> CommandResponse:
    """Add a text label."""
    result = session.add_text(
        request.text, request.position, height=request.height, layer=request.layer
    )
    return CommandResponse.from_result(result)


@router.post(
    "/save",
    response_model=CommandResponse,
    responses={500: {"model": ErrorResponse, "description": "File could not be written"}},
)
async def save_file(session: SessionDep, request: SaveFileRequest | None = None) -> CommandResponse:
    """Save the drawing to a DXF file on the server."""
    request = request or SaveFileRequest()
    return CommandResponse.from_result(session.save_file(request.filename))


@router.get("/layers", response_model=LayersResponse)
async def list_layers(session: SessionDep) -> LayersResponse:
    """List the drawing's layers in table order."""
    return LayersResponse(
        layers=[LayerSchema.from_layer(layer) for layer in session.layers()],
        active_layer=session.active_layer(),
    )


@router.post(
    "/layers",
    response_model=CommandResponse,
    status_code=201,
    responses={409: {"model": ErrorResponse, "description": "Layer already exists"}},
)
async def add_layer(request: AddLayerRequest, session: SessionDep) -> CommandResponse:
    """Add a custom layer."""
    return CommandResponse.from_result(session.add_layer(request.name, request.color))


@router.put("/layers/active", response_model=CommandResponse, responses=UNKNOWN_LAYER)
async def set_active_layer(request: SetLayerRequest, session: SessionDep) -> CommandResponse:
    """Change the layer used by commands that pass ``"layer": null``."""
    return CommandResponse.from_result(session.set_layer(request.name))


@router.get("/dxf")
async def get_dxf(session: SessionDep) -> Response:
    """Return the current drawing as DXF text without writing a file."""
    return Response(content=session.encode(), media_type=DXF_MEDIA_TYPE)
