"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from text2dxf.domain import (
    DrawingError,
    DrawingIOError,
    DuplicateLayerError,
    InvalidGeometryError,
    InvalidLayerError,
    UnknownLayerError,
)
from text2dxf.web.schemas.responses import ErrorResponse

# Most specific class first
STATUS_CODES: list[tuple[type[DrawingError], int]] = [
    (DuplicateLayerError, 409),
    (UnknownLayerError, 404),
    (InvalidGeometryError, 422),
    (InvalidLayerError, 422),
    (DrawingIOError, 500),
]


def status_code_for(exc: DrawingError) -> int:
    for error_class, status_code in STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return 400


def _details(exc: DrawingError) -> dict | None:
    if isinstance(exc, (DuplicateLayerError, UnknownLayerError)):
        return {"layer": exc.name}
    if isinstance(exc, DrawingIOError):
        return {"path": str(exc.path)}
    return None


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(DrawingError)
    async def drawing_error_handler(request: Request, exc: DrawingError) -> JSONResponse:
        return JSONResponse(
            status_code=status_code_for(exc),
            content=ErrorResponse(
                error=exc.message,
                error_type=exc.error_type,
                details=_details(exc),
            ).model_dump(),
        )
