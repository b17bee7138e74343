"""FastAPI application factory."""

from pathlib import Path

from fastapi import FastAPI

from text2dxf import __version__
from text2dxf.application import DrawingSession
from text2dxf.web.exceptions import register_exception_handlers
from text2dxf.web.routers import drawing_router


def create_app(output_dir: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The application serves one drawing session; all requests draw on the
    same document.

    Args:
        output_dir: Directory that relative save filenames resolve against.
            Defaults to the server's working directory.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="text2dxf API",
        description="REST API for building 2D architectural drawings and saving them as DXF",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.session = DrawingSession(output_dir=output_dir)

    register_exception_handlers(app)

    app.include_router(drawing_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
