"""API routers for the REST API."""

from text2dxf.web.routers.drawing import router as drawing_router

__all__ = ["drawing_router"]
