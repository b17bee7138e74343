"""FastAPI REST API for drawing sessions.

Usage:
    uvicorn --factory text2dxf.web:create_app
    text2dxf serve --port 8000
"""

from text2dxf.web.app import create_app

__all__ = ["create_app"]
