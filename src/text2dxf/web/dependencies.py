"""FastAPI dependency injection for the drawing session."""

from typing import Annotated

from fastapi import Depends, Request

from text2dxf.application import DrawingSession


def get_session(request: Request) -> DrawingSession:
    """Dependency for the application's single DrawingSession."""
    return request.app.state.session


# Type alias for cleaner endpoint signatures
SessionDep = Annotated[DrawingSession, Depends(get_session)]
