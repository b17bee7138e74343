"""Application layer - drawing sessions and scripts."""

from .session import DEFAULT_TEXT_HEIGHT, CommandResult, DrawingSession

__all__ = [
    "DEFAULT_TEXT_HEIGHT",
    "CommandResult",
    "DrawingSession",
]
