"""Replays drawing scripts against a drawing session."""

from __future__ import annotations

import logging

from text2dxf.application.config.schema import DrawingScript
from text2dxf.application.session import CommandResult, DrawingSession

logger = logging.getLogger(__name__)


def run_script(script: DrawingScript, session: DrawingSession) -> list[CommandResult]:
    """Add the script's layers, then run its commands in order.

    Execution stops at the first failing command; the error propagates and
    everything drawn before it stays in the session.

    Returns:
        One result per layer and per command, in execution order.
    """
    results: list[CommandResult] = []
    for layer in script.layers:
        results.append(session.add_layer(layer.name, layer.color))

    for index, command in enumerate(script.commands):
        logger.debug("Running command %d: %s", index, command.command)
        results.append(command.apply(session))

    return results
