"""Drawing script schema, loading and execution.

Public API:
    - DrawingScript: Root script model
    - LayerConfig: Custom layer definition
    - DrawingCommand: Tagged union of the script commands
    - load_script: Load a script from a JSON file
    - load_script_from_dict: Validate an already-parsed script
    - run_script: Replay a script against a DrawingSession
    - ScriptError: Exception for script loading errors

Example:
    >>> from pathlib import Path
    >>> from text2dxf.application import DrawingSession
    >>> from text2dxf.application.config import load_script, run_script
    >>>
    >>> script = load_script(Path("room.json"))
    >>> results = run_script(script, DrawingSession())
"""

from text2dxf.application.config.loader import (
    ScriptError,
    load_script,
    load_script_from_dict,
)
from text2dxf.application.config.runner import run_script
from text2dxf.application.config.schema import (
    SUPPORTED_VERSIONS,
    AddTextCommand,
    DrawArcCommand,
    DrawCircleCommand,
    DrawingCommand,
    DrawingScript,
    DrawLineCommand,
    DrawPolylineCommand,
    LayerConfig,
    NewProjectCommand,
    SaveFileCommand,
    SetLayerCommand,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AddTextCommand",
    "DrawArcCommand",
    "DrawCircleCommand",
    "DrawLineCommand",
    "DrawPolylineCommand",
    "DrawingCommand",
    "DrawingScript",
    "LayerConfig",
    "NewProjectCommand",
    "SaveFileCommand",
    "ScriptError",
    "SetLayerCommand",
    "load_script",
    "load_script_from_dict",
    "run_script",
]
