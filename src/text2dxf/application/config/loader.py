"""Drawing script loader with comprehensive error handling.

Loads JSON drawing scripts and validates them against
:class:`~text2dxf.application.config.schema.DrawingScript`. File system
errors, JSON syntax errors and pydantic validation errors all surface as a
single :class:`ScriptError` with actionable details.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from text2dxf.application.config.schema import DrawingScript


class ScriptError(Exception):
    """Exception raised for drawing script errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation)
        path: Path to the script file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("commands", 2, "draw_arc", "radius"))
        'commands[2].draw_arc.radius'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Drawing script validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def load_script_from_dict(data: Any, path: Path | None = None) -> DrawingScript:
    """Validate a drawing script given as already-parsed JSON data.

    Raises:
        ScriptError: If the data fails validation.
    """
    try:
        return DrawingScript.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ScriptError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_script(path: Path) -> DrawingScript:
    """Load and validate a drawing script from a JSON file.

    Args:
        path: Path to the JSON script.

    Returns:
        The validated script.

    Raises:
        ScriptError: If the file cannot be read, parsed or validated. The
            ``error_type`` attribute tells which.
    """
    if not path.exists():
        raise ScriptError(
            message=f"Script file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ScriptError(
            message=f"Error reading script file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ScriptError(
            message=f"Invalid JSON in script file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return load_script_from_dict(data, path=path)
