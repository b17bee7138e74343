"""Pydantic models for drawing scripts.

A drawing script is a JSON document that lists extra layers and a sequence
of drawing commands, replayed in order against a drawing session:

    {
      "schema_version": "1.0",
      "layers": [{"name": "ARCH-STAIR", "color": 5}],
      "commands": [
        {"command": "draw_polyline", "points": [[0, 0], [3, 0], [3, 5], [0, 5]]},
        {"command": "add_text", "text": "3x5m Room", "position": [1.5, 2.5], "height": 0.3},
        {"command": "save_file", "filename": "room_3x5"}
      ]
    }
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from text2dxf.application.session import DEFAULT_TEXT_HEIGHT
from text2dxf.domain.layers import (
    LAYER_CURVE,
    LAYER_FURNITURE,
    LAYER_TEXT,
    LAYER_WALL,
    MAX_LAYER_COLOR,
    MIN_LAYER_COLOR,
)
from text2dxf.infrastructure.persistence import DEFAULT_FILENAME

if TYPE_CHECKING:
    from text2dxf.application.session import CommandResult, DrawingSession

# Version 1.0: Initial script format
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# [x, y] pair
PointConfig = tuple[float, float]


class LayerConfig(BaseModel):
    """A custom layer to add before the commands run."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Unique layer name")
    color: int = Field(
        ..., ge=MIN_LAYER_COLOR, le=MAX_LAYER_COLOR, description="ACI colour index"
    )


class _CommandBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @abstractmethod
    def apply(self, session: DrawingSession) -> CommandResult:
        """Run the command against a session and return its result."""


class NewProjectCommand(_CommandBase):
    command: Literal["new_project"]

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.new_project()


class SetLayerCommand(_CommandBase):
    command: Literal["set_layer"]
    layer: str = Field(..., min_length=1)

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.set_layer(self.layer)


class DrawLineCommand(_CommandBase):
    command: Literal["draw_line"]
    start: PointConfig
    end: PointConfig
    layer: str | None = LAYER_WALL

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.draw_line(self.start, self.end, layer=self.layer)


class DrawPolylineCommand(_CommandBase):
    command: Literal["draw_polyline"]
    points: list[PointConfig] = Field(..., min_length=1)
    closed: bool = True
    layer: str | None = LAYER_WALL

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.draw_polyline(self.points, closed=self.closed, layer=self.layer)


class DrawArcCommand(_CommandBase):
    command: Literal["draw_arc"]
    center: PointConfig
    radius: float = Field(..., gt=0)
    start_angle: float
    end_angle: float
    layer: str | None = LAYER_CURVE

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.draw_arc(
            self.center, self.radius, self.start_angle, self.end_angle, layer=self.layer
        )


class DrawCircleCommand(_CommandBase):
    command: Literal["draw_circle"]
    center: PointConfig
    radius: float = Field(..., gt=0)
    layer: str | None = LAYER_FURNITURE

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.draw_circle(self.center, self.radius, layer=self.layer)


class AddTextCommand(_CommandBase):
    command: Literal["add_text"]
    text: str
    position: PointConfig
    height: float = Field(default=DEFAULT_TEXT_HEIGHT, gt=0)
    layer: str | None = LAYER_TEXT

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.add_text(self.text, self.position, height=self.height, layer=self.layer)


class SaveFileCommand(_CommandBase):
    command: Literal["save_file"]
    filename: str = Field(default=DEFAULT_FILENAME, min_length=1)

    def apply(self, session: DrawingSession) -> CommandResult:
        return session.save_file(self.filename)


DrawingCommand = Annotated[
    Union[
        NewProjectCommand,
        SetLayerCommand,
        DrawLineCommand,
        DrawPolylineCommand,
        DrawArcCommand,
        DrawCircleCommand,
        AddTextCommand,
        SaveFileCommand,
    ],
    Field(discriminator="command"),
]


class DrawingScript(BaseModel):
    """Root model of a drawing script.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        layers: Custom layers added after the standard ones.
        commands: Drawing commands, replayed in order.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    layers: list[LayerConfig] = Field(default_factory=list)
    commands: list[DrawingCommand] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @property
    def saves(self) -> bool:
        """True if any command writes the drawing to disk."""
        return any(isinstance(c, SaveFileCommand) for c in self.commands)
