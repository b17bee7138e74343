"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field

from text2dxf.application import CommandResult
from text2dxf.domain import Layer


class CommandResponse(BaseModel):
    """Result of a drawing command."""

    message: str
    entity_id: int | None = Field(default=None, description="Id of the added entity")
    path: str | None = Field(default=None, description="Absolute path of the saved file")

    @classmethod
    def from_result(cls, result: CommandResult) -> "CommandResponse":
        return cls(
            message=result.message,
            entity_id=result.entity_id,
            path=str(result.path) if result.path is not None else None,
        )


class LayerSchema(BaseModel):
    """A drawing layer."""

    name: str
    color: int

    @classmethod
    def from_layer(cls, layer: Layer) -> "LayerSchema":
        return cls(name=layer.name, color=layer.color)


class LayersResponse(BaseModel):
    """All layers of the drawing, in table order."""

    layers: list[LayerSchema]
    active_layer: str


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: dict | list | None = None
