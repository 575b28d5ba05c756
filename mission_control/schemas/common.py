"""Common schema helpers."""
from typing import Any, List, Union

from pydantic import AliasChoices, BaseModel, Field


def wire_field(name: str, wire_name: str, default: Any = ..., **kwargs: Any) -> Any:
    """Field that reads either spelling and always writes the camelCase wire name."""
    return Field(
        default,
        validation_alias=AliasChoices(wire_name, name),
        serialization_alias=wire_name,
        **kwargs,
    )


class FieldError(BaseModel):
    """Single field-level validation failure."""

    path: List[Union[str, int]]
    message: str
    code: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing route."""

    error: Union[str, List[FieldError]]
