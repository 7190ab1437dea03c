"""Result models for the turn on/off operation

The outcome is a tagged union: the ``kind`` discriminant is fixed at
construction, so callers never have to guess the variant from which field
happens to be populated.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from light_service.models.light import LightModel


class TurnOnOffSuccess(BaseModel):
    """The light was reached and its power state updated"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    light: LightModel


class LightUnavailable(BaseModel):
    """The light could not be reached; stored state is untouched"""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unavailable"] = "unavailable"
    message: str = Field(..., min_length=1)


TurnOnOffOutcome = Annotated[
    Union[TurnOnOffSuccess, LightUnavailable],
    Field(discriminator="kind"),
]

turn_on_off_outcome_adapter: TypeAdapter[TurnOnOffOutcome] = TypeAdapter(TurnOnOffOutcome)


def unavailable_message(name: str) -> str:
    """Message returned when the named light cannot be reached"""
    return f"{name} is currently unavailable"
