"""GraphQL types for Light Service"""

import logging
from typing import Annotated, Any, Mapping, Union
import strawberry
from pydantic import ValidationError

from light_service.models.light import LightModel
from light_service.models.result import (
    LightUnavailable as LightUnavailableModel,
    TurnOnOffOutcome,
    TurnOnOffSuccess,
    turn_on_off_outcome_adapter,
)

logger = logging.getLogger(__name__)


class ResultResolutionError(RuntimeError):
    """A turn on/off result matched neither union member (construction bug)"""


@strawberry.type(description="HSL color of a light")
class Color:
    hue: int
    saturation: float
    lightness: float


@strawberry.type(description="The queryable fields of a light")
class Light:
    id: strawberry.ID
    name: str
    on: bool
    brightness: float
    color: Color

    @classmethod
    def from_model(cls, model: LightModel) -> "Light":
        """Create Light from its domain model"""
        return cls(
            id=strawberry.ID(model.id),
            name=model.name,
            on=model.on,
            brightness=model.brightness,
            color=Color(
                hue=model.color.hue,
                saturation=model.color.saturation,
                lightness=model.color.lightness
            )
        )


@strawberry.type(description="The light was turned on or off")
class TurnOnOffLightSuccess:
    light: Light


@strawberry.type(description="The light can't be reached")
class LightUnavailable:
    message: str


TurnOnOffLightResult = Annotated[
    Union[TurnOnOffLightSuccess, LightUnavailable],
    strawberry.union("TurnOnOffLightResult", description="Either a success or a failure"),
]


_TYPE_NAMES = {
    "success": "TurnOnOffLightSuccess",
    "unavailable": "LightUnavailable",
}


def to_outcome(value: Any) -> TurnOnOffOutcome:
    """
    Coerce a turn on/off result into the tagged domain union

    Domain outcomes pass through untouched. Mappings with a ``kind`` key are
    validated against the tagged union; mappings without one are classified
    by their populated field, ``light`` first, then ``message``.

    Raises:
        ResultResolutionError: the value fits neither member
    """
    if isinstance(value, (TurnOnOffSuccess, LightUnavailableModel)):
        return value

    if not isinstance(value, Mapping):
        raise ResultResolutionError(f"Unknown turn on/off result: {value!r}")

    if "kind" not in value:
        if value.get("light"):
            value = {"kind": "success", "light": value["light"]}
        elif value.get("message"):
            value = {"kind": "unavailable", "message": value["message"]}
        else:
            raise ResultResolutionError("Turn on/off result has neither light nor message")

    try:
        return turn_on_off_outcome_adapter.validate_python(value)
    except ValidationError as e:
        raise ResultResolutionError(f"Invalid turn on/off result: {e}") from e


def resolve_result_type(value: Any) -> str:
    """Name of the GraphQL union member a turn on/off result belongs to"""
    return _TYPE_NAMES[to_outcome(value).kind]


def to_graphql_result(value: Any) -> Union[TurnOnOffLightSuccess, LightUnavailable]:
    """Convert a turn on/off result into the matching GraphQL union member"""
    try:
        outcome = to_outcome(value)
    except ResultResolutionError:
        logger.error(f"❌ Could not resolve turn on/off result: {value!r}")
        raise

    if isinstance(outcome, TurnOnOffSuccess):
        return TurnOnOffLightSuccess(light=Light.from_model(outcome.light))
    return LightUnavailable(message=outcome.message)
