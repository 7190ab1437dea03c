"""Domain models"""

from .light import ColorModel, LightModel
from .result import (
    LightUnavailable,
    TurnOnOffOutcome,
    TurnOnOffSuccess,
    turn_on_off_outcome_adapter,
    unavailable_message,
)

__all__ = [
    "ColorModel",
    "LightModel",
    "LightUnavailable",
    "TurnOnOffOutcome",
    "TurnOnOffSuccess",
    "turn_on_off_outcome_adapter",
    "unavailable_message",
]
