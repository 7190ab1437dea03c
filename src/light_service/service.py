"""Light operations shared by the GraphQL resolvers"""

import logging

from light_service.data.availability import AvailabilityPolicy
from light_service.data.repository import LightRepository
from light_service.models.light import LightModel
from light_service.models.result import (
    LightUnavailable,
    TurnOnOffOutcome,
    TurnOnOffSuccess,
    unavailable_message,
)

logger = logging.getLogger(__name__)


class LightService:
    """Reads the light and switches it on or off through an availability policy"""

    def __init__(self, repository: LightRepository, availability: AvailabilityPolicy):
        self.repository = repository
        self.availability = availability

    async def get_light(self) -> LightModel:
        """Current light state (a copy)"""
        return await self.repository.get()

    async def turn_on_off(self, on: bool) -> TurnOnOffOutcome:
        """
        Switch the light on or off

        An unreachable light is a normal outcome, not an error: the stored
        record is left alone and a ``LightUnavailable`` is returned.

        Args:
            on: Requested power state

        Returns:
            TurnOnOffSuccess with the updated light, or LightUnavailable
        """
        if self.availability.is_available():
            light = await self.repository.set_on(on)
            logger.info(f"💡 {light.name} turned {'on' if on else 'off'}")
            return TurnOnOffSuccess(light=light)

        light = await self.repository.get()
        logger.warning(f"⚠️ {light.name} unavailable, requested on={on}")
        return LightUnavailable(message=unavailable_message(light.name))
