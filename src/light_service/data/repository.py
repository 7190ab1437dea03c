"""Light data repository with in-memory data and latency simulation"""

import asyncio
from typing import Optional

from light_service.core.config import Settings, get_settings
from light_service.models.light import LightModel


class LightRepository:
    """Repository owning the single in-memory light record

    Every access goes through one lock so a concurrent reader never sees a
    half-applied update, and callers only ever get copies of the record.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._lock = asyncio.Lock()
        self._init_data()

    def _init_data(self):
        """Initialize in-memory data"""
        self._light = LightModel(
            id="52783cc8-8857-4e54-9461-8fabfc9812c6",
            name="Reading Lamp",
            on=True,
            brightness=0.6,
            color={
                "hue": 67,
                "saturation": 0.77,
                "lightness": 0.76
            }
        )

    async def _simulate_latency(self):
        if self.settings.latency_light > 0:
            await asyncio.sleep(self.settings.latency_light)

    async def get(self) -> LightModel:
        """Get a snapshot of the light"""
        async with self._lock:
            await self._simulate_latency()
            return self._light.model_copy(deep=True)

    async def set_on(self, on: bool) -> LightModel:
        """Switch the light on or off and return a snapshot of the result"""
        async with self._lock:
            await self._simulate_latency()
            self._light.on = on
            return self._light.model_copy(deep=True)

    def peek(self) -> LightModel:
        """Unlocked snapshot for synchronous callers (health checks)"""
        return self._light.model_copy(deep=True)
