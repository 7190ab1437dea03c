import asyncio

import pytest

from light_service.core.config import Settings
from light_service.data.availability import FixedAvailability
from light_service.data.repository import LightRepository
from light_service.service import LightService


INITIAL_LIGHT = {
    "id": "52783cc8-8857-4e54-9461-8fabfc9812c6",
    "name": "Reading Lamp",
    "on": True,
    "brightness": 0.6,
    "color": {"hue": 67, "saturation": 0.77, "lightness": 0.76},
}


@pytest.fixture
def settings():
    return Settings(metrics_enabled=False, latency_light=0.0, failure_rate=0.25)


@pytest.fixture
def repository(settings):
    return LightRepository(settings)


@pytest.fixture
def available_service(repository):
    return LightService(repository, FixedAvailability(True))


@pytest.fixture
def unavailable_service(repository):
    return LightService(repository, FixedAvailability(False))


def run(coro):
    return asyncio.run(coro)
