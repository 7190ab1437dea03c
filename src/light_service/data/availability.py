"""Availability policies deciding whether the light can be reached"""

import random
from typing import Optional, Protocol


class AvailabilityPolicy(Protocol):
    """Decides, per mutation, whether the light answers"""

    def is_available(self) -> bool:
        ...


class RandomAvailability:
    """Simulated outage: the light is unreachable ``failure_rate`` of the time

    Available iff a uniform draw from [0, 1) is strictly greater than
    ``failure_rate``.
    """

    def __init__(self, failure_rate: float = 0.25, rng: Optional[random.Random] = None):
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError(f"failure_rate must be within [0, 1], got {failure_rate}")
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()

    def is_available(self) -> bool:
        return self._rng.random() > self.failure_rate


class FixedAvailability:
    """Always gives the same answer; used to force a branch"""

    def __init__(self, available: bool):
        self.available = available

    def is_available(self) -> bool:
        return self.available
