"""Data access layer"""

from .availability import AvailabilityPolicy, FixedAvailability, RandomAvailability
from .repository import LightRepository

__all__ = ["AvailabilityPolicy", "FixedAvailability", "LightRepository", "RandomAvailability"]
