# data_models.py
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Bike:
    """Represents a hireable bike. Two bikes are only equal if they are the same bike."""

    def is_working(self) -> bool:
        """Checks if the bike can be ridden."""
        return True


@dataclass(eq=False)
class DockingStation:
    """Represents a docking station with a single slot for one bike."""
    _bike: Optional[Bike] = field(default=None, init=False)

    @property
    def bike(self) -> Optional[Bike]:
        """The bike currently docked, or None if nothing has been docked yet."""
        return self._bike

    def dock(self, bike: Bike) -> Bike:
        """Docks a bike, replacing any bike already held. Returns the docked bike."""
        self._bike = bike
        return bike

    def release_bike(self) -> Bike:
        """Hands out a new bike. The docked bike is left where it is."""
        return Bike()

    def __repr__(self) -> str:
        return f"DockingStation(bike={self._bike!r})"
