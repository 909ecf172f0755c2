"""Wind model.

Wind is reported the way pilots hear it: the direction it blows FROM and
its speed. The air mass itself moves toward the reciprocal bearing, which
is what the ground-track calculation adds to the aircraft's airspeed
vector.
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype

from uavsim.units import Bearing, Quantity, knots


@beartype
@dataclass(frozen=True)
class Wind:
    """Ambient wind.

    Attributes:
        direction_from: Direction the wind is coming from
        speed: Wind speed (non-negative velocity)
    """
    direction_from: Bearing = Bearing(360)
    speed: Quantity = knots(0.0)

    def __post_init__(self) -> None:
        if self.speed.dimension != "velocity":
            raise ValueError(f"Wind speed must be a velocity, got {self.speed.dimension}")
        if self.speed.value < 0:
            raise ValueError(f"Wind speed must be non-negative, got {self.speed}")

    @classmethod
    def calm(cls) -> "Wind":
        """No wind."""
        return cls()

    @classmethod
    def from_knots(cls, direction_deg: float | int, speed_kt: float | int) -> "Wind":
        """Create wind from a compass direction [deg] and speed [kt]."""
        return cls(direction_from=Bearing(direction_deg), speed=knots(speed_kt))

    @property
    def direction_to(self) -> Bearing:
        """Direction the air mass is moving toward."""
        return self.direction_from.reciprocal

    @property
    def north_component(self) -> Quantity:
        """Northward motion of the air mass (negative is southward)."""
        return self.speed * float(np.cos(self.direction_to.radians))

    @property
    def east_component(self) -> Quantity:
        """Eastward motion of the air mass (negative is westward)."""
        return self.speed * float(np.sin(self.direction_to.radians))

    def components(self, unit: str = "kt") -> tuple[float, float]:
        """Get (north, east) components in the requested velocity unit."""
        return (
            self.north_component.to(unit).value,
            self.east_component.to(unit).value,
        )
