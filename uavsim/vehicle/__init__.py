"""Vehicle modeling for the flight trainer.

Provides the static airframe profile: response rates with their
compensators, and envelope limits.

Example:
    >>> from uavsim.vehicle import Airframe, AirframeDynamics, AirframeLimits
    >>> from uavsim.units import degrees, feet
    >>>
    >>> custom = Airframe(
    ...     name="Trainer",
    ...     limits=AirframeLimits(max_altitude=feet(15000), max_bank=degrees(50)),
    ... )
"""

from uavsim.vehicle.airframe import (
    Airframe,
    AirframeDynamics,
    AirframeLimits,
)

__all__ = [
    "Airframe",
    "AirframeDynamics",
    "AirframeLimits",
]
