"""Environment models for the flight trainer.

Provides the fitted atmosphere, gravity at altitude, wind, and the
immutable Environment bundling them for the performance calculator.

Example:
    >>> from uavsim.environment import Environment, Wind
    >>> from uavsim.units import feet
    >>>
    >>> env = Environment(wind=Wind.from_knots(270, 30))
    >>> rho = env.air_density(feet(20000))  # kg/m^3
"""

from uavsim.environment.atmosphere import (
    RHO0,
    air_density,
    density_ratio,
    speed_of_sound,
)
from uavsim.environment.conditions import Environment
from uavsim.environment.gravity import R_EARTH_MEAN, gravity_at_altitude
from uavsim.environment.wind import Wind

__all__ = [
    # Atmosphere
    "RHO0",
    "air_density",
    "density_ratio",
    "speed_of_sound",
    # Gravity
    "R_EARTH_MEAN",
    "gravity_at_altitude",
    # Wind and conditions
    "Wind",
    "Environment",
]
