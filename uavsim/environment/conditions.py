"""Ambient conditions the aircraft flies through.

An Environment is immutable. Changing the weather means building a new one
(`with_wind`, `with_surface_temperature`) and handing it to the simulator
between ticks.

Example:
    >>> from uavsim.environment import Environment, Wind
    >>>
    >>> env = Environment.standard_day()
    >>> windy = env.with_wind(Wind.from_knots(270, 30))
    >>> windy.wind_components()
    (1.8...e-15, 30.0)
"""

from dataclasses import dataclass, field, replace

from beartype import beartype

from uavsim.environment.atmosphere import air_density, density_ratio, speed_of_sound
from uavsim.environment.wind import Wind
from uavsim.units import Quantity, fahrenheit

# Standard day at sea level as used by the trainer [F]
STANDARD_SURFACE_TEMPERATURE_F = 68.0


@beartype
@dataclass(frozen=True)
class Environment:
    """Wind and surface temperature.

    Attributes:
        wind: Ambient wind (direction from, speed)
        surface_temperature: Temperature at the surface
    """
    wind: Wind = field(default_factory=Wind.calm)
    surface_temperature: Quantity = fahrenheit(STANDARD_SURFACE_TEMPERATURE_F)

    def __post_init__(self) -> None:
        if self.surface_temperature.dimension != "temperature":
            raise ValueError(
                "Surface temperature must be a temperature, "
                f"got {self.surface_temperature.dimension}"
            )

    @classmethod
    def standard_day(cls) -> "Environment":
        """Zero wind, standard surface temperature."""
        return cls()

    def with_wind(self, wind: Wind) -> "Environment":
        """Copy of this environment with different wind."""
        return replace(self, wind=wind)

    def with_surface_temperature(self, temperature: Quantity) -> "Environment":
        """Copy of this environment with a different surface temperature."""
        return replace(self, surface_temperature=temperature)

    def air_density(self, altitude: Quantity) -> Quantity:
        """Air density at altitude [kg/m^3]."""
        return air_density(altitude)

    def density_ratio(self, altitude: Quantity) -> float:
        """Sea-level to local density ratio."""
        return density_ratio(altitude)

    def speed_of_sound(self, altitude: Quantity) -> Quantity:
        """Local speed of sound [m/s]."""
        return speed_of_sound(altitude)

    def wind_components(self, unit: str = "kt") -> tuple[float, float]:
        """Wind (north, east) components in the requested velocity unit."""
        return self.wind.components(unit)
