"""Gravity at altitude for the performance calculator.

Inverse-square falloff from standard sea-level gravity over a mean
Earth radius:

    g(h) = g0 * (R / (R + h))^2

Example:
    >>> from uavsim.environment import gravity_at_altitude
    >>> from uavsim.units import feet
    >>>
    >>> g = gravity_at_altitude(feet(20000))
    >>> g.to("ft/s^2").value
    32.11...
"""

from beartype import beartype

from uavsim.units import G0_SI, Quantity, meters, meters_per_second_squared

# =============================================================================
# Constants
# =============================================================================

# Mean Earth radius [m]
R_EARTH_MEAN = meters(6_378_100.0)

# Standard gravity at sea level [m/s^2]
G0: float = G0_SI.value


@beartype
def gravity_at_altitude(altitude: Quantity, unit: str = "ft/s^2") -> Quantity:
    """Gravitational acceleration experienced at altitude.

    Args:
        altitude: Altitude above sea level (any length unit)
        unit: Acceleration unit of the result

    Returns:
        Local gravity as an acceleration quantity

    Raises:
        ValueError: If unit is not an acceleration unit
    """
    r = R_EARTH_MEAN.to("m").value
    h = altitude.to("m").value
    g = G0 * (r / (r + h)) ** 2
    return meters_per_second_squared(g).to(unit)
