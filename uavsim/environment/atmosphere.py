"""Fitted atmosphere for the trainer's altitude band.

Air density and speed of sound are low-order polynomial fits to the
U.S. Standard Atmosphere 1976 over roughly 0-50,000 ft. They are not a
general atmosphere model: outside that band the fits extrapolate silently.

Example:
    >>> from uavsim.environment import air_density, speed_of_sound
    >>> from uavsim.units import feet
    >>>
    >>> rho = air_density(feet(20000))       # ~0.654 kg/m^3
    >>> a = speed_of_sound(feet(20000))      # ~317 m/s
"""

from beartype import beartype

from uavsim.units import Quantity, kg_per_cubic_meter, meters_per_second

# =============================================================================
# Constants
# =============================================================================

# Sea level density used to scale equivalent airspeed [kg/m^3]
RHO0 = 1.225

# Density fit: rho = C0 + C1*h + C2*h^2, h in feet, rho in kg/m^3
DENSITY_C0 = 1.22
DENSITY_C1 = -3.39e-5
DENSITY_C2 = 2.8e-10

# Speed of sound fit: a = A0 + A1*(h/1000), h in feet, a in m/s
SOUND_A0 = 341.59
SOUND_A1 = -1.2188


# =============================================================================
# Atmosphere Functions
# =============================================================================


@beartype
def air_density(altitude: Quantity) -> Quantity:
    """Estimate air density at altitude.

    Quadratic fit to the 1976 standard atmosphere. The fit has no real
    roots, so it stays positive at any altitude.

    Args:
        altitude: Altitude (any length unit)

    Returns:
        Density in kg/m^3
    """
    h_ft = altitude.to("ft").value
    rho = DENSITY_C0 + DENSITY_C1 * h_ft + DENSITY_C2 * h_ft**2
    return kg_per_cubic_meter(rho)


@beartype
def speed_of_sound(altitude: Quantity) -> Quantity:
    """Estimate the local speed of sound, linear in altitude.

    Args:
        altitude: Altitude (any length unit)

    Returns:
        Speed of sound in m/s
    """
    h_ft = altitude.to("ft").value
    return meters_per_second(SOUND_A0 + SOUND_A1 * (h_ft / 1000.0))


@beartype
def density_ratio(altitude: Quantity) -> float:
    """Ratio of sea-level density to local density (rho0 / rho)."""
    return RHO0 / air_density(altitude).to("kg/m^3").value
