"""Airframe profiles: response rates and flight envelope limits.

An airframe is configured once, when the aircraft is created, and never
changes afterwards. Each response rate is paired with a compensator that
models how effective the installed flight-control system is:

    effective rate = base rate * compensator

Example:
    >>> from uavsim.vehicle import Airframe
    >>>
    >>> mq9 = Airframe.mq9(tail_number="505")
    >>> mq9.dynamics.effective_roll_rate
    Quantity(6 deg/s)
    >>> mq9.limits.max_bank
    Quantity(45 deg)
"""

import math
from dataclasses import dataclass, field

from beartype import beartype

from uavsim.units import Quantity, degrees, degrees_per_second, feet, knots_per_second


def _require_non_negative(name: str, value: float | int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require_dimension(name: str, quantity: Quantity, dimension: str) -> None:
    if quantity.dimension != dimension:
        raise ValueError(f"{name} must be {dimension}, got {quantity.dimension}")


# =============================================================================
# Dynamics
# =============================================================================


@beartype
@dataclass(frozen=True)
class AirframeDynamics:
    """Maximum rates of change for the controlled axes.

    Attributes:
        roll_rate: Base roll rate [angular rate]
        roll_rate_compensator: Roll effectiveness multiplier [-]
        pitch_rate: Base flight-path angle rate [angular rate]
        pitch_rate_compensator: Pitch effectiveness multiplier [-]
        speed_rate: Base airspeed change rate [acceleration]
        speed_rate_compensator: Throttle effectiveness multiplier [-]
    """
    roll_rate: Quantity = degrees_per_second(10.0)
    roll_rate_compensator: float = 1.0
    pitch_rate: Quantity = degrees_per_second(3.0)
    pitch_rate_compensator: float = 1.0
    speed_rate: Quantity = knots_per_second(2.0)
    speed_rate_compensator: float = 1.0

    def __post_init__(self) -> None:
        _require_dimension("roll_rate", self.roll_rate, "angular_rate")
        _require_dimension("pitch_rate", self.pitch_rate, "angular_rate")
        _require_dimension("speed_rate", self.speed_rate, "acceleration")
        _require_non_negative("roll_rate", self.roll_rate.value)
        _require_non_negative("pitch_rate", self.pitch_rate.value)
        _require_non_negative("speed_rate", self.speed_rate.value)
        _require_non_negative("roll_rate_compensator", self.roll_rate_compensator)
        _require_non_negative("pitch_rate_compensator", self.pitch_rate_compensator)
        _require_non_negative("speed_rate_compensator", self.speed_rate_compensator)

    @property
    def effective_roll_rate(self) -> Quantity:
        return self.roll_rate * self.roll_rate_compensator

    @property
    def effective_pitch_rate(self) -> Quantity:
        return self.pitch_rate * self.pitch_rate_compensator

    @property
    def effective_speed_rate(self) -> Quantity:
        return self.speed_rate * self.speed_rate_compensator


# =============================================================================
# Limits
# =============================================================================


@beartype
@dataclass(frozen=True)
class AirframeLimits:
    """Flight envelope limits.

    Bank and pitch limits are symmetric magnitudes.

    Attributes:
        max_altitude: Service ceiling [length]
        max_bank: Maximum bank magnitude [angle]
        max_pitch: Maximum flight-path angle magnitude [angle]
        max_load_factor: Maximum structural load factor [-]
    """
    max_altitude: Quantity = feet(10_000.0)
    max_bank: Quantity = degrees(60.0)
    max_pitch: Quantity = degrees(30.0)
    max_load_factor: float = 8.0

    def __post_init__(self) -> None:
        _require_dimension("max_altitude", self.max_altitude, "length")
        _require_dimension("max_bank", self.max_bank, "angle")
        _require_dimension("max_pitch", self.max_pitch, "angle")
        _require_non_negative("max_altitude", self.max_altitude.value)
        _require_non_negative("max_bank", self.max_bank.value)
        _require_non_negative("max_pitch", self.max_pitch.value)
        _require_non_negative("max_load_factor", self.max_load_factor)

    @property
    def effective_max_bank(self) -> Quantity:
        """Bank limit after applying the load-factor limit.

        In a level turn n = 1 / cos(bank), so the load-factor limit caps
        bank at arccos(1 / n_max). A limit of 1 g or less is treated as
        "not set" and only the bank limit applies.
        """
        if self.max_load_factor <= 1.0:
            return self.max_bank
        load_limited = degrees(math.degrees(math.acos(1.0 / self.max_load_factor)))
        return min(self.max_bank, load_limited)


# =============================================================================
# Airframe
# =============================================================================


@beartype
@dataclass(frozen=True)
class Airframe:
    """A named aircraft type with its dynamics and limits.

    Attributes:
        name: Aircraft type name
        tail_number: Tail number shown on the HUD
        dynamics: Maximum rates of change
        limits: Flight envelope limits
    """
    name: str = "UAV"
    tail_number: str = ""
    dynamics: AirframeDynamics = field(default_factory=AirframeDynamics)
    limits: AirframeLimits = field(default_factory=AirframeLimits)

    @classmethod
    def generic(cls, tail_number: str = "") -> "Airframe":
        """Generic UAV: 10 deg/s roll, 10,000 ft ceiling, 60 deg bank, 8 g."""
        return cls(name="UAV", tail_number=tail_number)

    @classmethod
    def mq9(cls, tail_number: str = "") -> "Airframe":
        """MQ-9: 10 deg/s roll at 0.6 effectiveness, 50,000 ft, 45 deg bank, 2.5 g."""
        return cls(
            name="MQ-9",
            tail_number=tail_number,
            dynamics=AirframeDynamics(
                roll_rate=degrees_per_second(10.0),
                roll_rate_compensator=0.6,
                pitch_rate=degrees_per_second(2.0),
                speed_rate=knots_per_second(1.5),
            ),
            limits=AirframeLimits(
                max_altitude=feet(50_000.0),
                max_bank=degrees(45.0),
                max_pitch=degrees(20.0),
                max_load_factor=2.5,
            ),
        )

    def with_tail_number(self, tail_number: str) -> "Airframe":
        """Copy of this airframe carrying a different tail number."""
        return Airframe(
            name=self.name,
            tail_number=tail_number,
            dynamics=self.dynamics,
            limits=self.limits,
        )
