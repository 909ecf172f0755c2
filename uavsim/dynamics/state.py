"""Aircraft state and performance calculator.

The state holds what the aircraft is doing:
- Attitude: bank, pitch (flight-path angle), heading
- Energy: equivalent airspeed (KEAS), altitude
- Position: [east, north] offset from the start point [ft]

and what that implies, recomputed by update_performance_values():
- True airspeed, Mach number
- Ground speed and course (wind corrected)
- Load factor, experienced gravity
- Turn rate, turn radius
- Vertical speed

Sign conventions:
- Bank: positive is right wing down
- Pitch: positive is nose (flight path) up
- Heading and course: compass bearings in (0, 360], north is 360
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from uavsim.environment.conditions import Environment
from uavsim.environment.gravity import gravity_at_altitude
from uavsim.units import (
    G0_IMP,
    Bearing,
    Quantity,
    degrees,
    degrees_per_second,
    feet,
    feet_per_minute,
    knots,
)

logger = logging.getLogger(__name__)

# Bank magnitude used in place of anything steeper when evaluating 1/cos(bank)
LOAD_FACTOR_BANK_GUARD_DEG = 89.9

# Sentinel turn radius for wings-level flight
INFINITE_RADIUS = feet(math.inf)


# =============================================================================
# Status Enums
# =============================================================================


class ControlMode(Enum):
    """Who is flying the aircraft."""

    MANUAL = "manual"
    AUTOPILOT = "autopilot"
    AUTO = "auto"


class GearStatus(Enum):
    """Landing gear position."""

    UP = "up"
    DOWN = "down"
    TRANSIT = "transit"


class BoardsStatus(Enum):
    """Speed-board position."""

    NONE = "none"
    IN = "in"
    OUT = "out"


# =============================================================================
# State
# =============================================================================


@beartype
@dataclass
class AircraftState:
    """Current flight state of a single aircraft.

    Attributes:
        heading: Direction the nose points
        keas: Equivalent airspeed
        altitude: Altitude above sea level
        pitch: Flight-path angle (gamma)
        bank: Bank angle
        position: [east, north] offset from the start point [ft]
        control_mode: Manual, autopilot or auto
        gear_status: Landing gear position
        boards_status: Speed-board position
    """
    heading: Bearing = Bearing(360)
    keas: Quantity = knots(0.0)
    altitude: Quantity = feet(0.0)
    pitch: Quantity = degrees(0.0)
    bank: Quantity = degrees(0.0)
    position: NDArray[np.float64] = field(default_factory=lambda: np.zeros(2))
    control_mode: ControlMode = ControlMode.MANUAL
    gear_status: GearStatus = GearStatus.UP
    boards_status: BoardsStatus = BoardsStatus.NONE

    # Derived performance values, overwritten by update_performance_values()
    ktas: Quantity = field(default=knots(0.0), init=False)
    mach: float = field(default=0.0, init=False)
    ground_speed: Quantity = field(default=knots(0.0), init=False)
    course: Bearing = field(default=Bearing(360), init=False)
    load_factor: float = field(default=1.0, init=False)
    experienced_gravity: Quantity = field(default=G0_IMP, init=False)
    turn_rate: Quantity = field(default=degrees_per_second(0.0), init=False)
    turn_radius: Quantity = field(default=INFINITE_RADIUS, init=False)
    vertical_speed: Quantity = field(default=feet_per_minute(0.0), init=False)

    def __post_init__(self) -> None:
        """Validate units and position shape.

        Position must already be a float64 array: the type checker rejects
        lists and integer arrays before this runs.
        """
        if self.position.shape != (2,):
            raise ValueError(f"Position must be shape (2,), got {self.position.shape}")
        for name, expected in (
            ("keas", "velocity"),
            ("altitude", "length"),
            ("pitch", "angle"),
            ("bank", "angle"),
        ):
            quantity = getattr(self, name)
            if quantity.dimension != expected:
                raise ValueError(f"{name} must be {expected}, got {quantity.dimension}")

    @classmethod
    def from_initial_conditions(
        cls,
        heading_deg: float | int = 360.0,
        keas_kt: float | int = 0.0,
        altitude_ft: float | int = 0.0,
        pitch_deg: float | int = 0.0,
        bank_deg: float | int = 0.0,
        position_ft: tuple[float | int, float | int] = (0.0, 0.0),
    ) -> "AircraftState":
        """Create a state from plain display-unit numbers.

        Args:
            heading_deg: Heading [degrees] (0 or 360 = north)
            keas_kt: Equivalent airspeed [kt]
            altitude_ft: Altitude [ft]
            pitch_deg: Flight-path angle [degrees] (positive up)
            bank_deg: Bank angle [degrees] (positive right wing down)
            position_ft: [east, north] offset from the start point [ft]
        """
        return cls(
            heading=Bearing(heading_deg),
            keas=knots(keas_kt),
            altitude=feet(altitude_ft),
            pitch=degrees(pitch_deg),
            bank=degrees(bank_deg),
            position=np.array(position_ft, dtype=np.float64),
        )

    def copy(self) -> "AircraftState":
        """Create a copy of this state, derived values included."""
        new = AircraftState(
            heading=self.heading,
            keas=self.keas,
            altitude=self.altitude,
            pitch=self.pitch,
            bank=self.bank,
            position=self.position.copy(),
            control_mode=self.control_mode,
            gear_status=self.gear_status,
            boards_status=self.boards_status,
        )
        new.ktas = self.ktas
        new.mach = self.mach
        new.ground_speed = self.ground_speed
        new.course = self.course
        new.load_factor = self.load_factor
        new.experienced_gravity = self.experienced_gravity
        new.turn_rate = self.turn_rate
        new.turn_radius = self.turn_radius
        new.vertical_speed = self.vertical_speed
        return new

    @property
    def is_wings_level(self) -> bool:
        return self.bank.value == 0

    # -------------------------------------------------------------------------
    # Performance Calculator
    # -------------------------------------------------------------------------

    def update_performance_values(self, environment: Environment | None = None) -> None:
        """Recompute every derived performance value.

        Pure recomputation from the current attitude, position and
        environment: nothing is carried over from the previous call. The
        order matters, later values build on earlier ones.

        Args:
            environment: Ambient conditions; a calm standard day when None
        """
        if environment is None:
            environment = Environment.standard_day()

        self.ktas = self._true_airspeed(environment)
        self.mach = self._mach_number(environment)
        self.ground_speed, self.course = self._ground_track(environment)
        self.load_factor = self._load_factor()
        self.experienced_gravity = gravity_at_altitude(self.altitude, "ft/s^2")
        self.turn_rate = self._turn_rate()
        self.turn_radius = self._turn_radius()
        self.vertical_speed = self._vertical_speed()

    def _true_airspeed(self, environment: Environment) -> Quantity:
        """KTAS = KEAS * sqrt(rho0 / rho), rounded to the nearest knot."""
        ratio = environment.density_ratio(self.altitude)
        ktas = self.keas.to("kt").value * math.sqrt(ratio)
        return knots(float(round(ktas)))

    def _mach_number(self, environment: Environment) -> float:
        """Mach = KTAS / local speed of sound, to 2 decimals."""
        a_kt = environment.speed_of_sound(self.altitude).to("kt").value
        if a_kt <= 0:
            logger.debug("Speed of sound fit is %.3f kt, reporting Mach 0", a_kt)
            return 0.0
        return round(self.ktas.to("kt").value / a_kt, 2)

    def _ground_track(self, environment: Environment) -> tuple[Quantity, Bearing]:
        """Add the wind to the airspeed vector.

        Returns:
            (ground speed rounded to the nearest knot,
             course rounded to the nearest degree)
        """
        ktas = self.ktas.to("kt").value
        heading = self.heading.radians
        wind_north, wind_east = environment.wind_components("kt")

        north = ktas * float(np.cos(heading)) + wind_north
        east = ktas * float(np.sin(heading)) + wind_east

        ground_speed = float(round(math.hypot(north, east)))
        course_deg = math.degrees(math.atan2(east, north))
        return knots(ground_speed), Bearing(round(course_deg))

    def _guarded_bank_radians(self) -> float:
        """Bank in radians, held just short of +/-90 degrees."""
        bank_deg = self.bank.to("deg").value
        guarded = float(np.clip(bank_deg, -LOAD_FACTOR_BANK_GUARD_DEG, LOAD_FACTOR_BANK_GUARD_DEG))
        if guarded != bank_deg:
            logger.debug("Bank %.3f deg held at %.1f deg for load factor", bank_deg, guarded)
        return math.radians(guarded)

    def _load_factor(self) -> float:
        """n = 1 / cos(bank), to 2 decimals."""
        return round(1.0 / math.cos(self._guarded_bank_radians()), 2)

    def _turn_rate(self) -> Quantity:
        """Rate one turn: g * tan(bank) / V, in deg/s to 2 decimals.

        Sign follows bank (positive is a right turn).
        """
        v_mps = self.ktas.to("m/s").value
        if v_mps <= 0:
            return degrees_per_second(0.0)
        g_mps2 = self.experienced_gravity.to("m/s^2").value
        rate = math.degrees(g_mps2 * math.tan(self._guarded_bank_radians()) / v_mps)
        return degrees_per_second(round(rate, 2))

    def _turn_radius(self) -> Quantity:
        """R = V^2 / (g * sqrt(n^2 - 1)) in feet, to 4 decimals.

        Uses the unrounded load factor. Wings level is an infinite radius.
        Wind is not accounted for.
        """
        if self.is_wings_level:
            return INFINITE_RADIUS
        v_fps = self.ktas.to("ft/s").value
        g_fps2 = self.experienced_gravity.to("ft/s^2").value
        n = 1.0 / math.cos(self._guarded_bank_radians())
        root = math.sqrt(max(n * n - 1.0, 0.0))
        if root == 0.0:
            return INFINITE_RADIUS
        return feet(round(v_fps**2 / (g_fps2 * root), 4))

    def _vertical_speed(self) -> Quantity:
        """Ground speed * sin(gamma), in ft/min to 2 decimals."""
        gs_fpm = self.ground_speed.to("ft/s").value * 60.0
        return feet_per_minute(round(gs_fpm * math.sin(self.pitch.to("rad").value), 2))
