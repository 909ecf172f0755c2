"""Read-only view of the aircraft for display consumers.

Renderers and HUDs never touch the live AircraftState: each tick they get
an immutable snapshot in display units, so nothing outside the core can
bypass the estimator's rate limits.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from beartype import beartype

from uavsim.dynamics.state import AircraftState, BoardsStatus, ControlMode, GearStatus
from uavsim.vehicle.airframe import Airframe


@beartype
@dataclass(frozen=True)
class AircraftSnapshot:
    """Aircraft readouts for one tick.

    Attributes:
        name: Aircraft type name
        tail_number: Tail number
        bank_deg: Bank angle [deg] (positive right wing down)
        pitch_deg: Flight-path angle [deg] (positive up)
        heading_deg: Heading [deg] in (0, 360]
        course_deg: Course over the ground [deg] in (0, 360]
        keas_kt: Equivalent airspeed [kt]
        ktas_kt: True airspeed [kt]
        mach: Mach number [-]
        altitude_ft: Altitude [ft]
        ground_speed_kt: Ground speed [kt]
        load_factor: Load factor [g]
        turn_rate_dps: Turn rate [deg/s] (positive right)
        turn_radius_ft: Turn radius [ft], math.inf when wings level
        vertical_speed_fpm: Vertical speed [ft/min]
        position_ft: (east, north) offset from the start point [ft]
        control_mode: Who is flying
        gear_status: Landing gear position
        boards_status: Speed-board position
        duration: Elapsed simulation time, HH:MM:SS
        current_time: Simulated wall-clock time, None before the first start
    """
    name: str
    tail_number: str
    bank_deg: float
    pitch_deg: float
    heading_deg: float
    course_deg: float
    keas_kt: float
    ktas_kt: float
    mach: float
    altitude_ft: float
    ground_speed_kt: float
    load_factor: float
    turn_rate_dps: float
    turn_radius_ft: float
    vertical_speed_fpm: float
    position_ft: tuple[float, float]
    control_mode: ControlMode
    gear_status: GearStatus
    boards_status: BoardsStatus
    duration: str = "00:00:00"
    current_time: datetime | None = None

    @classmethod
    def capture(
        cls,
        state: AircraftState,
        airframe: Airframe,
        duration: str = "00:00:00",
        current_time: datetime | None = None,
    ) -> "AircraftSnapshot":
        """Freeze the current state into display units."""
        return cls(
            name=airframe.name,
            tail_number=airframe.tail_number,
            bank_deg=float(state.bank.to("deg").value),
            pitch_deg=float(state.pitch.to("deg").value),
            heading_deg=state.heading.degrees,
            course_deg=state.course.degrees,
            keas_kt=float(state.keas.to("kt").value),
            ktas_kt=float(state.ktas.to("kt").value),
            mach=float(state.mach),
            altitude_ft=float(state.altitude.to("ft").value),
            ground_speed_kt=float(state.ground_speed.to("kt").value),
            load_factor=float(state.load_factor),
            turn_rate_dps=float(state.turn_rate.to("deg/s").value),
            turn_radius_ft=float(state.turn_radius.to("ft").value),
            vertical_speed_fpm=float(state.vertical_speed.to("ft/min").value),
            position_ft=(float(state.position[0]), float(state.position[1])),
            control_mode=state.control_mode,
            gear_status=state.gear_status,
            boards_status=state.boards_status,
            duration=duration,
            current_time=current_time,
        )

    @property
    def is_turning(self) -> bool:
        return math.isfinite(self.turn_radius_ft)


@beartype
def format_turn_radius(radius_ft: float) -> str:
    """Render a turn radius for display, '∞' when wings level."""
    if math.isinf(radius_ft):
        return "∞"
    return f"{radius_ft:,.0f} ft"
