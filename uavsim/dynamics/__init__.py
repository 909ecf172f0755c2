"""Flight dynamics for the trainer.

Provides the aircraft state with its performance calculator, the
commanded attitude derived from controller flags, and the rate-limited
attitude estimator.

Example:
    >>> from uavsim.dynamics import AircraftState, AttitudeEstimator, CommandedAttitude
    >>> from uavsim.control import CommandFlags
    >>> from uavsim.vehicle import Airframe
    >>>
    >>> airframe = Airframe.mq9()
    >>> state = AircraftState.from_initial_conditions(keas_kt=120, altitude_ft=10000)
    >>> commanded = CommandedAttitude(airframe, state)
    >>> estimator = AttitudeEstimator(airframe, state, commanded)
    >>>
    >>> commanded.update_from_controller_commands(16.7, CommandFlags(roll_right=True))
    >>> estimator.advance(16.7)
    >>> state.update_performance_values()
"""

from uavsim.dynamics.commanded import CommandedAttitude, axis_target
from uavsim.dynamics.estimator import AttitudeEstimator, rate_limit
from uavsim.dynamics.snapshot import AircraftSnapshot, format_turn_radius
from uavsim.dynamics.state import (
    INFINITE_RADIUS,
    AircraftState,
    BoardsStatus,
    ControlMode,
    GearStatus,
)

__all__ = [
    # State
    "AircraftState",
    "ControlMode",
    "GearStatus",
    "BoardsStatus",
    "INFINITE_RADIUS",
    # Snapshot
    "AircraftSnapshot",
    "format_turn_radius",
    # Commands and estimation
    "CommandedAttitude",
    "axis_target",
    "AttitudeEstimator",
    "rate_limit",
]
