"""uavsim - Flight dynamics and simulation clock for a UAV visual trainer.

This package turns discrete controller commands into a rate-limited
aircraft attitude, derives the performance readouts a HUD shows (true
airspeed, Mach, ground track, turn performance, vertical speed) and keeps
a pausable simulation clock. Rendering and input capture live outside it.

Example:
    >>> from uavsim import CommandFlags, FlightSimulator, format_snapshot_summary
    >>>
    >>> sim = FlightSimulator.trainer_scenario()
    >>> sim.toggle()
    <ClockState.RUNNING: 'running'>
    >>> for _ in range(120):
    ...     snapshot = sim.tick(16.7, CommandFlags(roll_right=True))
    >>> print(format_snapshot_summary(snapshot))
"""

__version__ = "0.1.0"

# Controller input
from uavsim.control import (
    NO_COMMAND,
    AxisCommand,
    CommandFlags,
    NoCommand,
    Target,
)

# Dynamics
from uavsim.dynamics import (
    AircraftSnapshot,
    AircraftState,
    AttitudeEstimator,
    BoardsStatus,
    CommandedAttitude,
    ControlMode,
    GearStatus,
    format_turn_radius,
)

# Environment
from uavsim.environment import Environment, Wind

# Simulation
from uavsim.simulation import (
    ClockState,
    FlightSimulator,
    SimConfig,
    SimulationClock,
    format_snapshot_summary,
)

# Units
from uavsim.units import Bearing, Quantity

# Vehicle
from uavsim.vehicle import Airframe, AirframeDynamics, AirframeLimits

__all__ = [
    "__version__",
    # Units
    "Quantity",
    "Bearing",
    # Environment
    "Wind",
    "Environment",
    # Vehicle
    "Airframe",
    "AirframeDynamics",
    "AirframeLimits",
    # Controller input
    "CommandFlags",
    "AxisCommand",
    "NoCommand",
    "Target",
    "NO_COMMAND",
    # Dynamics
    "AircraftState",
    "AircraftSnapshot",
    "ControlMode",
    "GearStatus",
    "BoardsStatus",
    "CommandedAttitude",
    "AttitudeEstimator",
    "format_turn_radius",
    # Simulation
    "ClockState",
    "SimulationClock",
    "SimConfig",
    "FlightSimulator",
    "format_snapshot_summary",
]
