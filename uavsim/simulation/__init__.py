"""Simulation clock and tick orchestration.

Example:
    >>> from uavsim.simulation import FlightSimulator, format_snapshot_summary
    >>>
    >>> sim = FlightSimulator.trainer_scenario()
    >>> sim.toggle()
    <ClockState.RUNNING: 'running'>
    >>> print(format_snapshot_summary(sim.tick(1000.0)))
"""

from uavsim.simulation.clock import ClockState, SimulationClock, format_duration
from uavsim.simulation.readout import format_snapshot_summary
from uavsim.simulation.simulator import FlightSimulator, SimConfig

__all__ = [
    "ClockState",
    "SimulationClock",
    "format_duration",
    "SimConfig",
    "FlightSimulator",
    "format_snapshot_summary",
]
