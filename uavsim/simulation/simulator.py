"""Tick-driven flight simulation for a single aircraft.

The simulator owns the truth state and everything that mutates it. An
external frame scheduler drives it, one call per frame:

    sim.tick(elapsed_ms, flags) -> snapshot

and each tick runs the same fixed sequence:
    1. Clock increments elapsed time
    2. Commanded attitude consumes the controller flags
    3. Estimator advances the state using the previous tick's derived values
    4. State recomputes its performance values
    5. A read-only snapshot is returned for the renderer

Example:
    >>> from uavsim.control import CommandFlags
    >>> from uavsim.simulation import FlightSimulator
    >>>
    >>> sim = FlightSimulator.trainer_scenario()
    >>> sim.toggle()
    <ClockState.RUNNING: 'running'>
    >>>
    >>> # Frame loop (this code would live in the display layer)
    >>> for _ in range(60):
    ...     snapshot = sim.tick(16.7, CommandFlags(roll_right=True))
    >>> snapshot.bank_deg > 0
    True
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from beartype import beartype

from uavsim.control.commands import CommandFlags
from uavsim.dynamics.commanded import CommandedAttitude
from uavsim.dynamics.estimator import AttitudeEstimator
from uavsim.dynamics.snapshot import AircraftSnapshot
from uavsim.dynamics.state import AircraftState
from uavsim.environment.conditions import Environment
from uavsim.environment.wind import Wind
from uavsim.simulation.clock import ClockState, SimulationClock
from uavsim.vehicle.airframe import Airframe

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Initial conditions for a session.

    Attributes:
        heading_deg: Initial heading [deg]
        keas_kt: Initial equivalent airspeed [kt]
        altitude_ft: Initial altitude [ft]
        pitch_deg: Initial flight-path angle [deg]
        bank_deg: Initial bank angle [deg]
        start_time: Simulated time of the first start (toggle time when None)
    """
    heading_deg: float | int = 360.0
    keas_kt: float | int = 120.0
    altitude_ft: float | int = 10_000.0
    pitch_deg: float | int = 0.0
    bank_deg: float | int = 0.0
    start_time: datetime | None = None

    def __post_init__(self) -> None:
        if self.keas_kt < 0:
            raise ValueError(f"keas_kt must be non-negative, got {self.keas_kt}")
        if self.altitude_ft < 0:
            raise ValueError(f"altitude_ft must be non-negative, got {self.altitude_ft}")

    def initial_state(self) -> AircraftState:
        return AircraftState.from_initial_conditions(
            heading_deg=self.heading_deg,
            keas_kt=self.keas_kt,
            altitude_ft=self.altitude_ft,
            pitch_deg=self.pitch_deg,
            bank_deg=self.bank_deg,
        )


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class FlightSimulator:
    """Single-aircraft simulation driven by an external frame loop.

    Not safe for concurrent mutation: one thread drives ticks, toggles and
    environment changes.

    Attributes:
        airframe: Aircraft type being flown
        environment: Ambient conditions (standard day when None)
        config: Initial conditions
    """
    airframe: Airframe = field(default_factory=Airframe.generic)
    environment: Environment | None = None
    config: SimConfig = field(default_factory=SimConfig)

    _state: AircraftState = field(init=False, repr=False)
    _commanded: CommandedAttitude = field(init=False, repr=False)
    _estimator: AttitudeEstimator = field(init=False, repr=False)
    clock: SimulationClock = field(init=False)
    _last_timestamp_ms: float | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the initial state and check it against the airframe.

        Raises:
            ValueError: If the initial altitude is above the airframe ceiling
        """
        ceiling_ft = self.airframe.limits.max_altitude.to("ft").value
        if self.config.altitude_ft > ceiling_ft:
            raise ValueError(
                f"Initial altitude {self.config.altitude_ft} ft is above the "
                f"{self.airframe.name} ceiling of {ceiling_ft:.0f} ft"
            )
        if self.environment is None:
            self.environment = Environment.standard_day()
        self._state = self.config.initial_state()
        self._commanded = CommandedAttitude(self.airframe, self._state)
        self._estimator = AttitudeEstimator(self.airframe, self._state, self._commanded)
        self.clock = SimulationClock(start_time=self.config.start_time)
        self._state.update_performance_values(self.environment)

    @classmethod
    def trainer_scenario(cls, tail_number: str = "505") -> "FlightSimulator":
        """MQ-9 at 120 KEAS, 10,000 ft, heading north, wind 270 at 30 kt."""
        return cls(
            airframe=Airframe.mq9(tail_number),
            environment=Environment(wind=Wind.from_knots(270.0, 30.0)),
            config=SimConfig(),
        )

    # -------------------------------------------------------------------------
    # External signals
    # -------------------------------------------------------------------------

    def toggle(self, at: datetime | None = None) -> ClockState:
        """Forward the start/pause signal to the clock.

        The next advance_to() after a start or resume only primes its
        frame timestamp, so time spent paused is never integrated.
        """
        self._last_timestamp_ms = None
        return self.clock.toggle(at)

    def set_environment(self, environment: Environment | None) -> None:
        """Replace the ambient conditions between ticks."""
        if environment is None:
            environment = Environment.standard_day()
        self.environment = environment
        self._state.update_performance_values(self.environment)
        logger.info(
            "Environment replaced: wind %s at %s, surface %s",
            environment.wind.direction_from,
            environment.wind.speed,
            environment.surface_temperature,
        )

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def tick(
        self,
        elapsed_ms: float | int,
        flags: CommandFlags | None = None,
    ) -> AircraftSnapshot:
        """Run one frame.

        Physics is untouched unless the clock is running.

        Args:
            elapsed_ms: Time since the previous frame [ms]
            flags: Controller state for this frame (neutral when None)

        Returns:
            Snapshot of the state after the frame
        """
        if not self.clock.is_running:
            return self.snapshot()
        if flags is None:
            flags = CommandFlags.neutral()

        self.clock.increment_time(elapsed_ms)
        dt_ms = self.clock.time_increment_ms
        self._commanded.update_from_controller_commands(dt_ms, flags)
        self._estimator.advance(dt_ms)
        self._state.update_performance_values(self.environment)

        logger.debug(
            "Tick %.1f ms: bank=%s pitch=%s keas=%s hdg=%s alt=%s",
            dt_ms,
            self._state.bank,
            self._state.pitch,
            self._state.keas,
            self._state.heading,
            self._state.altitude,
        )
        return self.snapshot()

    def advance_to(
        self,
        timestamp_ms: float | int,
        flags: CommandFlags | None = None,
    ) -> AircraftSnapshot:
        """Run one frame from a monotonic frame timestamp.

        The delta is taken from the previous timestamp. The first frame
        after a start or resume has no previous timestamp and only primes it.

        Args:
            timestamp_ms: Monotonic frame time [ms]
            flags: Controller state for this frame (neutral when None)
        """
        previous = self._last_timestamp_ms
        self._last_timestamp_ms = float(timestamp_ms)
        if previous is None or not self.clock.is_running:
            return self.snapshot()
        return self.tick(max(float(timestamp_ms) - previous, 0.0), flags)

    # -------------------------------------------------------------------------
    # Read-only access
    # -------------------------------------------------------------------------

    def snapshot(self) -> AircraftSnapshot:
        return AircraftSnapshot.capture(
            self._state,
            self.airframe,
            duration=self.clock.get_duration(),
            current_time=self.clock.current_time,
        )

    def get_state(self) -> AircraftState:
        """Copy of the truth state. Changes to it do not affect the simulation."""
        return self._state.copy()
