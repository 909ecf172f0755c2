"""Pausable simulation clock.

The clock is the authoritative elapsed-time source for a session. It has
three states driven by a single edge-triggered toggle:

    UNARMED --toggle--> RUNNING --toggle--> PAUSED --toggle--> RUNNING ...

Duration only accumulates while running. Pausing freezes it and resuming
continues from the frozen value.

Example:
    >>> from uavsim.simulation import SimulationClock
    >>> clock = SimulationClock()
    >>> clock.toggle()
    <ClockState.RUNNING: 'running'>
    >>> clock.increment_time(1000.0)
    >>> clock.get_duration()
    '00:00:01'
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from beartype import beartype

logger = logging.getLogger(__name__)


class ClockState(Enum):
    """Lifecycle state of the simulation clock."""

    UNARMED = "unarmed"
    RUNNING = "running"
    PAUSED = "paused"


@beartype
@dataclass
class SimulationClock:
    """Elapsed-time accounting with pause and resume.

    Attributes:
        start_time: Simulated time at the first start. When set before the
            first toggle it is kept, otherwise the toggle time is used.
        duration_ms: Accumulated running time [ms]
        time_increment_ms: Last increment applied while running [ms]
    """
    start_time: datetime | None = None
    duration_ms: float = 0.0
    time_increment_ms: float = field(default=0.0, init=False)
    _state: ClockState = field(default=ClockState.UNARMED, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError(f"duration_ms must be non-negative, got {self.duration_ms}")

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ClockState.RUNNING

    @property
    def is_armed(self) -> bool:
        return self._state is not ClockState.UNARMED

    @property
    def current_time(self) -> datetime | None:
        """Start time plus accumulated duration, None until first armed."""
        if self.start_time is None:
            return None
        return self.start_time + timedelta(milliseconds=self.duration_ms)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def toggle(self, at: datetime | None = None) -> ClockState:
        """Handle the start/pause signal.

        Args:
            at: Time of the toggle, used as the start time on the first
                start when none was configured. Defaults to now.

        Returns:
            The state after the transition
        """
        if self._state is ClockState.UNARMED:
            self.start(at)
        elif self._state is ClockState.RUNNING:
            self.pause()
        else:
            self.resume()
        return self._state

    def start(self, at: datetime | None = None) -> None:
        """Arm the clock and start accumulating from zero.

        Raises:
            ValueError: If the clock has already been started
        """
        if self._state is not ClockState.UNARMED:
            raise ValueError(f"Clock already started (state: {self._state.value})")
        if self.start_time is None:
            self.start_time = at if at is not None else datetime.now()
        self.duration_ms = 0.0
        self.time_increment_ms = 0.0
        self._state = ClockState.RUNNING
        logger.info("Simulation clock started at %s", self.start_time.isoformat())

    def pause(self) -> None:
        """Freeze the accumulated duration. No-op unless running."""
        if self._state is not ClockState.RUNNING:
            return
        self._state = ClockState.PAUSED
        logger.info("Simulation clock paused at %s", self.get_duration())

    def resume(self) -> None:
        """Continue accumulating from the frozen duration. No-op unless paused."""
        if self._state is not ClockState.PAUSED:
            return
        self._state = ClockState.RUNNING
        logger.info("Simulation clock resumed at %s", self.get_duration())

    # -------------------------------------------------------------------------
    # Time keeping
    # -------------------------------------------------------------------------

    def increment_time(self, delta_ms: float | int) -> None:
        """Add a frame increment to the duration.

        Does nothing unless the clock is running. Negative increments are
        treated as zero so the duration never runs backwards.

        Args:
            delta_ms: Elapsed time since the previous frame [ms]
        """
        if not self.is_running:
            return
        if delta_ms < 0:
            logger.debug("Negative clock increment %.3f ms treated as 0", delta_ms)
            delta_ms = 0.0
        self.time_increment_ms = float(delta_ms)
        self.duration_ms += float(delta_ms)

    def get_duration(self) -> str:
        """Accumulated duration as HH:MM:SS, fractional seconds truncated."""
        return format_duration(self.duration_ms)


@beartype
def format_duration(duration_ms: float | int) -> str:
    """Format milliseconds as HH:MM:SS.

    Hours are not wrapped at 24; fractional seconds are truncated.

    Example:
        >>> format_duration(1500.0)
        '00:00:01'
    """
    total_seconds = int(duration_ms // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
