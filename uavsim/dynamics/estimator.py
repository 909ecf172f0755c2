"""Attitude estimator: rate-limited tracking of the commanded attitude.

Each tick, bank, pitch and speed independently move toward their targets
by at most effective_rate * dt. A target within reach is hit exactly, a
target out of reach is approached by exactly one full step, so an axis
never overshoots and never oscillates. This is a saturated first-order
tracker, not a dynamics model.

Heading, altitude and position are then integrated from the turn rate,
vertical speed, ground speed and course left by the previous performance
update. The estimator runs before the recompute in every tick.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np
from beartype import beartype

from uavsim.control.commands import AxisCommand, NoCommand
from uavsim.dynamics.commanded import CommandedAttitude
from uavsim.dynamics.state import AircraftState
from uavsim.units import Quantity, clamp, feet, knots, seconds
from uavsim.vehicle.airframe import Airframe

logger = logging.getLogger(__name__)


@beartype
def rate_limit(current: Quantity, target: Quantity, max_change: Quantity) -> Quantity:
    """Move current toward target by no more than max_change.

    Args:
        current: Current value
        target: Value to approach
        max_change: Largest allowed step (same dimension, non-negative)

    Returns:
        target if it is within reach, otherwise current moved one full step
    """
    delta = (target - current).to(current.unit).value
    step = max_change.to(current.unit).value
    if abs(delta) <= step:
        return target.to(current.unit)
    return Quantity(
        current.value + float(np.clip(delta, -step, step)),
        current.unit,
        current.dimension,
    )


@beartype
@dataclass
class AttitudeEstimator:
    """Advances the aircraft state toward the commanded attitude.

    Attributes:
        airframe: Airframe providing rates and limits
        state: State being advanced (mutated in place)
        commanded: Commanded attitude for the current tick
    """
    airframe: Airframe
    state: AircraftState
    commanded: CommandedAttitude

    def advance(self, elapsed_ms: float | int) -> None:
        """Advance the state by one tick.

        Args:
            elapsed_ms: Time since the previous tick [ms]; zero or negative
                leaves the state untouched
        """
        if elapsed_ms <= 0:
            return
        dt = float(elapsed_ms) / 1000.0
        duration = seconds(dt)
        dynamics = self.airframe.dynamics
        limits = self.airframe.limits
        state = self.state

        # Derived values from the previous performance update
        turn_rate = state.turn_rate
        vertical_speed = state.vertical_speed
        ground_speed_fps = state.ground_speed.to("ft/s").value
        course = state.course.radians

        state.bank = self._track(state.bank, self.commanded.bank, dynamics.effective_roll_rate * duration)
        state.pitch = self._track(state.pitch, self.commanded.pitch, dynamics.effective_pitch_rate * duration)
        state.keas = self._track(state.keas, self.commanded.speed, dynamics.effective_speed_rate * duration)

        max_bank = limits.effective_max_bank
        state.bank = self._hold(state.bank, -max_bank, max_bank, "bank")
        state.pitch = self._hold(state.pitch, -limits.max_pitch, limits.max_pitch, "pitch")
        state.keas = self._hold(state.keas, knots(0.0), knots(math.inf), "speed")

        state.heading = state.heading.rotated_by(turn_rate * duration)
        state.altitude = self._hold(
            state.altitude + vertical_speed * duration,
            feet(0.0),
            limits.max_altitude,
            "altitude",
        )
        state.position = state.position + ground_speed_fps * dt * np.array(
            [np.sin(course), np.cos(course)]
        )

    @staticmethod
    def _track(current: Quantity, command: AxisCommand, max_change: Quantity) -> Quantity:
        if isinstance(command, NoCommand):
            return current
        return rate_limit(current, command.value, max_change)

    @staticmethod
    def _hold(value: Quantity, lower: Quantity, upper: Quantity, name: str) -> Quantity:
        held = clamp(value, lower, upper)
        if held is not value:
            logger.debug("%s %s held at envelope limit %s", name, value, held)
        return held
