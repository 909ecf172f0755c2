"""Commanded attitude: controller flags to per-axis targets.

Each tick, every axis with an active flag gets a target one rate-step
away from where the aircraft is now:

    target = current + direction * effective_rate * dt

clamped to the airframe envelope. Axes without input get NoCommand, not
zero. Nothing here moves the aircraft; the estimator decides how far the
state actually travels toward the targets.
"""

import logging
import math
from dataclasses import dataclass

from beartype import beartype

from uavsim.control.commands import NO_COMMAND, AxisCommand, CommandFlags, Target
from uavsim.dynamics.state import AircraftState
from uavsim.units import Quantity, clamp, knots, seconds
from uavsim.vehicle.airframe import Airframe

logger = logging.getLogger(__name__)


@beartype
def axis_target(
    current: Quantity,
    direction: int,
    rate: Quantity,
    dt: float,
    lower: Quantity,
    upper: Quantity,
) -> AxisCommand:
    """Compute one axis command from a flag direction.

    Args:
        current: Current value of the axis
        direction: +1, -1 or 0 (no input)
        rate: Effective rate of change for the axis
        dt: Elapsed time [s]
        lower: Lowest allowed target
        upper: Highest allowed target

    Returns:
        NoCommand when direction is 0, otherwise the clamped Target
    """
    if direction == 0:
        return NO_COMMAND
    step = rate * seconds(dt)
    target = current + step * float(direction)
    return Target(clamp(target, lower, upper))


@beartype
@dataclass
class CommandedAttitude:
    """Target bank, pitch and speed for the current tick.

    Attributes:
        airframe: Airframe providing rates and limits
        state: State the targets are measured from
        bank: Bank command
        pitch: Flight-path angle command
        speed: Equivalent airspeed command
    """
    airframe: Airframe
    state: AircraftState
    bank: AxisCommand = NO_COMMAND
    pitch: AxisCommand = NO_COMMAND
    speed: AxisCommand = NO_COMMAND

    def clear(self) -> None:
        """Drop every command."""
        self.bank = NO_COMMAND
        self.pitch = NO_COMMAND
        self.speed = NO_COMMAND

    def update_from_controller_commands(
        self,
        elapsed_ms: float | int,
        flags: CommandFlags,
    ) -> None:
        """Replace all three axis commands from this tick's flags.

        Args:
            elapsed_ms: Time since the previous tick [ms]; negative is treated as 0
            flags: Controller state sampled for this tick
        """
        dt = max(float(elapsed_ms), 0.0) / 1000.0
        dynamics = self.airframe.dynamics
        limits = self.airframe.limits

        max_bank = limits.effective_max_bank
        self.bank = axis_target(
            self.state.bank,
            flags.roll_direction,
            dynamics.effective_roll_rate,
            dt,
            -max_bank,
            max_bank,
        )
        self.pitch = axis_target(
            self.state.pitch,
            flags.pitch_direction,
            dynamics.effective_pitch_rate,
            dt,
            -limits.max_pitch,
            limits.max_pitch,
        )
        self.speed = axis_target(
            self.state.keas,
            flags.throttle_direction,
            dynamics.effective_speed_rate,
            dt,
            knots(0.0),
            knots(math.inf),
        )

        if not flags.is_neutral:
            logger.debug(
                "Commands after %.1f ms: bank=%s pitch=%s speed=%s",
                elapsed_ms, self.bank, self.pitch, self.speed,
            )
