"""Controller command flags and per-axis commands.

Whatever produces pilot input (keyboard, joystick, a script) hands the core
a CommandFlags value once per tick. Only the instantaneous state matters:
there is no buffering or queueing of presses.

Each controlled axis then carries an explicit command for the tick: either
NoCommand (hold the current trajectory) or a Target value to approach.
"""

from dataclasses import dataclass

from beartype import beartype

from uavsim.units import Quantity


@beartype
@dataclass(frozen=True)
class CommandFlags:
    """Instantaneous controller state.

    Attributes:
        roll_left: Bank toward the left wing
        roll_right: Bank toward the right wing
        pitch_up: Raise the flight-path angle
        pitch_down: Lower the flight-path angle
        throttle_up: Increase airspeed
        throttle_down: Decrease airspeed
    """
    roll_left: bool = False
    roll_right: bool = False
    pitch_up: bool = False
    pitch_down: bool = False
    throttle_up: bool = False
    throttle_down: bool = False

    @classmethod
    def neutral(cls) -> "CommandFlags":
        """No input on any axis."""
        return cls()

    @property
    def roll_direction(self) -> int:
        """+1 for right, -1 for left, 0 when idle or both pressed."""
        return int(self.roll_right) - int(self.roll_left)

    @property
    def pitch_direction(self) -> int:
        """+1 for up, -1 for down, 0 when idle or both pressed."""
        return int(self.pitch_up) - int(self.pitch_down)

    @property
    def throttle_direction(self) -> int:
        """+1 for more speed, -1 for less, 0 when idle or both pressed."""
        return int(self.throttle_up) - int(self.throttle_down)

    @property
    def is_neutral(self) -> bool:
        return not (self.roll_direction or self.pitch_direction or self.throttle_direction)


# =============================================================================
# Axis Commands
# =============================================================================


@dataclass(frozen=True)
class NoCommand:
    """No command on this axis for the tick."""

    def __repr__(self) -> str:
        return "NoCommand"


@beartype
@dataclass(frozen=True)
class Target:
    """Commanded value for an axis.

    Attributes:
        value: Value the axis should approach
    """
    value: Quantity


AxisCommand = NoCommand | Target

NO_COMMAND = NoCommand()
