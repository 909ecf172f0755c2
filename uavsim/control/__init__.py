"""Controller input for the flight trainer.

The input layer reduces whatever the operator does to a CommandFlags value;
the dynamics layer turns those flags into per-axis commands.

Example:
    >>> from uavsim.control import CommandFlags
    >>>
    >>> flags = CommandFlags(roll_right=True, throttle_up=True)
    >>> flags.roll_direction
    1
"""

from uavsim.control.commands import (
    NO_COMMAND,
    AxisCommand,
    CommandFlags,
    NoCommand,
    Target,
)

__all__ = [
    "CommandFlags",
    "AxisCommand",
    "NoCommand",
    "Target",
    "NO_COMMAND",
]
