#!/usr/bin/env python
"""Headless holding pattern in the trainer scenario.

This example flies the MQ-9 trainer scenario through one racetrack
without a display:

1. Start the clock
2. Roll into a right turn and hold the bank through 180 degrees
3. Roll wings level for the outbound leg
4. Turn back inbound
5. Print the readout the HUD would show after each phase

The frame loop runs at 60 Hz with fixed increments, the way an
animation-frame scheduler would drive it.
"""

from uavsim import CommandFlags, FlightSimulator, format_snapshot_summary

FRAME_MS = 1000.0 / 60.0


def fly(sim: FlightSimulator, seconds: float, flags: CommandFlags):
    """Run frames for a fixed stretch of simulated time."""
    snapshot = sim.snapshot()
    for _ in range(round(seconds * 1000.0 / FRAME_MS)):
        snapshot = sim.tick(FRAME_MS, flags)
    return snapshot


def turn_until(sim: FlightSimulator, heading_deg: float, max_seconds: float = 300.0):
    """Hold the current bank until the heading is within 2 degrees of a target."""
    snapshot = sim.snapshot()
    for _ in range(round(max_seconds * 1000.0 / FRAME_MS)):
        snapshot = sim.tick(FRAME_MS, CommandFlags.neutral())
        error = (snapshot.heading_deg - heading_deg + 180.0) % 360.0 - 180.0
        if abs(error) < 2.0:
            break
    return snapshot


def main() -> None:
    """Run the holding pattern example."""
    print("=" * 60)
    print("HOLDING PATTERN")
    print("=" * 60)

    sim = FlightSimulator.trainer_scenario()
    sim.toggle()

    print("\n1. Initial conditions\n")
    print(format_snapshot_summary(sim.snapshot()))

    # =========================================================================
    # Inbound turn to the outbound leg
    # =========================================================================
    print("\n2. Rolling into a right turn\n")
    snapshot = fly(sim, 4.0, CommandFlags(roll_right=True))
    print(format_snapshot_summary(snapshot))

    print("\n3. Turning to 180\n")
    snapshot = turn_until(sim, 180.0)
    print(format_snapshot_summary(snapshot))

    # =========================================================================
    # Outbound leg
    # =========================================================================
    print("\n4. Wings level, outbound for one minute\n")
    fly(sim, 4.0, CommandFlags(roll_left=True))
    snapshot = fly(sim, 60.0, CommandFlags.neutral())
    print(format_snapshot_summary(snapshot))

    # =========================================================================
    # Turn back inbound
    # =========================================================================
    print("\n5. Turning inbound\n")
    fly(sim, 4.0, CommandFlags(roll_right=True))
    turn_until(sim, 360.0)
    snapshot = fly(sim, 4.0, CommandFlags(roll_left=True))
    print(format_snapshot_summary(snapshot))

    print("\n" + "=" * 60)
    print("HOLD COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
