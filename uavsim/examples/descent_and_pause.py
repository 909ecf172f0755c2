#!/usr/bin/env python
"""Descent with a pause, driven by frame timestamps.

Shows the clock semantics a display loop relies on:

1. Frames are fed as monotonic timestamps, not deltas
2. The first frame after a start or resume only primes the timestamp
3. While paused, neither the clock nor the aircraft moves
4. A wind change between frames takes effect on the next readout
"""

from datetime import datetime

from uavsim import (
    Airframe,
    CommandFlags,
    Environment,
    FlightSimulator,
    SimConfig,
    Wind,
    format_snapshot_summary,
)

FRAME_MS = 20.0


def run_frames(sim: FlightSimulator, start_ms: float, seconds: float, flags: CommandFlags):
    """Feed timestamps from start_ms for a stretch of wall time."""
    timestamp = start_ms
    snapshot = sim.advance_to(timestamp, flags)
    for _ in range(round(seconds * 1000.0 / FRAME_MS)):
        timestamp += FRAME_MS
        snapshot = sim.advance_to(timestamp, flags)
    return timestamp, snapshot


def main() -> None:
    """Run the descent example."""
    print("=" * 60)
    print("DESCENT WITH PAUSE")
    print("=" * 60)

    sim = FlightSimulator(
        airframe=Airframe.generic("101"),
        environment=Environment(wind=Wind.from_knots(360.0, 15.0)),
        config=SimConfig(keas_kt=110.0, altitude_ft=8000.0, heading_deg=90.0),
    )
    sim.toggle(at=datetime(2024, 1, 1, 12, 0, 0))

    print("\n1. Pushing over to 3 degrees nose down\n")
    timestamp, _ = run_frames(sim, 0.0, 1.0, CommandFlags(pitch_down=True))
    timestamp, snapshot = run_frames(sim, timestamp, 30.0, CommandFlags.neutral())
    print(format_snapshot_summary(snapshot))

    print("\n2. Paused for ten seconds of wall time\n")
    sim.toggle()
    timestamp, snapshot = run_frames(sim, timestamp, 10.0, CommandFlags.neutral())
    print(format_snapshot_summary(snapshot))

    print("\n3. Resumed with the wind veering to 045\n")
    sim.toggle()
    sim.set_environment(Environment(wind=Wind.from_knots(45.0, 15.0)))
    timestamp, snapshot = run_frames(sim, timestamp, 30.0, CommandFlags.neutral())
    print(format_snapshot_summary(snapshot))

    print("\n" + "=" * 60)
    print("DESCENT COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
