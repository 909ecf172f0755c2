"""Plain-text readouts of a snapshot, for headless runs and logs."""

from beartype import beartype

from uavsim.dynamics.snapshot import AircraftSnapshot, format_turn_radius


@beartype
def format_snapshot_summary(snapshot: AircraftSnapshot) -> str:
    """Format a snapshot as a readable string.

    Args:
        snapshot: Snapshot to summarize

    Returns:
        Multi-line string summary
    """
    identity = snapshot.name
    if snapshot.tail_number:
        identity = f"{snapshot.name} {snapshot.tail_number}"
    east, north = snapshot.position_ft
    clock = snapshot.duration
    if snapshot.current_time is not None:
        clock = f"{snapshot.duration} ({snapshot.current_time:%H:%M:%S})"

    lines = [
        f"Aircraft: {identity} [{snapshot.control_mode.value}]",
        "=" * 40,
        f"Time:           {clock}",
        f"Heading:        {snapshot.heading_deg:03.0f}°",
        f"Course:         {snapshot.course_deg:03.0f}°",
        f"Bank:           {snapshot.bank_deg:+.1f}°",
        f"Pitch:          {snapshot.pitch_deg:+.1f}°",
        f"KEAS / KTAS:    {snapshot.keas_kt:.0f} / {snapshot.ktas_kt:.0f} kt",
        f"Mach:           {snapshot.mach:.2f}",
        f"Ground speed:   {snapshot.ground_speed_kt:.0f} kt",
        f"Altitude:       {snapshot.altitude_ft:,.0f} ft",
        f"Vertical speed: {snapshot.vertical_speed_fpm:+,.0f} ft/min",
        f"Load factor:    {snapshot.load_factor:.2f} g",
        f"Turn rate:      {snapshot.turn_rate_dps:+.2f} °/s",
        f"Turn radius:    {format_turn_radius(snapshot.turn_radius_ft)}",
        f"Position:       {east:,.0f} ft E, {north:,.0f} ft N",
    ]
    return "\n".join(lines)
