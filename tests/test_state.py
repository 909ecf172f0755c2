"""Tests for the aircraft state performance calculator.

Scenario values are hand-computed from the fitted atmosphere, inverse-square
gravity and the turn/climb relations documented in uavsim.dynamics.state.
"""

import math

import numpy as np
import pytest
from beartype.roar import BeartypeCallHintParamViolation
from numpy.testing import assert_allclose

from uavsim.dynamics import (
    AircraftSnapshot,
    AircraftState,
    BoardsStatus,
    ControlMode,
    GearStatus,
    format_turn_radius,
)
from uavsim.environment import Environment, Wind
from uavsim.units import degrees, feet, knots
from uavsim.vehicle import Airframe

WINDY = Environment(wind=Wind.from_knots(270.0, 30.0))


def performance(**initial) -> AircraftState:
    """State at 120 KEAS / 20,000 ft with overrides, performance updated."""
    conditions = {"keas_kt": 120.0, "altitude_ft": 20_000.0}
    conditions.update(initial)
    environment = conditions.pop("environment", None)
    state = AircraftState.from_initial_conditions(**conditions)
    state.update_performance_values(environment)
    return state


# =============================================================================
# Construction
# =============================================================================


class TestAircraftStateInit:
    """Test state construction."""

    def test_defaults(self) -> None:
        state = AircraftState()
        assert state.heading.degrees == 360.0
        assert state.control_mode is ControlMode.MANUAL
        assert state.gear_status is GearStatus.UP
        assert state.boards_status is BoardsStatus.NONE
        assert_allclose(state.position, [0.0, 0.0])
        assert math.isinf(state.turn_radius.value)

    def test_from_initial_conditions(self) -> None:
        state = AircraftState.from_initial_conditions(
            heading_deg=0,
            keas_kt=120,
            altitude_ft=10000,
            pitch_deg=2.5,
            bank_deg=-15.0,
            position_ft=(100.0, -50.0),
        )
        assert state.heading.degrees == 360.0
        assert state.keas == knots(120.0)
        assert state.altitude == feet(10_000.0)
        assert state.pitch == degrees(2.5)
        assert state.bank == degrees(-15.0)
        assert_allclose(state.position, [100.0, -50.0])

    def test_bad_position_shape_raises(self) -> None:
        with pytest.raises(ValueError, match="shape"):
            AircraftState(position=np.zeros(3))

    @pytest.mark.parametrize(
        "position",
        [[0.0, 0.0], np.zeros(2, dtype=np.int64)],
    )
    def test_position_must_be_float_array(self, position) -> None:
        with pytest.raises(BeartypeCallHintParamViolation):
            AircraftState(position=position)

    def test_wrong_dimension_raises(self) -> None:
        with pytest.raises(ValueError, match="keas must be velocity"):
            AircraftState(keas=feet(120.0))

    def test_copy_is_independent(self) -> None:
        state = performance(bank_deg=30.0)
        clone = state.copy()
        clone.position[0] = 999.0
        clone.bank = degrees(0.0)
        assert state.position[0] == 0.0
        assert state.bank == degrees(30.0)
        assert clone.turn_rate == state.turn_rate


# =============================================================================
# Airspeed and Mach
# =============================================================================


class TestAirspeed:
    """Test true airspeed and Mach."""

    def test_true_airspeed_at_20000_ft(self) -> None:
        """120 KEAS at 20,000 ft is ~164 KTAS."""
        state = performance()
        assert state.ktas.unit == "kt"
        assert_allclose(state.ktas.value, 164.0, atol=0.5)

    def test_true_airspeed_is_whole_knots(self) -> None:
        state = performance(altitude_ft=12_345.0)
        assert state.ktas.value == round(state.ktas.value)

    def test_true_airspeed_at_sea_level(self) -> None:
        state = performance(altitude_ft=0.0)
        assert_allclose(state.ktas.value, 120.0)

    def test_mach_at_20000_ft(self) -> None:
        state = performance()
        assert state.mach == pytest.approx(0.27)

    def test_mach_guarded_where_fit_fails(self) -> None:
        """Above ~280,000 ft the speed-of-sound fit is not positive."""
        state = performance(altitude_ft=300_000.0)
        assert state.mach == 0.0


# =============================================================================
# Ground Track
# =============================================================================


class TestGroundTrack:
    """Test wind-corrected ground speed and course."""

    def test_calm_wind(self) -> None:
        state = performance(heading_deg=90.0)
        assert_allclose(state.ground_speed.value, state.ktas.value)
        assert state.course.degrees == pytest.approx(90.0)

    def test_crosswind_from_the_west(self) -> None:
        """164 KTAS north with wind 270/30 tracks ~010 at ~167 kt."""
        state = performance(heading_deg=360.0, environment=WINDY)
        assert_allclose(state.ground_speed.value, 167.0, atol=0.5)
        assert state.course.degrees == pytest.approx(10.0)

    def test_headwind(self) -> None:
        state = performance(heading_deg=270.0, environment=WINDY)
        assert_allclose(state.ground_speed.value, state.ktas.value - 30.0)
        assert state.course.degrees == pytest.approx(270.0)

    def test_course_stays_in_range(self) -> None:
        for heading in np.arange(0.0, 721.0, 15.0):
            state = performance(heading_deg=float(heading), environment=WINDY)
            assert 0.0 < state.course.degrees <= 360.0
            assert 0.0 < state.heading.degrees <= 360.0


# =============================================================================
# Turn Performance
# =============================================================================


class TestTurnPerformance:
    """Test load factor, turn rate and turn radius."""

    def test_thirty_degree_bank(self) -> None:
        """Bank 30 at 164 KTAS: n ~1.15, ~3.8 deg/s, radius ~4,130 ft."""
        state = performance(bank_deg=30.0)
        assert state.load_factor == pytest.approx(1.15)
        assert_allclose(state.turn_rate.to("deg/s").value, 3.84, atol=0.01)
        assert_allclose(state.turn_radius.to("ft").value, 4130.0, atol=10.0)

    def test_left_bank_turns_left(self) -> None:
        right = performance(bank_deg=30.0)
        left = performance(bank_deg=-30.0)
        assert left.turn_rate.value == -right.turn_rate.value
        assert left.load_factor == right.load_factor
        assert left.turn_radius == right.turn_radius

    def test_wings_level_has_infinite_radius(self) -> None:
        state = performance(bank_deg=0.0)
        assert state.is_wings_level
        assert math.isinf(state.turn_radius.value)
        assert not math.isnan(state.turn_radius.value)
        assert state.turn_rate.value == 0.0
        assert state.load_factor == 1.0

    def test_knife_edge_is_guarded(self) -> None:
        """Bank at 90 degrees gives a finite load factor instead of 1/0."""
        state = performance(bank_deg=90.0)
        assert math.isfinite(state.load_factor)
        assert state.load_factor > 500.0
        assert math.isfinite(state.turn_radius.value)

    def test_load_factor_never_below_one(self) -> None:
        for bank in np.linspace(-90.0, 90.0, 37):
            assert performance(bank_deg=float(bank)).load_factor >= 1.0

    def test_zero_airspeed_has_no_turn_rate(self) -> None:
        state = performance(keas_kt=0.0, bank_deg=20.0)
        assert state.turn_rate.value == 0.0

    def test_experienced_gravity(self) -> None:
        state = performance()
        assert state.experienced_gravity.unit == "ft/s^2"
        assert_allclose(state.experienced_gravity.value, 32.1126, atol=1e-3)


# =============================================================================
# Vertical Speed
# =============================================================================


class TestVerticalSpeed:
    """Test vertical speed from ground speed and flight-path angle."""

    def test_three_degree_descent(self) -> None:
        """167 kt over the ground at -3 degrees is ~-885 ft/min."""
        state = performance(heading_deg=360.0, pitch_deg=-3.0, environment=WINDY)
        assert_allclose(state.ground_speed.value, 167.0)
        assert_allclose(state.vertical_speed.to("ft/min").value, -885.0, atol=0.5)

    def test_level_flight(self) -> None:
        assert performance().vertical_speed.value == 0.0


# =============================================================================
# Environment Handling
# =============================================================================


class TestEnvironmentHandling:
    """Test missing and replaced environments."""

    def test_missing_environment_is_standard_day(self) -> None:
        implicit = performance(heading_deg=45.0)
        explicit = performance(heading_deg=45.0, environment=Environment.standard_day())
        assert implicit.ground_speed == explicit.ground_speed
        assert implicit.course == explicit.course

    def test_recompute_is_pure(self) -> None:
        """Recomputing twice gives identical values."""
        state = performance(bank_deg=25.0, pitch_deg=2.0, environment=WINDY)
        first = AircraftSnapshot.capture(state, Airframe.generic())
        state.update_performance_values(WINDY)
        second = AircraftSnapshot.capture(state, Airframe.generic())
        assert first == second


# =============================================================================
# Snapshot
# =============================================================================


class TestSnapshot:
    """Test the read-only snapshot."""

    def test_display_units(self) -> None:
        state = performance(heading_deg=360.0, bank_deg=30.0, environment=WINDY)
        snapshot = AircraftSnapshot.capture(state, Airframe.mq9("505"), duration="00:01:00")
        assert snapshot.name == "MQ-9"
        assert snapshot.tail_number == "505"
        assert snapshot.bank_deg == pytest.approx(30.0)
        assert snapshot.keas_kt == pytest.approx(120.0)
        assert snapshot.ktas_kt == pytest.approx(164.0)
        assert snapshot.altitude_ft == pytest.approx(20_000.0)
        assert snapshot.course_deg == pytest.approx(10.0)
        assert snapshot.duration == "00:01:00"
        assert snapshot.current_time is None
        assert snapshot.is_turning

    def test_snapshot_is_frozen(self) -> None:
        snapshot = AircraftSnapshot.capture(performance(), Airframe.generic())
        with pytest.raises(AttributeError):
            snapshot.bank_deg = 45.0  # type: ignore

    def test_snapshot_does_not_follow_state(self) -> None:
        state = performance()
        snapshot = AircraftSnapshot.capture(state, Airframe.generic())
        state.bank = degrees(20.0)
        state.position[1] = 1000.0
        assert snapshot.bank_deg == 0.0
        assert snapshot.position_ft == (0.0, 0.0)

    def test_wings_level_radius_renders_as_infinity(self) -> None:
        snapshot = AircraftSnapshot.capture(performance(), Airframe.generic())
        assert math.isinf(snapshot.turn_radius_ft)
        assert not snapshot.is_turning
        assert format_turn_radius(snapshot.turn_radius_ft) == "∞"

    def test_finite_radius_renders_in_feet(self) -> None:
        assert format_turn_radius(4132.4) == "4,132 ft"
        assert format_turn_radius(1500.0) == "1,500 ft"
