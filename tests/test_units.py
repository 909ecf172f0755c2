"""Tests for the units module."""


import math

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from uavsim.units import (
    G0_IMP,
    G0_SI,
    Bearing,
    Quantity,
    bearing_from_degrees,
    bearing_from_radians,
    clamp,
    degrees,
    degrees_per_second,
    dimensionless,
    fahrenheit,
    feet,
    feet_per_minute,
    feet_per_second,
    kelvin,
    knots,
    knots_per_second,
    meters,
    milliseconds,
    nautical_miles,
    normalize_bearing,
    seconds,
)


class TestQuantityCreation:
    """Test Quantity creation and validation."""

    def test_create_basic_quantity(self) -> None:
        """Test creating a basic quantity."""
        q = Quantity(120.0, "kt", "velocity")
        assert q.value == 120.0
        assert q.unit == "kt"
        assert q.dimension == "velocity"

    def test_invalid_unit_raises_error(self) -> None:
        """Test that invalid units raise ValueError."""
        with pytest.raises(ValueError, match="Unknown unit"):
            Quantity(10.0, "furlong", "length")

    def test_mismatched_dimension_raises_error(self) -> None:
        """Test that mismatched dimension raises ValueError."""
        with pytest.raises(ValueError, match="has dimension"):
            Quantity(10.0, "kt", "length")

    def test_frozen_dataclass(self) -> None:
        """Test that Quantity is immutable."""
        q = knots(120.0)
        with pytest.raises(AttributeError):
            q.value = 130.0  # type: ignore

    def test_wrong_argument_type_is_rejected(self) -> None:
        """Factories are type checked at call time."""
        with pytest.raises(BeartypeCallHintParamViolation):
            knots("120")  # type: ignore


class TestFactoryFunctions:
    """Test factory functions for creating quantities."""

    def test_knots(self) -> None:
        q = knots(120.0)
        assert q.unit == "kt"
        assert q.dimension == "velocity"

    def test_feet_per_minute(self) -> None:
        q = feet_per_minute(-885.0)
        assert q.unit == "ft/min"
        assert q.dimension == "velocity"

    def test_knots_per_second(self) -> None:
        q = knots_per_second(2.0)
        assert q.dimension == "acceleration"

    def test_degrees_per_second(self) -> None:
        q = degrees_per_second(3.0)
        assert q.unit == "deg/s"
        assert q.dimension == "angular_rate"

    def test_nautical_miles(self) -> None:
        q = nautical_miles(1.0)
        assert q.dimension == "length"

    def test_feet_per_second(self) -> None:
        q = feet_per_second(202.5)
        assert q.unit == "ft/s"
        assert q.dimension == "velocity"
        assert q.to("kt").value == pytest.approx(119.98, rel=1e-4)

    def test_dimensionless(self) -> None:
        q = dimensionless(1.15)
        assert q.unit == "1"
        assert q.dimension == "dimensionless"

    def test_dimensionless_scales_a_length(self) -> None:
        scaled = dimensionless(2.0) * feet(500.0)
        assert scaled.dimension == "length"
        assert scaled.to("ft").value == pytest.approx(1000.0)

    def test_ints_are_accepted(self) -> None:
        assert feet(10000).value == 10000


class TestUnitConversion:
    """Test unit conversion functionality."""

    def test_knots_to_feet_per_second(self) -> None:
        assert knots(120.0).to("ft/s").value == pytest.approx(202.537, rel=1e-5)

    def test_knots_to_meters_per_second(self) -> None:
        assert knots(1.0).to("m/s").value == pytest.approx(0.514444, rel=1e-6)

    def test_nautical_mile_to_feet(self) -> None:
        assert nautical_miles(1.0).to("ft").value == pytest.approx(6076.115, rel=1e-6)

    def test_feet_per_minute_to_feet_per_second(self) -> None:
        assert feet_per_minute(600.0).to("ft/s").value == pytest.approx(10.0)

    def test_degrees_to_radians(self) -> None:
        assert degrees(180.0).to("rad").value == pytest.approx(math.pi)

    def test_fahrenheit_to_celsius(self) -> None:
        """Temperature conversion applies the scale offset."""
        assert fahrenheit(68.0).to("C").value == pytest.approx(20.0)
        assert fahrenheit(68.0).to("K").value == pytest.approx(293.15)

    def test_kelvin_to_rankine(self) -> None:
        assert kelvin(300.0).to("R").value == pytest.approx(540.0)

    def test_milliseconds_to_seconds(self) -> None:
        assert milliseconds(1500.0).to("s").value == pytest.approx(1.5)

    def test_si_value(self) -> None:
        assert feet(1000.0).si_value == pytest.approx(304.8)

    def test_cross_dimension_conversion_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot convert"):
            feet(100.0).to("kt")

    def test_unknown_target_unit_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown unit"):
            knots(100.0).to("mph")

    def test_gravity_constants_agree(self) -> None:
        assert G0_IMP.to("m/s^2").value == pytest.approx(G0_SI.value, rel=1e-6)


class TestQuantityArithmetic:
    """Test arithmetic within and across dimensions."""

    def test_add_converts_to_left_unit(self) -> None:
        total = feet(1000.0) + meters(304.8)
        assert total.unit == "ft"
        assert total.value == pytest.approx(2000.0)

    def test_add_different_dimensions_raises(self) -> None:
        with pytest.raises(ValueError, match="different dimensions"):
            feet(1.0) + knots(1.0)

    def test_subtract(self) -> None:
        assert (degrees(30.0) - degrees(10.0)).value == pytest.approx(20.0)

    def test_scalar_multiply(self) -> None:
        q = 2 * knots(60.0)
        assert q.value == pytest.approx(120.0)
        assert q.unit == "kt"

    def test_velocity_times_time_is_length(self) -> None:
        distance = knots(120.0) * seconds(30.0)
        assert distance.dimension == "length"
        assert distance.to("nmi").value == pytest.approx(1.0, rel=1e-6)

    def test_rate_times_time_is_angle(self) -> None:
        angle = degrees_per_second(3.0) * seconds(2.0)
        assert angle.dimension == "angle"
        assert angle.to("deg").value == pytest.approx(6.0)

    def test_acceleration_times_time_is_velocity(self) -> None:
        speed = knots_per_second(2.0) * seconds(3.0)
        assert speed.dimension == "velocity"
        assert speed.to("kt").value == pytest.approx(6.0)

    def test_length_over_time_is_velocity(self) -> None:
        speed = feet(600.0) / seconds(60.0)
        assert speed.dimension == "velocity"
        assert speed.to("ft/s").value == pytest.approx(10.0)

    def test_unsupported_product_raises(self) -> None:
        with pytest.raises(ValueError, match="not supported"):
            knots(1.0) * feet(1.0)

    def test_negate_and_abs(self) -> None:
        assert (-degrees(10.0)).value == -10.0
        assert abs(degrees(-10.0)).value == 10.0


class TestQuantityComparison:
    """Test comparisons across units."""

    def test_equal_across_units(self) -> None:
        assert meters(304.8) == feet(1000.0)

    def test_ordering(self) -> None:
        assert knots(100.0) < knots(120.0)
        assert degrees(45.0) > degrees(30.0)
        assert degrees(45.0) >= degrees(45.0)
        assert degrees(45.0) <= degrees(45.0)

    def test_different_dimensions_not_equal(self) -> None:
        assert feet(1.0) != knots(1.0)

    def test_compare_different_dimensions_raises(self) -> None:
        with pytest.raises(ValueError):
            _ = feet(1.0) < knots(1.0)


class TestClamp:
    """Test clamping a quantity into bounds."""

    def test_within_bounds_unchanged(self) -> None:
        q = degrees(20.0)
        assert clamp(q, degrees(-45.0), degrees(45.0)) is q

    def test_clamped_to_upper(self) -> None:
        held = clamp(degrees(50.0), degrees(-45.0), degrees(45.0))
        assert held.value == pytest.approx(45.0)
        assert held.unit == "deg"

    def test_bounds_in_other_units(self) -> None:
        held = clamp(feet(-10.0), meters(0.0), meters(1000.0))
        assert held.unit == "ft"
        assert held.value == 0.0

    def test_infinite_upper_bound(self) -> None:
        q = knots(500.0)
        assert clamp(q, knots(0.0), knots(math.inf)) is q


class TestBearing:
    """Test compass bearings."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (0.0, 360.0),
            (360.0, 360.0),
            (720.0, 360.0),
            (-90.0, 270.0),
            (450.0, 90.0),
            (10.0, 10.0),
            (-370.0, 350.0),
        ],
    )
    def test_normalized_into_range(self, raw: float, expected: float) -> None:
        """Bearings always land in (0, 360]."""
        assert Bearing(raw).degrees == pytest.approx(expected)
        assert 0.0 < normalize_bearing(raw) <= 360.0

    def test_reciprocal(self) -> None:
        assert Bearing(270.0).reciprocal.degrees == pytest.approx(90.0)
        assert Bearing(180.0).reciprocal.degrees == pytest.approx(360.0)

    def test_rotated_by_wraps_through_north(self) -> None:
        assert Bearing(350.0).rotated_by(degrees(20.0)).degrees == pytest.approx(10.0)
        assert Bearing(10.0).rotated_by(degrees(-20.0)).degrees == pytest.approx(350.0)

    def test_rotated_by_rejects_non_angle(self) -> None:
        with pytest.raises(ValueError, match="Cannot rotate"):
            Bearing(90.0).rotated_by(feet(10.0))

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            Bearing(math.nan)

    def test_radians(self) -> None:
        assert Bearing(90.0).radians == pytest.approx(math.pi / 2)

    def test_from_radians(self) -> None:
        assert bearing_from_radians(-math.pi / 2).degrees == pytest.approx(270.0)

    def test_from_degrees(self) -> None:
        assert bearing_from_degrees(0).degrees == 360.0

    def test_string_is_three_digits(self) -> None:
        assert str(Bearing(10.0)) == "010°"

    def test_immutable(self) -> None:
        b = Bearing(90.0)
        with pytest.raises(AttributeError):
            b.value = 100.0  # type: ignore
