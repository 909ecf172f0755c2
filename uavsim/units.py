"""Units module for uavsim.

Provides a Quantity class for type-safe physical quantities with unit
conversion, and a Bearing type for compass directions.

Design principles:
- Explicit over implicit: all conversions require calling .to()
- Type safe: beartype checks at runtime
- Immutable: frozen dataclasses prevent accidental mutation
- No magic: clear, predictable behavior
"""

import math
from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Dimension and Unit Definitions
# =============================================================================

# Each dimension has a base SI unit
DIMENSIONS = {
    "length": "m",
    "velocity": "m/s",
    "acceleration": "m/s^2",
    "angle": "rad",
    "angular_rate": "rad/s",
    "temperature": "K",
    "density": "kg/m^3",
    "time": "s",
    "dimensionless": "1",
}

# Conversion factors TO base SI unit
# e.g., 1 ft = 0.3048 m, so CONVERSIONS["ft"] = (0.3048, "length")
CONVERSIONS: dict[str, tuple[float, str]] = {
    # Length
    "m": (1.0, "length"),
    "km": (1000.0, "length"),
    "ft": (0.3048, "length"),
    "nmi": (1852.0, "length"),
    # Velocity
    "m/s": (1.0, "velocity"),
    "kt": (0.514444444, "velocity"),
    "ft/s": (0.3048, "velocity"),
    "ft/min": (0.3048 / 60.0, "velocity"),
    "km/h": (1000.0 / 3600.0, "velocity"),
    # Acceleration
    "m/s^2": (1.0, "acceleration"),
    "ft/s^2": (0.3048, "acceleration"),
    "kt/s": (0.514444444, "acceleration"),
    # Angle
    "rad": (1.0, "angle"),
    "deg": (math.pi / 180.0, "angle"),
    # Angular rate
    "rad/s": (1.0, "angular_rate"),
    "deg/s": (math.pi / 180.0, "angular_rate"),
    # Temperature (offset applied before scaling, see TEMPERATURE_OFFSETS)
    "K": (1.0, "temperature"),
    "C": (1.0, "temperature"),
    "F": (5 / 9, "temperature"),
    "R": (5 / 9, "temperature"),
    # Density
    "kg/m^3": (1.0, "density"),
    "slug/ft^3": (515.378818, "density"),
    # Time
    "s": (1.0, "time"),
    "ms": (0.001, "time"),
    "min": (60.0, "time"),
    "hr": (3600.0, "time"),
    # Dimensionless
    "1": (1.0, "dimensionless"),
    "": (1.0, "dimensionless"),
}

# Additive offsets for temperature scales: K = (value + offset) * factor
TEMPERATURE_OFFSETS: dict[str, float] = {
    "C": 273.15,
    "F": 459.67,
}


def _get_dimension(unit: str) -> str:
    """Get the dimension for a unit string."""
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit][1]


def _get_conversion_factor(unit: str) -> float:
    """Get the conversion factor to SI base unit."""
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit][0]


def _to_si(value: float, unit: str) -> float:
    return (value + TEMPERATURE_OFFSETS.get(unit, 0.0)) * _get_conversion_factor(unit)


def _from_si(si_value: float, unit: str) -> float:
    return si_value / _get_conversion_factor(unit) - TEMPERATURE_OFFSETS.get(unit, 0.0)


def _convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a value between units of the same dimension."""
    from_dim = _get_dimension(from_unit)
    to_dim = _get_dimension(to_unit)

    if from_dim != to_dim:
        raise ValueError(
            f"Cannot convert between different dimensions: {from_dim} and {to_dim}"
        )

    if from_unit == to_unit:
        return value

    return _from_si(_to_si(value, from_unit), to_unit)


# =============================================================================
# Quantity Class
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class Quantity:
    """A physical quantity with value, unit, and dimension.

    Quantities are immutable and support arithmetic operations that respect
    dimensional analysis.

    Examples:
        >>> speed = Quantity(120, "kt", "velocity")
        >>> speed.to("ft/s")
        Quantity(202.537 ft/s)

        >>> distance = knots(120) * seconds(30)  # Returns a length in meters
    """

    value: float | int
    unit: str
    dimension: str

    def __post_init__(self) -> None:
        """Validate that unit matches dimension."""
        if self.unit not in CONVERSIONS:
            raise ValueError(f"Unknown unit: {self.unit!r}")
        expected_dim = CONVERSIONS[self.unit][1]
        if self.dimension != expected_dim:
            raise ValueError(
                f"Unit {self.unit!r} has dimension {expected_dim!r}, "
                f"but {self.dimension!r} was specified"
            )

    def to(self, target_unit: str) -> "Quantity":
        """Convert to a different unit of the same dimension.

        Args:
            target_unit: The unit to convert to

        Returns:
            A new Quantity with the converted value and new unit

        Raises:
            ValueError: If target_unit is incompatible dimension
        """
        new_value = _convert(self.value, self.unit, target_unit)
        return Quantity(new_value, target_unit, self.dimension)

    def to_si(self) -> "Quantity":
        """Convert to SI base unit for this dimension."""
        return self.to(DIMENSIONS[self.dimension])

    @property
    def si_value(self) -> float:
        """Get the value in SI base units without creating new Quantity."""
        return _to_si(self.value, self.unit)

    def __repr__(self) -> str:
        return f"Quantity({self.value:.6g} {self.unit})"

    def __str__(self) -> str:
        return f"{self.value:.6g} {self.unit}"

    # -------------------------------------------------------------------------
    # Arithmetic Operations
    # -------------------------------------------------------------------------

    def __add__(self, other: "Quantity") -> "Quantity":
        """Add two quantities of the same dimension."""
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot add Quantity and {type(other).__name__}")
        if self.dimension != other.dimension:
            raise ValueError(
                f"Cannot add quantities with different dimensions: "
                f"{self.dimension} and {other.dimension}"
            )
        other_converted = other.to(self.unit)
        return Quantity(self.value + other_converted.value, self.unit, self.dimension)

    def __sub__(self, other: "Quantity") -> "Quantity":
        """Subtract two quantities of the same dimension."""
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot subtract Quantity and {type(other).__name__}")
        if self.dimension != other.dimension:
            raise ValueError(
                f"Cannot subtract quantities with different dimensions: "
                f"{self.dimension} and {other.dimension}"
            )
        other_converted = other.to(self.unit)
        return Quantity(self.value - other_converted.value, self.unit, self.dimension)

    def __mul__(self, other: "Quantity | float | int") -> "Quantity":
        """Multiply by a scalar or another quantity."""
        if isinstance(other, (int, float)):
            return Quantity(self.value * other, self.unit, self.dimension)
        if isinstance(other, Quantity):
            new_dim = _multiply_dimensions(self.dimension, other.dimension)
            new_unit = DIMENSIONS[new_dim]
            return Quantity(self.si_value * other.si_value, new_unit, new_dim)
        raise TypeError(f"Cannot multiply Quantity by {type(other).__name__}")

    def __rmul__(self, other: float | int) -> "Quantity":
        """Right multiply by scalar."""
        if isinstance(other, (int, float)):
            return Quantity(self.value * other, self.unit, self.dimension)
        raise TypeError(f"Cannot multiply {type(other).__name__} by Quantity")

    def __truediv__(self, other: "Quantity | float | int") -> "Quantity":
        """Divide by a scalar or another quantity."""
        if isinstance(other, (int, float)):
            return Quantity(self.value / other, self.unit, self.dimension)
        if isinstance(other, Quantity):
            new_dim = _divide_dimensions(self.dimension, other.dimension)
            new_unit = DIMENSIONS[new_dim]
            return Quantity(self.si_value / other.si_value, new_unit, new_dim)
        raise TypeError(f"Cannot divide Quantity by {type(other).__name__}")

    def __neg__(self) -> "Quantity":
        """Negate the quantity."""
        return Quantity(-self.value, self.unit, self.dimension)

    def __pos__(self) -> "Quantity":
        """Positive (returns copy)."""
        return Quantity(self.value, self.unit, self.dimension)

    def __abs__(self) -> "Quantity":
        """Absolute value."""
        return Quantity(abs(self.value), self.unit, self.dimension)

    # -------------------------------------------------------------------------
    # Comparison Operations
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check equality (compares SI values for same dimension)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        return math.isclose(self.si_value, other.si_value, rel_tol=1e-9, abs_tol=1e-12)

    def __lt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare Quantity with {type(other).__name__}")
        if self.dimension != other.dimension:
            raise ValueError("Cannot compare quantities with different dimensions")
        return self.si_value < other.si_value

    def __le__(self, other: "Quantity") -> bool:
        return self == other or self < other

    def __gt__(self, other: "Quantity") -> bool:
        if not isinstance(other, Quantity):
            raise TypeError(f"Cannot compare Quantity with {type(other).__name__}")
        if self.dimension != other.dimension:
            raise ValueError("Cannot compare quantities with different dimensions")
        return self.si_value > other.si_value

    def __ge__(self, other: "Quantity") -> bool:
        return self == other or self > other

    def __hash__(self) -> int:
        """Hash based on SI value and dimension for consistency."""
        return hash((round(self.si_value, 9), self.dimension))


# =============================================================================
# Dimension Algebra
# =============================================================================

# Multiplication table for dimensions
_MULT_TABLE: dict[tuple[str, str], str] = {
    ("velocity", "time"): "length",
    ("acceleration", "time"): "velocity",
    ("angular_rate", "time"): "angle",
    ("dimensionless", "length"): "length",
    ("dimensionless", "velocity"): "velocity",
    ("dimensionless", "acceleration"): "acceleration",
    ("dimensionless", "angle"): "angle",
    ("dimensionless", "angular_rate"): "angular_rate",
    ("dimensionless", "time"): "time",
    ("dimensionless", "density"): "density",
    ("dimensionless", "dimensionless"): "dimensionless",
}

# Division table for dimensions
_DIV_TABLE: dict[tuple[str, str], str] = {
    ("length", "time"): "velocity",
    ("length", "velocity"): "time",
    ("velocity", "time"): "acceleration",
    ("velocity", "acceleration"): "time",
    ("angle", "time"): "angular_rate",
    ("angle", "angular_rate"): "time",
    ("length", "length"): "dimensionless",
    ("velocity", "velocity"): "dimensionless",
    ("acceleration", "acceleration"): "dimensionless",
    ("angle", "angle"): "dimensionless",
    ("angular_rate", "angular_rate"): "dimensionless",
    ("density", "density"): "dimensionless",
    ("time", "time"): "dimensionless",
    ("dimensionless", "dimensionless"): "dimensionless",
}


def _multiply_dimensions(dim1: str, dim2: str) -> str:
    """Determine result dimension for multiplication."""
    if (dim1, dim2) in _MULT_TABLE:
        return _MULT_TABLE[(dim1, dim2)]
    if (dim2, dim1) in _MULT_TABLE:
        return _MULT_TABLE[(dim2, dim1)]
    raise ValueError(
        f"Multiplication of {dim1} and {dim2} not supported. "
        "Result dimension is ambiguous."
    )


def _divide_dimensions(dim1: str, dim2: str) -> str:
    """Determine result dimension for division."""
    if (dim1, dim2) in _DIV_TABLE:
        return _DIV_TABLE[(dim1, dim2)]
    raise ValueError(
        f"Division of {dim1} by {dim2} not supported. "
        "Result dimension is ambiguous."
    )


@beartype
def clamp(quantity: Quantity, lower: Quantity, upper: Quantity) -> Quantity:
    """Clamp a quantity into [lower, upper], keeping its unit.

    Raises:
        ValueError: If the bounds have a different dimension
    """
    lo = lower.to(quantity.unit).value
    hi = upper.to(quantity.unit).value
    if quantity.value < lo:
        return Quantity(lo, quantity.unit, quantity.dimension)
    if quantity.value > hi:
        return Quantity(hi, quantity.unit, quantity.dimension)
    return quantity


# =============================================================================
# Bearing
# =============================================================================


def normalize_bearing(degrees_value: float) -> float:
    """Wrap a direction in degrees into the (0, 360] range.

    North is reported as 360, never 0.
    """
    wrapped = math.fmod(degrees_value, 360.0)
    if wrapped <= 0.0:
        wrapped += 360.0
    return wrapped


@beartype
@dataclass(frozen=True, slots=True)
class Bearing:
    """A compass direction in degrees, always held in (0, 360].

    Examples:
        >>> Bearing(0).degrees
        360.0
        >>> Bearing(-90).degrees
        270.0
        >>> Bearing(270).reciprocal.degrees
        90.0
    """

    value: float | int

    def __post_init__(self) -> None:
        if not math.isfinite(self.value):
            raise ValueError(f"Bearing must be finite, got {self.value!r}")
        # Frozen: bypass __setattr__ to store the normalized value
        object.__setattr__(self, "value", normalize_bearing(float(self.value)))

    @property
    def degrees(self) -> float:
        return self.value

    @property
    def radians(self) -> float:
        return math.radians(self.value)

    @property
    def reciprocal(self) -> "Bearing":
        """The opposite direction (180 degrees around)."""
        return Bearing(self.value + 180.0)

    def rotated_by(self, angle: Quantity) -> "Bearing":
        """Turn this bearing by a relative angle (positive is clockwise)."""
        if angle.dimension != "angle":
            raise ValueError(f"Cannot rotate a bearing by a {angle.dimension} quantity")
        return Bearing(self.value + angle.to("deg").value)

    def __repr__(self) -> str:
        return f"Bearing({self.value:06.2f}°)"

    def __str__(self) -> str:
        return f"{self.value:03.0f}°"


@beartype
def bearing_from_degrees(value: float | int) -> Bearing:
    """Create a bearing from compass degrees."""
    return Bearing(value)


@beartype
def bearing_from_radians(value: float | int) -> Bearing:
    """Create a bearing from radians measured clockwise from north."""
    return Bearing(math.degrees(value))


# =============================================================================
# Factory Functions - Clear, Explicit Quantity Creation
# =============================================================================


@beartype
def meters(value: float | int) -> Quantity:
    """Create a length quantity in meters."""
    return Quantity(value, "m", "length")


@beartype
def feet(value: float | int) -> Quantity:
    """Create a length quantity in feet."""
    return Quantity(value, "ft", "length")


@beartype
def nautical_miles(value: float | int) -> Quantity:
    """Create a length quantity in nautical miles."""
    return Quantity(value, "nmi", "length")


@beartype
def knots(value: float | int) -> Quantity:
    """Create a velocity quantity in knots."""
    return Quantity(value, "kt", "velocity")


@beartype
def meters_per_second(value: float | int) -> Quantity:
    """Create a velocity quantity in m/s."""
    return Quantity(value, "m/s", "velocity")


@beartype
def feet_per_second(value: float | int) -> Quantity:
    """Create a velocity quantity in ft/s."""
    return Quantity(value, "ft/s", "velocity")


@beartype
def feet_per_minute(value: float | int) -> Quantity:
    """Create a velocity quantity in ft/min."""
    return Quantity(value, "ft/min", "velocity")


@beartype
def meters_per_second_squared(value: float | int) -> Quantity:
    """Create an acceleration quantity in m/s^2."""
    return Quantity(value, "m/s^2", "acceleration")


@beartype
def feet_per_second_squared(value: float | int) -> Quantity:
    """Create an acceleration quantity in ft/s^2."""
    return Quantity(value, "ft/s^2", "acceleration")


@beartype
def knots_per_second(value: float | int) -> Quantity:
    """Create an acceleration quantity in knots per second."""
    return Quantity(value, "kt/s", "acceleration")


@beartype
def degrees(value: float | int) -> Quantity:
    """Create a relative angle quantity in degrees."""
    return Quantity(value, "deg", "angle")


@beartype
def radians(value: float | int) -> Quantity:
    """Create a relative angle quantity in radians."""
    return Quantity(value, "rad", "angle")


@beartype
def degrees_per_second(value: float | int) -> Quantity:
    """Create an angular rate quantity in deg/s."""
    return Quantity(value, "deg/s", "angular_rate")


@beartype
def kelvin(value: float | int) -> Quantity:
    """Create a temperature quantity in Kelvin."""
    return Quantity(value, "K", "temperature")


@beartype
def celsius(value: float | int) -> Quantity:
    """Create a temperature quantity in degrees Celsius."""
    return Quantity(value, "C", "temperature")


@beartype
def fahrenheit(value: float | int) -> Quantity:
    """Create a temperature quantity in degrees Fahrenheit."""
    return Quantity(value, "F", "temperature")


@beartype
def kg_per_cubic_meter(value: float | int) -> Quantity:
    """Create a density quantity in kg/m^3."""
    return Quantity(value, "kg/m^3", "density")


@beartype
def seconds(value: float | int) -> Quantity:
    """Create a time quantity in seconds."""
    return Quantity(value, "s", "time")


@beartype
def milliseconds(value: float | int) -> Quantity:
    """Create a time quantity in milliseconds."""
    return Quantity(value, "ms", "time")


@beartype
def dimensionless(value: float | int) -> Quantity:
    """Create a dimensionless quantity."""
    return Quantity(value, "1", "dimensionless")


# =============================================================================
# Constants
# =============================================================================

# Standard gravity at sea level
G0_SI = meters_per_second_squared(9.80665)
G0_IMP = feet_per_second_squared(32.174049)
