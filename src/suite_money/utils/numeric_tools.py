from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from fractions import Fraction
from numbers import Rational
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def round_half_up(value: Fraction | Decimal | int) -> int:
    """Round an exact value to the nearest integer, ties away from zero.

    Works on `Fraction` so that no intermediate precision is lost, whatever the size of $value.

    Examples:
        >>> round_half_up(Fraction(5, 2))
        3
        >>> round_half_up(Fraction(-5, 2))
        -3
        >>> round_half_up(Decimal("1.49"))
        1
    """
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return int(value.to_integral_value(rounding=ROUND_HALF_UP))

    magnitude = abs(value)
    rounded = (magnitude.numerator * 2 + magnitude.denominator) // (magnitude.denominator * 2)
    return -rounded if value < 0 else rounded


# region Tagged numeric variant


class NumericKind(Enum):
    """Kinds of numeric input accepted by `Money.from_numeric`."""

    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    FLOAT = "FLOAT"
    RATIONAL = "RATIONAL"


@dataclass(frozen=True)
class NumericAmount:
    """A numeric value tagged with its `NumericKind`.

    Classification happens once, in `NumericAmount.of`; consumers branch on $kind only.
    """

    kind: NumericKind
    value: int | Decimal | float | Fraction

    @classmethod
    def of(cls, value: object) -> NumericAmount | None:
        """Tag $value with its kind, or return None when $value is not a supported number.

        `bool` is deliberately not a number here even though it subclasses `int`.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return cls(NumericKind.INTEGER, value)
        if isinstance(value, Decimal):
            return cls(NumericKind.DECIMAL, value)
        if isinstance(value, float):
            return cls(NumericKind.FLOAT, value)
        if isinstance(value, Rational):
            return cls(NumericKind.RATIONAL, Fraction(value.numerator, value.denominator))
        return None

    def to_decimal(self) -> Decimal:
        """Convert to `Decimal` for the arbitrary-precision path.

        Rationals that have no finite decimal expansion are divided in the current decimal context.
        """
        match self.kind:
            case NumericKind.INTEGER:
                return Decimal(self.value)
            case NumericKind.DECIMAL:
                return self.value
            case NumericKind.FLOAT:
                return as_decimal(self.value)
            case NumericKind.RATIONAL:
                return Decimal(self.value.numerator) / Decimal(self.value.denominator)


# endregion
