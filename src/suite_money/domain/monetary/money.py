from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation, localcontext
from fractions import Fraction

from suite_money.config import DEFAULT_CONFIG, MoneyConfig
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatchError, InvalidAmountError, UnsupportedTypeError
from suite_money.utils.numeric_tools import DecimalLike, NumericAmount, NumericKind, as_decimal, round_half_up

# Arithmetic context for infinite-precision values; only division can exceed it
INFINITE_PRECISION_CONTEXT = Context(prec=50)


def _with_enough_precision(value: Decimal, extra_digits: int) -> Context:
    """Context able to multiply $value by a number of $extra_digits digits without rounding."""
    return Context(prec=max(28, len(value.as_tuple().digits) + extra_digits + 1))


def _finite_decimal(amount: NumericAmount) -> Decimal:
    """Decimal value of a scalar operand.

    Raises:
        InvalidAmountError: If the operand is NaN or infinite.
    """
    decimal_value = amount.to_decimal()
    if not decimal_value.is_finite():
        raise InvalidAmountError(f"Cannot scale Money by a non-finite value ({amount.value})", amount.value)
    return decimal_value


def _scalar_as_fraction(amount: NumericAmount) -> Fraction:
    """Exact rational value of a scalar operand (floats are read through `str`, like `as_decimal`)."""
    if amount.kind in (NumericKind.INTEGER, NumericKind.RATIONAL):
        return Fraction(amount.value)
    return Fraction(_finite_decimal(amount))


class Money:
    """Exact monetary amount: a count of currency subunits plus its currency.

    By default $subunits is an `int` (cents for USD). With `MoneyConfig.infinite_precision`
    it is an exact `Decimal` that is never rounded to the subunit boundary.

    Values are immutable; every operation returns a new Money. Operations between different
    currencies raise `CurrencyMismatchError`, there is no implicit conversion.
    """

    __slots__ = ("_subunits", "_currency", "_infinite_precision")

    def __init__(self, subunits: DecimalLike, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> None:
        """Initialize Money from a count of subunits.

        Args:
            subunits: Number of subunits (e.g., 595 for 5.95 USD). Non-integral values are rounded
                with `config.rounding` unless `config.infinite_precision` is set.
            currency: Currency or its code. None means `config.default_currency`.
            config: Settings to apply.

        Raises:
            InvalidAmountError: If $subunits is not a finite number.
            UnsupportedTypeError: If $subunits is a bool.
            UnknownCurrencyError: If a currency code is not registered.
        """
        # Raise: bool subclasses int but is never an amount
        if isinstance(subunits, bool):
            raise UnsupportedTypeError(f"Cannot init `Money` because $subunits is bool ({subunits})")

        self._currency = Currency.wrap(currency, config.default_currency)
        self._infinite_precision = config.infinite_precision

        if isinstance(subunits, int):
            self._subunits = Decimal(subunits) if config.infinite_precision else subunits
            return

        try:
            decimal_value = as_decimal(subunits)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidAmountError(f"Cannot init `Money` because $subunits ({subunits!r}) cannot be converted to Decimal", subunits) from e

        # Raise: NaN and infinities have no amount
        if not decimal_value.is_finite():
            raise InvalidAmountError(f"Cannot init `Money` because $subunits ({subunits}) is not finite", subunits)

        if config.infinite_precision:
            self._subunits = decimal_value
        else:
            self._subunits = int(decimal_value.to_integral_value(rounding=config.rounding))

    @classmethod
    def _of(cls, subunits: int | Decimal, currency: Currency, infinite_precision: bool) -> Money:
        """Build a result of an operation without re-validating or re-rounding."""
        money = object.__new__(cls)
        money._subunits = Decimal(subunits) if infinite_precision else subunits
        money._currency = currency
        money._infinite_precision = infinite_precision
        return money

    # region Numeric constructors

    @classmethod
    def from_integer(cls, value: int, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
        """Money from a whole number of major units (e.g., 5 -> 500 cents). Exact, no rounding.

        Raises:
            UnsupportedTypeError: If $value is not an int.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedTypeError(f"Cannot call `Money.from_integer` because $value is not int (got type '{type(value).__name__}')")

        resolved = Currency.wrap(currency, config.default_currency)
        return cls(value * resolved.subunit_to_unit, resolved, config=config)

    @classmethod
    def from_decimal(cls, value: Decimal, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
        """Money from a `Decimal` amount of major units.

        This is the single rounding point for non-integral numeric input: the subunit value
        `value * subunit_to_unit` is rounded with `config.rounding`, or kept exact when
        `config.infinite_precision` is set.

        Raises:
            UnsupportedTypeError: If $value is not a Decimal.
            InvalidAmountError: If $value is NaN or infinite.
        """
        if not isinstance(value, Decimal):
            raise UnsupportedTypeError(f"Cannot call `Money.from_decimal` because $value is not Decimal (got type '{type(value).__name__}')")

        # Raise: NaN and infinities have no amount
        if not value.is_finite():
            raise InvalidAmountError(f"Cannot call `Money.from_decimal` because $value ({value}) is not finite", value)

        resolved = Currency.wrap(currency, config.default_currency)
        ratio = resolved.subunit_to_unit
        subunits = _with_enough_precision(value, len(str(ratio))).multiply(value, Decimal(ratio))
        return cls(subunits, resolved, config=config)

    @classmethod
    def from_float(cls, value: float, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
        """Money from a float amount of major units.

        The float is read through its shortest `str` form (1.2 -> Decimal("1.2")), then handled by `from_decimal`.

        Raises:
            UnsupportedTypeError: If $value is not a float.
            InvalidAmountError: If $value is NaN or infinite.
        """
        if not isinstance(value, float):
            raise UnsupportedTypeError(f"Cannot call `Money.from_float` because $value is not float (got type '{type(value).__name__}')")

        return cls.from_decimal(as_decimal(value), currency, config=config)

    @classmethod
    def from_numeric(cls, value: object, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
        """Money from any supported number of major units.

        Integers take the exact integer path; decimals, floats and other rationals take the
        decimal path.

        Raises:
            UnsupportedTypeError: If $value is not a supported number (strings included).
        """
        amount = NumericAmount.of(value)
        if amount is None:
            raise UnsupportedTypeError(f"Cannot call `Money.from_numeric` because $value is not a number (got type '{type(value).__name__}')")

        match amount.kind:
            case NumericKind.INTEGER:
                return cls.from_integer(amount.value, currency, config=config)
            case NumericKind.FLOAT:
                return cls.from_float(amount.value, currency, config=config)
            case NumericKind.DECIMAL | NumericKind.RATIONAL:
                return cls.from_decimal(amount.to_decimal(), currency, config=config)

    @classmethod
    def zero(cls, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
        """Zero for a given currency. Useful as initial value for `sum()`."""
        return cls(0, currency, config=config)

    # endregion

    # region Properties

    @property
    def subunits(self) -> int | Decimal:
        """Amount in subunits (cents for USD)."""
        return self._subunits

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def infinite_precision(self) -> bool:
        return self._infinite_precision

    def to_decimal(self) -> Decimal:
        """Amount in major units (e.g., Decimal("5.95") for 595 USD cents)."""
        subunits = Decimal(self._subunits)
        context = _with_enough_precision(subunits, len(str(self._currency.subunit_to_unit)))
        return context.divide(subunits, Decimal(self._currency.subunit_to_unit))

    def is_zero(self) -> bool:
        return self._subunits == 0

    def is_positive(self) -> bool:
        return self._subunits > 0

    def is_negative(self) -> bool:
        return self._subunits < 0

    # endregion

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check if two Money objects have the same currency.

        Raises:
            CurrencyMismatchError: If currencies don't match.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Cannot call `{operation}` because currencies differ: {self.currency} and {other.currency}")

    # region Comparison operators (same currency required)

    def __eq__(self, other) -> bool:
        """Money values are equal when both subunits and currency are equal."""
        if not isinstance(other, Money):
            return False
        return self.currency == other.currency and self._subunits == other._subunits

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__lt__")
        return self._subunits < other._subunits

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__le__")
        return self._subunits <= other._subunits

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__gt__")
        return self._subunits > other._subunits

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__ge__")
        return self._subunits >= other._subunits

    def __hash__(self) -> int:
        # int and Decimal of equal value hash equally, so hash stays consistent with __eq__
        return hash((self._subunits, self.currency.code))

    # endregion

    # region Arithmetic operations

    def __add__(self, other):
        """Add two Money objects of the same currency."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__add__")
        return Money._of(self._subunits + other._subunits, self._currency, self._infinite_precision or other._infinite_precision)

    def __radd__(self, other):
        """Right addition; only `0 + money` is supported, which lets `sum()` start from 0."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        """Subtract two Money objects of the same currency."""
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other, "__sub__")
        return Money._of(self._subunits - other._subunits, self._currency, self._infinite_precision or other._infinite_precision)

    def __mul__(self, other):
        """Multiply Money by a number (returns Money).

        Integer factors are exact. Other factors are exact under infinite precision; otherwise
        the product is rounded half-up to whole subunits.
        """
        amount = NumericAmount.of(other)
        if amount is None:
            return NotImplemented  # Money * Money doesn't make sense

        if amount.kind is NumericKind.INTEGER and not self._infinite_precision:
            return Money._of(self._subunits * amount.value, self._currency, False)

        if self._infinite_precision:
            factor = _finite_decimal(amount)
            product = _with_enough_precision(self._subunits, len(factor.as_tuple().digits)).multiply(self._subunits, factor)
            return Money._of(product, self._currency, True)

        return Money._of(round_half_up(Fraction(self._subunits) * _scalar_as_fraction(amount)), self._currency, False)

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by a number (returns Money) or Money by Money (returns Decimal).

        Without infinite precision the quotient is rounded half-up to whole subunits.

        Raises:
            ZeroDivisionError: If the divisor is zero.
            CurrencyMismatchError: If dividing by Money of another currency.
            InvalidAmountError: If the divisor is NaN or infinite.
        """
        if isinstance(other, Money):
            self._check_same_currency(other, "__truediv__")
            if other._subunits == 0:
                raise ZeroDivisionError("Cannot divide by zero Money")
            return INFINITE_PRECISION_CONTEXT.divide(Decimal(self._subunits), Decimal(other._subunits))

        amount = NumericAmount.of(other)
        if amount is None:
            return NotImplemented
        divisor = _scalar_as_fraction(amount)
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide Money by zero")

        if self._infinite_precision:
            return Money._of(INFINITE_PRECISION_CONTEXT.divide(self._subunits, _finite_decimal(amount)), self._currency, True)

        return Money._of(round_half_up(Fraction(self._subunits) / divisor), self._currency, False)

    def __rtruediv__(self, other):
        """Right division: number / Money (not supported)."""
        return NotImplemented

    def __neg__(self):
        return Money._of(-self._subunits, self._currency, self._infinite_precision)

    def __pos__(self):
        return self

    def __abs__(self):
        return Money._of(abs(self._subunits), self._currency, self._infinite_precision)

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Return string like '5.95 USD'."""
        return f"{self.to_decimal()} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(595, USD)'."""
        return f"{self.__class__.__name__}({self._subunits}, {self.currency.code})"

    # endregion
