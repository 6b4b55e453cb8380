from decimal import Decimal
from fractions import Fraction

import pytest

from suite_money.config import MoneyConfig
from suite_money.domain.monetary.currency_registry import CLP, EUR, TND, USD
from suite_money.domain.monetary.errors import InvalidAmountError, UnsupportedTypeError
from suite_money.domain.monetary.money import Money

# Constants
INFINITE = MoneyConfig(infinite_precision=True)


def test_from_integer():
    assert Money.from_integer(1) == Money(1_00, USD)
    assert Money.from_integer(1, "EUR") == Money(1_00, EUR)
    assert Money.from_integer(-7, EUR) == Money(-7_00, EUR)


@pytest.mark.parametrize("constructor", [Money.from_integer, Money.from_decimal, Money.from_float, Money.from_numeric])
@pytest.mark.parametrize("currency, subunits", [(USD, 1_00), (TND, 1_000), (CLP, 1)])
def test_constructors_respect_subunit_to_unit(constructor, currency, subunits):
    values = {
        Money.from_integer: 1,
        Money.from_decimal: Decimal("1"),
        Money.from_float: 1.0,
        Money.from_numeric: 1,
    }
    assert constructor(values[constructor], currency) == Money(subunits, currency)


@pytest.mark.parametrize("constructor", [Money.from_integer, Money.from_numeric])
def test_constructors_use_default_currency(constructor):
    assert constructor(1).currency == USD
    assert constructor(1, config=MoneyConfig(default_currency="EUR")).currency == EUR


def test_from_integer_rejects_other_types():
    with pytest.raises(UnsupportedTypeError):
        Money.from_integer(1.0)
    with pytest.raises(UnsupportedTypeError):
        Money.from_integer(True)


def test_from_decimal_rounds_once():
    assert Money.from_decimal(Decimal("1.005")) == Money(100, USD)
    assert Money.from_decimal(Decimal("1.015")) == Money(102, USD)
    assert Money.from_decimal(Decimal("1.005"), config=MoneyConfig(rounding="ROUND_HALF_UP")) == Money(101, USD)
    assert Money.from_decimal(Decimal("-1.23456")) == Money(-123, USD)


def test_from_decimal_keeps_precision_in_infinite_mode():
    assert Money.from_decimal(Decimal("1.23456"), config=INFINITE) == Money(Decimal("123.456"), config=INFINITE)
    assert Money.from_decimal(Decimal("-1.23456"), config=INFINITE) == Money(Decimal("-123.456"), config=INFINITE)
    assert Money.from_decimal(Decimal("1.23456"), "EUR", config=INFINITE).subunits == Decimal("123.456")


def test_from_decimal_keeps_all_digits_of_large_values():
    value = Decimal("123456789012345678901234567890.12")
    assert Money.from_decimal(value).subunits == 12345678901234567890123456789012


def test_from_decimal_rejects_invalid_values():
    with pytest.raises(UnsupportedTypeError):
        Money.from_decimal(1.5)
    with pytest.raises(InvalidAmountError):
        Money.from_decimal(Decimal("NaN"))
    with pytest.raises(InvalidAmountError):
        Money.from_decimal(Decimal("-Infinity"))


def test_from_float():
    assert Money.from_float(1.2) == Money(1_20, USD)
    assert Money.from_float(1.2, "EUR") == Money(1_20, EUR)
    assert Money.from_float(1.2, "TND") == Money(1_200, TND)
    assert Money.from_float(1.2, "CLP") == Money(1, CLP)
    # Read through str: 0.1 + 0.2 is 0.30000000000000004, which still rounds to 30 cents
    assert Money.from_float(0.1 + 0.2) == Money(30, USD)


def test_from_float_rejects_invalid_values():
    with pytest.raises(UnsupportedTypeError):
        Money.from_float(1)
    with pytest.raises(InvalidAmountError):
        Money.from_float(float("inf"))


@pytest.mark.parametrize("value", [1, 1.0, Decimal("1"), Fraction(1)])
def test_from_numeric_converts_every_kind(value):
    assert Money.from_numeric(value) == Money(1_00, USD)


def test_from_numeric_dispatches_by_kind(monkeypatch):
    calls = []
    original_from_integer = Money.from_integer.__func__
    original_from_decimal = Money.from_decimal.__func__

    def tracking_from_integer(cls, value, currency=None, *, config=None):
        calls.append("integer")
        return original_from_integer(cls, value, currency, config=config)

    def tracking_from_decimal(cls, value, currency=None, *, config=None):
        calls.append("decimal")
        return original_from_decimal(cls, value, currency, config=config)

    monkeypatch.setattr(Money, "from_integer", classmethod(tracking_from_integer))
    monkeypatch.setattr(Money, "from_decimal", classmethod(tracking_from_decimal))

    Money.from_numeric(1, "USD", config=MoneyConfig())
    Money.from_numeric(1.0, "USD", config=MoneyConfig())
    Money.from_numeric(Fraction(1, 3), "USD", config=MoneyConfig())

    assert calls == ["integer", "decimal", "decimal"]


@pytest.mark.parametrize("value", ["100", None, True, [1]])
def test_from_numeric_rejects_non_numbers(value):
    with pytest.raises(UnsupportedTypeError):
        Money.from_numeric(value)


def test_from_numeric_with_infinite_precision():
    assert Money.from_numeric(Fraction(1, 8), config=INFINITE).subunits == Decimal("12.5")
    assert Money.from_numeric(2, config=INFINITE).subunits == Decimal("200")
