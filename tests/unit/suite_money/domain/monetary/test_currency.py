import pytest

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.currency_registry import (
    EUR,
    JPY,
    MGA,
    USD,
    currency_code_for_symbol,
    known_symbols,
    lookup_currency,
    register_symbol,
    symbols_for_currency_code,
    unregister_symbol,
)
from suite_money.domain.monetary.errors import UnknownCurrencyError
from suite_money.domain.monetary.money import Money


def test_predefined_currencies():
    assert USD.subunit_to_unit == 100
    assert USD.decimal_places == 2
    assert EUR.decimal_mark == ","
    assert EUR.thousands_separator == "."
    assert JPY.decimal_places == 0
    assert MGA.subunit_to_unit == 5
    assert MGA.decimal_places == 1


@pytest.mark.parametrize("subunit_to_unit, expected", [(1, 0), (5, 1), (10, 1), (100, 2), (1000, 3), (10_000, 4)])
def test_default_decimal_places(subunit_to_unit, expected):
    currency = Currency("TST", subunit_to_unit, "Test", CurrencyType.FIAT)
    assert currency.decimal_places == expected


def test_validation():
    with pytest.raises(ValueError):
        Currency("", 100, "Empty", CurrencyType.FIAT)
    with pytest.raises(ValueError):
        Currency("TST", 0, "Zero ratio", CurrencyType.FIAT)
    with pytest.raises(ValueError):
        Currency("TST", 1000, "Too few places", CurrencyType.FIAT, decimal_places=2)
    with pytest.raises(ValueError):
        Currency("TST", 100, "Same marks", CurrencyType.FIAT, decimal_mark=",", thousands_separator=",")
    with pytest.raises(TypeError):
        Currency("TST", 100, "Bad type", "FIAT")


def test_equality_by_code():
    assert Currency("usd", 100, "Another dollar", CurrencyType.FIAT) == USD
    assert hash(Currency("USD", 100, "Another dollar", CurrencyType.FIAT)) == hash(USD)
    assert USD != EUR


def test_from_str_is_case_insensitive():
    assert Currency.from_str("usd") is USD
    assert Currency.from_str(" EUR ") is EUR


def test_from_str_unknown():
    with pytest.raises(UnknownCurrencyError) as exc_info:
        Currency.from_str("XYZ")
    assert exc_info.value.code == "XYZ"


def test_wrap():
    assert Currency.wrap(EUR) is EUR
    assert Currency.wrap("EUR") is EUR
    assert Currency.wrap(None, "JPY") is JPY
    assert Currency.wrap(None, USD) is USD
    with pytest.raises(TypeError):
        Currency.wrap(None)


def test_register_and_unregister():
    bar = Currency("BAR", 10_000, "Dollar with 4 decimal places", CurrencyType.FIAT)
    Currency.register(bar)
    try:
        assert Currency.from_str("BAR") is bar
        with pytest.raises(ValueError):
            Currency.register(bar)
        money = Money(4000, "BAR")
    finally:
        assert Currency.unregister("BAR") is bar

    assert not Currency.is_registered("BAR")
    # Values created before unregistering keep a working currency
    assert money.currency.subunit_to_unit == 10_000
    assert money + money == Money(8000, bar)
    with pytest.raises(UnknownCurrencyError):
        Currency.unregister("BAR")


def test_symbol_table():
    assert currency_code_for_symbol("$") == "USD"
    assert symbols_for_currency_code("eur") == ["€"]
    assert currency_code_for_symbol("¤") is None


def test_register_symbol_conflicts():
    with pytest.raises(ValueError):
        register_symbol("$", "JPY")
    with pytest.raises(UnknownCurrencyError):
        register_symbol("¤", "XYZ")
    with pytest.raises(UnknownCurrencyError):
        unregister_symbol("¤")


def test_known_symbols_longest_first():
    register_symbol("Ar", "MGA")
    try:
        symbols = known_symbols()
        assert symbols[0] == "Ar"
        assert set(symbols) == {"Ar", "$", "€", "£"}
        assert symbols_for_currency_code("MGA") == ["Ar"]
    finally:
        assert unregister_symbol("Ar") == "MGA"


def test_lookup_currency_by_code_or_symbol():
    assert lookup_currency("USD") is USD
    assert lookup_currency("€") is EUR
    with pytest.raises(UnknownCurrencyError):
        lookup_currency("¤")


def test_register_symbol_adds_alias_next_to_existing_symbols():
    register_symbol("US$", "USD")
    try:
        assert currency_code_for_symbol("US$") == "USD"
        assert currency_code_for_symbol("$") == "USD"
        assert symbols_for_currency_code("USD") == ["$", "US$"]
        assert known_symbols().index("US$") < known_symbols().index("$")
    finally:
        unregister_symbol("US$")
    assert symbols_for_currency_code("USD") == ["$"]


def test_register_symbol_overwrite_repoints_only_that_symbol():
    register_symbol("£", "USD", overwrite=True)
    try:
        assert currency_code_for_symbol("£") == "USD"
        assert currency_code_for_symbol("$") == "USD"
        assert symbols_for_currency_code("GBP") == []
    finally:
        register_symbol("£", "GBP", overwrite=True)
    assert currency_code_for_symbol("£") == "GBP"


def test_register_same_symbol_twice_is_allowed():
    register_symbol("$", "USD")
    assert currency_code_for_symbol("$") == "USD"
