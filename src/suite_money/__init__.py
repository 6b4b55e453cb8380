__version__ = "0.0.1"

from suite_money.config import DEFAULT_CONFIG, MoneyConfig
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import (
    CurrencyMismatchError,
    InvalidAmountError,
    MoneyError,
    UnknownCurrencyError,
    UnknownLocaleError,
    UnsupportedTypeError,
)
from suite_money.domain.monetary.locale import Locale
from suite_money.domain.monetary.money import Money
from suite_money.parsing.money_parser import from_string, parse

__all__ = [
    "DEFAULT_CONFIG",
    "MoneyConfig",
    "Currency",
    "Locale",
    "Money",
    "parse",
    "from_string",
    "MoneyError",
    "CurrencyMismatchError",
    "InvalidAmountError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
    "UnsupportedTypeError",
]
