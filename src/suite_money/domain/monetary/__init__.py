"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including Currency definitions, the locale table and exact Money arithmetic.
Importing it registers the predefined currencies.
"""

from suite_money.domain.monetary import currency_registry
from suite_money.domain.monetary.currency import Currency, CurrencyType
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

__all__ = [
    "currency_registry",
    "Currency",
    "CurrencyType",
    "Locale",
    "Money",
    "MoneyError",
    "CurrencyMismatchError",
    "InvalidAmountError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
    "UnsupportedTypeError",
]
