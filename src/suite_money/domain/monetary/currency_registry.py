from __future__ import annotations

import logging

from suite_money.domain.monetary.currency import Currency, CurrencyType
from suite_money.domain.monetary.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


# Fiat currencies
USD = Currency("USD", 100, "United States Dollar", CurrencyType.FIAT, symbols=("$", "US$"), iso_numeric="840")
EUR = Currency("EUR", 100, "Euro", CurrencyType.FIAT, decimal_mark=",", thousands_separator=".", symbols=("€",), iso_numeric="978")
GBP = Currency("GBP", 100, "British Pound", CurrencyType.FIAT, symbols=("£",), iso_numeric="826")
JPY = Currency("JPY", 1, "Japanese Yen", CurrencyType.FIAT, symbols=("¥", "円"), iso_numeric="392")
CHF = Currency("CHF", 100, "Swiss Franc", CurrencyType.FIAT, thousands_separator="'", symbols=("CHF", "Fr."), iso_numeric="756")
CLP = Currency("CLP", 1, "Chilean Peso", CurrencyType.FIAT, decimal_mark=",", thousands_separator=".", symbols=("$",), iso_numeric="152")
TND = Currency("TND", 1000, "Tunisian Dinar", CurrencyType.FIAT, symbols=("د.ت",), iso_numeric="788")
BHD = Currency("BHD", 1000, "Bahraini Dinar", CurrencyType.FIAT, symbols=("ب.د",), iso_numeric="048")
KWD = Currency("KWD", 1000, "Kuwaiti Dinar", CurrencyType.FIAT, symbols=("د.ك",), iso_numeric="414")
# Non-decimal subunit: 1 ariary = 5 iraimbilanja
MGA = Currency("MGA", 5, "Malagasy Ariary", CurrencyType.FIAT, decimal_places=1, symbols=("Ar",), iso_numeric="969")

# Crypto currencies
BTC = Currency("BTC", 100_000_000, "Bitcoin", CurrencyType.CRYPTO, symbols=("₿",))

# Register all predefined currencies
for _currency in (USD, EUR, GBP, JPY, CHF, CLP, TND, BHD, KWD, MGA, BTC):
    Currency.register(_currency, overwrite=True)


# region Symbol table

# Symbols whose currency may be assumed from a leading symbol in parsed text (symbol -> currency code).
# Many symbols may map to the same currency; each symbol maps to exactly one.
_SYMBOL_TO_CODE: dict[str, str] = {"$": "USD", "€": "EUR", "£": "GBP"}


def register_symbol(symbol: str, code: str, overwrite: bool = False) -> None:
    """Make a leading $symbol imply the currency with $code.

    Other symbols of the same currency stay registered, so a currency can have several aliases
    (e.g. "$" and "US$" both imply USD).

    Args:
        symbol: Currency symbol text (e.g., "¥").
        code: Code of a registered currency.
        overwrite: Re-point $symbol if it already implies a different currency, instead of raising.

    Raises:
        ValueError: If $symbol is empty, or $symbol already implies another currency and $overwrite is False.
        UnknownCurrencyError: If $code is not registered.
    """
    if not isinstance(symbol, str) or not symbol.strip():
        raise ValueError(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

    symbol = symbol.strip()
    currency = Currency.from_str(code)
    existing_code = _SYMBOL_TO_CODE.get(symbol)
    # Raise: symbol already implies another currency
    if existing_code is not None and existing_code != currency.code and not overwrite:
        raise ValueError(f"Cannot call `register_symbol` because $symbol '{symbol}' already implies $code '{existing_code}'. Use overwrite=True to re-point it to '{currency.code}'.")

    _SYMBOL_TO_CODE[symbol] = currency.code
    logger.info(f"Registered currency symbol '{symbol}' for $code '{currency.code}'")


def unregister_symbol(symbol: str) -> str:
    """Remove $symbol from the symbol table and return the code it mapped to.

    Raises:
        UnknownCurrencyError: If $symbol is not in the table.
    """
    if symbol not in _SYMBOL_TO_CODE:
        raise UnknownCurrencyError(f"Cannot call `unregister_symbol` because $symbol '{symbol}' is not registered", symbol)

    code = _SYMBOL_TO_CODE.pop(symbol)
    logger.info(f"Unregistered currency symbol '{symbol}' (was $code '{code}')")
    return code


def currency_code_for_symbol(symbol: str) -> str | None:
    return _SYMBOL_TO_CODE.get(symbol)


def symbols_for_currency_code(code: str) -> list[str]:
    """Return the symbols that imply the currency with $code, in registration order."""
    code = code.upper().strip()
    return [symbol for symbol, symbol_code in _SYMBOL_TO_CODE.items() if symbol_code == code]


def known_symbols() -> list[str]:
    """Return registered symbols, longest first, so that prefix matching prefers "US$" over "$"."""
    return sorted(_SYMBOL_TO_CODE.keys(), key=len, reverse=True)


# endregion


def lookup_currency(code_or_symbol: str) -> Currency:
    """Resolve a currency code or a registered symbol to its Currency.

    Args:
        code_or_symbol: ISO code (case-insensitive) or symbol from the symbol table.

    Returns:
        Currency: The registered currency.

    Raises:
        UnknownCurrencyError: If nothing matches.
    """
    code = currency_code_for_symbol(code_or_symbol.strip())
    return Currency.from_str(code if code is not None else code_or_symbol)
