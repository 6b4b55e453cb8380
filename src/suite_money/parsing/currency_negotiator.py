from __future__ import annotations

import logging
import re

from suite_money.config import DEFAULT_CONFIG, MoneyConfig
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.currency_registry import currency_code_for_symbol, known_symbols
from suite_money.domain.monetary.errors import CurrencyMismatchError
from suite_money.domain.monetary.locale import Locale

logger = logging.getLogger(__name__)

# First run of 2-3 uppercase ASCII letters is read as a currency code ("USD 5", "5 EUR", "$100 USD")
_CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{2,3}")


def implied_currency(text: str, config: MoneyConfig = DEFAULT_CONFIG) -> Currency | None:
    """Return the currency that $text itself names, if any.

    With `config.assume_from_symbol`, a registered symbol at the start of $text (after whitespace)
    decides the currency. Otherwise the first 2-3 letter uppercase run anywhere in $text is taken
    as a currency code.

    Args:
        text: Raw input text.
        config: Settings to apply.

    Returns:
        The implied Currency, or None if $text names none.

    Raises:
        UnknownCurrencyError: If the code found in $text is not registered.
    """
    stripped = text.strip()

    if config.assume_from_symbol:
        for symbol in known_symbols():
            if stripped.startswith(symbol):
                code = currency_code_for_symbol(symbol)
                logger.debug(f"Leading symbol '{symbol}' in $text '{text}' implies currency '{code}'")
                return Currency.from_str(code)

    match = _CURRENCY_CODE_PATTERN.search(stripped)
    if match is None:
        return None
    return Currency.from_str(match.group())


def negotiate_currency(explicit: Currency | None, implied: Currency | None, config: MoneyConfig = DEFAULT_CONFIG) -> Currency:
    """Pick the currency of a parsed amount.

    Args:
        explicit: Currency requested by the caller, if any.
        implied: Currency named by the input text, if any.
        config: Settings to apply; `config.default_currency` is used when both are None.

    Returns:
        The negotiated Currency.

    Raises:
        CurrencyMismatchError: If both are given and differ. Neither side is preferred silently.
    """
    if explicit is None and implied is None:
        return config.resolve_default_currency()
    if explicit is None:
        return implied
    if implied is None or implied == explicit:
        return explicit

    raise CurrencyMismatchError(f"Cannot negotiate currency because $explicit ({explicit}) differs from currency implied by the text ({implied})")


def resolve_locale(locale: Locale | str | None) -> Locale:
    """Wrap an explicit locale as-is; an absent locale resolves to the default ("." decimal, "," thousands)."""
    return Locale.wrap(locale)
