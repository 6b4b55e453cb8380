from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from suite_money.config import DEFAULT_CONFIG, MoneyConfig
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import InvalidAmountError, UnknownCurrencyError, UnsupportedTypeError
from suite_money.domain.monetary.locale import LOCALES, Locale
from suite_money.domain.monetary.money import Money
from suite_money.parsing.amount_extractor import extract_subunits
from suite_money.parsing.currency_negotiator import implied_currency, negotiate_currency, resolve_locale

logger = logging.getLogger(__name__)


def parse(
    text: str,
    currency: Currency | str | None = None,
    locale: Locale | str | None = None,
    *,
    config: MoneyConfig = DEFAULT_CONFIG,
) -> Money:
    """Parse human-written amount text into Money.

    Characters around the number are discarded, so "$5.95 ea.", "EUR 1.234,56" (with a "DE" locale)
    and "hello 2000 world" all parse.

    Args:
        text: Amount text.
        currency: Expected currency (Currency or code). Must agree with a currency named in $text.
        locale: Punctuation of $text (Locale or identifier such as "DE" or "de_DE"). None means "." decimal
            and "," thousands.
        config: Settings to apply ($default_currency, $assume_from_symbol, $infinite_precision).

    Returns:
        Money: The parsed amount.

    Raises:
        InvalidAmountError: If $text is None/empty or cannot be reduced to a single amount.
        CurrencyMismatchError: If $currency differs from the currency named in $text.
        UnknownCurrencyError: If a currency code is not registered (including a locale identifier such as "DE"
            passed as $currency).
        UnknownLocaleError: If $locale is an unknown identifier.
        UnsupportedTypeError: If $text is not a string (use `Money.from_numeric` for numbers), or $currency is a Locale.

    Examples:
        >>> parse("$1,234.56")
        Money(123456, USD)
        >>> parse("USD 5", currency="EUR")
        Traceback (most recent call last):
        CurrencyMismatchError: ...
    """
    # Raise: absent input is a caller bug, not a zero amount
    if text is None:
        raise InvalidAmountError("Cannot call `parse` because $text is None", text)
    if not isinstance(text, str):
        raise UnsupportedTypeError(f"Cannot call `parse` because $text is not str (got type '{type(text).__name__}'). Use `Money.from_numeric` for numbers")

    _check_currency_is_not_a_locale(currency)

    stripped = text.strip()
    explicit = Currency.wrap(currency) if currency is not None else None
    resolved_currency = negotiate_currency(explicit, implied_currency(stripped, config), config)
    resolved_locale = resolve_locale(locale)
    logger.debug(f"Parsing $text '{text}' as {resolved_currency} with {resolved_locale}")

    subunits = extract_subunits(stripped, resolved_currency, resolved_locale)
    return Money(subunits, resolved_currency, config=config)


def _check_currency_is_not_a_locale(currency: object) -> None:
    """Reject a locale given in the $currency position; the locale is always passed as $locale."""
    if isinstance(currency, Locale):
        raise UnsupportedTypeError("Cannot call `parse` because $currency is a Locale. Pass it as `locale=` instead")
    if isinstance(currency, str) and not Currency.is_registered(currency) and currency.strip() in LOCALES:
        raise UnknownCurrencyError(f"Cannot call `parse` because $currency '{currency}' is a locale identifier, not a currency code. Pass it as `locale='{currency.strip()}'` instead", currency)


def from_string(value: str, currency: Currency | str | None = None, *, config: MoneyConfig = DEFAULT_CONFIG) -> Money:
    """Money from a plain decimal literal of major units, e.g. "100" or "-1.23".

    Unlike `parse`, no symbols, codes or grouping are accepted; the string must be a `Decimal` literal.

    Raises:
        InvalidAmountError: If $value is not a finite decimal literal.
    """
    if not isinstance(value, str):
        raise UnsupportedTypeError(f"Cannot call `from_string` because $value is not str (got type '{type(value).__name__}')")

    try:
        decimal_value = Decimal(value.strip())
    except InvalidOperation as e:
        raise InvalidAmountError(f"Cannot call `from_string` because $value '{value}' is not a decimal literal", value) from e

    return Money.from_decimal(decimal_value, currency, config=config)
