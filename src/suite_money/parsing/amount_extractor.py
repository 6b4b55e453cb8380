"""Reduce messy amount text to an exact, signed number of currency subunits.

Only digit strings and integer arithmetic are used; floating point never appears, so
currencies with large subunit ratios parse without precision loss.
"""

from __future__ import annotations

import functools
import logging
import re

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import InvalidAmountError
from suite_money.domain.monetary.locale import Locale

logger = logging.getLogger(__name__)

MINUS_SIGN = "-"
# Legacy grouping mark ("1'234.50"), always accepted next to the locale's own thousands separator
APOSTROPHE = "'"


@functools.lru_cache(maxsize=64)
def _noise_pattern(decimal_separator: str, thousands_separator: str) -> re.Pattern[str]:
    """Pattern matching every character that can not be part of an amount for the given separators."""
    kept = re.escape(decimal_separator) + re.escape(thousands_separator) + re.escape(APOSTROPHE) + re.escape(MINUS_SIGN)
    return re.compile(f"[^0-9{kept}]")


def _split_sign(number: str, text: str) -> tuple[bool, str]:
    """Detect a leading or trailing minus sign and return (is_negative, number without the sign).

    Raises:
        InvalidAmountError: If the sign is on both ends or a minus sign is left inside the number.
    """
    leading = number.startswith(MINUS_SIGN)
    trailing = number.endswith(MINUS_SIGN)

    # Raise: a minus on both ends leaves the polarity undecidable
    if leading and trailing and len(number) > 1:
        raise InvalidAmountError(f"Cannot extract amount from $text '{text}' because polarity is ambiguous (minus sign on both ends)", text)

    negative = leading or trailing
    if leading:
        number = number[1:]
    elif trailing:
        number = number[:-1]

    # Raise: an inner hyphen means a range ("5.95-10.95") or garbage, not a single amount
    if MINUS_SIGN in number:
        raise InvalidAmountError(f"Cannot extract amount from $text '{text}' because it contains an embedded hyphen", text)

    return negative, number


def _normalize_minor(minor: str, decimal_places: int) -> int:
    """Turn the minor digit run into exactly $decimal_places digits.

    Short runs are right-padded with zeros. Long runs keep $decimal_places digits and round
    half-up on the first dropped digit only; the carry may reach a whole unit ("0.996" -> 100 cents).
    """
    if len(minor) < decimal_places:
        return int(minor.ljust(decimal_places, "0"))

    kept = int(minor[:decimal_places] or "0")
    if len(minor) > decimal_places and int(minor[decimal_places]) >= 5:
        kept += 1
    return kept


def extract_subunits(text: str, currency: Currency, locale: Locale) -> int:
    """Parse $text into a signed number of $currency subunits.

    Every character other than digits, the $locale separators, an apostrophe and the minus sign
    is discarded first, so symbols, codes and words around the number are ignored.

    Args:
        text: Amount text, e.g. "$1,234.56", "EUR 1.234,56", "5.95-".
        currency: Currency whose `subunit_to_unit` and `decimal_places` scale the result.
        locale: Punctuation conventions of $text.

    Returns:
        Signed subunit count (e.g., 123456 for "$1,234.56" in USD).

    Raises:
        InvalidAmountError: If $text has no digits, an ambiguous sign, an embedded hyphen,
            or more than one decimal separator.

    Examples:
        >>> extract_subunits("1,234,567.89", USD, Locale.default())
        123456789
        >>> extract_subunits("5.95-", USD, Locale.default())
        -595
    """
    number = _noise_pattern(locale.decimal_separator, locale.thousands_separator).sub("", text)

    # Raise: nothing numeric survived filtering (empty or fully unparseable input)
    if not any(char.isdigit() for char in number):
        raise InvalidAmountError(f"Cannot extract amount from $text '{text}' because it contains no digits", text)

    negative, number = _split_sign(number, text)

    # Trailing punctuation with nothing after it is noise, not a fraction ("$5.95, each")
    if number.endswith((locale.decimal_separator, locale.thousands_separator)):
        logger.debug(f"Dropping trailing separator '{number[-1]}' from $text '{text}'")
        number = number[:-1]

    groups = number.replace(locale.thousands_separator, "").replace(APOSTROPHE, "").split(locale.decimal_separator)

    # Raise: more than one decimal separator leaves the grouping ambiguous
    if len(groups) > 2:
        raise InvalidAmountError(f"Cannot extract amount from $text '{text}' because it has {len(groups)} decimal-separated groups", text)

    major = groups[0]
    minor = groups[1] if len(groups) == 2 else ""

    subunits = int(major or "0") * currency.subunit_to_unit
    subunits += _normalize_minor(minor, currency.decimal_places)

    return -subunits if negative else subunits
