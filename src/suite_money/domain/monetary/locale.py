from __future__ import annotations

import logging
from dataclasses import dataclass

from babel import UnknownLocaleError as BabelUnknownLocaleError
from babel.numbers import get_decimal_symbol, get_group_symbol

from suite_money.domain.monetary.errors import UnknownLocaleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locale:
    """Punctuation conventions of a text amount, independent of its currency.

    Attributes:
        decimal_separator: Single character separating major from minor digits.
        thousands_separator: Single character grouping major digits.
    """

    decimal_separator: str = "."
    thousands_separator: str = ","

    def __post_init__(self) -> None:
        # Raise: separators are single characters and must differ
        for label, separator in (("decimal_separator", self.decimal_separator), ("thousands_separator", self.thousands_separator)):
            if not isinstance(separator, str) or len(separator) != 1:
                raise ValueError(f"${label} must be a single character, but provided value is: '{separator}'")
        if self.decimal_separator == self.thousands_separator:
            raise ValueError(f"$decimal_separator and $thousands_separator must differ, but both are: '{self.decimal_separator}'")

    @classmethod
    def default(cls) -> Locale:
        return cls(".", ",")

    @classmethod
    def from_str(cls, locale_id: str) -> Locale:
        """Look up a locale by identifier.

        The local `LOCALES` table is consulted first; other identifiers are resolved through CLDR
        number symbols (Babel). Both "de-DE" and "de_DE" spellings are accepted.

        Raises:
            UnknownLocaleError: If $locale_id is neither in `LOCALES` nor known to CLDR.
        """
        if locale_id in LOCALES:
            return LOCALES[locale_id]

        normalized = locale_id.strip().replace("-", "_")
        try:
            decimal_separator = get_decimal_symbol(normalized)
            thousands_separator = get_group_symbol(normalized)
        except (BabelUnknownLocaleError, ValueError) as e:
            raise UnknownLocaleError(f"Cannot call `Locale.from_str` because $locale_id '{locale_id}' is unknown", locale_id) from e

        logger.debug(f"Resolved $locale_id '{locale_id}' through CLDR: decimal='{decimal_separator}', thousands='{thousands_separator}'")
        return cls(decimal_separator, thousands_separator)

    @classmethod
    def wrap(cls, value: Locale | str | None) -> Locale:
        """Resolve $value to a Locale: a Locale as-is, None as the default, a string by lookup."""
        if value is None:
            return cls.default()
        if isinstance(value, Locale):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        raise TypeError(f"Cannot call `Locale.wrap` because $value is not Locale or str (got type '{type(value).__name__}')")


LOCALES: dict[str, Locale] = {
    "DE": Locale(",", "."),
    "EN": Locale(".", ","),
}
