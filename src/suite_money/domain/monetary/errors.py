"""Errors raised by the monetary domain.

Every error also derives from the builtin exception the rest of the code raises for the
same condition (`ValueError` / `TypeError`), so existing `except ValueError` handlers keep working.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base class for all monetary domain errors."""


class CurrencyMismatchError(MoneyError, ValueError):
    """Two currencies that must agree do not (explicit vs. implied, or operands of an operation)."""


class InvalidAmountError(MoneyError, ValueError):
    """Input cannot be reduced to a single unambiguous amount.

    Attributes:
        input_value: The offending input, as received.
    """

    def __init__(self, message: str, input_value: object = None) -> None:
        super().__init__(message)
        self.input_value = input_value


class UnknownCurrencyError(MoneyError, ValueError):
    """Currency code or symbol is not registered.

    Attributes:
        code: The code (or symbol) that was looked up.
    """

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class UnknownLocaleError(MoneyError, ValueError):
    """Locale identifier is neither in the locale table nor known to CLDR.

    Attributes:
        locale_id: The identifier that was looked up.
    """

    def __init__(self, message: str, locale_id: str) -> None:
        super().__init__(message)
        self.locale_id = locale_id


class UnsupportedTypeError(MoneyError, TypeError):
    """Numeric dispatch received a value that is not a supported number."""
