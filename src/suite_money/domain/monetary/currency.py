from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable

from suite_money.domain.monetary.errors import UnknownCurrencyError

logger = logging.getLogger(__name__)


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


def _default_decimal_places(subunit_to_unit: int) -> int:
    """Smallest number of decimal places able to hold every subunit of a unit."""
    places = 0
    while 10**places < subunit_to_unit:
        places += 1
    return places


class Currency:
    """Describes the numeric shape of one currency.

    Instances are immutable. The class-level registry owns them; `Money` values only hold
    references, so unregistering a currency never invalidates existing `Money` values.

    Attributes:
        code (str): ISO alpha code (e.g., "USD", "BTC").
        subunit_to_unit (int): Number of subunits in one major unit (e.g., 100 for USD).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
        decimal_places (int): Digits of the minor unit. Normally log10 of $subunit_to_unit.
        decimal_mark (str): Decimal mark of the currency's own canonical rendering.
        thousands_separator (str): Grouping mark of the currency's own canonical rendering.
        symbols (tuple[str, ...]): Symbol aliases (e.g., ("$", "US$")).
        iso_numeric (str | None): ISO 4217 numeric code, if any.
    """

    # Class-level registry for predefined currencies
    _registry: Dict[str, "Currency"] = {}

    __slots__ = (
        "_code",
        "_subunit_to_unit",
        "_name",
        "_currency_type",
        "_decimal_places",
        "_decimal_mark",
        "_thousands_separator",
        "_symbols",
        "_iso_numeric",
    )

    def __init__(
        self,
        code: str,
        subunit_to_unit: int,
        name: str,
        currency_type: CurrencyType,
        decimal_places: int | None = None,
        decimal_mark: str = ".",
        thousands_separator: str = ",",
        symbols: Iterable[str] = (),
        iso_numeric: str | None = None,
    ) -> None:
        """Initialize a Currency instance.

        Args:
            code: Currency code (e.g., "USD", "BTC").
            subunit_to_unit: Positive number of subunits per major unit.
            name: Full currency name.
            currency_type: Type of currency.
            decimal_places: Digits of the minor unit. Defaults to the smallest count that can
                hold $subunit_to_unit - 1 (2 for 100, 1 for 5, 0 for 1).
            decimal_mark: Single character separating major from minor units in this currency's rendering.
            thousands_separator: Single character grouping major units in this currency's rendering.
            symbols: Symbol aliases.
            iso_numeric: ISO 4217 numeric code.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $currency_type is not CurrencyType instance.
        """
        # Raise: $code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        # Raise: $subunit_to_unit must be a positive integer
        if isinstance(subunit_to_unit, bool) or not isinstance(subunit_to_unit, int) or subunit_to_unit <= 0:
            raise ValueError(f"$subunit_to_unit must be a positive integer, but provided value is: {subunit_to_unit}")

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        if decimal_places is None:
            decimal_places = _default_decimal_places(subunit_to_unit)

        # Raise: $decimal_places must be able to hold every subunit, otherwise parsed minor digits cannot round-trip
        if isinstance(decimal_places, bool) or not isinstance(decimal_places, int) or decimal_places < 0:
            raise ValueError(f"$decimal_places must be a non-negative integer, but provided value is: {decimal_places}")
        if 10**decimal_places < subunit_to_unit:
            raise ValueError(f"$decimal_places ({decimal_places}) is too small for $subunit_to_unit ({subunit_to_unit})")

        # Raise: marks are single characters and must differ
        for label, mark in (("decimal_mark", decimal_mark), ("thousands_separator", thousands_separator)):
            if not isinstance(mark, str) or len(mark) != 1:
                raise ValueError(f"${label} must be a single character, but provided value is: '{mark}'")
        if decimal_mark == thousands_separator:
            raise ValueError(f"$decimal_mark and $thousands_separator must differ, but both are: '{decimal_mark}'")

        self._code = code.upper().strip()
        self._subunit_to_unit = subunit_to_unit
        self._name = name.strip()
        self._currency_type = currency_type
        self._decimal_places = decimal_places
        self._decimal_mark = decimal_mark
        self._thousands_separator = thousands_separator
        self._symbols = tuple(symbols)
        self._iso_numeric = iso_numeric

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def subunit_to_unit(self) -> int:
        return self._subunit_to_unit

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def decimal_places(self) -> int:
        return self._decimal_places

    @property
    def decimal_mark(self) -> str:
        return self._decimal_mark

    @property
    def thousands_separator(self) -> str:
        return self._thousands_separator

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def iso_numeric(self) -> str | None:
        return self._iso_numeric

    @classmethod
    def register(cls, currency: "Currency", overwrite: bool = False) -> None:
        """Register a currency in the global registry.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to overwrite existing currency.

        Raises:
            ValueError: If currency already exists and overwrite is False.
            TypeError: If currency is not Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in cls._registry and not overwrite:
            raise ValueError(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.code] = currency
        logger.info(f"Registered currency $code '{currency.code}' (subunit_to_unit={currency.subunit_to_unit})")

    @classmethod
    def unregister(cls, code: str) -> Currency:
        """Remove a currency from the global registry.

        The removed instance itself is left untouched, so `Money` values that hold it stay valid.

        Args:
            code (str): Currency code to remove.

        Returns:
            Currency: The removed currency.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        normalized = code.upper().strip()
        if normalized not in cls._registry:
            raise UnknownCurrencyError(f"Cannot call `Currency.unregister` because currency with code '{normalized}' is not registered", normalized)

        currency = cls._registry.pop(normalized)
        logger.info(f"Unregistered currency $code '{normalized}'")
        return currency

    @classmethod
    def from_str(cls, code: str) -> "Currency":
        """Get currency from registry by code.

        Args:
            code (str): Currency code to look up.

        Returns:
            Currency: The currency instance.

        Raises:
            UnknownCurrencyError: If currency code is not found in registry.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        code = code.upper().strip()
        if code not in cls._registry:
            raise UnknownCurrencyError(f"Currency with code '{code}' not found in registry. Available currencies: {list(cls._registry.keys())}", code)

        return cls._registry[code]

    @classmethod
    def is_registered(cls, code: str) -> bool:
        return code.upper().strip() in cls._registry

    @classmethod
    def wrap(cls, value: "Currency | str | None", default: "Currency | str | None" = None) -> "Currency":
        """Resolve $value to a Currency.

        A Currency is returned as-is, a string is looked up in the registry, and None falls back to $default.

        Raises:
            UnknownCurrencyError: If a code is not registered.
            TypeError: If neither $value nor $default resolves to a currency.
        """
        if value is None:
            value = default
        if isinstance(value, Currency):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        raise TypeError(f"Cannot call `Currency.wrap` because $value is not Currency or str (got type '{type(value).__name__}')")

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return string representation."""
        return self.code

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{self.__class__.__name__}('{self.code}', {self.subunit_to_unit}, '{self.name}', {self.currency_type})"
