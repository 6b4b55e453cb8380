"""Explicit configuration for parsing and constructing Money values.

There are no module-level switches: entry points receive a `MoneyConfig` (defaulting to
`DEFAULT_CONFIG`), which keeps concurrent callers with different settings independent.
"""

from __future__ import annotations

import dataclasses
import decimal
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from suite_money.domain.monetary.currency import Currency

ENV_PREFIX = "SUITE_MONEY_"

_ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot read ${name} because value '{raw}' is not a boolean (expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)})")


@dataclass(frozen=True)
class MoneyConfig:
    """Settings consumed by the parser and the numeric constructors.

    Attributes:
        default_currency: Currency (or its code) used when no currency is given or implied.
        assume_from_symbol: Infer the currency from a leading symbol such as "$".
        infinite_precision: Keep subunits as exact `Decimal` instead of rounding to `int`.
        rounding: `decimal` rounding constant applied when non-integral subunits are rounded.
    """

    default_currency: Currency | str = "USD"
    assume_from_symbol: bool = False
    infinite_precision: bool = False
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        # Raise: $rounding must be one of the `decimal` module rounding constants
        if self.rounding not in _ROUNDING_MODES:
            raise ValueError(f"$rounding must be a `decimal` rounding constant, but provided value is: '{self.rounding}'")

    def replace(self, **changes) -> MoneyConfig:
        """Return a copy with $changes applied."""
        return dataclasses.replace(self, **changes)

    def resolve_default_currency(self) -> Currency:
        from suite_money.domain.monetary.currency import Currency

        return Currency.wrap(self.default_currency)

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> MoneyConfig:
        """Build a config from environment variables, after loading a `.env` file.

        Recognized variables (all optional):
            SUITE_MONEY_DEFAULT_CURRENCY: currency code, e.g. "EUR".
            SUITE_MONEY_ASSUME_FROM_SYMBOL: boolean ("true"/"false", "1"/"0", ...).
            SUITE_MONEY_INFINITE_PRECISION: boolean.
            SUITE_MONEY_ROUNDING: name of a `decimal` rounding constant, e.g. "ROUND_HALF_UP".

        Variables already present in the process environment win over the `.env` file.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        load_dotenv(dotenv_path=dotenv_path)

        changes = {}
        default_currency = os.environ.get(f"{ENV_PREFIX}DEFAULT_CURRENCY")
        if default_currency:
            changes["default_currency"] = default_currency.strip().upper()

        for field_name in ("assume_from_symbol", "infinite_precision"):
            env_name = f"{ENV_PREFIX}{field_name.upper()}"
            raw = os.environ.get(env_name)
            if raw:
                changes[field_name] = _parse_bool(env_name, raw)

        rounding = os.environ.get(f"{ENV_PREFIX}ROUNDING")
        if rounding:
            changes["rounding"] = rounding.strip().upper()

        return cls(**changes)


DEFAULT_CONFIG = MoneyConfig()
