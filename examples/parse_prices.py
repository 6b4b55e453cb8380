from __future__ import annotations

import logging
from decimal import Decimal

from suite_money import Money, MoneyConfig, parse
from suite_money.domain.monetary.errors import InvalidAmountError

logger = logging.getLogger(__name__)

# Scraped price labels in mixed conventions
PRICE_LABELS = [
    ("$5.95 ea.", None),
    ("EUR 1.234.567,89", "DE"),
    ("EUR 1 234,56", "fr_FR"),
    ("£9.99", None),
    ("$5.95 - $10.95", None),
]


def main() -> None:
    config = MoneyConfig(assume_from_symbol=True)

    for label, locale in PRICE_LABELS:
        try:
            money = parse(label, locale=locale, config=config)
        except InvalidAmountError as e:
            logger.warning(f"Skipping price label '{label}': {e}")
            continue
        logger.info(f"{label!r:>22} -> {money!r} ({money})")

    # Exact totals: three items at 5.95 plus 8.25% tax
    subtotal = Money.from_decimal(Decimal("5.95")) * 3
    tax = subtotal * Decimal("0.0825")
    logger.info(f"subtotal={subtotal}, tax={tax}, total={subtotal + tax}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
