# src/moneybank/application/bank.py
"""
Bank - Exchange Rate Table and Expression Reduction

This module holds the bank: a table of directional integer exchange rates
keyed by currency Pair, and the entry point for reducing an Expression to
a single Money in a target currency.

Rates are strictly directional. Registering CHF->USD does not make USD->CHF
available, and no rate is ever derived from other rates. Converting a
currency to itself always uses rate 1.

Files that USE this module:
- moneybank.app (bootstrap builds a bank from settings)
- moneybank (package re-exports Bank and create_bank)
- tests.test_bank (unit tests)

Files that this module USES:
- moneybank.domain.models (Expression, Money, Pair)
- moneybank.domain.errors (MissingRateError, InvalidRateError, InvalidCurrencyError)
- moneybank.shared.validators (currency and rate validation)
- moneybank.config (settings, lazily, for create_bank defaults)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging rate registration and lookups
from types import MappingProxyType  # Read-only view for rate snapshots
from typing import TYPE_CHECKING, Dict, Mapping, Optional  # Type hints

from moneybank.domain.errors import (
    InvalidCurrencyError,  # Empty or non-string currency label
    InvalidRateError,  # Zero, negative or non-integer rate
    MissingRateError,  # No rate registered for a non-identity pair
)
from moneybank.domain.models import Expression, Money, Pair  # Domain value objects
from moneybank.shared.validators import validate_currency_code, validate_rate  # Input validation

if TYPE_CHECKING:
    from moneybank.config.settings import Settings

logger = logging.getLogger(__name__)


def _require_currency(code: str) -> str:
    if not validate_currency_code(code):
        raise InvalidCurrencyError(f"Invalid currency code: {code!r}")
    return code


class Bank:
    """
    In-memory table of directional exchange rates.

    A rate is the number of source-currency units per one target-currency
    unit: with CHF->USD = 2, reducing 10 CHF to USD yields 5 USD.

    The table is plain mutable state with no locking; callers sharing a bank
    across threads must serialize add_rate against reads themselves.
    """

    def __init__(self, default_currency: Optional[str] = None):
        if default_currency is not None:
            _require_currency(default_currency)
        self.default_currency = default_currency
        self._rates: Dict[Pair, int] = {}

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"Bank(rates={len(self._rates)}, default_currency={self.default_currency!r})"

    @property
    def rates(self) -> Mapping[Pair, int]:
        """Read-only snapshot of the registered rates."""
        return MappingProxyType(dict(self._rates))

    def add_rate(self, from_currency: str, to_currency: str, rate: int) -> None:
        """
        Register (or overwrite) the rate for the exact pair from -> to.

        Args:
            from_currency: Source currency label
            to_currency: Target currency label
            rate: Positive integer, source units per one target unit

        Raises:
            InvalidCurrencyError: If either label is empty or not a string
            InvalidRateError: If rate is not a positive integer
        """
        _require_currency(from_currency)
        _require_currency(to_currency)
        if not validate_rate(rate):
            raise InvalidRateError(
                f"Rate for {from_currency} -> {to_currency} must be a positive integer, got {rate!r}"
            )

        pair = Pair(from_currency, to_currency)
        previous = self._rates.get(pair)
        self._rates[pair] = rate
        if previous is not None and previous != rate:
            logger.info("Rate %s overwritten: %s -> %s", pair, previous, rate)
        else:
            logger.debug("Rate %s registered: %s", pair, rate)

    def has_rate(self, from_currency: str, to_currency: str) -> bool:
        """Return True if rate() would succeed for this pair."""
        return from_currency == to_currency or Pair(from_currency, to_currency) in self._rates

    def rate(self, from_currency: str, to_currency: str) -> int:
        """
        Look up the rate for converting from_currency into to_currency.

        Args:
            from_currency: Source currency label
            to_currency: Target currency label

        Returns:
            1 for identical currencies (regardless of stored rates),
            otherwise the registered rate

        Raises:
            MissingRateError: If no rate is registered for the pair
        """
        if from_currency == to_currency:
            return 1
        try:
            return self._rates[Pair(from_currency, to_currency)]
        except KeyError:
            logger.warning("No rate registered for %s -> %s", from_currency, to_currency)
            raise MissingRateError(from_currency, to_currency) from None

    def reduce(self, source: Expression, to_currency: Optional[str] = None) -> Money:
        """
        Reduce an expression to a single Money in to_currency.

        Args:
            source: Money or Sum expression (any nesting depth)
            to_currency: Target currency label (defaults to the bank's
                         default_currency)

        Returns:
            Money in to_currency

        Raises:
            MissingRateError: If any leaf needs an unregistered rate
            InvalidCurrencyError: If no target is given and the bank has no default
        """
        if to_currency is None:
            if self.default_currency is None:
                raise InvalidCurrencyError("No target currency given and bank has no default currency")
            to_currency = self.default_currency
        return source.reduce(self, to_currency)


def create_bank(settings: Optional[Settings] = None) -> Bank:
    """
    Build a bank preloaded with the configured exchange rates.

    Entries are applied in order, so a later entry for the same pair
    overwrites an earlier one.

    Args:
        settings: Settings instance (defaults to the global settings)

    Returns:
        New Bank with every configured rate registered and
        settings.default_currency as its default reduce target
    """
    if settings is None:
        from moneybank.config import settings as default_settings
        settings = default_settings

    bank = Bank(default_currency=settings.default_currency)
    for entry in settings.exchange_rates:
        bank.add_rate(entry.from_currency, entry.to_currency, entry.rate)
    logger.info("Bank created with %d rate(s) from settings", len(bank))
    return bank
