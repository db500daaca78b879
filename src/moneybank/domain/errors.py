# src/moneybank/domain/errors.py
"""
Domain Errors - Conversion and Rate Exceptions

This module defines domain-specific exceptions raised while registering
exchange rates and reducing expressions.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class MissingRateError(DomainError):
    """Raised when no rate is registered for a non-identity currency pair."""

    def __init__(self, from_currency: str, to_currency: str):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"No exchange rate registered for {from_currency} -> {to_currency}")


class InvalidRateError(DomainError):
    """Raised when a rate value is invalid (e.g., negative or zero)."""
    pass


class InvalidCurrencyError(DomainError):
    """Raised when a currency label is empty or not a string."""
    pass
