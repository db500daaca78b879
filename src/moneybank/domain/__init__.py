# src/moneybank/domain/__init__.py
"""
Domain Layer - Pure Value Objects

This package contains the money value type, the expression tree and the
domain errors. No dependencies on configuration or logging.
"""

from moneybank.domain.models import (
    CHF,
    USD,
    Expression,
    Money,
    Pair,
    Sum,
)
from moneybank.domain.errors import (
    DomainError,
    InvalidCurrencyError,
    InvalidRateError,
    MissingRateError,
)

__all__ = [
    "Expression",
    "Money",
    "Sum",
    "Pair",
    "USD",
    "CHF",
    "DomainError",
    "InvalidCurrencyError",
    "InvalidRateError",
    "MissingRateError",
]
