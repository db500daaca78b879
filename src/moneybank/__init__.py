# src/moneybank/__init__.py
"""
MoneyBank - Currency-Aware Money Expressions

A small library for integer money values in named currencies, composable
into sum expressions and reduced to a single currency through a bank of
directional exchange rates.
"""

from moneybank.domain.models import CHF, USD, Expression, Money, Pair, Sum
from moneybank.domain.errors import DomainError, MissingRateError
from moneybank.application.bank import Bank, create_bank

__version__ = "1.0.0"

__all__ = [
    "Money",
    "Sum",
    "Expression",
    "Pair",
    "USD",
    "CHF",
    "Bank",
    "create_bank",
    "DomainError",
    "MissingRateError",
]
