# src/moneybank/application/__init__.py
"""
Application Layer - Rate Table and Reduction

This package contains the bank that registers exchange rates and reduces
expressions to a target currency.
"""

from moneybank.application.bank import Bank, create_bank

__all__ = [
    "Bank",
    "create_bank",
]
