# src/moneybank/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from moneybank.shared.validators import (
    normalize_currency_code,
    validate_currency_code,
    validate_rate,
)
from moneybank.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_rate",
    "normalize_currency_code",
    "setup_logging",
]
