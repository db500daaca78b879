# src/moneybank/shared/validators.py
"""
Input Validation Utilities - Currency and Rate Validation

This module provides validation functions for currency labels and exchange
rates, used both when registering rates on a bank and when loading rates
from configuration.

Files that USE this module:
- moneybank.application.bank (validates add_rate arguments)
- moneybank.config.settings (uses validation functions in field validators)

Files that this module USES:
- None (pure utility functions)
"""
import re


def validate_currency_code(code: str) -> bool:
    """
    Validate a currency label.
    
    Labels are free-form (no ISO registry lookup) but must be non-empty
    strings without surrounding or embedded whitespace.
    
    Args:
        code: Currency label to validate (e.g., 'USD', 'CHF')
        
    Returns:
        True if valid, False otherwise
    """
    if not isinstance(code, str) or not code:
        return False
    
    return bool(re.match(r'^\S+$', code))


def validate_rate(rate: int) -> bool:
    """
    Validate an exchange rate.
    
    Args:
        rate: Units of the source currency per unit of the target currency
        
    Returns:
        True if rate is a positive integer, False otherwise
    """
    if isinstance(rate, bool) or not isinstance(rate, int):
        return False
    
    return rate > 0


def normalize_currency_code(code: str) -> str:
    """Strip whitespace from a configured currency label. Case is kept."""
    return code.strip() if isinstance(code, str) else code
