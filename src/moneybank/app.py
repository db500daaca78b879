# src/moneybank/app.py
"""
Application Bootstrap - Logging and Bank Initialization

This module is the composition root for programs embedding the bank.
It configures logging from settings and returns a bank preloaded with
the configured exchange rates.

Files that USE this module:
- tests.test_app (unit tests)

Files that this module USES:
- moneybank.shared.logging_conf (setup_logging for logging configuration)
- moneybank.config (settings for configuration management)
- moneybank.application.bank (create_bank for the rate table)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from typing import Optional  # Type hints for optional values

from moneybank.application.bank import Bank, create_bank  # Rate table factory
from moneybank.config.settings import Settings  # Settings type
from moneybank.shared.logging_conf import setup_logging  # Configure logging with file rotation

logger = logging.getLogger(__name__)


def bootstrap(settings: Optional[Settings] = None, configure_logging: bool = True) -> Bank:
    """
    Configure logging and build the application's bank.
    
    Args:
        settings: Settings instance (defaults to the global settings)
        configure_logging: Install root log handlers from settings
        
    Returns:
        Bank preloaded with settings.exchange_rates
    """
    if settings is None:
        from moneybank.config import settings as default_settings
        settings = default_settings

    if configure_logging:
        setup_logging(
            level=settings.log_level,
            log_file=settings.log_file,
            log_dir=settings.log_dir,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count,
            log_to_stdout=settings.log_stdout,
        )

    bank = create_bank(settings)
    logger.info("Default currency: %s", settings.default_currency)
    return bank
