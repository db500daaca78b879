# src/moneybank/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
"""

from moneybank.config.settings import RateEntry, Settings, settings

__all__ = ["RateEntry", "Settings", "settings"]
