"""
Configuration management for solwallet.

Loads settings from environment variables and an optional .env file and
exposes a single source of truth for node, price source and storage settings.
"""

from solwallet.config.settings import Settings, get_settings, load_settings, reset_settings_cache

__all__ = ["Settings", "get_settings", "load_settings", "reset_settings_cache"]
