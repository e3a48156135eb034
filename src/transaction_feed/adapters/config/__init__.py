"""Configuration adapters."""

from transaction_feed.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
