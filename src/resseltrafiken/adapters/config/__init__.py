"""Configuration adapters."""

from resseltrafiken.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
