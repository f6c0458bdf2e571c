"""
Configuration loading for basket_core.
"""

from .loader import AppConfig, FeedsConfig, RedisConfig, VenuesConfig

__all__ = ["AppConfig", "FeedsConfig", "RedisConfig", "VenuesConfig"]
