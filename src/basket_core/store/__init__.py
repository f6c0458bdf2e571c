"""
External basket data sources.
"""

from .redis_store import RedisBasketStore, StoredBasket

__all__ = ["RedisBasketStore", "StoredBasket"]
