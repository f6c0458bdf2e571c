"""
Security / basket data model for basket_core.
"""

from .security import (
    Basket,
    BasketComponent,
    Security,
    SecurityAttributes,
    SecurityLike,
    normalize_cusip,
)

__all__ = [
    "Basket",
    "BasketComponent",
    "Security",
    "SecurityAttributes",
    "SecurityLike",
    "normalize_cusip",
]
