"""
basket_core

NSCC/DTCC basket composition parsing, security reference feeds and
tbricks instrument / basket XML rendering.
"""

from basket_core.errors import (
    BasketFeedError,
    CorruptRecord,
    InvalidIdentifier,
    OutOfOrderRecord,
    RecordCountMismatch,
    UndefinedRatio,
)

__all__ = [
    "BasketFeedError",
    "CorruptRecord",
    "InvalidIdentifier",
    "OutOfOrderRecord",
    "RecordCountMismatch",
    "UndefinedRatio",
]
