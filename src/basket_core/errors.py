"""
Exception and warning types raised by basket_core.
"""

from __future__ import annotations

from typing import Optional


class BasketFeedError(Exception):
    """Base class for feed decoding and derivation errors."""


class InvalidIdentifier(BasketFeedError, ValueError):
    """A security was constructed without a usable CUSIP."""


class OutOfOrderRecord(BasketFeedError):
    """A component detail record appeared before any basket header."""


class CorruptRecord(BasketFeedError):
    """A fixed-width record is too short for its record type."""


class UndefinedRatio(BasketFeedError, ZeroDivisionError):
    """NAV or leg ratio requested for a basket with no creation units."""


class RecordCountMismatch(UserWarning):
    """
    Trailer record count disagrees with the records actually read.

    Collected on the parse result and logged; never raised by the parser.
    """

    def __init__(self, found: int, reported: int, line_no: Optional[int] = None):
        self.found = found
        self.reported = reported
        self.line_no = line_no
        super().__init__(
            f"Error in DTCC file: records found:{found} != records reported:{reported}"
        )
