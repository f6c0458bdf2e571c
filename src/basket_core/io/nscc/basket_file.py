"""
basket_file.py

Parser for the NSCC/DTCC basket composition file.

File layout (one record per line, fixed width, no delimiters):

  Header record describing the basket (type 01)
  => 01WREI           18383M47200220110624000000950005000000000000000291+0000000000000+0000162471058+0000000003249+0000000004503+0000005000000000000000000+
  Basket component records (type 02), belonging to the preceding 01
  => 02AKR            0042391090002011062400000193WREI           18383M472002
  => 02ALX            0147521090002011062400000013WREI           18383M472002
  File trailer (type 09) with the record count of 01 + 02 + 09 records

Any other record type is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from basket_core.errors import (
    CorruptRecord,
    InvalidIdentifier,
    OutOfOrderRecord,
    RecordCountMismatch,
)
from basket_core.index_maps import build_map_by_cusip, build_map_by_ticker
from basket_core.io.nscc.fields import (
    char_field,
    float_field,
    int_field,
    signed_amount,
    text_field,
)
from basket_core.model import Basket, BasketComponent, Security, SecurityAttributes

logger = logging.getLogger(__name__)


HEADER = "01"
DETAIL = "02"
TRAILER = "09"

# Shortest line that still carries every mandatory field of the record type.
# The 01 cash indicator (col 150) and the 02 ETF echo / new-security
# indicator (cols 45..72) are optional.
MIN_LENGTH: Dict[str, int] = {
    HEADER: 150,
    DETAIL: 45,
    TRAILER: 45,
}


@dataclass
class NsccBasketFile:
    """
    Result of one parser run.

    records_read counts 01, 02 and 09 records; warnings holds one
    RecordCountMismatch per trailer that disagreed with records_read.
    """
    baskets: List[Basket] = field(default_factory=list)
    records_read: int = 0
    declared_record_count: Optional[int] = None
    warnings: List[RecordCountMismatch] = field(default_factory=list)

    def baskets_by_ticker(self) -> Dict[str, Basket]:
        return build_map_by_ticker(self.baskets)

    def baskets_by_cusip(self) -> Dict[str, Basket]:
        return build_map_by_cusip(self.baskets)


def _common_attributes(line: str) -> SecurityAttributes:
    return SecurityAttributes(
        ticker_symbol=text_field(line, 2, 16),
        when_issued_indicator=char_field(line, 26),
        foreign_indicator=char_field(line, 27),
        exchange_indicator=char_field(line, 28),
        trade_date=text_field(line, 29, 36),
    )


def _security(line: str, line_no: int) -> Security:
    try:
        return Security(line[17:26], _common_attributes(line))
    except InvalidIdentifier as exc:
        raise InvalidIdentifier(f"line {line_no}: {exc}") from exc


def decode_header(line: str, line_no: int = 0) -> Basket:
    """Decode a type 01 record into a Basket with no components."""
    return Basket(
        security=_security(line, line_no),
        # Component Count...99,999,999
        component_count=int_field(line, 37, 44),
        # Create/Redeem Units per Trade...99,999,999
        creation_units_per_trade=int_field(line, 45, 52),
        # Estimated T-1 Cash Amount Per Creation Unit...999,999,999,999.99-
        estimated_t1_cash_per_creation_unit=signed_amount(line, 53, 64, 65, 66, 67),
        # Estimated T-1 Cash Per Index Receipt...99,999,999,999.99-
        estimated_t1_cash_per_index_receipt=signed_amount(line, 68, 78, 79, 80, 81),
        nav_per_creation_unit=signed_amount(line, 82, 92, 93, 94, 95),
        nav_per_index_receipt=signed_amount(line, 96, 106, 107, 108, 109),
        total_cash_amount=signed_amount(line, 110, 120, 121, 122, 123),
        # Total Shares Outstanding Per ETF...999,999,999,999
        total_shares_outstanding=int_field(line, 124, 135),
        dividend_amount=signed_amount(line, 136, 146, 147, 148, 149),
        cash_indicator=char_field(line, 150),
    )


def decode_detail(line: str, line_no: int = 0) -> BasketComponent:
    """Decode a type 02 record into a BasketComponent."""
    return BasketComponent(
        security=_security(line, line_no),
        # Component Share Qty...99,999,999 (unsigned)
        share_quantity=float_field(line, 37, 44),
        new_security_indicator=char_field(line, 72),
        index_receipt_symbol=text_field(line, 45, 59),
        index_receipt_cusip=text_field(line, 60, 68),
    )


def _check_length(rec_type: str, line: str, line_no: int) -> None:
    need = MIN_LENGTH[rec_type]
    if len(line) < need:
        raise CorruptRecord(
            f"line {line_no}: record {rec_type} is {len(line)} chars, expected at least {need}"
        )


def parse_nscc_basket_lines(lines: Iterable[str]) -> NsccBasketFile:
    """
    Decode an iterable of NSCC basket file lines in a single pass.

    Raises:
        OutOfOrderRecord: a 02 record precedes every 01 record.
        CorruptRecord:    a 01/02/09 record is too short to decode.
        InvalidIdentifier: a 01/02 record has a blank CUSIP.
    """
    result = NsccBasketFile()
    current: Optional[Basket] = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        rec_type = line[0:2]

        if rec_type == HEADER:
            _check_length(rec_type, line, line_no)
            result.records_read += 1
            current = decode_header(line, line_no)
            result.baskets.append(current)

        elif rec_type == DETAIL:
            _check_length(rec_type, line, line_no)
            if current is None:
                raise OutOfOrderRecord(
                    f"line {line_no}: component record before any basket header"
                )
            result.records_read += 1
            current.add_component(decode_detail(line, line_no))

        elif rec_type == TRAILER:
            _check_length(rec_type, line, line_no)
            result.records_read += 1
            # Record Count...99,999,999 includes records 01, 02, 09
            reported = int_field(line, 37, 44)
            result.declared_record_count = reported
            if reported != result.records_read:
                mismatch = RecordCountMismatch(result.records_read, reported, line_no)
                logger.warning("%s (line %d)", mismatch, line_no)
                result.warnings.append(mismatch)

        else:
            logger.debug("Ignoring record type %r at line %d", rec_type, line_no)

    return result


def parse_nscc_basket_file(path: Union[str, Path], encoding: str = "latin-1") -> NsccBasketFile:
    """Parse an NSCC basket composition file from disk."""
    path = Path(path)
    with path.open("r", encoding=encoding, newline="") as fh:
        result = parse_nscc_basket_lines(fh)

    logger.info(
        "Parsed %s: baskets=%d records=%d",
        path.name,
        len(result.baskets),
        result.records_read,
    )
    return result
