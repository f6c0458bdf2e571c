"""
security.py

Core reference-data entities:

- SecurityAttributes: optional descriptive fields filled in by the feeds
- Security:           trimmed CUSIP + attributes
- BasketComponent:    one creation-basket leg (holds a Security)
- Basket:             ETF basket header + its components (holds a Security)

The entities compare by value but are not hashable: attrs and the
components mapping stay mutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from basket_core.errors import InvalidIdentifier


CUSIP_LENGTH = 9


def normalize_cusip(value: Optional[str], pad: bool = True) -> str:
    """
    Trim a CUSIP and (optionally) left-zero-pad it to 9 characters.

    Some feeds (NYSE group, NSX) drop leading zeros: '13817101' -> '013817101'.
    """
    if value is None:
        raise InvalidIdentifier("Invalid CUSIP number: <None>")
    s = str(value).strip()
    if not s:
        raise InvalidIdentifier("Invalid CUSIP number: <empty>")
    if pad:
        s = s.rjust(CUSIP_LENGTH, "0")
    return s


@dataclass
class SecurityAttributes:
    """
    Descriptive attributes of one tradable instrument.

    Every field is optional; None means "not supplied by the feed".
    """
    ticker_symbol: Optional[str] = None
    security_type: Optional[str] = None
    cik: Optional[str] = None
    isin: Optional[str] = None
    sedol: Optional[str] = None
    valoren: Optional[str] = None

    exchange: Optional[str] = None
    primary_market: Optional[str] = None

    name: Optional[str] = None
    company_name: Optional[str] = None
    short_name: Optional[str] = None

    industry_code: Optional[str] = None
    industry_name: Optional[str] = None
    super_sector_code: Optional[str] = None
    super_sector_name: Optional[str] = None
    sector_code: Optional[str] = None
    sector_name: Optional[str] = None
    sub_sector_code: Optional[str] = None
    sub_sector_name: Optional[str] = None

    issue: Optional[str] = None
    lot: Optional[int] = None
    board_lot: Optional[int] = None

    # NSCC indicator codes, stored verbatim
    when_issued_indicator: Optional[str] = None  # 0 = regular way, 1 = when issued
    foreign_indicator: Optional[str] = None      # 0 = domestic, 1 = foreign
    exchange_indicator: Optional[str] = None     # 0 = NYSE, 1 = AMEX, 2 = other
    trade_date: Optional[str] = None             # CCYYMMDD
    tape: Optional[str] = None


class SecurityLike(Protocol):
    """Capabilities shared by Security, Basket and BasketComponent."""

    @property
    def cusip(self) -> str: ...

    @property
    def attrs(self) -> SecurityAttributes: ...

    @property
    def ticker_symbol(self) -> Optional[str]: ...


@dataclass(frozen=True)
class Security:
    """
    Identity + descriptive attributes for one instrument.

    The CUSIP is trimmed at construction and fixed afterwards; attrs stays
    mutable so feeds can enrich it.
    """
    cusip: str
    attrs: SecurityAttributes = field(default_factory=SecurityAttributes)

    __hash__ = None  # attrs is mutable

    def __post_init__(self) -> None:
        object.__setattr__(self, "cusip", normalize_cusip(self.cusip, pad=False))

    @property
    def ticker_symbol(self) -> Optional[str]:
        return self.attrs.ticker_symbol


@dataclass(frozen=True)
class BasketComponent:
    """One leg of a creation basket; owned by its Basket."""
    security: Security
    share_quantity: Optional[float] = None  # shares per creation unit
    new_security_indicator: Optional[str] = None  # 'N' = new CUSIP

    # ETF echoed on the detail record
    index_receipt_symbol: Optional[str] = None
    index_receipt_cusip: Optional[str] = None

    __hash__ = None

    @property
    def cusip(self) -> str:
        return self.security.cusip

    @property
    def attrs(self) -> SecurityAttributes:
        return self.security.attrs

    @property
    def ticker_symbol(self) -> Optional[str]:
        return self.security.ticker_symbol


@dataclass(frozen=True)
class Basket:
    """
    ETF creation/redemption basket.

    component_count is what the header record declares; the components
    mapping is authoritative once parsing is complete.
    """
    security: Security

    component_count: Optional[int] = None
    creation_units_per_trade: Optional[int] = None

    estimated_t1_cash_per_creation_unit: Optional[float] = None
    estimated_t1_cash_per_index_receipt: Optional[float] = None
    nav_per_creation_unit: Optional[float] = None
    nav_per_index_receipt: Optional[float] = None
    total_cash_amount: Optional[float] = None

    total_shares_outstanding: Optional[int] = None
    dividend_amount: Optional[float] = None
    cash_indicator: Optional[str] = None  # 1 = cash only, 2 = cash or components

    components: Dict[str, BasketComponent] = field(default_factory=dict, repr=False)

    __hash__ = None  # components is mutable

    @property
    def cusip(self) -> str:
        return self.security.cusip

    @property
    def attrs(self) -> SecurityAttributes:
        return self.security.attrs

    @property
    def ticker_symbol(self) -> Optional[str]:
        return self.security.ticker_symbol

    @property
    def actual_component_count(self) -> int:
        return len(self.components)

    def add_component(self, component: Optional[BasketComponent]) -> None:
        """Insert or replace a component keyed by its CUSIP; None is ignored."""
        if component is None:
            return
        self.components[component.cusip] = component
