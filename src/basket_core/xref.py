"""
Venue cross-reference: (security identifier, venue MIC) -> venue ticker.

The instrument XML renderer asks the resolver once per (security, venue)
and emits an identifier block only when a symbol comes back.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Protocol, Tuple

from basket_core.model import SecurityLike


class CrossReferenceResolver(Protocol):
    def resolve(self, identifier: str, venue: str) -> Optional[str]: ...


class NullResolver:
    """Resolver that knows no listings; every venue block is omitted."""

    def resolve(self, identifier: str, venue: str) -> Optional[str]:
        return None


class ListingTableResolver:
    """
    Static exchange-listing table keyed by (CUSIP, venue MIC).

    Typically built from the venue symbol lists, e.g.
        ListingTableResolver.from_listings({
            "NSX": parse_nsx_symbol_list_file(nsx_path),
            "EDGX": parse_edge_symbol_list_file(edge_path),
        })
    """

    def __init__(self, table: Optional[Mapping[Tuple[str, str], str]] = None):
        self._table: Dict[Tuple[str, str], str] = dict(table or {})

    @classmethod
    def from_listings(
        cls, listings: Mapping[str, Iterable[SecurityLike]]
    ) -> "ListingTableResolver":
        table: Dict[Tuple[str, str], str] = {}
        for venue, securities in listings.items():
            for sec in securities:
                if sec.ticker_symbol:
                    table[(sec.cusip, venue)] = sec.ticker_symbol
        return cls(table)

    def add(self, identifier: str, venue: str, symbol: str) -> None:
        self._table[(identifier, venue)] = symbol

    def resolve(self, identifier: str, venue: str) -> Optional[str]:
        return self._table.get((identifier, venue))

    def __len__(self) -> int:
        return len(self._table)
