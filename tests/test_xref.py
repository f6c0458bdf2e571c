# tests/test_xref.py
from __future__ import annotations

from basket_core.model import Security, SecurityAttributes
from basket_core.xref import ListingTableResolver, NullResolver


def test_null_resolver_returns_nothing():
    assert NullResolver().resolve("00768Y206", "BATS") is None


def test_listing_table_from_venue_lists():
    nsx = [
        Security("88706P106", SecurityAttributes(ticker_symbol="TSU")),
        Security("000000001"),  # no ticker: not listed
    ]
    edge = [Security("084670702", SecurityAttributes(ticker_symbol="BRK.B"))]

    resolver = ListingTableResolver.from_listings({"NSX": nsx, "EDGX": edge})

    assert len(resolver) == 2
    assert resolver.resolve("88706P106", "NSX") == "TSU"
    assert resolver.resolve("88706P106", "EDGX") is None
    assert resolver.resolve("084670702", "EDGX") == "BRK.B"
    assert resolver.resolve("000000001", "NSX") is None

    resolver.add("88706P106", "EDGX", "TSU")
    assert resolver.resolve("88706P106", "EDGX") == "TSU"
