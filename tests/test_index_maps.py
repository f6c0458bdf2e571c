# tests/test_index_maps.py
from __future__ import annotations

from basket_core.index_maps import build_map_by_cusip, build_map_by_ticker
from basket_core.model import Basket, Security, SecurityAttributes


def _sec(cusip, ticker=None):
    return Security(cusip, SecurityAttributes(ticker_symbol=ticker))


def test_ticker_map_last_write_wins():
    first = _sec("111111111", "ABC")
    second = _sec("222222222", "ABC")

    by_ticker = build_map_by_ticker([first, second])
    assert by_ticker == {"ABC": second}


def test_ticker_map_skips_missing_ticker():
    no_ticker = _sec("333333333")
    by_ticker = build_map_by_ticker([no_ticker, _sec("444444444", "XYZ")])
    assert list(by_ticker) == ["XYZ"]


def test_cusip_map_keeps_every_distinct_cusip():
    a = _sec("111111111", "ABC")
    b = _sec("222222222", "ABC")
    a2 = _sec("111111111", "ABD")

    by_cusip = build_map_by_cusip([a, b, a2])
    assert by_cusip == {"111111111": a2, "222222222": b}


def test_maps_accept_baskets():
    basket = Basket(_sec("18383M472", "WREI"), creation_units_per_trade=50000)
    assert build_map_by_ticker([basket])["WREI"] is basket
    assert build_map_by_cusip([basket])["18383M472"] is basket
