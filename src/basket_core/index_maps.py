"""
Lookup maps over parsed securities (or baskets).

Later entries win on duplicate keys; entries without the key are skipped.
"""

from __future__ import annotations

from typing import Dict, Iterable, TypeVar

from basket_core.model import SecurityLike

S = TypeVar("S", bound=SecurityLike)


def build_map_by_ticker(securities: Iterable[S]) -> Dict[str, S]:
    mapping: Dict[str, S] = {}
    for sec in securities:
        if sec.ticker_symbol:
            mapping[sec.ticker_symbol] = sec
    return mapping


def build_map_by_cusip(securities: Iterable[S]) -> Dict[str, S]:
    mapping: Dict[str, S] = {}
    for sec in securities:
        if sec.cusip:
            mapping[sec.cusip] = sec
    return mapping
