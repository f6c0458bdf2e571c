"""
comp_etfs.py

Component / ETF cross-reference report: every component and the ETF
baskets it belongs to.

    Count,Component Ticker,ETF Baskets
    100,A,ETFA,ETFB,ETFC,...
    11,B,ETFD,ETFF,...

Rows are variable width (one trailing column per ETF).

Membership comes from the NSCC basket file when it is available, otherwise
from the redis basket store.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from basket_core.io.nscc import parse_nscc_basket_file
from basket_core.model import Basket
from basket_core.store import RedisBasketStore

logger = logging.getLogger(__name__)

REPORT_HEADERS = ["Count", "Component Ticker", "ETF Baskets"]

Memberships = Dict[str, List[str]]


def memberships_from_baskets(baskets: Iterable[Basket]) -> Memberships:
    """component ticker -> ETF tickers, in basket order."""
    memberships: Memberships = {}
    for basket in baskets:
        etf = basket.ticker_symbol
        if not etf:
            continue
        for comp in basket.components.values():
            if not comp.ticker_symbol:
                continue
            memberships.setdefault(comp.ticker_symbol, []).append(etf)
    return memberships


def memberships_from_nscc_file(path: Union[str, Path]) -> Memberships:
    return memberships_from_baskets(parse_nscc_basket_file(path).baskets)


def write_comp_etfs_report(memberships: Memberships, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(REPORT_HEADERS)
        for comp, etfs in memberships.items():
            writer.writerow([len(etfs), comp, *etfs])
    logger.info("Wrote %s (%d components)", path, len(memberships))
    return path


def run_comp_etfs_report(
    out_path: Union[str, Path],
    infile: Optional[Union[str, Path]] = None,
    store_factory: Callable[[], RedisBasketStore] = RedisBasketStore,
) -> Path:
    """
    Build the report from infile when it exists, else from the basket store.

    The store is opened and closed here, whatever happens in between.
    """
    if infile and Path(infile).exists():
        memberships = memberships_from_nscc_file(infile)
    else:
        logger.warning("File not found %s, using redis basket store", infile)
        with store_factory() as store:
            memberships = store.component_memberships()

    return write_comp_etfs_report(memberships, out_path)
