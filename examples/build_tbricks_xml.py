# examples/build_tbricks_xml.py
"""
Build the tbricks XML documents from the configured feeds:

  - tbricks_instruments.xml        (NYSE group securities, venue identifiers)
  - tbricks_stub_baskets.xml       (one "<T> Basket" instrument per ETF)
  - tbricks_basket_components.xml  (NAV + leg ratios per ETF)

Venue symbols come from the NSX / EDGE symbol lists when configured.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from basket_core.config import AppConfig
from basket_core.io import (
    parse_edge_symbol_list_file,
    parse_nscc_basket_file,
    parse_nsx_symbol_list_file,
    parse_nyse_grp_sym_file,
)
from basket_core.render import (
    build_basket_components_xml,
    build_instruments_xml,
    build_stub_basket_instruments_xml,
    write_xml,
)
from basket_core.xref import ListingTableResolver


def find_repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default=None, type=Path, help="AppConfig YAML")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg_path = args.config or find_repo_root() / "config" / "example_config.yaml"
    app_cfg = AppConfig.from_yaml(cfg_path)
    feeds = app_cfg.feeds
    venues = app_cfg.venues
    out_dir = app_cfg.output_root

    if feeds.nscc_basket_file is None or not feeds.nscc_basket_file.exists():
        print(f"[ERROR] NSCC basket file not found: {feeds.nscc_basket_file}")
        sys.exit(1)

    parsed = parse_nscc_basket_file(feeds.nscc_basket_file)
    for w in parsed.warnings:
        print(f"[WARN] {w}")

    # ---- venue listings ----
    listings = {}
    if feeds.nsx_symbol_file and feeds.nsx_symbol_file.exists():
        listings["NSX"] = parse_nsx_symbol_list_file(feeds.nsx_symbol_file)
    if feeds.edge_symbol_file and feeds.edge_symbol_file.exists():
        edge = parse_edge_symbol_list_file(feeds.edge_symbol_file)
        listings["EDGA"] = edge
        listings["EDGX"] = edge
    resolver = ListingTableResolver.from_listings(listings)
    print(f"[INFO] Venue listings: {len(resolver)} (cusip, venue) pairs")

    securities = []
    if feeds.nyse_group_file and feeds.nyse_group_file.exists():
        securities = parse_nyse_grp_sym_file(feeds.nyse_group_file)

    write_xml(
        build_instruments_xml(securities, venues.mics, resolver, venue_uuid=venues.venue_uuid),
        out_dir / "tbricks_instruments.xml",
    )
    write_xml(
        build_stub_basket_instruments_xml(
            parsed.baskets, stub_venue_uuid=venues.stub_venue_uuid, stub_mic=venues.stub_mic
        ),
        out_dir / "tbricks_stub_baskets.xml",
    )
    write_xml(
        build_basket_components_xml(parsed.baskets, leg_mic=venues.leg_mic),
        out_dir / "tbricks_basket_components.xml",
    )

    print(f"Wrote tbricks XML for {len(securities)} securities, {len(parsed.baskets)} baskets -> {out_dir}")


if __name__ == "__main__":
    main()
