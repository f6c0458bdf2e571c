# examples/run_comp_etfs_report.py
"""
Component / ETF cross-reference report.

Call using:
    python examples/run_comp_etfs_report.py [--infile <NSCC basket file>] [--config <yaml>]

Without a readable --infile the basket membership is read from redis.
"""

from __future__ import annotations

import argparse
import logging
from functools import partial
from pathlib import Path

from basket_core.config import AppConfig
from basket_core.reports import run_comp_etfs_report
from basket_core.store import RedisBasketStore


def find_repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--infile", "-i", default=None, type=Path, help="NSCC basket composition file")
    ap.add_argument("--config", default=None, type=Path, help="AppConfig YAML")
    ap.add_argument("--out", default=None, type=Path, help="Output CSV (default <out_dir>/comp-etfs-report.csv)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg_path = args.config or find_repo_root() / "config" / "example_config.yaml"
    print(f"[INFO] Using config file: {cfg_path}")
    app_cfg = AppConfig.from_yaml(cfg_path)

    infile = args.infile or app_cfg.feeds.nscc_basket_file
    out_path = args.out or app_cfg.output_root / "comp-etfs-report.csv"

    store_factory = partial(RedisBasketStore, **app_cfg.redis_store_kwargs())
    written = run_comp_etfs_report(out_path, infile=infile, store_factory=store_factory)
    print(f"Wrote: {written}")


if __name__ == "__main__":
    main()
