"""
symbol_lists.py

Loaders for the delimited security reference feeds:

- NSX symbol list        (SYMBOL,CUSIP,TAPE,IS_TEST)
- EDGE symbol list       (CUSIP,Symbol,Ext,Company Name,Primary Market,...)
- NYSE group symbol file (Symbol,CUSIP,CompanyName,NYSEGroupMarket,...)
- Xignite master securities file (" Records Record Symbol", ...)

Each loader maps named columns onto SecurityAttributes and returns one
Security per usable row, in file order. Rows without a CUSIP are skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from basket_core.model import Security, SecurityAttributes, normalize_cusip

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def normalize_col(c: str) -> str:
    if c is None:
        return ""
    s = str(c).replace("\ufeff", "")
    return re.sub(r"\s+", " ", s.strip())


def try_read_csv(path: PathLike) -> pd.DataFrame:
    # dtype=str keeps leading zeros; keep_default_na=False keeps tickers like "NA"
    try:
        df = pd.read_csv(path, dtype=str, encoding="utf-8-sig", keep_default_na=False)
    except UnicodeDecodeError:
        # latin1 maps every byte, so this read cannot fail on encoding
        df = pd.read_csv(path, dtype=str, encoding="latin1", keep_default_na=False)
    df.columns = [normalize_col(c) for c in df.columns]
    return df


def _safe_get(row: pd.Series, col: str) -> Optional[str]:
    if col not in row.index:
        return None
    val = row[col]
    if val is None or (isinstance(val, float) and pd.isna(val)):
        return None
    s = str(val).strip()
    return s or None


def _safe_int(row: pd.Series, col: str) -> Optional[int]:
    val = _safe_get(row, col)
    if val is None:
        return None
    try:
        return int(float(val.replace(",", "")))
    except ValueError:
        return None


def _row_cusip(row: pd.Series, col: str, pad: bool) -> Optional[str]:
    raw = _safe_get(row, col)
    if raw is None:
        return None
    return normalize_cusip(raw, pad=pad)


def parse_nsx_symbol_list_file(path: PathLike) -> List[Security]:
    """
    NSX symbol list.

    Header: SYMBOL,CUSIP,TAPE,IS_TEST
    Data:   TSU,88706P106,A,N

    Test symbols (IS_TEST other than 'N') are dropped.
    """
    df = try_read_csv(path)
    securities: List[Security] = []
    skipped = 0

    for _, row in df.iterrows():
        cusip = _row_cusip(row, "CUSIP", pad=True)
        is_test = _safe_get(row, "IS_TEST") != "N"
        if cusip is None or is_test:
            skipped += 1
            continue

        securities.append(
            Security(
                cusip,
                SecurityAttributes(
                    ticker_symbol=_safe_get(row, "SYMBOL"),
                    tape=_safe_get(row, "TAPE"),
                ),
            )
        )

    logger.debug("NSX %s: kept=%d skipped=%d", path, len(securities), skipped)
    return securities


def parse_edge_symbol_list_file(path: PathLike) -> List[Security]:
    """
    EDGE symbol list.

    Header: CUSIP,Symbol,Ext,Company Name,Primary Market,Round Lot Size,Min Order Qty
    Data:   00846U101,A,,AGILENT TECHNOLOGIES INC,NYSE,100,0

    A non-empty Ext is appended to the symbol ('BRK' + 'A' -> 'BRK.A').
    """
    df = try_read_csv(path)
    securities: List[Security] = []

    for _, row in df.iterrows():
        cusip = _row_cusip(row, "CUSIP", pad=False)
        if cusip is None:
            logger.debug("EDGE %s: row without CUSIP skipped", path)
            continue

        symbol = _safe_get(row, "Symbol")
        ext = _safe_get(row, "Ext")
        if symbol is not None and ext is not None:
            symbol = f"{symbol}.{ext}"

        securities.append(
            Security(
                cusip,
                SecurityAttributes(
                    ticker_symbol=symbol,
                    security_type=ext,
                    primary_market=_safe_get(row, "Primary Market"),
                    company_name=_safe_get(row, "Company Name"),
                    board_lot=_safe_int(row, "Round Lot Size"),
                    lot=_safe_int(row, "Min Order Qty"),
                ),
            )
        )

    return securities


def parse_nyse_grp_sym_file(path: PathLike) -> List[Security]:
    """
    NYSE group symbol file.

    Header: Symbol,CUSIP,CompanyName,NYSEGroupMarket,PrimaryMarket,IndustryCode,
            SuperSectorCode,SectorCode,SubSectorCode,IndustryName,SuperSectorName,
            SectorName,SubSectorName
    Data:   AA,13817101,"ALCOA, INC",N,N,1000,1700,1750,1753,Basic Materials,...
    """
    df = try_read_csv(path)
    securities: List[Security] = []

    for _, row in df.iterrows():
        cusip = _row_cusip(row, "CUSIP", pad=True)
        if cusip is None:
            logger.debug("NYSE %s: row without CUSIP skipped", path)
            continue

        # Symbology conversion...BRK A => BRK.A
        symbol = _safe_get(row, "Symbol")
        if symbol is not None:
            symbol = symbol.replace(" ", ".", 1)

        securities.append(
            Security(
                cusip,
                SecurityAttributes(
                    ticker_symbol=symbol,
                    exchange=_safe_get(row, "NYSEGroupMarket"),
                    primary_market=_safe_get(row, "PrimaryMarket"),
                    company_name=_safe_get(row, "CompanyName"),
                    industry_code=_safe_get(row, "IndustryCode"),
                    industry_name=_safe_get(row, "IndustryName"),
                    super_sector_code=_safe_get(row, "SuperSectorCode"),
                    super_sector_name=_safe_get(row, "SuperSectorName"),
                    sector_code=_safe_get(row, "SectorCode"),
                    sector_name=_safe_get(row, "SectorName"),
                    sub_sector_code=_safe_get(row, "SubSectorCode"),
                    sub_sector_name=_safe_get(row, "SubSectorName"),
                ),
            )
        )

    return securities


def parse_xignite_master_securities_file(path: PathLike) -> List[Security]:
    """
    Xignite master securities file.

    Headers carry a leading space (" Records Record Symbol"); they are
    normalized before lookup, so the keys below are stripped.
    """
    df = try_read_csv(path)
    securities: List[Security] = []

    for _, row in df.iterrows():
        cusip = _row_cusip(row, "Records Record CUSIP", pad=False)
        if cusip is None:
            logger.debug("Xignite %s: row without CUSIP skipped", path)
            continue

        securities.append(
            Security(
                cusip,
                SecurityAttributes(
                    ticker_symbol=_safe_get(row, "Records Record Symbol"),
                    cik=_safe_get(row, "Records Record CIK"),
                    isin=_safe_get(row, "Records Record ISIN"),
                    sedol=_safe_get(row, "Records Record SEDOL"),
                    valoren=_safe_get(row, "Records Record Valoren"),
                    exchange=_safe_get(row, "Records Record Exchange"),
                    name=_safe_get(row, "Records Record Name"),
                    short_name=_safe_get(row, "Records Record ShortName"),
                    issue=_safe_get(row, "Records Record Issue"),
                    sector_name=_safe_get(row, "Records Record Sector"),
                    industry_name=_safe_get(row, "Records Record Industry"),
                ),
            )
        )

    return securities
