"""
tbricks_xml.py

Builders for the tbricks instrument reference-data XML documents:

1) instruments XML          -> one instrument per security, with a venue
                               identifier block per resolved venue symbol
2) stub basket instruments  -> one "<T> Basket" instrument per ETF basket
3) basket components XML   -> etf / netassetvalue / basket legs + ratios

Builders return an ElementTree root; write_xml() serializes it.
Attributes whose value is None are left out of the element.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from basket_core.errors import UndefinedRatio
from basket_core.model import Basket, SecurityLike
from basket_core.ratios import format_ratio, leg_ratio, nav_per_unit
from basket_core.xref import CrossReferenceResolver

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "application/x-instrument-reference-data+xml"

DEFAULT_VENUE_UUID = "7c15c3c2-4a25-11e0-b2a1-2a7689193271"
DEFAULT_STUB_VENUE_UUID = "c0c78852-efd6-11de-9fb8-dfdb5824b38d"


def _el(parent: Optional[ET.Element], tag: str, **attrs: Optional[str]) -> ET.Element:
    clean = {k: v for k, v in attrs.items() if v is not None}
    if parent is None:
        return ET.Element(tag, clean)
    return ET.SubElement(parent, tag, clean)


def _resource_root() -> Tuple[ET.Element, ET.Element]:
    root = _el(None, "resource", name="instruments", type=RESOURCE_TYPE)
    return root, _el(root, "instruments")


def _identifier(parent: ET.Element, venue_uuid: str, mic: str, fields: Sequence[Tuple[str, str]]) -> None:
    ident = _el(parent, "identifier", venue=venue_uuid, mic=mic)
    fields_el = _el(ident, "fields")
    for name, value in fields:
        _el(fields_el, "field", name=name, value=value)


def build_instruments_xml(
    securities: Iterable[SecurityLike],
    venues: Sequence[str],
    resolver: CrossReferenceResolver,
    venue_uuid: str = DEFAULT_VENUE_UUID,
) -> ET.Element:
    """
    <resource name="instruments" type="application/x-instrument-reference-data+xml">
      <instruments>
        <instrument short_name="AADR" mnemonic="AADR" precedence="no" cfi="ESNTFR"
                    price_format="decimal 2" deleted="no">
          <xml type="fixml"/>
          <groups/>
          <identifiers>
            <identifier venue="..." mic="BATS">
              <fields>
                <field name="exdestination" value="BATS"/>
                <field name="symbol" value="AADR"/>
              </fields>
            </identifier>
            ...
    """
    root, instruments = _resource_root()

    for sec in securities:
        # ticker symbol is the short_name, consistent with the baskets XML
        inst = _el(
            instruments,
            "instrument",
            short_name=sec.ticker_symbol,
            long_name=sec.attrs.name,
            mnemonic=sec.ticker_symbol,
            precedence="no",
            cfi="ESNTFR",
            price_format="decimal 2",
            deleted="no",
        )
        _el(inst, "xml", type="fixml")
        _el(inst, "groups")
        identifiers = _el(inst, "identifiers")

        for mic in venues:
            sym = resolver.resolve(sec.cusip, mic)
            if sym:
                _identifier(identifiers, venue_uuid, mic, [("exdestination", mic), ("symbol", sym)])

    return root


def build_stub_basket_instruments_xml(
    baskets: Iterable[Basket],
    stub_venue_uuid: str = DEFAULT_STUB_VENUE_UUID,
    stub_mic: str = "XXXX",
) -> ET.Element:
    """
    <instrument short_name="EDZ Basket" long_name="" mnemonic="" precedence="yes"
                cfi="ESXXXX" price_format="decimal 2" deleted="no">
      ...
      <identifier venue="..." mic="XXXX">
        <fields><field name="symbol" value="EDZ"/></fields>
      </identifier>
    """
    root, instruments = _resource_root()

    for basket in baskets:
        if not basket.ticker_symbol:
            logger.warning("Skipping basket %s: no ticker symbol", basket.cusip)
            continue
        inst = _el(
            instruments,
            "instrument",
            short_name=f"{basket.ticker_symbol} Basket",
            long_name="",
            mnemonic="",
            precedence="yes",
            cfi="ESXXXX",
            price_format="decimal 2",
            deleted="no",
        )
        _el(inst, "xml", type="fixml")
        _el(inst, "groups")
        identifiers = _el(inst, "identifiers")
        _identifier(identifiers, stub_venue_uuid, stub_mic, [("symbol", basket.ticker_symbol)])

    return root


def _basket_etf(parent: ET.Element, basket: Basket, leg_mic: str) -> None:
    # Compute every value first so a basket with undefined ratios leaves no partial element
    nav = format_ratio(nav_per_unit(basket))
    legs = [
        (comp.ticker_symbol, format_ratio(leg_ratio(basket, comp)))
        for comp in basket.components.values()
    ]

    etf = _el(parent, "etf", short_name=basket.ticker_symbol)
    _el(etf, "parameter", name="netassetvalue", value=nav)
    basket_el = _el(etf, "basket", short_name=f"{basket.ticker_symbol} Basket")
    legs_el = _el(basket_el, "legs")
    for short_name, ratio in legs:
        _el(legs_el, "leg", short_name=short_name, mic=leg_mic, ratio=ratio)


def build_basket_components_xml(baskets: Iterable[Basket], leg_mic: str = "BATS") -> ET.Element:
    """
    <instruments>
      <etf short_name="WREI">
        <parameter name="netassetvalue" value="0.0009"/>
        <basket short_name="WREI Basket">
          <legs>
            <leg short_name="AKR" mic="BATS" ratio="0.0039"/>
            ...

    Baskets without a ticker, or whose NAV or leg ratios are undefined, are
    dropped with a warning.
    """
    root = _el(None, "instruments")
    for basket in baskets:
        if not basket.ticker_symbol:
            logger.warning("Skipping basket %s: no ticker symbol", basket.cusip)
            continue
        try:
            _basket_etf(root, basket, leg_mic)
        except UndefinedRatio as exc:
            logger.warning("Skipping basket %s: %s", basket.ticker_symbol, exc)
    return root


def to_xml_string(root: ET.Element) -> str:
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def write_xml(root: ET.Element, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_xml_string(root), encoding="utf-8")
    logger.info("Wrote %s", path)
    return path
