"""
NAV and leg-ratio derivation for the tbricks basket XML.

  NAV per unit = total cash amount / creation units per trade
  leg ratio    = component share quantity / creation units per trade

A basket with zero (or missing) creation units has no defined ratio; the
functions raise UndefinedRatio instead of returning inf/nan.
"""

from __future__ import annotations

from basket_core.errors import UndefinedRatio
from basket_core.model import Basket, BasketComponent

RATIO_FORMAT = "{:.4f}"


def _units(basket: Basket) -> int:
    units = basket.creation_units_per_trade
    if not units:
        raise UndefinedRatio(
            f"Basket {basket.ticker_symbol or basket.cusip} has no creation units per trade"
        )
    return units


def nav_per_unit(basket: Basket) -> float:
    units = _units(basket)
    if basket.total_cash_amount is None:
        raise UndefinedRatio(
            f"Basket {basket.ticker_symbol or basket.cusip} has no total cash amount"
        )
    return basket.total_cash_amount / units


def leg_ratio(basket: Basket, component: BasketComponent) -> float:
    units = _units(basket)
    if component.share_quantity is None:
        raise UndefinedRatio(
            f"Component {component.ticker_symbol or component.cusip} has no share quantity"
        )
    return component.share_quantity / units


def format_ratio(value: float) -> str:
    """Render with exactly 4 decimal digits: 0.00386 -> '0.0039'."""
    return RATIO_FORMAT.format(value)
