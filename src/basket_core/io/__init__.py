"""
Input helpers for basket_core: the NSCC basket file and the delimited
exchange / vendor symbol feeds.
"""

from .nscc import NsccBasketFile, parse_nscc_basket_file, parse_nscc_basket_lines
from .symbol_lists import (
    parse_edge_symbol_list_file,
    parse_nsx_symbol_list_file,
    parse_nyse_grp_sym_file,
    parse_xignite_master_securities_file,
)

__all__ = [
    "NsccBasketFile",
    "parse_nscc_basket_file",
    "parse_nscc_basket_lines",
    "parse_edge_symbol_list_file",
    "parse_nsx_symbol_list_file",
    "parse_nyse_grp_sym_file",
    "parse_xignite_master_securities_file",
]
