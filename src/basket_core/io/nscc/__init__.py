"""
basket_core.io.nscc

NSCC/DTCC basket composition file decoding.

- fields.py      -> positional / signed-numeric field decoders
- basket_file.py -> record-type state machine producing Basket objects
"""

from .basket_file import (
    NsccBasketFile,
    decode_detail,
    decode_header,
    parse_nscc_basket_file,
    parse_nscc_basket_lines,
)

__all__ = [
    "NsccBasketFile",
    "decode_detail",
    "decode_header",
    "parse_nscc_basket_file",
    "parse_nscc_basket_lines",
]
