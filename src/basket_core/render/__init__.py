"""
Output renderers for basket_core.
"""

from .tbricks_xml import (
    build_basket_components_xml,
    build_instruments_xml,
    build_stub_basket_instruments_xml,
    to_xml_string,
    write_xml,
)

__all__ = [
    "build_basket_components_xml",
    "build_instruments_xml",
    "build_stub_basket_instruments_xml",
    "to_xml_string",
    "write_xml",
]
