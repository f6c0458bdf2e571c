"""
Reports built on top of parsed basket data.
"""

from .comp_etfs import (
    REPORT_HEADERS,
    memberships_from_baskets,
    memberships_from_nscc_file,
    run_comp_etfs_report,
    write_comp_etfs_report,
)

__all__ = [
    "REPORT_HEADERS",
    "memberships_from_baskets",
    "memberships_from_nscc_file",
    "run_comp_etfs_report",
    "write_comp_etfs_report",
]
