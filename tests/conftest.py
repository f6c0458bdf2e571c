from __future__ import annotations

from pathlib import Path
from fnmatch import fnmatchcase
from typing import Callable, Optional, Sequence

import pytest


WREI_HEADER = (
    "01WREI           18383M47200220110624000000950005000000000000000291+"
    "0000000000000+0000162471058+0000000003249+0000000004503+"
    "0000005000000000000000000+"
)
AKR_DETAIL = "02AKR            0042391090002011062400000193WREI           18383M472002"
ALX_DETAIL = "02ALX            0147521090002011062400000013WREI           18383M472002"


def _amount(value: float, width: int) -> str:
    cents = round(abs(value) * 100)
    whole, frac = divmod(cents, 100)
    sign = "-" if value < 0 else "+"
    return f"{whole:0{width}d}{frac:02d}{sign}"


def _header_line(
    ticker: str = "WREI",
    cusip: str = "18383M472",
    count: int = 2,
    units: int = 50000,
    amounts: Sequence[float] = (2.91, 0.0, 1624710.58, 32.49, 45.03),
    shares: int = 500000,
    dividend: float = 0.0,
    cash_indicator: Optional[str] = None,
) -> str:
    s = "01" + ticker.ljust(15) + cusip.ljust(9) + "002" + "20110624"
    s += f"{count:08d}{units:08d}"
    for i, amt in enumerate(amounts):
        s += _amount(amt, 12 if i == 0 else 11)
    s += f"{shares:012d}"
    s += _amount(dividend, 11)
    if cash_indicator is not None:
        s += cash_indicator
    return s


def _detail_line(
    ticker: str,
    cusip: str,
    qty: int,
    etf: str = "WREI",
    etf_cusip: str = "18383M472",
    new_security: Optional[str] = None,
) -> str:
    s = "02" + ticker.ljust(15) + cusip.ljust(9) + "000" + "20110624" + f"{qty:08d}"
    s += etf.ljust(15) + etf_cusip.ljust(9) + "002"
    if new_security is not None:
        s += new_security
    return s


def _trailer_line(count: int) -> str:
    return "09" + " " * 35 + f"{count:08d}"


@pytest.fixture(scope="session")
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


@pytest.fixture
def header_line() -> Callable[..., str]:
    return _header_line


@pytest.fixture
def detail_line() -> Callable[..., str]:
    return _detail_line


@pytest.fixture
def trailer_line() -> Callable[[int], str]:
    return _trailer_line


@pytest.fixture
def wrei_lines() -> list:
    return [WREI_HEADER, AKR_DETAIL, ALX_DETAIL, _trailer_line(4)]


@pytest.fixture
def nscc_file(tmp_path: Path, wrei_lines: list) -> Path:
    p = tmp_path / "basket_composition.txt"
    p.write_text("\r\n".join(wrei_lines) + "\r\n", encoding="latin-1")
    return p


class FakeRedis:
    """In-memory stand-in for the handful of redis calls the store makes."""

    def __init__(self, hashes):
        self.hashes = hashes
        self.closed = False

    def scan_iter(self, match=None):
        for key in sorted(self.hashes):
            if match is None or fnmatchcase(key, match):
                yield key

    def hget(self, key, field):
        return self.hashes.get(key, {}).get(field)

    def close(self):
        self.closed = True
