from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from basket_core.render.tbricks_xml import DEFAULT_STUB_VENUE_UUID, DEFAULT_VENUE_UUID


# ---------- Feeds ----------

@dataclass
class FeedsConfig:
    """
    Input feed locations. Any feed may be left out of the YAML.
    """
    nscc_basket_file: Optional[Path] = None
    nsx_symbol_file: Optional[Path] = None
    edge_symbol_file: Optional[Path] = None
    nyse_group_file: Optional[Path] = None
    xignite_master_file: Optional[Path] = None


# ---------- Redis basket store ----------

@dataclass
class RedisConfig:
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    key_pattern: str = "DTCC:BASKET:*"
    cusip_field: str = "IndexReceiptCUSIP"
    components_field: str = "Components"


# ---------- Venues ----------

@dataclass
class VenuesConfig:
    """
    tbricks venue settings.

    - mics: venues queried for an identifier block per instrument
    - leg_mic: MIC stamped on every basket leg
    """
    mics: List[str] = field(default_factory=lambda: ["BATS", "EDGA", "EDGX"])
    venue_uuid: str = DEFAULT_VENUE_UUID
    stub_venue_uuid: str = DEFAULT_STUB_VENUE_UUID
    stub_mic: str = "XXXX"
    leg_mic: str = "BATS"


@dataclass
class AppConfig:
    """
    Top-level configuration object for basket_core.
    """
    feeds: FeedsConfig = field(default_factory=FeedsConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    venues: VenuesConfig = field(default_factory=VenuesConfig)
    out_dir: Path = Path("output")

    @property
    def output_root(self) -> Path:
        out = self.out_dir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def redis_store_kwargs(self) -> Dict[str, Any]:
        r = self.redis
        return {
            "host": r.host,
            "port": r.port,
            "db": r.db,
            "password": r.password,
            "key_pattern": r.key_pattern,
            "cusip_field": r.cusip_field,
            "components_field": r.components_field,
        }

    # ---------- constructors ----------

    @classmethod
    def from_yaml(cls, cfg_path: Path) -> "AppConfig":
        """
        Load configuration from a YAML file.

        Paths in the YAML are interpreted as relative to the repo root.
        We assume this file lives in: <repo root>/config/example_config.yaml
        """
        cfg_path = Path(cfg_path)
        text = cfg_path.read_text(encoding="utf-8")
        data: Dict[str, Any] = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config {cfg_path} must be a YAML mapping, got {type(data).__name__}")

        # repo root ~ parent of the "config" directory
        repo_root = cfg_path.parent.parent

        def resolve_path(p: Optional[str]) -> Optional[Path]:
            if not p:
                return None
            path = Path(p)
            if not path.is_absolute():
                path = repo_root / path
            return path.resolve()

        # ----- Feeds -----
        feeds_data: Dict[str, Any] = data.get("feeds", {}) or {}
        feeds_cfg = FeedsConfig(
            nscc_basket_file=resolve_path(feeds_data.get("nscc_basket_file")),
            nsx_symbol_file=resolve_path(feeds_data.get("nsx_symbol_file")),
            edge_symbol_file=resolve_path(feeds_data.get("edge_symbol_file")),
            nyse_group_file=resolve_path(feeds_data.get("nyse_group_file")),
            xignite_master_file=resolve_path(feeds_data.get("xignite_master_file")),
        )

        # ----- Redis -----
        r_data: Dict[str, Any] = data.get("redis", {}) or {}
        defaults = RedisConfig()
        redis_cfg = RedisConfig(
            host=str(r_data.get("host", defaults.host)),
            port=int(r_data.get("port", defaults.port)),
            db=int(r_data.get("db", defaults.db)),
            password=r_data.get("password"),
            key_pattern=str(r_data.get("key_pattern", defaults.key_pattern)),
            cusip_field=str(r_data.get("cusip_field", defaults.cusip_field)),
            components_field=str(r_data.get("components_field", defaults.components_field)),
        )

        # ----- Venues -----
        v_data: Dict[str, Any] = data.get("venues", {}) or {}
        v_defaults = VenuesConfig()
        mics = v_data.get("mics", v_defaults.mics)
        if not isinstance(mics, list):
            raise ValueError(f"venues.mics must be a list, got {mics!r}")
        venues_cfg = VenuesConfig(
            mics=[str(m) for m in mics],
            venue_uuid=str(v_data.get("venue_uuid", v_defaults.venue_uuid)),
            stub_venue_uuid=str(v_data.get("stub_venue_uuid", v_defaults.stub_venue_uuid)),
            stub_mic=str(v_data.get("stub_mic", v_defaults.stub_mic)),
            leg_mic=str(v_data.get("leg_mic", v_defaults.leg_mic)),
        )

        # ----- Output -----
        out_data: Dict[str, Any] = data.get("output", {}) or {}
        out_dir = resolve_path(out_data.get("out_dir", "output"))

        return cls(feeds=feeds_cfg, redis=redis_cfg, venues=venues_cfg, out_dir=out_dir)
