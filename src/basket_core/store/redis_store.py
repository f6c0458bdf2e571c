"""
Redis-backed basket store.

One hash per basket, keyed like DTCC:BASKET:<id>, holding at least:
  IndexReceiptCUSIP -> ETF CUSIP
  Components        -> JSON object {component_id: quantity}

This is an alternate source for the component -> basket join that the
NSCC flat file produces.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import redis

logger = logging.getLogger(__name__)


@dataclass
class StoredBasket:
    key: str
    index_receipt_cusip: Optional[str]
    components: Dict[str, float] = field(default_factory=dict)


class RedisBasketStore:
    """
    Explicit handle on the basket hashes, scoped to one run.

    Use as a context manager; a client opened here is closed on exit, an
    injected client is left open for its owner.

        with RedisBasketStore(host="localhost") as store:
            memberships = store.component_memberships()
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        key_pattern: str = "DTCC:BASKET:*",
        cusip_field: str = "IndexReceiptCUSIP",
        components_field: str = "Components",
    ):
        self.key_pattern = key_pattern
        self.cusip_field = cusip_field
        self.components_field = components_field

        self._owns_client = client is None
        if client is None:
            client = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
            logger.info("Redis basket store: %s:%s/%s", host, port, db)
        self.client = client

    def close(self) -> None:
        if self._owns_client and self.client is not None:
            self.client.close()
            self.client = None

    def __enter__(self) -> "RedisBasketStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def iter_baskets(self) -> Iterator[StoredBasket]:
        for key in self.client.scan_iter(match=self.key_pattern):
            cusip = self.client.hget(key, self.cusip_field)
            raw = self.client.hget(key, self.components_field)
            if not raw:
                logger.warning("Basket key %s has no %s field", key, self.components_field)
                continue

            try:
                comps = json.loads(raw)
                if not isinstance(comps, dict):
                    raise ValueError(f"expected a JSON object, got {type(comps).__name__}")
                components = {str(k): float(v) for k, v in comps.items()}
            except (TypeError, ValueError) as exc:
                logger.warning("Basket key %s has an unreadable %s field: %s", key, self.components_field, exc)
                continue

            yield StoredBasket(key=key, index_receipt_cusip=cusip, components=components)

    def component_memberships(self) -> Dict[str, List[str]]:
        """component id -> identifiers of every basket holding it."""
        memberships: Dict[str, List[str]] = {}
        for basket in self.iter_baskets():
            if basket.index_receipt_cusip is None:
                logger.warning("Basket key %s has no %s field", basket.key, self.cusip_field)
                continue
            for comp_id in basket.components:
                memberships.setdefault(comp_id, []).append(basket.index_receipt_cusip)
        return memberships
