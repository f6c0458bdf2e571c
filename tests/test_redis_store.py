# tests/test_redis_store.py
from __future__ import annotations

import json

import pytest

from basket_core.store import RedisBasketStore

from conftest import FakeRedis


@pytest.fixture
def fake_redis():
    return FakeRedis({
        "DTCC:BASKET:WREI": {
            "IndexReceiptCUSIP": "18383M472",
            "Components": json.dumps({"004239109": 193, "014752109": 13}),
        },
        "DTCC:BASKET:SPY": {
            "IndexReceiptCUSIP": "78462F103",
            "Components": json.dumps({"004239109": 50}),
        },
        "DTCC:BASKET:EMPTY": {"IndexReceiptCUSIP": "000000000"},
        "OTHER:KEY": {"IndexReceiptCUSIP": "999999999", "Components": "{}"},
    })


def test_iter_baskets_reads_matching_keys(fake_redis, caplog):
    store = RedisBasketStore(client=fake_redis)
    baskets = {b.key: b for b in store.iter_baskets()}

    assert set(baskets) == {"DTCC:BASKET:WREI", "DTCC:BASKET:SPY"}
    assert baskets["DTCC:BASKET:WREI"].index_receipt_cusip == "18383M472"
    assert baskets["DTCC:BASKET:WREI"].components == {"004239109": 193.0, "014752109": 13.0}
    assert "DTCC:BASKET:EMPTY has no Components field" in caplog.text


def test_component_memberships_join(fake_redis):
    with RedisBasketStore(client=fake_redis) as store:
        memberships = store.component_memberships()

    # keys scanned in sorted order: SPY before WREI
    assert memberships == {
        "004239109": ["78462F103", "18383M472"],
        "014752109": ["18383M472"],
    }


def test_injected_client_is_left_open(fake_redis):
    with RedisBasketStore(client=fake_redis):
        pass
    assert fake_redis.closed is False


def test_owned_client_is_released_on_error():
    store = RedisBasketStore(host="localhost", port=6379, db=0)
    assert store.client is not None

    with pytest.raises(RuntimeError):
        with store:
            raise RuntimeError("boom")

    assert store.client is None


def test_custom_field_names():
    client = FakeRedis({"B:1": {"etf": "18383M472", "legs": json.dumps({"A": "5"})}})
    store = RedisBasketStore(client=client, key_pattern="B:*", cusip_field="etf", components_field="legs")
    assert store.component_memberships() == {"A": ["18383M472"]}


def test_unreadable_components_are_skipped(caplog):
    client = FakeRedis({
        "DTCC:BASKET:BAD": {"IndexReceiptCUSIP": "111111111", "Components": "not json"},
        "DTCC:BASKET:LIST": {"IndexReceiptCUSIP": "222222222", "Components": "[1, 2]"},
        "DTCC:BASKET:QTY": {"IndexReceiptCUSIP": "333333333", "Components": json.dumps({"A": "lots"})},
        "DTCC:BASKET:WREI": {"IndexReceiptCUSIP": "18383M472", "Components": json.dumps({"A": 5})},
    })
    store = RedisBasketStore(client=client)

    assert store.component_memberships() == {"A": ["18383M472"]}
    for key in ("BAD", "LIST", "QTY"):
        assert f"DTCC:BASKET:{key} has an unreadable Components field" in caplog.text
