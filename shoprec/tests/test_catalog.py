from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from shoprec.catalog.data_store import clear_snapshot, get_snapshot
from shoprec.catalog.index import build_catalog_index, build_snapshot


def test_popularity_counts_users_per_product(ratings, categories):
    index = build_catalog_index(ratings, categories)
    assert index.popularity["p2"] == 4
    assert index.popularity["p6"] == 3
    assert index.popularity["p1"] == 2
    assert index.popularity["p7"] == 2
    assert index.popularity["g1"] == 3


def test_uncategorized_products_are_not_indexed(ratings, categories):
    index = build_catalog_index(ratings, categories)
    assert "p9" not in index.popularity
    assert all("p9" not in products for products in index.category_products.values())


def test_category_lists_keep_discovery_order_without_duplicates(ratings, categories):
    index = build_catalog_index(ratings, categories)
    assert index.category_products["Books"] == ("p1", "p2", "p3")
    assert index.category_products["Music"] == ("p4", "p5", "p6")
    assert index.category_products["Games"] == ("p7", "g1", "g2", "g3", "g4", "g5", "g6")


def test_empty_inputs_yield_empty_index():
    index = build_catalog_index({}, {})
    assert dict(index.category_products) == {}
    assert dict(index.popularity) == {}


def test_categories_without_purchases_are_absent():
    index = build_catalog_index({"u1": {"a": 1.0}}, {"a": "X", "b": "Y"})
    assert dict(index.category_products) == {"X": ("a",)}


def test_snapshot_is_read_only(snapshot):
    with pytest.raises(TypeError):
        snapshot.ratings["new"] = {}
    with pytest.raises(TypeError):
        snapshot.ratings["u1"]["p2"] = 1.0
    with pytest.raises(TypeError):
        snapshot.categories["p9"] = "Books"
    with pytest.raises(TypeError):
        snapshot.index.popularity["p1"] = 100


def test_snapshot_is_isolated_from_source_mappings(ratings, categories):
    snap = build_snapshot(ratings, categories)
    ratings["u1"]["p2"] = 1.0
    categories["p9"] = "Books"
    assert "p2" not in snap.ratings["u1"]
    assert "p9" not in snap.categories


def test_describe_reports_catalog_metadata(snapshot):
    meta = snapshot.describe()
    assert meta["users"] == 12
    assert meta["products"] == 14
    assert meta["categories"] == [
        {"name": "Books", "products": 3},
        {"name": "Games", "products": 7},
        {"name": "Music", "products": 3},
    ]


def test_lazy_snapshot_load_runs_once_under_concurrency(monkeypatch, ratings, categories):
    calls = []

    def slow_load(config):
        calls.append(config)
        time.sleep(0.05)
        return ratings, categories

    monkeypatch.setattr("shoprec.catalog.data_store.load_dataset", slow_load)
    clear_snapshot()
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            snapshots = list(pool.map(lambda _: get_snapshot(), range(16)))
    finally:
        clear_snapshot()

    assert len(calls) == 1
    assert all(s is snapshots[0] for s in snapshots)
